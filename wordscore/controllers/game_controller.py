"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict

from flask import Blueprint, current_app, jsonify, request

from ..models.game import RoundState
from ..utils.game_logger import game_logger
from ..utils.helpers import json_body

game_bp = Blueprint('game', __name__)


def _game_service():
    return getattr(current_app, 'game_service', None)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _log_round_end(game_id, state, event_name=None, **kwargs):
    """Log a game event when the round has just finished."""
    if state.state == RoundState.IN_PROGRESS.value and event_name is None:
        return
    if event_name is None:
        event_name = 'round_won' if state.state == RoundState.WON.value else 'round_lost'
    game_logger.log_game_event(
        game_id, event_name, request.remote_addr,
        guesses_used=state.guess_count, secret_word=state.secret_word, **kwargs
    )


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = _game_service()
        if not game_service:
            return _service_unavailable()

        data = json_body(request)
        seed = data.get('seed')
        if seed is not None and not isinstance(seed, int):
            error_response = {
                'success': False,
                'error': 'Seed must be an integer'
            }
            game_logger.log_server_response(request, 'new_game', False, error_response)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'new_game', seed=seed)

        game_id = game_service.create_new_game(seed=seed)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_guesses=state.max_guesses
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')

        error_response = {
            'success': False,
            'error': str(e)
        }

        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current round status."""
    try:
        game_service = _game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            guess_count=state.guess_count, round_state=state.state
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a whole word for scoring."""
    try:
        game_service = _game_service()
        if not game_service:
            return _service_unavailable()

        data = json_body(request)
        guess = data.get('guess')
        if not isinstance(guess, str) or not guess:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess)
        )

        result = game_service.make_guess(game_id, guess)
        if result is None:
            return _not_found('submit_guess', game_id)

        state = game_service.get_game_state(game_id)

        if not result.accepted:
            error_response = {
                'success': False,
                'error': game_service.messages.get(result.outcome, 'Round is over'),
                'reason': result.outcome.value,
                'state': asdict(state)
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                validation_error=result.outcome.value, attempted_guess=guess
            )
            return jsonify(error_response), 400

        response_data = {
            'success': True,
            'result': result.to_dict(),
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=result.word, score=result.score, guess_count=state.guess_count
        )
        _log_round_end(game_id, state, final_guess=result.word)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/key', methods=['POST'])
def press_key(game_id):
    """Apply one key command: a letter, DEL, ENT, GIVEUP or CONTINUE."""
    try:
        game_service = _game_service()
        if not game_service:
            return _service_unavailable()

        key = json_body(request).get('key')
        if not isinstance(key, str) or not key:
            error_response = {
                'success': False,
                'error': 'Key is required'
            }
            game_logger.log_server_response(request, 'press_key', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'press_key', game_id, key=key)

        try:
            changed = game_service.press_key(game_id, key)
        except ValueError as e:
            error_response = {
                'success': False,
                'error': str(e)
            }
            game_logger.log_server_response(request, 'press_key', False, error_response, game_id)
            return jsonify(error_response), 400

        if changed is None:
            return _not_found('press_key', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'changed': changed,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'press_key', True, response_data, game_id, key=key)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'press_key', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'press_key', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/give_up', methods=['POST'])
def give_up(game_id):
    """Forfeit the round in progress and reveal the secret."""
    try:
        game_service = _game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'give_up', game_id)

        changed = game_service.give_up(game_id)
        if changed is None:
            return _not_found('give_up', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': changed,
            'state': asdict(state)
        }
        if not changed:
            response_data['error'] = 'Round is already over'

        game_logger.log_server_response(request, 'give_up', changed, response_data, game_id)
        if changed:
            _log_round_end(game_id, state, 'round_given_up')

        return jsonify(response_data), 200 if changed else 400

    except Exception as e:
        game_logger.log_error(request, e, 'give_up', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'give_up', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/continue', methods=['POST'])
def continue_game(game_id):
    """Start the next round once the current one is won or lost."""
    try:
        game_service = _game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'continue', game_id)

        changed = game_service.continue_game(game_id)
        if changed is None:
            return _not_found('continue', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': changed,
            'state': asdict(state)
        }
        if not changed:
            response_data['error'] = 'Round is still in progress'

        game_logger.log_server_response(request, 'continue', changed, response_data, game_id)
        if changed:
            game_logger.log_game_event(game_id, 'round_continued', request.remote_addr)

        return jsonify(response_data), 200 if changed else 400

    except Exception as e:
        game_logger.log_error(request, e, 'continue', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'continue', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = _game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
            return jsonify(response_data)
        return jsonify(response_data), 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = _game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': game_service.active_games if game_service else 0,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
