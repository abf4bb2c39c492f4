"""
WebSocket Event Handlers

Real-time surface of the game service. Clients join the room of their game to
receive ``letter_classified``, ``round_status``, ``error_shown`` and
``error_hidden`` events, and send key presses or whole guesses.
"""

from dataclasses import asdict

from flask import current_app, request
from flask_socketio import emit, join_room, leave_room

from ..models.game import SubmitOutcome
from ..services.game_service import game_room
from ..utils.game_logger import game_logger


def _lookup_game(data):
    """Return (game_service, game_id), emitting an error and returning None on failure."""
    game_service = getattr(current_app, 'game_service', None)
    if not game_service:
        emit('error', {'error': 'Game service unavailable'})
        return None

    game_id = (data or {}).get('game_id')
    if not game_id:
        emit('error', {'error': 'Game ID is required'})
        return None

    if game_service.get_session(game_id) is None:
        emit('error', {'error': 'Game not found', 'game_id': game_id})
        return None

    return game_service, game_id


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join_game')
    def handle_join_game(data):
        """Join a game room and receive its current status."""
        found = _lookup_game(data)
        if found is None:
            return
        game_service, game_id = found

        join_room(game_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} joined game {game_id}")

        emit('round_status', asdict(game_service.get_game_state(game_id)))

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Stop receiving events for a game."""
        game_id = (data or {}).get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        leave_room(game_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} left game {game_id}")

    @socketio.on('press_key')
    def handle_press_key(data):
        """Apply a key command; the new status is broadcast to the game room."""
        found = _lookup_game(data)
        if found is None:
            return
        game_service, game_id = found

        key = data.get('key')
        if not isinstance(key, str) or not key:
            emit('error', {'error': 'Key is required', 'game_id': game_id})
            return

        try:
            game_service.press_key(game_id, key)
        except ValueError as e:
            emit('error', {'error': str(e), 'game_id': game_id})

    @socketio.on('submit_guess')
    def handle_submit_guess(data):
        """Submit a whole word and reply with the outcome."""
        found = _lookup_game(data)
        if found is None:
            return
        game_service, game_id = found

        guess = data.get('guess')
        if not isinstance(guess, str) or not guess:
            emit('error', {'error': 'Guess is required', 'game_id': game_id})
            return

        result = game_service.make_guess(game_id, guess)
        emit('guess_result', {'game_id': game_id, **result.to_dict()})

        if result.outcome in (SubmitOutcome.WON, SubmitOutcome.LOST):
            game_logger.log_game_event(
                game_id, f"round_{result.outcome.value.lower()}", request.remote_addr,
                final_guess=result.word
            )
