"""
Services Package

Contains the guess evaluation engine and the game session service.
"""

from .game_service import GameService, GameSession, game_room
from .inference import CrossGuessInferencer, compare_guesses
from .input_boundary import Command, CommandType, InputBoundary
from .keyboard import KeyboardProjector
from .knowledge import ClassificationConflict, LetterKnowledge
from .round_controller import RoundController
from .saturation import SaturationResolver
from .scoring import pick_secret, score_guess

__all__ = [
    'GameService', 'GameSession', 'game_room',
    'CrossGuessInferencer', 'compare_guesses',
    'Command', 'CommandType', 'InputBoundary',
    'KeyboardProjector',
    'ClassificationConflict', 'LetterKnowledge',
    'RoundController',
    'SaturationResolver',
    'pick_secret', 'score_guess'
]
