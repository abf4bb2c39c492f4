"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    Classification,
    GuessRecord,
    RoundState,
    RoundStatus,
    SubmitOutcome,
    SubmitResult,
    WordLookup,
)

__all__ = [
    'Classification', 'GuessRecord', 'RoundState', 'RoundStatus',
    'SubmitOutcome', 'SubmitResult', 'WordLookup'
]
