"""
Keyboard Projector

Read-only view of which keys can still be typed, derived from the letter
knowledge on every read.
"""

from typing import Dict, FrozenSet, Iterable, List

from ..config.game_settings import ALPHABET
from ..models.game import Classification
from .knowledge import LetterKnowledge


class KeyboardProjector:
    """
    A key is selectable unless its letter is WRONG. Once ``word_length``
    distinct letters are RIGHT, no other letter can be in the secret, so every
    other key is unselectable too.
    """

    def __init__(self, knowledge: LetterKnowledge, word_length: int, keys: Iterable[str] = ALPHABET):
        self.knowledge = knowledge
        self.word_length = word_length
        self.keys = tuple(key.upper() for key in keys)

    def restricted(self) -> FrozenSet[str]:
        right = self.knowledge.right_letters
        if len(right) >= self.word_length:
            return frozenset(key for key in self.keys if key not in right)
        return frozenset(key for key in self.keys if self.knowledge.get(key) is Classification.WRONG)

    def is_selectable(self, key: str) -> bool:
        return key.upper() not in self.restricted()

    def selectable_keys(self) -> List[str]:
        restricted = self.restricted()
        return [key for key in self.keys if key not in restricted]

    def view(self) -> Dict[str, bool]:
        restricted = self.restricted()
        return {key: key not in restricted for key in self.keys}
