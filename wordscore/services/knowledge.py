"""
Letter Knowledge

Per-round map of letter -> Classification. Every letter starts UNKNOWN and may
be classified RIGHT or WRONG exactly once. Observers are notified synchronously
whenever a letter gains a classification.
"""

import logging
from typing import Callable, Dict, List, Set

from ..models.game import Classification

logger = logging.getLogger(__name__)

ClassificationObserver = Callable[[str, Classification], None]


class ClassificationConflict(Exception):
    """Raised in strict mode when a letter would flip RIGHT <-> WRONG."""

    def __init__(self, letter: str, current: Classification, attempted: Classification):
        super().__init__(
            f"Letter '{letter}' is already {current.value}, refusing {attempted.value}"
        )
        self.letter = letter
        self.current = current
        self.attempted = attempted


class LetterKnowledge:
    """
    Monotonic letter classification store.

    In strict mode a contradictory write raises ``ClassificationConflict``;
    otherwise it is logged and ignored so the first write wins.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self._letters: Dict[str, Classification] = {}
        self._observers: List[ClassificationObserver] = []
        self._resolvers: List[ClassificationObserver] = []
        self.conflicts: List[ClassificationConflict] = []

    def subscribe(self, observer: ClassificationObserver, resolver: bool = False) -> None:
        """
        Register a callback for new classifications.

        Resolvers run after every plain observer, so a letter always reaches
        the observers before any letter deduced from it.
        """
        (self._resolvers if resolver else self._observers).append(observer)

    def unsubscribe(self, observer: ClassificationObserver) -> None:
        for observers in (self._observers, self._resolvers):
            if observer in observers:
                observers.remove(observer)

    def get(self, letter: str) -> Classification:
        return self._letters.get(letter.upper(), Classification.UNKNOWN)

    def is_unknown(self, letter: str) -> bool:
        return self.get(letter) is Classification.UNKNOWN

    def classify(self, letter: str, classification: Classification) -> bool:
        """
        Record a classification for ``letter``.

        Returns:
            bool: True if the letter gained a new classification, False for a
            repeated or ignored write
        """
        if classification is Classification.UNKNOWN:
            raise ValueError("Cannot classify a letter as UNKNOWN")

        letter = letter.upper()
        current = self.get(letter)
        if current is classification:
            return False

        if current is not Classification.UNKNOWN:
            conflict = ClassificationConflict(letter, current, classification)
            if self.strict:
                raise conflict
            self.conflicts.append(conflict)
            logger.warning("Ignoring contradictory classification: %s", conflict)
            return False

        self._letters[letter] = classification
        logger.debug("Letter %s classified %s", letter, classification.value)

        for observer in self._observers + self._resolvers:
            observer(letter, classification)
        return True

    def letters_with(self, classification: Classification) -> Set[str]:
        return {letter for letter, value in self._letters.items() if value is classification}

    @property
    def right_letters(self) -> Set[str]:
        return self.letters_with(Classification.RIGHT)

    @property
    def wrong_letters(self) -> Set[str]:
        return self.letters_with(Classification.WRONG)

    def snapshot(self) -> Dict[str, str]:
        return {letter: value.value for letter, value in sorted(self._letters.items())}

    def clear(self) -> None:
        """Forget every classification. Observers stay registered."""
        self._letters.clear()
        self.conflicts.clear()

    def __len__(self) -> int:
        return len(self._letters)
