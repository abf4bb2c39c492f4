"""
Saturation Resolver

Completes a guess once enough of its positions are classified:

- wrong saturation: when ``wrong_count + score == word_length`` the unknown
  positions must account for the rest of the score, so they are RIGHT
- right saturation: when ``marked_right_count == score`` every remaining
  unknown position is WRONG

Counters are kept per position, so a letter appearing twice in a guess moves
its counter by two.
"""

import logging

from ..models.game import Classification, GuessRecord
from .history import GuessHistory
from .knowledge import LetterKnowledge

logger = logging.getLogger(__name__)


class SaturationResolver:
    """Keeps guess counters in step with the letter knowledge and applies both rules."""

    def __init__(self, knowledge: LetterKnowledge, history: GuessHistory, word_length: int):
        self.knowledge = knowledge
        self.history = history
        self.word_length = word_length
        knowledge.subscribe(self._on_classified, resolver=True)

    def register(self, record: GuessRecord) -> None:
        """
        Add a freshly scored guess to the history and saturate it.

        Counters are seeded from what is already known before the record
        becomes visible to classification events.
        """
        record.wrong_count = sum(
            1 for letter in record.word if self.knowledge.get(letter) is Classification.WRONG
        )
        record.marked_right_count = sum(
            1 for letter in record.word if self.knowledge.get(letter) is Classification.RIGHT
        )
        self.history.append(record)
        self.apply(record)

    def apply(self, record: GuessRecord) -> None:
        if record.wrong_count + record.score == self.word_length:
            self._classify_unknown(record, Classification.RIGHT)
            if record.marked_right_count == record.score:
                self._classify_unknown(record, Classification.WRONG)

        if record.marked_right_count == record.score:
            self._classify_unknown(record, Classification.WRONG)

    def _classify_unknown(self, record: GuessRecord, classification: Classification) -> None:
        for letter in record.word:
            if self.knowledge.is_unknown(letter):
                logger.debug(
                    "Guess %s saturated: %s -> %s", record.word, letter, classification.value
                )
                self.knowledge.classify(letter, classification)

    def _on_classified(self, letter: str, classification: Classification) -> None:
        touched = []
        for record in self.history:
            occurrences = record.occurrences(letter)
            if not occurrences:
                continue
            if classification is Classification.WRONG:
                record.wrong_count += occurrences
            else:
                record.marked_right_count += occurrences
            touched.append(record)

        for record in touched:
            self.apply(record)
