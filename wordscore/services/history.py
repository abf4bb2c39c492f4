"""
Guess history store for a single round.
"""

from typing import Iterator, List

from ..models.game import GuessRecord


class GuessHistory:
    """Ordered record of the scored guesses of a round."""

    def __init__(self):
        self._records: List[GuessRecord] = []

    def create(self, word: str, score: int) -> GuessRecord:
        """Build the next record (not yet stored)."""
        return GuessRecord(word=word, index=len(self._records), score=score)

    def append(self, record: GuessRecord) -> None:
        self._records.append(record)

    def before(self, record: GuessRecord) -> List[GuessRecord]:
        """Records submitted earlier than ``record``, oldest first."""
        return [prior for prior in self._records if prior.index < record.index]

    def contains(self, word: str) -> bool:
        return any(record.word == word for record in self._records)

    def clear(self) -> None:
        self._records.clear()

    def __iter__(self) -> Iterator[GuessRecord]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)
