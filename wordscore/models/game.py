"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional, Set


class Classification(Enum):
    """What is known about a letter value across every guess of a round."""
    UNKNOWN = "UNKNOWN"
    WRONG = "WRONG"
    RIGHT = "RIGHT"

    def opposite(self) -> "Classification":
        if self is Classification.RIGHT:
            return Classification.WRONG
        if self is Classification.WRONG:
            return Classification.RIGHT
        raise ValueError("UNKNOWN has no opposite classification")


class RoundState(Enum):
    """Round lifecycle states."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


class SubmitOutcome(Enum):
    """Result kinds of a word submission."""
    ACCEPTED = "ACCEPTED"
    WON = "WON"
    LOST = "LOST"
    INCOMPLETE_WORD = "INCOMPLETE_WORD"
    ALREADY_GUESSED = "ALREADY_GUESSED"
    INVALID_WORD = "INVALID_WORD"
    ROUND_OVER = "ROUND_OVER"

    @property
    def is_rejection(self) -> bool:
        return self in (
            SubmitOutcome.INCOMPLETE_WORD,
            SubmitOutcome.ALREADY_GUESSED,
            SubmitOutcome.INVALID_WORD,
        )


@dataclass(frozen=True)
class WordLookup:
    """The two word sets a round validates against.

    ``accepted`` always contains every secret, so a secret can be typed in.
    """
    secrets: FrozenSet[str]
    accepted: FrozenSet[str]

    @classmethod
    def from_words(cls, secrets: Iterable[str], accepted: Iterable[str] = ()) -> "WordLookup":
        secret_set = frozenset(word.strip().upper() for word in secrets)
        accepted_set = frozenset(word.strip().upper() for word in accepted) | secret_set
        return cls(secrets=secret_set, accepted=accepted_set)

    def is_accepted(self, word: str) -> bool:
        return word in self.accepted


@dataclass
class GuessRecord:
    """A scored, non-winning guess and its saturation counters."""
    word: str
    index: int
    score: int
    wrong_count: int = 0
    marked_right_count: int = 0

    @property
    def letters(self) -> Set[str]:
        """Distinct letters of the guess."""
        return set(self.word)

    def occurrences(self, letter: str) -> int:
        return self.word.count(letter)

    def tiles(self, knowledge) -> List[Dict[str, str]]:
        """Per-position classification snapshot read from ``knowledge``."""
        return [
            {"letter": letter, "classification": knowledge.get(letter).value}
            for letter in self.word
        ]


@dataclass
class SubmitResult:
    """Outcome of a single submission."""
    outcome: SubmitOutcome
    word: str
    state: RoundState
    score: Optional[int] = None

    @property
    def accepted(self) -> bool:
        return not self.outcome.is_rejection and self.outcome != SubmitOutcome.ROUND_OVER

    def to_dict(self) -> Dict:
        return {
            "outcome": self.outcome.value,
            "word": self.word,
            "state": self.state.value,
            "score": self.score,
        }


@dataclass
class RoundStatus:
    """Serializable round snapshot (secret only included once the round is over)."""
    game_id: Optional[str]
    word_length: int
    guess_count: int
    max_guesses: int
    state: str
    guesses: List[Dict] = field(default_factory=list)
    letter_knowledge: Dict[str, str] = field(default_factory=dict)
    selectable_letters: List[str] = field(default_factory=list)
    buffer: str = ""
    error_message: Optional[str] = None
    secret_word: Optional[str] = None
