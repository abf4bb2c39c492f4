"""
Round Controller

State machine for a single round:

    IN_PROGRESS -> WON      (secret guessed)
    IN_PROGRESS -> LOST     (guess budget exhausted, or give-up)
    WON / LOST  -> IN_PROGRESS  (continue: new secret, empty history)

Every submission is scored, saturated and cross-inferred before ``submit``
returns.
"""

import logging
import random
from typing import Iterable, Optional

from ..config.game_settings import ALPHABET, MAX_GUESSES, WORD_LENGTH
from ..models.game import (
    Classification,
    RoundState,
    RoundStatus,
    SubmitOutcome,
    SubmitResult,
    WordLookup,
)
from .history import GuessHistory
from .inference import CrossGuessInferencer
from .keyboard import KeyboardProjector
from .knowledge import ClassificationObserver, LetterKnowledge
from .saturation import SaturationResolver
from .scoring import pick_secret, score_guess

logger = logging.getLogger(__name__)


class RoundController:
    """
    Owns the secret word, the guess history and the letter knowledge of the
    round in play.

    Args:
        lookup: Secret and accepted word sets
        word_length: Letters per word
        max_guesses: Non-winning guesses allowed before the round is lost
        secret_word: Fixed first secret (picked at random when omitted)
        strict: Raise on contradictory classifications instead of ignoring them
        rng: Random source for secret selection
        keys: Keyboard key identifiers
    """

    def __init__(self,
                 lookup: WordLookup,
                 word_length: int = WORD_LENGTH,
                 max_guesses: int = MAX_GUESSES,
                 secret_word: Optional[str] = None,
                 strict: bool = False,
                 rng: Optional[random.Random] = None,
                 keys: Iterable[str] = ALPHABET):
        if max_guesses < 1:
            raise ValueError("max_guesses must be at least 1")

        self.lookup = lookup
        self.word_length = word_length
        self.max_guesses = max_guesses
        self.rng = rng or random.Random()

        self.knowledge = LetterKnowledge(strict=strict)
        self.history = GuessHistory()
        self.saturation = SaturationResolver(self.knowledge, self.history, word_length)
        self.inferencer = CrossGuessInferencer(self.knowledge)
        self.keyboard = KeyboardProjector(self.knowledge, word_length, keys)

        self.state = RoundState.IN_PROGRESS
        self.guess_count = 0
        self.secret_word = self._checked_secret(secret_word) if secret_word else pick_secret(
            lookup.secrets, None, self.rng
        )

    @staticmethod
    def _normalize(word: str) -> str:
        return word.strip().upper()

    def _checked_secret(self, word: str) -> str:
        word = self._normalize(word)
        if len(word) != self.word_length:
            raise ValueError(f"Secret word '{word}' is not {self.word_length} letters long")
        if word not in self.lookup.secrets:
            raise ValueError(f"Secret word '{word}' is not in the secret word list")
        return word

    @property
    def in_progress(self) -> bool:
        return self.state is RoundState.IN_PROGRESS

    def subscribe(self, observer: ClassificationObserver) -> None:
        """Register a sink for (letter, classification) events."""
        self.knowledge.subscribe(observer)

    def unsubscribe(self, observer: ClassificationObserver) -> None:
        self.knowledge.unsubscribe(observer)

    def submit(self, word: str) -> SubmitResult:
        """
        Validate, score and infer from a guess.

        Rejections are returned as outcomes, never raised. In strict mode a
        contradictory deduction raises ClassificationConflict after the guess
        has been recorded and counted.
        """
        word = self._normalize(word or "")

        if not self.in_progress:
            return SubmitResult(SubmitOutcome.ROUND_OVER, word, self.state)

        if len(word) != self.word_length:
            return SubmitResult(SubmitOutcome.INCOMPLETE_WORD, word, self.state)

        if self.history.contains(word):
            return SubmitResult(SubmitOutcome.ALREADY_GUESSED, word, self.state)

        if not self.lookup.is_accepted(word):
            return SubmitResult(SubmitOutcome.INVALID_WORD, word, self.state)

        if word == self.secret_word:
            self.guess_count += 1
            self.state = RoundState.WON
            for letter in word:
                self.knowledge.classify(letter, Classification.RIGHT)
            logger.info("Round won with %s after %d guesses", word, self.guess_count)
            return SubmitResult(SubmitOutcome.WON, word, self.state, score=self.word_length)

        score = score_guess(word, self.secret_word)
        record = self.history.create(word, score)
        # the guess counts even if a strict knowledge conflict aborts the deductions
        self.guess_count += 1
        if self.guess_count >= self.max_guesses:
            self.state = RoundState.LOST
            logger.info("Round lost, secret was %s", self.secret_word)

        self.saturation.register(record)
        deductions = self.inferencer.infer(record, self.history.before(record))
        logger.debug("Guess %s scored %d, %d cross-guess deductions", word, score, len(deductions))

        if self.state is RoundState.LOST:
            return SubmitResult(SubmitOutcome.LOST, word, self.state, score=score)

        return SubmitResult(SubmitOutcome.ACCEPTED, word, self.state, score=score)

    def give_up(self) -> bool:
        """Forfeit the round. Returns False if it was already over."""
        if not self.in_progress:
            return False
        self.state = RoundState.LOST
        logger.info("Round given up, secret was %s", self.secret_word)
        return True

    def continue_round(self, secret_word: Optional[str] = None) -> bool:
        """
        Start the next round after a win or loss.

        Returns:
            bool: False if the current round is still in progress
        """
        if self.in_progress:
            return False

        previous = self.secret_word
        if secret_word:
            secret_word = self._checked_secret(secret_word)
            if secret_word == previous:
                raise ValueError("The next secret word must differ from the previous one")
            self.secret_word = secret_word
        else:
            self.secret_word = pick_secret(self.lookup.secrets, previous, self.rng)

        self.history.clear()
        self.knowledge.clear()
        self.guess_count = 0
        self.state = RoundState.IN_PROGRESS
        return True

    def status(self, game_id: Optional[str] = None) -> RoundStatus:
        return RoundStatus(
            game_id=game_id,
            word_length=self.word_length,
            guess_count=self.guess_count,
            max_guesses=self.max_guesses,
            state=self.state.value,
            guesses=[
                {
                    "word": record.word,
                    "score": record.score,
                    "tiles": record.tiles(self.knowledge),
                    "wrong_count": record.wrong_count,
                    "marked_right_count": record.marked_right_count,
                }
                for record in self.history
            ],
            letter_knowledge=self.knowledge.snapshot(),
            selectable_letters=self.keyboard.selectable_keys(),
            secret_word=None if self.in_progress else self.secret_word,
        )
