"""
Cross-Guess Inference

Compares a new guess against every earlier guess. When the letters swapped
between two guesses (the symmetric difference of their distinct letter sets)
number exactly twice the score change, each swapped-in letter gained one point
and each swapped-out letter lost one (or the reverse), so all of them can be
classified.
"""

import logging
from typing import Iterable, List, Set, Tuple

from ..models.game import Classification, GuessRecord
from .knowledge import LetterKnowledge

logger = logging.getLogger(__name__)

Deduction = Tuple[str, Classification]


def swapped_letters(guess: GuessRecord, prior: GuessRecord) -> Set[str]:
    """Letters present in exactly one of the two guesses."""
    return guess.letters ^ prior.letters


def compare_guesses(guess: GuessRecord, prior: GuessRecord) -> List[Deduction]:
    """
    Deduce classifications from one pair of guesses.

    Returns an empty list when the score change does not pin down the
    swapped letters.
    """
    diff = guess.score - prior.score
    swapped = swapped_letters(guess, prior)

    if len(swapped) % 2 != 0 or len(swapped) // 2 != abs(diff):
        return []

    gained = Classification.RIGHT if diff > 0 else Classification.WRONG
    lost = gained.opposite()

    guess_letters = guess.letters
    return [
        (letter, gained if letter in guess_letters else lost)
        for letter in sorted(swapped)
    ]


class CrossGuessInferencer:
    """Writes pairwise deductions into the round's letter knowledge."""

    def __init__(self, knowledge: LetterKnowledge):
        self.knowledge = knowledge

    def infer(self, guess: GuessRecord, priors: Iterable[GuessRecord]) -> List[Deduction]:
        """
        Compare ``guess`` with each earlier guess, oldest first.

        Returns:
            List of every deduction asserted, including ones already known
        """
        deductions: List[Deduction] = []
        for prior in priors:
            pair = compare_guesses(guess, prior)
            if not pair:
                continue
            logger.debug("Guesses %s/%s explain letters %s", guess.word, prior.word, pair)
            for letter, classification in pair:
                self.knowledge.classify(letter, classification)
            deductions.extend(pair)
        return deductions
