"""
Guess scoring and secret word selection.
"""

import random
from typing import Iterable, Optional


def score_guess(guess: str, secret: str) -> int:
    """
    Count the positions of ``guess`` whose letter occurs anywhere in ``secret``.

    Every position is credited on its own, so a repeated guess letter that
    appears once in the secret is counted each time: ``score_guess("AAII",
    "RAIN") == 4``.
    """
    secret_letters = set(secret.upper())
    return sum(1 for letter in guess.upper() if letter in secret_letters)


def pick_secret(secrets: Iterable[str], current: Optional[str] = None,
                rng: Optional[random.Random] = None) -> str:
    """
    Pick a uniformly random secret different from ``current``.

    Raises:
        ValueError: If no word other than ``current`` is available
    """
    rng = rng or random
    candidates = sorted(word for word in secrets if word != current)
    if not candidates:
        raise ValueError("No secret word available other than the current one")
    return rng.choice(candidates)
