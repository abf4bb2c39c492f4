"""
Game Configuration Constants Module

This module defines all game configuration constants and loads the two word
lists the game validates against: the secret words a round may pick and the
larger list of words accepted as guesses. Both lists are plain text files with
one word per line.
"""

import os
from typing import Dict, Final, List, Optional

from ..models.game import WordLookup

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 4
"""
Number of letters in every secret word and every guess.
"""

MAX_GUESSES: Final[int] = 10
"""
Maximum number of non-winning guesses before the round is lost.
"""

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
"""
Key identifiers shown on the keyboard.
"""

_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')
DEFAULT_SECRET_WORDS_FILE: Final[str] = os.path.join(_DATA_DIR, 'secret_words.txt')
DEFAULT_ALL_WORDS_FILE: Final[str] = os.path.join(_DATA_DIR, 'all_words.txt')


def load_word_list(file_path: str, word_length: int = WORD_LENGTH) -> List[str]:
    """
    Load a word list from a text file with one word per line.

    Blank lines are skipped and words are uppercased.

    Args:
        file_path: Path of the word list file
        word_length: Required length of every word

    Returns:
        List[str]: List of uppercase words in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the list is empty or contains invalid words
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Word list file not found: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        words = [line.strip().upper() for line in f if line.strip()]

    validate_word_list_integrity(words, word_length)
    return words


def validate_word_list_integrity(words: List[str], word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly ``word_length`` characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries, ignoring case

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

    normalized = [word.upper() for word in words]
    if len(normalized) != len(set(normalized)):
        duplicates = sorted({word for word in normalized if normalized.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def load_word_lookup(secret_words_file: Optional[str] = None,
                     all_words_file: Optional[str] = None,
                     word_length: int = WORD_LENGTH) -> WordLookup:
    """Build the lookup from the secret and accepted word list files."""
    secrets = load_word_list(secret_words_file or DEFAULT_SECRET_WORDS_FILE, word_length)
    accepted = load_word_list(all_words_file or DEFAULT_ALL_WORDS_FILE, word_length)
    return WordLookup.from_words(secrets, accepted)


def get_word_statistics(words: List[str]) -> Dict:
    """
    Analyzes a word list and returns statistical information for game balancing.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the list
            - avg_vowel_count: Average vowels per word
            - repeated_letter_words: Words containing a letter more than once
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "repeated_letter_words": sum(1 for word in words if len(set(word)) != len(word)),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        lookup = load_word_lookup()
        print(f" Loaded {len(lookup.secrets)} secret words, {len(lookup.accepted)} accepted words")
        print(f" Secret word statistics: {get_word_statistics(sorted(lookup.secrets))}")
    except (OSError, ValueError) as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
