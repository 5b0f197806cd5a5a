"""
Game Configuration Constants Module

This module defines all game configuration constants. Board dimensions and
the fixed fallback word list are centralized here so that the word provider,
the round state machine and the word endpoint agree on them.
"""

import json
import os
from typing import Dict, Final, Iterable, List, Optional

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""Number of letters in every secret word and guess."""

MAX_GUESSES: Final[int] = 5
"""
Maximum number of guess attempts allowed per round.
Type: Final[int] - Immutable to prevent accidental modification
"""

DIFFICULTIES: Final[tuple] = ("easy", "normal", "hard")
DEFAULT_DIFFICULTY: Final[str] = "normal"


def _load_word_list() -> List[str]:
    """
    Load word list from wordles.json file.

    Returns:
        List[str]: List of uppercase 5-letter words

    Raises:
        FileNotFoundError: If wordles.json file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'wordles.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in wordles.json: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    uppercase_words = [word.upper() for word in word_list]
    validate_word_list_integrity(uppercase_words)
    return uppercase_words


def validate_word_list_integrity(words: Optional[Iterable[str]] = None) -> bool:
    """
    Validates the integrity and consistency of a word database.

    Checks performed:
    1. Length validation: All words must be exactly WORD_LENGTH characters
    2. Character validation: Only alphabetic characters allowed
    3. Format validation: Consistent uppercase formatting
    4. Uniqueness validation: No duplicate entries

    Args:
        words: Word list to check, defaults to FALLBACK_WORDS

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    word_list = list(FALLBACK_WORDS if words is None else words)
    if not word_list:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(word_list):
        if not isinstance(word, str) or len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(word_list) != len(set(word_list)):
        duplicates = sorted({word for word in word_list if word_list.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def words_for_difficulty(difficulty: str, words: Optional[List[str]] = None) -> List[str]:
    """
    Select the bucket of words served for a difficulty level.

    `easy` words have five distinct letters, `hard` words repeat at least one
    letter and `normal` is the whole list. An empty bucket yields the whole list.

    Raises:
        ValueError: If difficulty is not one of DIFFICULTIES
    """
    if difficulty not in DIFFICULTIES:
        raise ValueError(f"Unknown difficulty '{difficulty}'. Expected one of {', '.join(DIFFICULTIES)}")

    word_list = FALLBACK_WORDS if words is None else words
    if difficulty == "easy":
        bucket = [word for word in word_list if len(set(word)) == len(word)]
    elif difficulty == "hard":
        bucket = [word for word in word_list if len(set(word)) < len(word)]
    else:
        bucket = list(word_list)

    return bucket or list(word_list)


def get_word_statistics(words: Optional[List[str]] = None) -> Dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in database
            - avg_vowel_count: Average vowels per word
            - repeated_letter_words: Words containing a repeated letter
            - most_common_letters: Five most frequent letters
    """
    word_list = FALLBACK_WORDS if words is None else words
    if not word_list:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in word_list)

    letter_frequency: Dict[str, int] = {}
    for word in word_list:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(word_list),
        "avg_vowel_count": round(total_vowels / len(word_list), 2),
        "repeated_letter_words": len([word for word in word_list if len(set(word)) < len(word)]),
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


# Curated fallback word database loaded from JSON file
FALLBACK_WORDS: Final[List[str]] = _load_word_list()
