"""
Word Service

Server-side word selection behind the word endpoint.
"""

import random
from typing import List, Optional

from ..config import DEFAULT_DIFFICULTY, FALLBACK_WORDS, get_word_statistics, words_for_difficulty


class WordService:
    """
    Picks secret words for the word endpoint.

    Args:
        words: Word bank to serve from, defaults to the bundled list
        rng: Random source
    """

    def __init__(self, words: Optional[List[str]] = None, rng: Optional[random.Random] = None):
        self.word_list = list(FALLBACK_WORDS if words is None else words)
        self.rng = rng or random.Random()

    def random_word(self, difficulty: str = DEFAULT_DIFFICULTY) -> str:
        """
        Select a random word for a difficulty.

        Raises:
            ValueError: If the difficulty is unknown
        """
        bucket = words_for_difficulty(difficulty, self.word_list)
        return self.rng.choice(bucket)

    def statistics(self) -> dict:
        return get_word_statistics(self.word_list)


# Global service instance
_word_service = None


def get_word_service() -> Optional[WordService]:
    """Get the global word service instance."""
    return _word_service


def initialize_word_service(words: Optional[List[str]] = None) -> WordService:
    """Initialize the global word service instance."""
    global _word_service
    _word_service = WordService(words)
    return _word_service
