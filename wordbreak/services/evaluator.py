"""
Guess Evaluator

Implements the two-pass Wordle letter evaluation.
"""

from collections import Counter
from typing import Dict, Iterable, List, Optional, Tuple

from ..models.game import GuessRecord, LetterStatus

_STATUS_RANK = {
    LetterStatus.ABSENT: 0,
    LetterStatus.PRESENT: 1,
    LetterStatus.CORRECT: 2,
}


def evaluate_guess(guess: str, secret: str) -> Tuple[LetterStatus, ...]:
    """
    Classify every letter of a guess against the secret word.

    Exact matches claim their letters first; the remaining letters are then
    scanned left to right and marked PRESENT only while the secret still has
    an unclaimed occurrence of that letter.

    Args:
        guess: Normalized guess
        secret: Normalized secret word

    Returns:
        Tuple of LetterStatus, one per position

    Raises:
        ValueError: If guess and secret differ in length
    """
    if len(guess) != len(secret):
        raise ValueError(f"Guess '{guess}' and secret must have the same length")

    result: List[Optional[LetterStatus]] = [None] * len(guess)
    available = Counter(secret)

    # First pass: exact position matches
    for i, (letter, target) in enumerate(zip(guess, secret)):
        if letter == target:
            result[i] = LetterStatus.CORRECT
            available[letter] -= 1

    # Second pass: present or absent
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if available[letter] > 0:
            result[i] = LetterStatus.PRESENT
            available[letter] -= 1
        else:
            result[i] = LetterStatus.ABSENT

    return tuple(result)  # type: ignore[arg-type]


def summarize_letters(history: Iterable[GuessRecord]) -> Dict[str, LetterStatus]:
    """
    Best-known status of every guessed letter across a round's history.

    CORRECT beats PRESENT, which beats ABSENT.
    """
    summary: Dict[str, LetterStatus] = {}
    for record in history:
        for letter, status in zip(record.word, record.evaluation):
            current = summary.get(letter)
            if current is None or _STATUS_RANK[status] > _STATUS_RANK[current]:
                summary[letter] = status
    return summary
