"""
Game Data Models

Contains all round-related data structures and enums. Every model is
immutable so that a round state can be passed through the transition
function and compared or projected without defensive copies.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class LetterStatus(Enum):
    """Per-letter classification of a guess against the secret word."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


class RoundStatus(Enum):
    """Lifecycle of a single round."""
    AWAITING_WORD = "AWAITING_WORD"
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self in (RoundStatus.WON, RoundStatus.LOST)


@dataclass(frozen=True)
class WordResult:
    """Secret word obtained for a round, with where it came from."""
    word: str
    source: str = "remote"  # "remote" or "fallback"
    warning: Optional[str] = None  # user-facing message when the fallback was used


@dataclass(frozen=True)
class GuessRecord:
    """An accepted guess together with its evaluation."""
    word: str
    evaluation: Tuple[LetterStatus, ...]


@dataclass(frozen=True)
class RoundState:
    """Snapshot of one round."""
    round_id: int = 0
    status: RoundStatus = RoundStatus.AWAITING_WORD
    secret_word: Optional[str] = None
    guesses: Tuple[GuessRecord, ...] = field(default_factory=tuple)
    loading: bool = False
    word_source: Optional[str] = None
    blocked_reason: Optional[str] = None

    @property
    def accepts_guesses(self) -> bool:
        return self.status == RoundStatus.IN_PROGRESS and not self.loading


# Events consumed by the round state machine

@dataclass(frozen=True)
class WordRequested:
    round_id: int


@dataclass(frozen=True)
class WordResolved:
    round_id: int
    result: WordResult


@dataclass(frozen=True)
class WordFailed:
    round_id: int
    reason: str


@dataclass(frozen=True)
class GuessSubmitted:
    raw: str


@dataclass(frozen=True)
class ResetRequested:
    pass
