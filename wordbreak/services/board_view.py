"""
Board Render Projection

Projects a round state into what the host UI draws: one row of coloured
tiles per guess, plus the state of the input box and the action button.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Optional, Tuple

from ..config import MAX_GUESSES
from ..models.game import LetterStatus, RoundState, RoundStatus
from .evaluator import summarize_letters

LETTER_COLOURS: Dict[LetterStatus, str] = {
    LetterStatus.CORRECT: "green",
    LetterStatus.PRESENT: "yellow",
    LetterStatus.ABSENT: "gray",
}


@dataclass(frozen=True)
class TileView:
    letter: str
    status: str
    colour: str


@dataclass(frozen=True)
class RowView:
    guess: str
    tiles: Tuple[TileView, ...]


@dataclass(frozen=True)
class BoardView:
    """Everything the host needs to draw the board."""
    round_id: int
    status: str
    rows: Tuple[RowView, ...]
    keyboard: Dict[str, str]
    remaining_guesses: int
    input_read_only: bool
    button_label: str
    button_disabled: bool
    message: Optional[str] = None
    answer: Optional[str] = None  # Only revealed once the round is over

    def to_dict(self) -> Dict:
        return asdict(self)


def render_board(state: RoundState) -> BoardView:
    """Project a round state into a BoardView."""
    rows = tuple(
        RowView(
            guess=record.word,
            tiles=tuple(
                TileView(letter=letter, status=status.value, colour=LETTER_COLOURS[status])
                for letter, status in zip(record.word, record.evaluation)
            ),
        )
        for record in state.guesses
    )

    if state.loading:
        button_label = "Loading..."
    elif state.status == RoundStatus.IN_PROGRESS:
        button_label = "Guess"
    else:
        button_label = "Reset Game"

    return BoardView(
        round_id=state.round_id,
        status=state.status.value,
        rows=rows,
        keyboard={letter: status.value for letter, status in summarize_letters(state.guesses).items()},
        remaining_guesses=MAX_GUESSES - len(state.guesses),
        input_read_only=not state.accepts_guesses,
        button_label=button_label,
        button_disabled=state.loading,
        message=state.blocked_reason,
        answer=state.secret_word if state.status.is_terminal else None,
    )
