"""
Round State Machine

Pure transition function driving a single round:

    AWAITING_WORD -> IN_PROGRESS -> {WON, LOST}

with a reset available from every state. Rejected operations raise and
leave the caller's state untouched; accepted ones return a new state.
"""

from dataclasses import replace
from typing import Union

from ..config import MAX_GUESSES, WORD_LENGTH
from ..errors import StateError, ValidationError
from ..models.game import (
    GuessRecord, GuessSubmitted, ResetRequested, RoundState, RoundStatus,
    WordFailed, WordRequested, WordResolved
)
from ..utils.helpers import is_valid_word, normalize_word
from .evaluator import evaluate_guess

RoundEvent = Union[WordRequested, WordResolved, WordFailed, GuessSubmitted, ResetRequested]

INVALID_GUESS_MESSAGE = f"Guess must be {WORD_LENGTH} letters!"
NOT_READY_MESSAGE = "Please wait for the word to load."
OUT_OF_GUESSES_MESSAGE = f"Game over! You've used all {MAX_GUESSES} guesses."
ALREADY_WON_MESSAGE = "Game over! You already found the word."


def initial_state() -> RoundState:
    """State before the first round has been requested."""
    return RoundState()


def transition(state: RoundState, event: RoundEvent) -> RoundState:
    """
    Apply one event to a round.

    Args:
        state: Current round state
        event: Event to apply

    Returns:
        RoundState: The next state (the same object when the event is ignored)

    Raises:
        ValidationError: Guess is not 5 letters
        StateError: Guess submitted to a round that is not in progress
    """
    if isinstance(event, ResetRequested):
        return RoundState(round_id=state.round_id + 1)

    if isinstance(event, WordRequested):
        if _is_stale(state, event.round_id):
            return state
        return replace(state, loading=True, blocked_reason=None)

    if isinstance(event, WordResolved):
        if _is_stale(state, event.round_id):
            return state
        word = normalize_word(event.result.word)
        if not is_valid_word(word, WORD_LENGTH):
            return replace(state, loading=False, blocked_reason="Invalid secret word received.")
        return replace(
            state,
            status=RoundStatus.IN_PROGRESS,
            secret_word=word,
            guesses=(),
            loading=False,
            word_source=event.result.source,
            blocked_reason=None,
        )

    if isinstance(event, WordFailed):
        if _is_stale(state, event.round_id):
            return state
        return replace(state, loading=False, blocked_reason=event.reason)

    if isinstance(event, GuessSubmitted):
        return _submit_guess(state, event.raw)

    raise TypeError(f"Unsupported round event: {type(event).__name__}")


def _is_stale(state: RoundState, round_id: int) -> bool:
    # Word events only apply to the round that asked for them, and only once.
    return round_id != state.round_id or state.status != RoundStatus.AWAITING_WORD


def _submit_guess(state: RoundState, raw: str) -> RoundState:
    if state.status == RoundStatus.WON:
        raise StateError(ALREADY_WON_MESSAGE)
    if state.status == RoundStatus.LOST or len(state.guesses) >= MAX_GUESSES:
        raise StateError(OUT_OF_GUESSES_MESSAGE)
    if not state.accepts_guesses or state.secret_word is None:
        raise StateError(state.blocked_reason or NOT_READY_MESSAGE, title="Game Not Ready")

    guess = normalize_word(raw)
    # Check the raw text too: uppercasing can change the length (sharp s becomes "SS").
    if not is_valid_word(guess, WORD_LENGTH) or not str(raw).strip().isascii():
        raise ValidationError(INVALID_GUESS_MESSAGE)

    record = GuessRecord(word=guess, evaluation=evaluate_guess(guess, state.secret_word))
    guesses = state.guesses + (record,)

    if guess == state.secret_word:
        status = RoundStatus.WON
    elif len(guesses) >= MAX_GUESSES:
        status = RoundStatus.LOST
    else:
        status = RoundStatus.IN_PROGRESS

    return replace(state, guesses=guesses, status=status)
