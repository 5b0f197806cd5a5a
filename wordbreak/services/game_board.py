"""
Game Board Service

Host-facing controller for one player's board. It owns the current round
state, feeds events through the round state machine, fetches secret words
through the word provider and reports everything the player should see
through the host's `send_alert` callback.
"""

import threading
from concurrent.futures import Executor, Future
from typing import Callable, Optional

from ..config import Config
from ..errors import GameError, StateError, WordProviderError
from ..models.alert import Alert
from ..models.game import (
    GuessRecord, GuessSubmitted, ResetRequested, RoundState, RoundStatus,
    WordFailed, WordRequested, WordResolved
)
from ..utils.game_logger import game_logger
from .board_view import BoardView, render_board
from .round_machine import initial_state, transition
from .word_provider import GENERIC_FAILURE_MESSAGE, WordProvider

AlertCallback = Callable[[Alert], None]


class GameBoard:
    """
    Single-player board driven by host button activations.

    One word fetch is outstanding per round. A reset while a fetch is pending
    starts a new round; the superseded fetch result is discarded when it
    arrives because word events are keyed by round id.

    Args:
        provider: Word provider used at round start and reset
        send_alert: Host callback receiving Alert objects
        difficulty: Difficulty requested from the word endpoint
        executor: Run word fetches in the background; None fetches inline
        autostart: Request the first word immediately
    """

    def __init__(self,
                 provider: Optional[WordProvider] = None,
                 send_alert: Optional[AlertCallback] = None,
                 difficulty: Optional[str] = None,
                 executor: Optional[Executor] = None,
                 autostart: bool = True):
        self.provider = provider or WordProvider()
        self.send_alert = send_alert
        self.difficulty = difficulty or Config.DEFAULT_DIFFICULTY
        self.executor = executor
        self._lock = threading.RLock()
        self._state = initial_state()

        if autostart:
            self.reset()

    @property
    def state(self) -> RoundState:
        with self._lock:
            return self._state

    def view(self) -> BoardView:
        """Render projection of the current round."""
        return render_board(self.state)

    def reset(self) -> Optional[Future]:
        """
        Start a new round and request its secret word.

        Returns:
            The pending Future when an executor is configured, otherwise None
        """
        with self._lock:
            previous = self._state
            state = transition(previous, ResetRequested())
            state = transition(state, WordRequested(state.round_id))
            self._state = state
            round_id = state.round_id

        if previous.round_id:
            game_logger.log_game_event(round_id, 'round_reset',
                                       previous_round=previous.round_id,
                                       previous_status=previous.status.value,
                                       superseded_fetch=previous.loading)

        if self.executor is None:
            self._load_word(round_id)
            return None
        return self.executor.submit(self._load_word, round_id)

    def submit_guess(self, raw: str) -> GuessRecord:
        """
        Submit a guess to the current round.

        Args:
            raw: Text typed by the player

        Returns:
            GuessRecord: The accepted guess with its evaluation

        Raises:
            ValidationError: Guess is not 5 letters
            StateError: Round is over or its word has not loaded
        """
        with self._lock:
            try:
                state = transition(self._state, GuessSubmitted(raw))
            except GameError as e:
                variant = "warning" if isinstance(e, StateError) and e.title == "Game Not Ready" else "danger"
                self._alert(e.title, str(e), variant)
                raise
            self._state = state

        record = state.guesses[-1]
        if state.status == RoundStatus.WON:
            self._alert("Congratulations!", "You've won! 🎉", "success")
            game_logger.log_game_event(state.round_id, 'round_won',
                                       guesses_used=len(state.guesses), word_source=state.word_source)
        elif state.status == RoundStatus.LOST:
            self._alert("Game Over", f"You've used all your guesses. The word was {state.secret_word}.", "danger")
            game_logger.log_game_event(state.round_id, 'round_lost',
                                       guesses_used=len(state.guesses), word_source=state.word_source)
        return record

    def _load_word(self, round_id: int) -> bool:
        try:
            result = self.provider.acquire_word(self.difficulty)
        except WordProviderError as e:
            game_logger.log_error(e, 'acquire_word', round_id=round_id)
            if self._apply_word_event(WordFailed(round_id, str(e))) is not None:
                self._alert("Error", str(e), "error")
            return False
        except Exception as e:
            # A broken provider must not leave the board stuck loading.
            game_logger.log_error(e, 'acquire_word', round_id=round_id)
            if self._apply_word_event(WordFailed(round_id, GENERIC_FAILURE_MESSAGE)) is not None:
                self._alert("Error", GENERIC_FAILURE_MESSAGE, "error")
            return False

        state = self._apply_word_event(WordResolved(round_id, result))
        if state is None:
            return False
        if state.blocked_reason:
            self._alert("Error", state.blocked_reason, "error")
            return False
        if result.warning:
            self._alert("Using Backup Word", result.warning, "warning")
        return True

    def _apply_word_event(self, event) -> Optional[RoundState]:
        """Apply a word event; returns the new state, or None when it was stale."""
        with self._lock:
            state = transition(self._state, event)
            applied = state is not self._state
            self._state = state

        if not applied:
            game_logger.log_game_event(event.round_id, 'stale_word_discarded', current_round=state.round_id)
            return None
        return state

    def _alert(self, title: str, message: str, variant: str):
        if self.send_alert is None:
            return
        self.send_alert(Alert(title=title, message=message, variant=variant))
