import random
import unittest
from concurrent.futures import Future
from unittest.mock import MagicMock

import requests

from wordbreak.errors import StateError, ValidationError, WordUnavailableError
from wordbreak.models.game import LetterStatus, RoundStatus, WordResult
from wordbreak.services.game_board import GameBoard
from wordbreak.services.word_provider import ProviderSettings, WordProvider


class DeferredExecutor:
    """Executor double that runs submitted fetches only when told to."""

    def __init__(self):
        self.pending = []

    def submit(self, fn, *args, **kwargs):
        future = Future()
        self.pending.append((future, fn, args, kwargs))
        return future

    def run(self, index=0):
        future, fn, args, kwargs = self.pending.pop(index)
        future.set_result(fn(*args, **kwargs))
        return future


def make_provider(*results):
    provider = MagicMock()
    provider.acquire_word.side_effect = list(results)
    return provider


class TestGameBoardRounds(unittest.TestCase):
    """Tests for round play through the board."""

    def setUp(self):
        self.alerts = []

    def make_board(self, *results, **kwargs):
        return GameBoard(make_provider(*results), send_alert=self.alerts.append, **kwargs)

    def test_start_fetches_word(self):
        board = self.make_board(WordResult("REACT"))
        self.assertEqual(board.state.status, RoundStatus.IN_PROGRESS)
        self.assertEqual(board.state.secret_word, "REACT")
        board.provider.acquire_word.assert_called_once_with("normal")
        self.assertEqual(self.alerts, [])

    def test_difficulty_is_forwarded(self):
        board = self.make_board(WordResult("REACT"), difficulty="hard")
        board.provider.acquire_word.assert_called_once_with("hard")

    def test_react_scenario(self):
        board = self.make_board(WordResult("REACT"))
        board.submit_guess("stack")
        board.submit_guess("TRACE")
        record = board.submit_guess("REACT")

        self.assertEqual(record.evaluation, (LetterStatus.CORRECT,) * 5)
        self.assertEqual(board.state.status, RoundStatus.WON)
        self.assertEqual(len(board.state.guesses), 3)
        self.assertEqual(self.alerts[-1].title, "Congratulations!")
        self.assertEqual(self.alerts[-1].variant, "success")

        with self.assertRaises(StateError):
            board.submit_guess("TRACE")
        self.assertEqual(len(board.state.guesses), 3)

    def test_invalid_guess_alerts_and_raises(self):
        board = self.make_board(WordResult("REACT"))
        for raw in ["REAC", "REACTS"]:
            with self.assertRaises(ValidationError):
                board.submit_guess(raw)
        self.assertEqual(board.state.guesses, ())
        self.assertEqual([a.title for a in self.alerts], ["Invalid Guess", "Invalid Guess"])
        self.assertEqual(self.alerts[0].message, "Guess must be 5 letters!")
        self.assertEqual(self.alerts[0].variant, "danger")

    def test_sixth_guess_rejected_after_loss(self):
        board = self.make_board(WordResult("REACT"))
        for guess in ["STACK", "TRACE", "CHAIR", "TIGER", "MUSIC"]:
            board.submit_guess(guess)
        self.assertEqual(board.state.status, RoundStatus.LOST)
        self.assertIn("REACT", self.alerts[-1].message)

        with self.assertRaises(StateError):
            board.submit_guess("REACT")
        self.assertEqual(board.state.status, RoundStatus.LOST)
        self.assertEqual(len(board.state.guesses), 5)

    def test_reset_starts_fresh_round(self):
        board = self.make_board(WordResult("REACT"), WordResult("TIGER"))
        board.submit_guess("REACT")
        first_round = board.state.round_id

        board.reset()
        self.assertEqual(board.provider.acquire_word.call_count, 2)
        self.assertEqual(board.state.status, RoundStatus.IN_PROGRESS)
        self.assertEqual(board.state.guesses, ())
        self.assertEqual(board.state.secret_word, "TIGER")
        self.assertGreater(board.state.round_id, first_round)

    def test_fallback_emits_exactly_one_warning(self):
        board = self.make_board(WordResult("CHAIR", source="fallback",
                                           warning="Network error. Please check your connection."))
        self.assertEqual(board.state.status, RoundStatus.IN_PROGRESS)
        self.assertEqual(board.state.word_source, "fallback")
        warnings = [a for a in self.alerts if a.variant == "warning"]
        self.assertEqual(len(warnings), 1)
        self.assertEqual(warnings[0].message, "Network error. Please check your connection.")

    def test_unavailable_word_blocks_guessing(self):
        board = self.make_board(WordUnavailableError("No word is available. Please try again later."))
        self.assertEqual(board.state.status, RoundStatus.AWAITING_WORD)
        self.assertFalse(board.state.loading)
        self.assertEqual(self.alerts[-1].variant, "error")
        self.assertTrue(board.view().input_read_only)

        with self.assertRaises(StateError):
            board.submit_guess("REACT")

    def test_works_without_alert_callback(self):
        board = GameBoard(make_provider(WordResult("REACT")))
        with self.assertRaises(ValidationError):
            board.submit_guess("NOPE")

    def test_unexpected_provider_error_unblocks_board(self):
        board = self.make_board(RuntimeError("boom"))
        view = board.view()

        self.assertEqual(board.state.status, RoundStatus.AWAITING_WORD)
        self.assertFalse(board.state.loading)
        self.assertFalse(view.button_disabled)
        self.assertEqual(view.button_label, "Reset Game")
        self.assertEqual(len(self.alerts), 1)
        self.assertEqual(self.alerts[0].variant, "error")
        self.assertEqual(self.alerts[0].message, "Failed to fetch new word.")

    def test_malformed_word_alerts(self):
        board = self.make_board(WordResult("HI"))
        self.assertEqual(board.state.status, RoundStatus.AWAITING_WORD)
        self.assertEqual([a.variant for a in self.alerts], ["error"])
        self.assertEqual(self.alerts[0].message, "Invalid secret word received.")
        with self.assertRaises(StateError):
            board.submit_guess("REACT")


class TestGameBoardWithWordProvider(unittest.TestCase):
    """Board wired to a real WordProvider whose endpoint is unreachable."""

    def setUp(self):
        self.alerts = []
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("connection refused")
        settings = ProviderSettings(endpoint_url="https://words.example.test/getRandomWord",
                                    fallback_words=("CHAIR", "TIGER", "MUSIC"))
        self.provider = WordProvider(settings, session=session, rng=random.Random(11))

    def test_network_failure_reaches_in_progress_with_one_warning(self):
        board = GameBoard(self.provider, self.alerts.append)

        self.assertEqual(board.state.status, RoundStatus.IN_PROGRESS)
        self.assertIn(board.state.secret_word, ("CHAIR", "TIGER", "MUSIC"))
        self.assertEqual(board.state.word_source, "fallback")
        self.assertEqual(len(self.alerts), 1)
        self.assertEqual(self.alerts[0].variant, "warning")
        self.assertEqual(self.alerts[0].message, "Network error. Please check your connection.")

        board.submit_guess(board.state.secret_word)
        self.assertEqual(board.state.status, RoundStatus.WON)

    def test_network_failure_in_background_fetch(self):
        executor = DeferredExecutor()
        board = GameBoard(self.provider, self.alerts.append, executor=executor)
        self.assertTrue(board.view().button_disabled)

        executor.run()
        self.assertEqual(board.state.status, RoundStatus.IN_PROGRESS)
        self.assertEqual([a.variant for a in self.alerts], ["warning"])


class TestGameBoardConcurrency(unittest.TestCase):
    """Tests for background fetches and stale results."""

    def setUp(self):
        self.alerts = []
        self.executor = DeferredExecutor()

    def test_guess_while_loading_is_rejected(self):
        board = GameBoard(make_provider(WordResult("REACT")), self.alerts.append, executor=self.executor)
        self.assertTrue(board.state.loading)
        self.assertEqual(board.view().button_label, "Loading...")

        with self.assertRaises(StateError):
            board.submit_guess("REACT")
        self.assertEqual(self.alerts[-1].title, "Game Not Ready")
        self.assertEqual(self.alerts[-1].variant, "warning")

        self.executor.run()
        self.assertEqual(board.state.status, RoundStatus.IN_PROGRESS)
        board.submit_guess("REACT")
        self.assertEqual(board.state.status, RoundStatus.WON)

    def test_reset_during_fetch_discards_superseded_word(self):
        provider = make_provider(WordResult("REACT"), WordResult("STACK"))
        board = GameBoard(provider, self.alerts.append, executor=self.executor)
        board.reset()
        self.assertEqual(len(self.executor.pending), 2)
        current_round = board.state.round_id

        # Newest round resolves first, then the superseded one.
        self.assertTrue(self.executor.run(1).result())
        self.assertFalse(self.executor.run(0).result())

        self.assertEqual(board.state.round_id, current_round)
        self.assertEqual(board.state.secret_word, "REACT")
        self.assertEqual(board.state.status, RoundStatus.IN_PROGRESS)

    def test_unexpected_error_in_background_fetch_clears_loading(self):
        board = GameBoard(make_provider(RuntimeError("boom")), self.alerts.append, executor=self.executor)
        self.assertEqual(board.view().button_label, "Loading...")

        self.assertFalse(self.executor.run().result())
        view = board.view()
        self.assertFalse(board.state.loading)
        self.assertFalse(view.button_disabled)
        self.assertEqual(view.button_label, "Reset Game")
        self.assertEqual([(a.variant, a.message) for a in self.alerts],
                         [("error", "Failed to fetch new word.")])

        board.reset()
        self.assertEqual(len(self.executor.pending), 1)

    def test_superseded_fallback_warning_is_not_shown(self):
        provider = make_provider(WordResult("REACT"),
                                 WordResult("CHAIR", source="fallback", warning="Network error."))
        board = GameBoard(provider, self.alerts.append, executor=self.executor)
        board.reset()

        self.executor.run(1)
        self.executor.run(0)
        self.assertEqual(self.alerts, [])
        self.assertEqual(board.state.secret_word, "REACT")


class TestBoardView(unittest.TestCase):
    """Tests for the render projection."""

    def test_rows_and_colours(self):
        board = GameBoard(make_provider(WordResult("REACT")))
        board.submit_guess("STACK")
        view = board.view()

        self.assertEqual(view.button_label, "Guess")
        self.assertFalse(view.input_read_only)
        self.assertEqual(view.remaining_guesses, 4)
        self.assertIsNone(view.answer)

        row = view.rows[0]
        self.assertEqual(row.guess, "STACK")
        self.assertEqual([t.colour for t in row.tiles], ["gray", "yellow", "green", "green", "gray"])
        self.assertEqual(view.keyboard["A"], "CORRECT")

    def test_finished_round_offers_reset(self):
        board = GameBoard(make_provider(WordResult("REACT")))
        board.submit_guess("REACT")
        view = board.view()

        self.assertEqual(view.status, "WON")
        self.assertEqual(view.button_label, "Reset Game")
        self.assertTrue(view.input_read_only)
        self.assertEqual(view.answer, "REACT")
        self.assertEqual(view.to_dict()["rows"][0]["tiles"][0]["colour"], "green")


if __name__ == '__main__':
    unittest.main()
