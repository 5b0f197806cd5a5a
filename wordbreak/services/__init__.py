"""
Services Package

Contains all business logic: guess evaluation, the round state machine,
the word provider client, the game board and the endpoint's word service.
"""

from .evaluator import evaluate_guess, summarize_letters
from .round_machine import initial_state, transition
from .word_provider import WordProvider, ProviderSettings, describe_failure
from .board_view import BoardView, RowView, TileView, render_board
from .game_board import GameBoard
from .word_service import WordService, get_word_service, initialize_word_service

__all__ = [
    'evaluate_guess', 'summarize_letters',
    'initial_state', 'transition',
    'WordProvider', 'ProviderSettings', 'describe_failure',
    'BoardView', 'RowView', 'TileView', 'render_board',
    'GameBoard',
    'WordService', 'get_word_service', 'initialize_word_service'
]
