"""
Data Models Package

Contains all data models and events used throughout the application.
"""

from .alert import Alert
from .game import (
    LetterStatus, RoundStatus, WordResult, GuessRecord, RoundState,
    WordRequested, WordResolved, WordFailed, GuessSubmitted, ResetRequested
)

__all__ = [
    'Alert', 'LetterStatus', 'RoundStatus', 'WordResult', 'GuessRecord', 'RoundState',
    'WordRequested', 'WordResolved', 'WordFailed', 'GuessSubmitted', 'ResetRequested'
]
