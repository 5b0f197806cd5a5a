"""
Error Types

Exception hierarchy shared by the word provider, the round state machine
and the word endpoint. Nothing here is fatal: every error degrades to a
user-visible message plus either a fallback word or an unchanged round.
"""

from typing import Optional


class WordBreakError(Exception):
    """Base class for all WordBreak errors."""


class WordProviderError(WordBreakError):
    """Failure while acquiring a secret word."""


class NetworkError(WordProviderError):
    """
    Transport failure reaching the word endpoint, or a non-2xx response.

    Args:
        message: Human readable description
        status_code: HTTP status when the endpoint answered, None otherwise
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ProtocolError(WordProviderError):
    """Endpoint reachable but the response has no usable `word` field."""


class WordUnavailableError(WordProviderError):
    """Neither the remote endpoint nor the fallback list produced a word."""


class GameError(WordBreakError):
    """
    Rejected operation against the current round.

    Args:
        message: Text shown to the player
        title: Alert title, defaults to the class title
    """

    title = "Error"

    def __init__(self, message: str, title: Optional[str] = None):
        super().__init__(message)
        if title is not None:
            self.title = title


class ValidationError(GameError):
    """Guess failed the 5-letter precondition."""

    title = "Invalid Guess"


class StateError(GameError):
    """Operation attempted against a terminal or not-yet-ready round."""

    title = "Game Over"
