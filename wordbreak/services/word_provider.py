"""
Word Provider

Obtains the secret word for a round from the remote word endpoint, falling
back to the fixed local word list when the endpoint cannot be used.
"""

import random
from dataclasses import dataclass, field
from typing import Optional, Tuple

import requests

from ..config import Config, FALLBACK_WORDS, WORD_LENGTH
from ..errors import NetworkError, ProtocolError, WordProviderError, WordUnavailableError
from ..models.game import WordResult
from ..utils.game_logger import game_logger
from ..utils.helpers import is_valid_word as _is_word, normalize_word

GENERIC_FAILURE_MESSAGE = "Failed to fetch new word."


@dataclass(frozen=True)
class ProviderSettings:
    """Injected configuration for a WordProvider."""
    endpoint_url: str
    timeout: float = 5.0
    default_difficulty: str = "normal"
    fallback_words: Tuple[str, ...] = field(default_factory=lambda: tuple(FALLBACK_WORDS))
    use_fallback_on_failure: bool = True
    api_key: Optional[str] = None

    @classmethod
    def from_config(cls, config_class=Config) -> "ProviderSettings":
        return cls(
            endpoint_url=config_class.WORD_ENDPOINT_URL,
            timeout=config_class.WORD_REQUEST_TIMEOUT,
            default_difficulty=config_class.DEFAULT_DIFFICULTY,
            use_fallback_on_failure=config_class.USE_FALLBACK_ON_FAILURE,
            api_key=config_class.WORD_API_KEY,
        )


def is_valid_word(word: str) -> bool:
    return _is_word(word, WORD_LENGTH)


def describe_failure(error: WordProviderError) -> str:
    """
    Turn a provider failure into the message shown to the player.

    Args:
        error: NetworkError or ProtocolError raised by the remote fetch

    Returns:
        str: User-facing warning text
    """
    if isinstance(error, ProtocolError):
        return "Invalid response from word service."
    if isinstance(error, NetworkError):
        if error.status_code is None:
            return "Network error. Please check your connection."
        if error.status_code == 404:
            return "Word service not found. Please contact support."
        if error.status_code >= 500:
            return "Word service is temporarily down. Please try again."
    return GENERIC_FAILURE_MESSAGE


class WordProvider:
    """
    Client for the word endpoint.

    Args:
        settings: Endpoint, timeout and fallback configuration
        session: HTTP session, replaceable by a test double
        rng: Random source used for fallback selection
    """

    def __init__(self,
                 settings: Optional[ProviderSettings] = None,
                 session: Optional[requests.Session] = None,
                 rng: Optional[random.Random] = None):
        self.settings = settings or ProviderSettings.from_config()
        self.session = session or requests.Session()
        self.rng = rng or random.Random()
        self.fallback_words: Tuple[str, ...] = tuple(
            word for word in (normalize_word(w) for w in self.settings.fallback_words)
            if is_valid_word(word)
        )

    def acquire_word(self, difficulty: Optional[str] = None) -> WordResult:
        """
        Get the secret word for a new round.

        Remote failures resolve to a fallback word with a warning attached.

        Args:
            difficulty: Difficulty passed to the endpoint, defaults to the configured one

        Returns:
            WordResult with an uppercase 5-letter word

        Raises:
            WordUnavailableError: If fallback is disabled or no fallback word exists
        """
        difficulty = difficulty or self.settings.default_difficulty

        try:
            word = self.fetch_remote_word(difficulty)
            return WordResult(word=word, source="remote")
        except (NetworkError, ProtocolError) as error:
            warning = describe_failure(error)
            status_code = getattr(error, 'status_code', None)

            if not self.settings.use_fallback_on_failure:
                game_logger.log_word_request(
                    'failure', self.settings.endpoint_url, difficulty,
                    error_type=type(error).__name__, error=str(error),
                    status_code=status_code, fallback_enabled=False
                )
                raise WordUnavailableError(warning) from error

            word = self.pick_fallback_word()
            game_logger.log_word_request(
                'fallback', self.settings.endpoint_url, difficulty,
                error_type=type(error).__name__, error=str(error),
                status_code=status_code, source='fallback'
            )
            return WordResult(word=word, source="fallback", warning=warning)

    def fetch_remote_word(self, difficulty: str) -> str:
        """
        Request a word from the endpoint.

        Raises:
            NetworkError: On transport failure or a non-2xx status
            ProtocolError: If the body has no usable `word` field
        """
        url = self.settings.endpoint_url
        game_logger.log_word_request('start', url, difficulty)

        headers = {'Accept': 'application/json'}
        if self.settings.api_key:
            headers['X-Api-Key'] = self.settings.api_key

        try:
            response = self.session.get(
                url,
                params={'difficulty': difficulty},
                headers=headers,
                timeout=self.settings.timeout,
            )
        except requests.RequestException as e:
            raise NetworkError(f"Failed to reach word service: {e}") from e

        if not response.ok:
            message = f"HTTP {response.status_code}"
            try:
                error_data = response.json()
                if isinstance(error_data, dict):
                    message = error_data.get('error') or error_data.get('message') or message
            except ValueError:
                pass
            raise NetworkError(message, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise ProtocolError("Invalid response: body is not JSON") from e

        raw_word = data.get('word') if isinstance(data, dict) else None
        if not raw_word or not isinstance(raw_word, str):
            raise ProtocolError("Invalid response: missing word property")

        word = normalize_word(raw_word)
        if not is_valid_word(word):
            raise ProtocolError(f"Invalid response: word must be {WORD_LENGTH} letters")

        game_logger.log_word_request('success', url, difficulty,
                                     status_code=response.status_code, source='remote')
        return word

    def pick_fallback_word(self) -> str:
        """
        Choose a word uniformly at random from the local fallback list.

        Raises:
            WordUnavailableError: If the fallback list holds no valid word
        """
        if not self.fallback_words:
            raise WordUnavailableError("No word is available. Please try again later.")
        return self.rng.choice(self.fallback_words)

