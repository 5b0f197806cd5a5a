"""
Game Logger Module for WordBreak

This module provides structured logging for word requests, endpoint
traffic, round events and errors, shared by the word endpoint and the
client-side game board.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config import Config
from .helpers import get_user_identity


class GameLogger:
    """
    Centralized logging system for WordBreak.

    Features:
    - Word request tracking (start, success, fallback, failure)
    - Endpoint request and response logging with client identification
    - Round event logging (won, lost, reset)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, str(level).upper(), logging.INFO)

        # Setup main game logger
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger('wordbreak')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        log_file = self._log_file()

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(self.level)

        # Console only shows warnings and errors
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Dict[str, Any],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def _emit(self, level: int, event_type: str, action: str,
              user_info: Dict[str, Any], details: Dict[str, Any]):
        # Logging must never break a round.
        try:
            self.logger.log(level, self._create_log_entry(event_type, action, user_info, details))
        except Exception as e:
            logging.getLogger(__name__).debug("Dropped log entry %s/%s: %s", event_type, action, e)

    def log_user_action(self, request, action: str, **kwargs):
        """
        Log an incoming endpoint request.

        Args:
            request: Flask request object
            action: Type of action (e.g., 'get_random_word', 'health_check')
            **kwargs: Additional details to log
        """
        details = {
            'endpoint': request.endpoint,
            'method': request.method,
            'url': request.url,
            **kwargs
        }
        self._emit(logging.INFO, 'USER_ACTION', action, get_user_identity(request), details)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            **kwargs):
        """
        Log endpoint responses with full context.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            **kwargs: Additional details to log
        """
        details = {
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        level = logging.INFO if success else logging.ERROR
        self._emit(level, event_type, action, get_user_identity(request), details)

    def log_word_request(self, phase: str, endpoint: str, difficulty: str, **kwargs):
        """
        Log a word provider request.

        Args:
            phase: 'start', 'success', 'fallback' or 'failure'
            endpoint: URL the word was requested from
            difficulty: Requested difficulty
            **kwargs: Additional details (status code, error, source)
        """
        details = {'endpoint': endpoint, 'difficulty': difficulty, **kwargs}
        level = logging.WARNING if phase in ('fallback', 'failure') else logging.INFO
        self._emit(level, 'WORD_REQUEST', phase, get_user_identity(), details)

    def log_game_event(self, round_id: Optional[int], event: str, **kwargs):
        """
        Log round events (wins, losses, resets).

        Args:
            round_id: Round identifier
            event: Type of event (e.g., 'round_won', 'round_lost', 'round_reset')
            **kwargs: Additional round details
        """
        details = {'round_id': round_id, **kwargs}
        self._emit(logging.INFO, 'GAME_EVENT', event, get_user_identity(), details)

    def log_error(self, error: Exception, action: str, request=None, **kwargs):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            request: Flask request object when the error happened in the endpoint
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            **kwargs
        }
        self._emit(logging.ERROR, 'ERROR', action, get_user_identity(request), details)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Mask the served word so logs do not spoil the round."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()
        if 'word' in sanitized:
            sanitized['word'] = '*' * len(str(sanitized['word']))
        if 'word_statistics' in sanitized:
            sanitized['word_statistics'] = '<omitted>'
        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about today's logged events."""
        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'user_actions': 0,
            'server_responses': 0,
            'word_requests': 0,
            'game_events': 0,
            'errors': 0
        }

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if not line.strip():
                        continue
                    stats['total_entries'] += 1
                    if 'USER_ACTION' in line:
                        stats['user_actions'] += 1
                    elif 'SERVER_RESPONSE' in line:
                        stats['server_responses'] += 1
                    elif 'WORD_REQUEST' in line:
                        stats['word_requests'] += 1
                    elif 'GAME_EVENT' in line:
                        stats['game_events'] += 1
                    elif '"ERROR"' in line:
                        stats['errors'] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return stats


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
