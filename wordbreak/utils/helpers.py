"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """
    Extract caller identity information for log entries.

    Args:
        request_obj: Flask request object, or None for client-side events

    Returns:
        dict with the caller address and user agent
    """
    if request_obj is None:
        return {'user_ip': 'local', 'user_agent': None}

    user_agent = getattr(request_obj, 'user_agent', None)
    return {
        'user_ip': getattr(request_obj, 'remote_addr', None) or 'unknown',
        'user_agent': str(user_agent) if user_agent else None
    }


def normalize_word(raw) -> str:
    """Strip surrounding whitespace and uppercase a word or guess."""
    if raw is None:
        return ""
    return str(raw).strip().upper()


def is_valid_word(word: str, length: int = 5) -> bool:
    """True for exactly `length` ASCII letters."""
    return len(word) == length and word.isascii() and word.isalpha()
