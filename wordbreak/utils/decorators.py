"""
Endpoint Decorators

Contains the shared-secret check for the word endpoint.
"""

import hmac
from functools import wraps
from flask import request, jsonify, current_app

API_KEY_HEADER = 'X-Api-Key'


def require_api_key(f):
    """
    Decorator requiring the configured WORD_API_KEY on protected endpoints.

    When no key is configured the endpoint stays open.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from .game_logger import game_logger

        expected = current_app.config.get('WORD_API_KEY')
        if not expected:
            return f(*args, **kwargs)

        provided = request.headers.get(API_KEY_HEADER, '')
        if not hmac.compare_digest(provided, expected):
            error_response = {'error': 'Invalid or missing API key'}
            game_logger.log_server_response(request, request.endpoint or 'unknown', False, error_response)
            return jsonify(error_response), 401

        return f(*args, **kwargs)

    return decorated_function
