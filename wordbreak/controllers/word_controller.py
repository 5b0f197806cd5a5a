"""
Word Controller

Handles the word endpoint's HTTP routes.
"""

from flask import Blueprint, request, jsonify
from ..config import DEFAULT_DIFFICULTY
from ..services.word_service import get_word_service
from ..utils.decorators import require_api_key
from ..utils.game_logger import game_logger

word_bp = Blueprint('word', __name__)


@word_bp.route('/getRandomWord', methods=['GET'])
@require_api_key
def get_random_word():
    """Return a random secret word for the requested difficulty."""
    difficulty = (request.args.get('difficulty') or DEFAULT_DIFFICULTY).strip().lower()

    try:
        word_service = get_word_service()
        if not word_service:
            return jsonify({'error': 'Word service unavailable'}), 500

        game_logger.log_user_action(request, 'get_random_word', difficulty=difficulty)

        try:
            word = word_service.random_word(difficulty)
        except ValueError as e:
            error_response = {'error': str(e)}
            game_logger.log_server_response(request, 'get_random_word', False, error_response,
                                            difficulty=difficulty)
            return jsonify(error_response), 400

        response_data = {
            'word': word,
            'difficulty': difficulty
        }
        game_logger.log_server_response(request, 'get_random_word', True, response_data,
                                        difficulty=difficulty)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(e, 'get_random_word', request)
        error_response = {'error': str(e)}
        game_logger.log_server_response(request, 'get_random_word', False, error_response)
        return jsonify(error_response), 500


@word_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        word_service = get_word_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy' if word_service else 'degraded',
            'words_loaded': len(word_service.word_list) if word_service else 0,
            'word_statistics': word_service.statistics() if word_service else None,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(e, 'health_check', request)
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
