"""
WordBreak Word Endpoint - Main Entry Point

Initializes the word service and starts the Flask application that
serves secret words to game boards.
"""

import os

from . import create_app
from .config import config, validate_word_list_integrity
from .services.word_service import initialize_word_service
from .utils.game_logger import game_logger


def main():
    """Initialize services and start the word endpoint."""
    config_name = os.getenv('WORDBREAK_CONFIG', 'default')
    config_class = config.get(config_name, config['default'])

    try:
        print("Initializing services...")

        validate_word_list_integrity()
        word_service = initialize_word_service()
        print(f"✓ Word service initialized with {len(word_service.word_list)} words")

        app = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info("WordBreak word endpoint starting")

        print(f"\nStarting WordBreak word endpoint on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"API key required: {bool(config_class.WORD_API_KEY)}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("WordBreak word endpoint shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
