"""
WordBreak Application Package

Word-guessing game core (guess evaluation, round state machine, word
provider with local fallback) plus the tiny HTTP endpoint that supplies
secret words.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory for the word endpoint.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    from .services.word_service import get_word_service, initialize_word_service
    if get_word_service() is None:
        initialize_word_service()

    # Register blueprints
    from .controllers.word_controller import word_bp
    app.register_blueprint(word_bp)

    return app
