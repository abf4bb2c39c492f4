"""
Wordscore Game Server Application Package

A word-count guessing game: every guess is scored with how many of its letters
occur in the secret word, and the server deduces which letters are in or out
of the secret from those scores.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config

__version__ = "0.1.0"


def create_app(config_class=Config, lookup=None, timer_factory=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        lookup: Word lookup overriding the configured word list files
        timer_factory: Timer factory for error banners (tests)

    Returns:
        Tuple of (Flask application, SocketIO instance)
    """
    from .services.game_service import GameService

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    service_kwargs = {'timer_factory': timer_factory} if timer_factory else {}
    app.game_service = GameService(
        lookup=lookup,
        config_class=config_class,
        emitter=socketio.emit,
        **service_kwargs
    )

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
