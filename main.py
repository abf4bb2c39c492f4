"""
Wordscore Game Server - Main Entry Point

Creates the Flask-SocketIO application and starts serving it.
"""

import logging

from wordscore import create_app
from wordscore.config import Config, config
from wordscore.utils.game_logger import game_logger


def main(config_name: str = 'default'):
    """Create the application and start the server."""
    config_class = config.get(config_name, Config)
    logging.basicConfig(level=getattr(logging, config_class.LOG_LEVEL.upper(), logging.INFO))

    try:
        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        lookup = app.game_service.lookup
        print(f"✓ Loaded {len(lookup.secrets)} secret words, {len(lookup.accepted)} accepted words")

        game_logger.logger.info("Wordscore Server Starting")

        print(f"\nStarting Wordscore Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"Word length: {config_class.WORD_LENGTH}, max guesses: {config_class.MAX_GUESSES}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordscore Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
