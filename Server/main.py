"""
Wordle Guess Engine Server - Main Entry Point

Initializes the word provider and game service, then starts the
Flask-SocketIO application.
"""

from wordle_engine import create_app
from wordle_engine.config import Config, validate_word_list_integrity
from wordle_engine.services import CorpusUnavailable, FileWordProvider, initialize_game_service
from wordle_engine.utils.game_logger import game_logger


def check_corpus(word_provider):
    """Load the corpus once at startup so a missing word list shows up early."""
    try:
        words = word_provider.words()
        validate_word_list_integrity(words)
        print(f"✓ Loaded {len(words)} words from {word_provider.path}")
        return True
    except (CorpusUnavailable, ValueError) as e:
        print(f"✗ Word corpus problem: {e}")
        print(f"  Games will use the fallback word {Config.FALLBACK_SECRET_WORD!r} and reject every guess")
        game_logger.logger.warning(f"Word corpus unavailable at startup: {e}")
        return False


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        word_provider = FileWordProvider(Config.WORD_LIST_PATH)
        check_corpus(word_provider)

        initialize_game_service(word_provider)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle Guess Engine Server starting")

        print(f"\nStarting Wordle Guess Engine Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Guess Engine Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
