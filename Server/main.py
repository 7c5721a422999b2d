"""
Word Unscramble Server - Main Entry Point

Initializes the game service and starts the Flask-SocketIO application.
"""

from unscramble import create_app
from unscramble.config import Config, validate_word_list_integrity
from unscramble.services.game_service import initialize_game_service
from unscramble.services.scheduler import SocketIOScheduler
from unscramble.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        # Fail fast on a vocabulary that cannot fill a round
        validate_word_list_integrity(words_per_round=Config.WORDS_PER_ROUND)

        # Create Flask app first so highlight timers can run on the SocketIO loop
        print("Creating Flask application...")
        game_service = initialize_game_service(
            words_per_round=Config.WORDS_PER_ROUND,
            blink_seconds=Config.BLINK_DURATION_MS / 1000,
            reshuffle_solved=Config.RESHUFFLE_SOLVED_SCRAMBLES
        )
        app, socketio = create_app(Config)
        game_service.scheduler = SocketIOScheduler(socketio)
        print("✓ Game service initialized successfully")
        print("✓ Flask application created successfully")

        game_logger.logger.info("Word Unscramble Server Starting")

        print(f"\nStarting Word Unscramble Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Words per round: {Config.WORDS_PER_ROUND}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Unscramble Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
