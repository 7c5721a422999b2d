"""
Word Unscramble Server Application Package

Hosts the word-unscramble round engine behind a small HTTP and WebSocket API.
Each browser game gets its own round of scrambled words whose tiles are
reordered by drag-and-drop until every word is spelled correctly.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp

    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers, make_round_event_forwarder
    register_websocket_handlers(socketio)

    # Relay round events of the running game service to connected clients
    from .services.game_service import get_game_service
    game_service = get_game_service()
    if game_service:
        game_service.add_listener(make_round_event_forwarder(socketio))

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
