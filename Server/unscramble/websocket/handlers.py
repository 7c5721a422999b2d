"""
WebSocket Event Handlers

Lets a browser act as the drag-and-drop and rendering side of a game:
clients join a game room, send reorders and receive pushed round state.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger


def game_room(game_id):
    return f"game_{game_id}"


def payload_game_id(data):
    """Game id of an event payload, None when the payload is not an object."""
    if not isinstance(data, dict):
        return None
    return data.get('game_id')


def broadcast_round_state(game_id, socketio):
    """Push the current round snapshot to every client in the game room."""
    game_service = get_game_service()
    if not game_service:
        return

    state = game_service.get_game_state(game_id)
    if state is None:
        return

    socketio.emit('round_state_update', {
        'success': True,
        'state': asdict(state)
    }, to=game_room(game_id))


def make_round_event_forwarder(socketio):
    """
    Builds the game service listener that logs round events and relays the
    ones clients cannot see in a request response.
    """
    def forward(game_id, event, data):
        game_logger.log_game_event(game_id, event, **data)

        if event == 'word_solved':
            socketio.emit('word_solved', data, to=game_room(game_id))
        elif event == 'round_complete':
            socketio.emit('round_complete', data, to=game_room(game_id))
        elif event == 'blink_cleared':
            # Timer driven, nobody asked for this update
            broadcast_round_state(game_id, socketio)

    return forward


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join_game')
    def handle_join_game(data):
        """Join a game room for real-time updates."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        game_id = payload_game_id(data)
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        state = game_service.get_game_state(game_id)
        if state is None:
            emit('error', {'error': 'Game not found'})
            return

        join_room(game_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} joined game {game_id}")

        emit('round_state_update', {
            'success': True,
            'state': asdict(state)
        })

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Leave a game room."""
        game_id = payload_game_id(data)
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        leave_room(game_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} left game {game_id}")

    @socketio.on('reorder_tiles')
    def handle_reorder_tiles(data):
        """Apply a finished drag and broadcast the new state."""
        game_id = payload_game_id(data)
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        try:
            game_service = get_game_service()
            if not game_service:
                emit('error', {'error': 'Game service unavailable'})
                return

            game_logger.log_user_action(request, 'reorder_tiles', game_id, payload=data)

            is_valid, error = game_service.is_valid_reorder(game_id, data)
            if not is_valid:
                emit('error', {'error': error})
                return

            result = game_service.reorder_tiles(
                game_id, data['word_index'], data['source_tile_id'], data['target_tile_id']
            )
            if result is None:
                emit('error', {'error': 'Game not found'})
                return

            if result.applied:
                broadcast_round_state(game_id, socketio)

        except Exception as e:
            game_logger.log_error(request, e, 'reorder_tiles', game_id)
            emit('error', {'error': str(e)})

    @socketio.on('new_set')
    def handle_new_set(data):
        """Start a new round and broadcast it."""
        game_id = payload_game_id(data)
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        try:
            game_service = get_game_service()
            if not game_service:
                emit('error', {'error': 'Game service unavailable'})
                return

            game_logger.log_user_action(request, 'new_set', game_id)

            state = game_service.new_set(game_id)
            if state is None:
                emit('error', {'error': 'Game not found'})
                return

            broadcast_round_state(game_id, socketio)

        except Exception as e:
            game_logger.log_error(request, e, 'new_set', game_id)
            emit('error', {'error': str(e)})
