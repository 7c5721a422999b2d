"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..config.game_settings import get_word_statistics
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _game_not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session with a fresh round."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            total_words=state.total_words
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get the current round snapshot."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _game_not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'get_state', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/reorder', methods=['POST'])
def reorder_tiles(game_id):
    """Apply a finished drag: move one tile onto another tile's position."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)

        game_logger.log_user_action(request, 'reorder_tiles', game_id, payload=data)

        if game_id not in game_service.games:
            return _game_not_found('reorder_tiles', game_id)

        is_valid, error = game_service.is_valid_reorder(game_id, data)
        if not is_valid:
            error_response = {
                'success': False,
                'error': error
            }
            game_logger.log_server_response(
                request, 'reorder_tiles', False, error_response, game_id,
                validation_error=error
            )
            return jsonify(error_response), 400

        result = game_service.reorder_tiles(
            game_id, data['word_index'], data['source_tile_id'], data['target_tile_id']
        )
        if result is None:
            return _game_not_found('reorder_tiles', game_id)

        response_data = {
            'success': True,
            'applied': result.applied,
            'solved': result.solved,
            'state': asdict(result.state)
        }

        game_logger.log_server_response(
            request, 'reorder_tiles', True, response_data, game_id,
            word_index=data['word_index'], applied=result.applied
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'reorder_tiles', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'reorder_tiles', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/new_set', methods=['POST'])
def new_set(game_id):
    """Replace the current round with a freshly generated one."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'new_set', game_id)

        state = game_service.new_set(game_id)
        if state is None:
            return _game_not_found('new_set', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'new_set', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_set', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_set', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        word_stats = get_word_statistics(game_service.word_list if game_service else None)

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'log_stats': game_logger.get_log_stats(),
            'vocabulary': {
                'total_words': word_stats.get('total_words', 0),
                'distinct_words': word_stats.get('distinct_words', 0),
                'repeated_letter_words': word_stats.get('repeated_letter_words', [])
            }
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
