"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..models.game import EventDecodeError, InputEvent
from ..services.game_service import get_game_service
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session."""
    try:
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
            word_length=state.word_length, max_attempts=state.max_attempts
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
@require_game_service
def get_state(game_id, game_service):
    """Get current game state."""
    game_logger.log_user_action(request, 'get_state', game_id)

    state = game_service.get_game_state(game_id)
    if state is None:
        error_response = {
            'success': False,
            'error': 'Game not found'
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 404

    response_data = {
        'success': True,
        'state': asdict(state)
    }
    game_logger.log_server_response(
        request, 'get_state', True, response_data, game_id, status=state.status
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/event', methods=['POST'])
@require_game_service
def game_event(game_id, game_service):
    """Deliver one semantic input event (type_letter, backspace, submit, reset)."""
    data = request.get_json(silent=True)

    try:
        event = InputEvent.from_dict(data)
    except EventDecodeError as e:
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'game_event', False, error_response, game_id)
        return jsonify(error_response), 400

    game_logger.log_user_action(
        request, 'game_event', game_id,
        event_type=event.kind.value, letter=event.letter
    )

    try:
        result = game_service.handle_event(game_id, event)
    except Exception as e:
        game_logger.log_error(request, e, 'game_event', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'game_event', False, error_response, game_id)
        return jsonify(error_response), 500

    if result is None:
        error_response = {
            'success': False,
            'error': 'Game not found'
        }
        game_logger.log_server_response(request, 'game_event', False, error_response, game_id)
        return jsonify(error_response), 404

    response_data = {
        'success': True,
        'result': result.to_dict()
    }
    game_logger.log_server_response(
        request, 'game_event', True, response_data, game_id,
        event_type=event.kind.value, ignored=result.ignored
    )
    game_logger.log_result_notice(game_id, result, request.remote_addr)

    return jsonify(response_data)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """Delete a game session."""
    game_logger.log_user_action(request, 'delete_game', game_id)

    success = game_service.delete_game(game_id)
    response_data = {
        'success': success
    }
    game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

    if success:
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
        return jsonify(response_data)

    response_data['error'] = 'Game not found'
    return jsonify(response_data), 404


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()
    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy' if game_service else 'degraded',
        'active_games': len(game_service.games) if game_service else 0,
        'log_stats': game_logger.get_log_stats()
    }
    game_logger.log_server_response(request, 'health_check', True, response_data)

    return jsonify(response_data)
