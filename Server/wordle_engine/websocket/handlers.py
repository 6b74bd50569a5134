"""
WebSocket Event Handlers

Forwards semantic input events from Socket.IO clients to the game service
and pushes the results back to every client watching that game.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..models.game import EventDecodeError, InputEvent
from ..utils.decorators import websocket_game_service_required
from ..utils.game_logger import game_logger
from ..utils.helpers import event_from_key


def game_room(game_id):
    return f"game_{game_id}"


def decode_event(data):
    """
    Build an InputEvent from a Socket.IO payload.

    Accepts either a semantic event (``{"type": "submit"}``) or a raw key
    name (``{"key": "Enter"}``).
    """
    if isinstance(data, dict) and 'key' in data:
        event = event_from_key(data['key'])
        if event is None:
            raise EventDecodeError(f"Unsupported key: {data['key']!r}")
        return event
    return InputEvent.from_dict(data)


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.logger.debug(f"WebSocket: client {request.sid} connected")

    @socketio.on('new_game')
    @websocket_game_service_required
    def handle_new_game(data=None, game_service=None):
        """Create a game and subscribe the caller to its updates."""
        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        join_room(game_room(game_id))
        game_logger.log_game_event(game_id, 'game_created', request.remote_addr, transport='websocket')

        emit('game_created', {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        })

    @socketio.on('join_game')
    @websocket_game_service_required
    def handle_join_game(data, game_service=None):
        """Subscribe to an existing game's updates."""
        game_id = (data or {}).get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        state = game_service.get_game_state(game_id)
        if state is None:
            emit('error', {'error': 'Game not found'})
            return

        join_room(game_room(game_id))
        emit('game_state', {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        })

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Stop receiving a game's updates."""
        game_id = (data or {}).get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return
        leave_room(game_room(game_id))

    @socketio.on('game_event')
    @websocket_game_service_required
    def handle_game_event(data, game_service=None):
        """Deliver one input event and broadcast the result to the game room."""
        game_id = data.get('game_id') if isinstance(data, dict) else None
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        try:
            event = decode_event(data)
        except EventDecodeError as e:
            emit('error', {'error': str(e), 'game_id': game_id})
            return

        try:
            result = game_service.handle_event(game_id, event)
        except Exception as e:
            game_logger.log_error(request, e, 'game_event', game_id)
            emit('error', {'error': str(e), 'game_id': game_id})
            return

        if result is None:
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return

        game_logger.log_result_notice(game_id, result, request.remote_addr)
        join_room(game_room(game_id))
        emit('game_update', {
            'success': True,
            'game_id': game_id,
            'result': result.to_dict()
        }, to=game_room(game_id))
