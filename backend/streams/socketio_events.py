from flask_socketio import emit
from flask import current_app
from streams import socketio
from streams.api.boards import board_payload
from streams.services.games import BoardContractError


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_ping(data):
    emit('pong', data or {})


def handle_score_board(data):
    """Score a board pushed by a client and reply on the same socket."""
    if not isinstance(data, dict) or 'board' not in data:
        emit('error', {'message': 'board is required'})
        return
    try:
        payload = board_payload(data['board'])
    except BoardContractError as exc:
        current_app.logger.warning(f"[board-rejected] {exc}")
        emit('error', {'message': str(exc)})
        return
    emit('board_scored', payload)


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    namespaces = ['/ws', '/'] if testing else ['/ws']
    for namespace in namespaces:
        socketio.on_event('connect', handle_connect, namespace=namespace)
        socketio.on_event('ping', handle_ping, namespace=namespace)
        socketio.on_event('score_board', handle_score_board, namespace=namespace)
