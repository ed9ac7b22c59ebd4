from flask import current_app, request
from flask_socketio import emit
from tictactoe import socketio
from tictactoe.exceptions import InvalidMove, RoomError

NAMESPACE = '/'


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _coordinator():
    return current_app.extensions['room_coordinator']


def _text(data, key):
    value = data.get(key) if isinstance(data, dict) else None
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _room_code(data):
    code = _text(data, 'roomCode')
    return code.upper() if code else None


def _report(exc: RoomError) -> None:
    # Errors go back to the caller only
    if isinstance(exc, InvalidMove):
        emit('invalidMove', exc.message)
    else:
        emit('roomError', exc.message)


def handle_connect():
    current_app.logger.info(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    sid = _get_sid()
    code = _coordinator().disconnect(sid)
    current_app.logger.info(f"[disconnect] sid={sid} room={code} reason={reason}")


def handle_create_room(data):
    code = _room_code(data)
    name = _text(data, 'playerName')
    if not code:
        emit('roomError', 'roomCode is required')
        return
    if not name:
        emit('roomError', 'playerName is required')
        return
    try:
        _coordinator().create_room(code, name, _get_sid())
    except RoomError as exc:
        _report(exc)


def handle_join_room(data):
    code = _room_code(data)
    name = _text(data, 'playerName')
    if not code:
        emit('roomError', 'roomCode is required')
        return
    if not name:
        emit('roomError', 'playerName is required')
        return
    try:
        _coordinator().join_room(code, name, _get_sid())
    except RoomError as exc:
        _report(exc)


def handle_make_move(data):
    code = _room_code(data)
    position = data.get('position') if isinstance(data, dict) else None
    if not code or isinstance(position, bool) or not isinstance(position, int):
        current_app.logger.warning(f"[move-rejected] sid={_get_sid()} payload={data!r}")
        return
    try:
        _coordinator().make_move(code, position, _get_sid())
    except RoomError as exc:
        _report(exc)


def handle_restart_game(data):
    if isinstance(data, str) and data.strip():
        # Older clients send the bare code; {roomCode} is the canonical shape
        current_app.logger.warning(f"[restart-legacy-payload] sid={_get_sid()} code={data!r}")
        code = data.strip().upper()
    else:
        code = _room_code(data)
    if not code:
        current_app.logger.warning(f"[restart-rejected] sid={_get_sid()} payload={data!r}")
        return
    _coordinator().restart_game(code)


def handle_leave_room(data):
    code = _room_code(data)
    if not code:
        current_app.logger.warning(f"[leave-rejected] sid={_get_sid()} payload={data!r}")
        return
    _coordinator().leave_room(code, _get_sid())


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on the default namespace."""
    socketio.on_event('connect', handle_connect, namespace=NAMESPACE)
    socketio.on_event('disconnect', handle_disconnect, namespace=NAMESPACE)
    socketio.on_event('createRoom', handle_create_room, namespace=NAMESPACE)
    socketio.on_event('joinRoom', handle_join_room, namespace=NAMESPACE)
    socketio.on_event('makeMove', handle_make_move, namespace=NAMESPACE)
    socketio.on_event('restartGame', handle_restart_game, namespace=NAMESPACE)
    socketio.on_event('leaveRoom', handle_leave_room, namespace=NAMESPACE)
