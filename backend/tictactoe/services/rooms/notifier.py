from typing import Any, Optional

from flask_socketio import join_room, leave_room


class Notifier:
    """Transport seam used by the coordinator to address connections and rooms."""

    def join(self, conn_id: str, code: str) -> None:
        raise NotImplementedError

    def leave(self, conn_id: str, code: str) -> None:
        raise NotImplementedError

    def emit(self, event: str, payload: Any = None, to: Optional[str] = None, skip: Optional[str] = None) -> None:
        raise NotImplementedError

    def close(self, code: str) -> None:
        raise NotImplementedError


class SocketIONotifier(Notifier):
    """Flask-SocketIO backed notifier. Room channels are named by room code."""

    def __init__(self, socketio, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def join(self, conn_id, code):
        join_room(code, sid=conn_id, namespace=self.namespace)

    def leave(self, conn_id, code):
        leave_room(code, sid=conn_id, namespace=self.namespace)

    def emit(self, event, payload=None, to=None, skip=None):
        args = () if payload is None else (payload,)
        self.socketio.emit(event, *args, to=to, skip_sid=skip, namespace=self.namespace)

    def close(self, code):
        self.socketio.close_room(code, namespace=self.namespace)
