import os
import sys
import pytest

# Ensure the backend root (containing the `tictactoe` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from tictactoe import create_app, socketio
from tictactoe.services.rooms.coordinator import RoomCoordinator
from tictactoe.services.rooms.notifier import Notifier
from tictactoe.services.rooms.store import RoomStore


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    HOST = '127.0.0.1'
    PORT = 3000
    CORS_ORIGINS = '*'
    FRONTEND_DIR = None
    ROOM_IDLE_TTL_SEC = 0
    REAPER_INTERVAL_SEC = 30
    LOG_LEVEL = 'DEBUG'


class RecordingNotifier(Notifier):
    """Collects everything the coordinator would have sent over the wire."""

    def __init__(self):
        self.events = []
        self.joined = []
        self.left = []
        self.closed = []

    def join(self, conn_id, code):
        self.joined.append((conn_id, code))

    def leave(self, conn_id, code):
        self.left.append((conn_id, code))

    def emit(self, event, payload=None, to=None, skip=None):
        self.events.append({'event': event, 'payload': payload, 'to': to, 'skip': skip})

    def close(self, code):
        self.closed.append(code)

    def named(self, event):
        return [e for e in self.events if e['event'] == event]

    def clear(self):
        self.events.clear()


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def store():
    return RoomStore()


@pytest.fixture()
def coordinator(store, notifier, clock):
    return RoomCoordinator(store, notifier, clock=clock)


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_sio_client(flask_app):
    """Factory for Socket.IO test clients; all are disconnected on teardown."""
    created = []

    def _make():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass
