from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from tictactoe.config import Config

socketio = SocketIO(async_mode=None)


def _parse_origins(value):
    if not value or value == '*':
        return '*'
    if isinstance(value, str):
        return [o.strip() for o in value.split(',') if o.strip()]
    return list(value)


def create_app(config_class=Config):
    flask_app = Flask(__name__, static_folder=None)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = _parse_origins(flask_app.config.get('CORS_ORIGINS', '*'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One coordinator per app; tests get a fresh, empty store each time
    from tictactoe.services.rooms.coordinator import RoomCoordinator
    from tictactoe.services.rooms.notifier import SocketIONotifier
    from tictactoe.services.rooms.store import RoomStore
    flask_app.extensions['room_coordinator'] = RoomCoordinator(RoomStore(), SocketIONotifier(socketio))

    from tictactoe.routes import main
    flask_app.register_blueprint(main)

    from tictactoe.api.rooms import rooms
    flask_app.register_blueprint(rooms, url_prefix='/api/rooms')

    # Importing here ensures the handlers bind to the initialized socketio instance
    from tictactoe.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    from tictactoe.services.rooms.reaper import start_room_reaper
    start_room_reaper(flask_app)

    return flask_app
