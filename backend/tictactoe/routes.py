import os

from flask import Blueprint, abort, current_app, jsonify, send_from_directory

main = Blueprint('main', __name__)


def _frontend_dir():
    directory = current_app.config.get('FRONTEND_DIR')
    if directory and os.path.isdir(directory):
        return os.path.abspath(directory)
    return None


@main.route('/')
def index():
    directory = _frontend_dir()
    if directory and os.path.isfile(os.path.join(directory, 'index.html')):
        return send_from_directory(directory, 'index.html')
    return jsonify({'message': 'Welcome to the tic-tac-toe room server!'})


@main.route('/health')
def health():
    coordinator = current_app.extensions['room_coordinator']
    return jsonify({'status': 'ok', 'rooms': coordinator.room_count()})


@main.route('/<path:filename>')
def frontend_asset(filename):
    """Serve files from the configured frontend build, if any."""
    directory = _frontend_dir()
    if not directory:
        abort(404)
    return send_from_directory(directory, filename)
