from flask import Blueprint, current_app, jsonify

rooms = Blueprint('rooms', __name__)


@rooms.route('/<string:room_code>/state', methods=['GET'])
def get_room_state(room_code):
    """
    Returns a read-only snapshot of a live room.
    """
    room = current_app.extensions['room_coordinator'].get_room(room_code)
    if room is None:
        return jsonify({'error': 'Room not found'}), 404
    return jsonify(room.to_dict()), 200
