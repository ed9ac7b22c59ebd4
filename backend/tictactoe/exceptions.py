class RoomError(Exception):
    """Base error for room operations; `message` is sent back to the caller."""

    message = "Room error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class RoomExists(RoomError):
    message = "Room already exists"


class RoomNotFound(RoomError):
    message = "Room does not exist"


class RoomFull(RoomError):
    message = "Room is full"


class InvalidMove(RoomError):
    message = "Not your turn"
