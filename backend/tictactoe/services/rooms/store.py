from typing import Dict, Iterator, List, Optional

from tictactoe.models import Room


def normalize_code(code: str) -> str:
    return code.strip().upper()


class RoomStore:
    """In-memory mapping of room code to Room, owned by one coordinator.

    Lives in a single process; several server workers would each see their
    own store.
    """

    def __init__(self):
        self._rooms: Dict[str, Room] = {}

    def get(self, code: str) -> Optional[Room]:
        return self._rooms.get(normalize_code(code))

    def add(self, room: Room) -> None:
        self._rooms[normalize_code(room.code)] = room

    def remove(self, code: str) -> Optional[Room]:
        return self._rooms.pop(normalize_code(code), None)

    def codes(self) -> List[str]:
        return list(self._rooms)

    def __contains__(self, code: str) -> bool:
        return normalize_code(code) in self._rooms

    def __iter__(self) -> Iterator[Room]:
        # snapshot so callers may remove while iterating
        return iter(list(self._rooms.values()))

    def __len__(self) -> int:
        return len(self._rooms)
