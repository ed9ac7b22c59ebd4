import logging
import threading
import time
from typing import Callable, List, Optional

from tictactoe.exceptions import InvalidMove, RoomExists, RoomFull, RoomNotFound
from tictactoe.models import Player, Room
from .board import BOARD_SIZE, DRAW, X, find_winner, is_full, other_symbol
from .notifier import Notifier
from .store import RoomStore, normalize_code

logger = logging.getLogger(__name__)


class RoomCoordinator:
    """
    Owns every live room and applies player intents to it.

    Responsibilities:
    - Create, join, leave and expire rooms
    - Enforce turn order and cell emptiness on moves
    - Detect wins and draws
    - Emit the resulting events through the notifier

    Every public operation runs under a single lock so each inbound message
    is fully applied, broadcasts included, before the next one is looked at.
    """

    def __init__(self, store: RoomStore, notifier: Notifier, clock: Callable[[], float] = time.monotonic):
        self.store = store
        self.notifier = notifier
        self.clock = clock
        self._lock = threading.RLock()

    def get_room(self, code: str) -> Optional[Room]:
        with self._lock:
            return self.store.get(code)

    def room_count(self) -> int:
        with self._lock:
            return len(self.store)

    def create_room(self, code: str, player_name: str, conn_id: str) -> Room:
        code = normalize_code(code)
        with self._lock:
            if code in self.store:
                raise RoomExists()
            now = self.clock()
            room = Room(code=code, created_at=now, last_active=now)
            room.seat(Player(conn_id=conn_id, name=player_name, symbol=X))
            self.store.add(room)
            self.notifier.join(conn_id, code)
            self.notifier.emit('roomCreated', {
                'roomCode': code,
                'symbol': X,
                'playerName': player_name,
            }, to=conn_id)
            logger.info(f"[room-create] code={code} player={player_name} sid={conn_id}")
            return room

    def join_room(self, code: str, player_name: str, conn_id: str) -> Room:
        code = normalize_code(code)
        with self._lock:
            room = self.store.get(code)
            if room is None:
                raise RoomNotFound()
            if room.is_full:
                raise RoomFull()
            waiting = list(room.players)
            # A parked room may still hold a decided board; the new pair starts fresh
            if find_winner(room.board) or is_full(room.board):
                room.reset_board()
            player = Player(conn_id=conn_id, name=player_name, symbol=room.free_symbol())
            room.seat(player)
            room.started = True
            room.last_active = self.clock()
            self.notifier.join(conn_id, code)
            self.notifier.emit('gameStarted', {
                'players': [p.to_dict() for p in room.players],
                'currentTurn': room.current_turn,
                'board': list(room.board),
            }, to=code)
            for opponent in waiting:
                self.notifier.emit('playerJoined', {
                    'playerName': player.name,
                    'playerSymbol': player.symbol,
                }, to=opponent.conn_id)
            logger.info(f"[room-join] code={code} player={player_name} symbol={player.symbol} sid={conn_id}")
            return room

    def make_move(self, code: str, position: int, conn_id: str) -> None:
        with self._lock:
            room = self.store.get(code)
            if room is None or not room.started or room.winner:
                return
            player = room.find_player(conn_id)
            if player is None:
                logger.debug(f"[move-ignored] code={room.code} sid={conn_id} reason=not-seated")
                return
            if player.symbol != room.current_turn:
                raise InvalidMove()
            if isinstance(position, bool) or not isinstance(position, int):
                return
            if not 0 <= position < BOARD_SIZE or room.board[position] is not None:
                return

            room.board[position] = player.symbol
            room.last_active = self.clock()

            result = find_winner(room.board)
            if result:
                winner, pattern = result
                room.winner = winner
                self.notifier.emit('gameWon', {
                    'winner': winner,
                    'winningPattern': pattern,
                }, to=room.code)
                logger.info(f"[game-won] code={room.code} winner={winner} pattern={pattern}")
            elif is_full(room.board):
                room.winner = DRAW
                self.notifier.emit('gameDraw', to=room.code)
                logger.info(f"[game-draw] code={room.code}")
            else:
                room.current_turn = other_symbol(room.current_turn)
                self.notifier.emit('moveMade', {
                    'board': list(room.board),
                    'nextTurn': room.current_turn,
                }, to=room.code)

    def restart_game(self, code: str) -> None:
        with self._lock:
            room = self.store.get(code)
            if room is None:
                return
            room.reset_board()
            room.last_active = self.clock()
            self.notifier.emit('gameRestarted', {
                'board': list(room.board),
                'currentTurn': room.current_turn,
            }, to=room.code)
            logger.info(f"[game-restart] code={room.code}")

    def leave_room(self, code: str, conn_id: str) -> None:
        code = normalize_code(code)
        with self._lock:
            self.notifier.leave(conn_id, code)
            room = self.store.get(code)
            if room is None:
                return
            self._remove_player(room, conn_id)

    def disconnect(self, conn_id: str) -> Optional[str]:
        """Drop the connection from the first room seating it; returns that room's code."""
        with self._lock:
            for room in self.store:
                if room.find_player(conn_id) is not None:
                    self._remove_player(room, conn_id)
                    return room.code
            return None

    def reap_idle(self, max_idle_sec: float) -> List[str]:
        """Delete rooms with no activity for longer than max_idle_sec."""
        expired = []
        with self._lock:
            cutoff = self.clock() - max_idle_sec
            for room in self.store:
                if room.last_active < cutoff:
                    self.store.remove(room.code)
                    self.notifier.emit('roomExpired', {'roomCode': room.code}, to=room.code)
                    self.notifier.close(room.code)
                    expired.append(room.code)
                    logger.info(f"[room-expire] code={room.code} idle_since={room.last_active}")
        return expired

    def _remove_player(self, room: Room, conn_id: str) -> None:
        player = room.remove_player(conn_id)
        if player is None:
            return
        if not room.players:
            self.store.remove(room.code)
            logger.info(f"[room-delete] code={room.code} last_player={player.name}")
            return
        room.started = False
        room.winner = None
        room.last_active = self.clock()
        self.notifier.emit('playerDisconnected', to=room.code, skip=conn_id)
        logger.info(f"[player-left] code={room.code} player={player.name} remaining={len(room.players)}")
