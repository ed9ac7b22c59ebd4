from dataclasses import dataclass, field
from typing import List, Optional

from tictactoe.services.rooms.board import O, X, empty_board


@dataclass
class Player:
    conn_id: str
    name: str
    symbol: str

    def to_dict(self):
        return {
            'id': self.conn_id,
            'name': self.name,
            'symbol': self.symbol,
        }


@dataclass
class Room:
    code: str
    players: List[Player] = field(default_factory=list)
    board: List[Optional[str]] = field(default_factory=empty_board)
    current_turn: str = X
    started: bool = False
    winner: Optional[str] = None  # X, O or 'draw'
    created_at: float = 0.0
    last_active: float = 0.0

    @property
    def is_full(self) -> bool:
        return len(self.players) >= 2

    def find_player(self, conn_id: str) -> Optional[Player]:
        for player in self.players:
            if player.conn_id == conn_id:
                return player
        return None

    def free_symbol(self) -> str:
        taken = {p.symbol for p in self.players}
        return X if X not in taken else O

    def seat(self, player: Player) -> None:
        """Add a player keeping the X seat first."""
        if player.symbol == X:
            self.players.insert(0, player)
        else:
            self.players.append(player)

    def remove_player(self, conn_id: str) -> Optional[Player]:
        player = self.find_player(conn_id)
        if player is not None:
            self.players.remove(player)
        return player

    def reset_board(self) -> None:
        self.board = empty_board()
        self.current_turn = X
        self.winner = None

    def to_dict(self):
        return {
            'roomCode': self.code,
            'players': [p.to_dict() for p in self.players],
            'board': list(self.board),
            'currentTurn': self.current_turn,
            'started': self.started,
            'winner': self.winner,
        }
