"""Pure tic-tac-toe rules over a flat 9-cell board."""

from typing import List, Optional, Sequence, Tuple

X = 'X'
O = 'O'
DRAW = 'draw'
BOARD_SIZE = 9

# rows, columns, diagonals; checked in this order
WIN_PATTERNS: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def empty_board() -> List[Optional[str]]:
    return [None] * BOARD_SIZE


def other_symbol(symbol: str) -> str:
    return O if symbol == X else X


def find_winner(board: Sequence[Optional[str]]) -> Optional[Tuple[str, List[int]]]:
    """Return (symbol, winning pattern) for the first completed line, else None."""
    for a, b, c in WIN_PATTERNS:
        mark = board[a]
        if mark and mark == board[b] == board[c]:
            return mark, [a, b, c]
    return None


def is_full(board: Sequence[Optional[str]]) -> bool:
    return all(cell is not None for cell in board)
