import pytest

from tictactoe.services.rooms.board import WIN_PATTERNS, find_winner, is_full, other_symbol, empty_board


@pytest.mark.parametrize('pattern', WIN_PATTERNS)
def test_every_line_wins(pattern):
    board = empty_board()
    for idx in pattern:
        board[idx] = 'O'
    assert find_winner(board) == ('O', list(pattern))


def test_top_row_win_with_opponent_marks():
    board = ['X', 'X', 'X', None, 'O', 'O', None, None, None]
    assert find_winner(board) == ('X', [0, 1, 2])


def test_no_winner_on_empty_or_partial_board():
    assert find_winner(empty_board()) is None
    assert find_winner(['X', 'O', 'X', None, None, None, None, None, None]) is None


def test_first_line_in_order_is_reported():
    # row 0 and column 0 both complete; rows are checked before columns
    board = ['X', 'X', 'X', 'X', 'O', 'O', 'X', 'O', 'O']
    assert find_winner(board) == ('X', [0, 1, 2])


def test_full_board_without_line_is_not_a_win():
    board = ['X', 'O', 'X', 'X', 'O', 'O', 'O', 'X', 'X']
    assert find_winner(board) is None
    assert is_full(board)


def test_is_full_and_other_symbol():
    board = empty_board()
    assert len(board) == 9
    assert not is_full(board)
    assert other_symbol('X') == 'O'
    assert other_symbol('O') == 'X'
