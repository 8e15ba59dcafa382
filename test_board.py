import numpy as np
import pytest

from draughts.board import (
    Board,
    empty_board,
    initial_board,
    is_valid,
    parse_board,
    parse_player,
    stack_boards,
)
from draughts.errors import InvalidBoardError, InvalidPlayerError
from draughts.types import Color, Piece

INITIAL = "rrrrrrrrrrrr________bbbbbbbbbbbb"


def test_is_valid_accepts_well_formed_encodings():
    assert is_valid("_" * 32)
    assert is_valid(INITIAL)
    assert is_valid(list("rRbB_" * 6 + "__"))
    assert is_valid([Piece.RED_KING] * 32)
    assert is_valid(initial_board())


@pytest.mark.parametrize("board", [
    "",
    "_" * 31,
    "_" * 33,
    "_" * 31 + "x",
    "_" * 31 + "k",
    ["rr"] + ["_"] * 31,
    [1] * 32,
    None,
    42,
])
def test_is_valid_rejects_malformed_boards(board):
    assert not is_valid(board)


def test_parse_board_round_trips_string():
    board = parse_board(INITIAL)
    assert isinstance(board, Board)
    assert board.to_string() == INITIAL
    assert str(board) == INITIAL
    assert board == initial_board()


def test_parse_board_error_echoes_input():
    with pytest.raises(InvalidBoardError) as exc:
        parse_board("rrx")
    assert '"rrx"' in str(exc.value)
    assert exc.value.board == "rrx"
    assert isinstance(exc.value, ValueError)


def test_board_constructor_rejects_wrong_length():
    with pytest.raises(InvalidBoardError):
        Board((Piece.EMPTY,) * 31)


def test_board_constructor_freezes_list_input():
    board = Board([Piece.EMPTY] * 32)
    assert isinstance(board.squares, tuple)
    assert hash(board) == hash(Board((Piece.EMPTY,) * 32))
    assert board == Board((Piece.EMPTY,) * 32)


def test_board_constructor_rejects_non_iterable():
    with pytest.raises(InvalidBoardError):
        Board(7)


@pytest.mark.parametrize("player,expected", [
    ("red", Color.RED),
    ("black", Color.BLACK),
    (Color.RED, Color.RED),
])
def test_parse_player(player, expected):
    assert parse_player(player) is expected


@pytest.mark.parametrize("player", ["white", "Red", "", None, 1])
def test_parse_player_rejects_unknown(player):
    with pytest.raises(InvalidPlayerError) as exc:
        parse_player(player)
    assert str(player) in str(exc.value)


def test_with_pieces_returns_new_board():
    board = empty_board()
    moved = board.with_pieces({5: Piece.BLACK_MAN})
    assert moved[5] is Piece.BLACK_MAN
    assert board[5] is Piece.EMPTY


def test_promote_back_ranks_only_crowns_men_on_far_rank():
    board = parse_board("b_r_" + "_" * 24 + "r_b_")
    promoted = board.promote_back_ranks()
    assert promoted.to_string() == "B_r_" + "_" * 24 + "R_b_"


def test_count_pieces_and_squares_of():
    board = initial_board()
    assert board.count_pieces() == (12, 0, 12, 0)
    assert list(board.squares_of(Color.RED)) == list(range(12))
    assert list(board.squares_of(Color.BLACK)) == list(range(20, 32))


def test_numeric_encoding():
    board = parse_board("rRbB" + "_" * 28)
    arr = board.to_array()
    assert arr.dtype == np.int8
    assert arr[:5].tolist() == [-1, -2, 1, 2, 0]
    assert Board.from_array(arr) == board
    assert is_valid(arr)
    assert parse_board(arr) == board


def test_numeric_encoding_rejects_bad_codes():
    arr = np.zeros(32, dtype=np.int8)
    arr[3] = 5
    assert not is_valid(arr)
    with pytest.raises(InvalidBoardError):
        Board.from_array(arr)
    with pytest.raises(InvalidBoardError):
        Board.from_array(np.zeros(31, dtype=np.int8))


def test_stack_boards():
    stacked = stack_boards([INITIAL, empty_board()])
    assert stacked.shape == (2, 32)
    assert stacked[0, 0] == -1 and stacked[0, 31] == 1
    assert not stacked[1].any()
    assert stack_boards([]).shape == (0, 32)
