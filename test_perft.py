import pytest

from draughts.batch import generate_moves_batch
from draughts.board import initial_board
from draughts.config import GeneratorSettings
from draughts.errors import ChainDepthExceededError, InvalidBoardError, InvalidPlayerError
from draughts.moves import generate_moves
from draughts.perft import perft


@pytest.mark.parametrize("depth,nodes", [(0, 1), (1, 7), (2, 49), (3, 302)])
def test_perft_initial_position(depth, nodes):
    assert perft(initial_board(), "black", depth) == nodes


def test_perft_is_symmetric_for_first_mover():
    assert perft(initial_board(), "red", 2) == perft(initial_board(), "black", 2)


def test_perft_rejects_negative_depth():
    with pytest.raises(ValueError):
        perft(initial_board(), "black", -1)


def test_perft_counts_no_leaves_for_stuck_side():
    assert perft("_" * 32, "black", 3) == 0


def frontier():
    return generate_moves(str(initial_board()), "black")


def test_batch_matches_sequential():
    boards = frontier()
    expected = [generate_moves(b, "red") for b in boards]
    assert generate_moves_batch(boards, "red", workers=1) == expected


def test_batch_with_worker_pool_keeps_order():
    boards = frontier()
    expected = [generate_moves(b, "red") for b in boards]
    assert generate_moves_batch(boards, "red", workers=2) == expected


def test_batch_rejects_zero_workers():
    with pytest.raises(ValueError):
        generate_moves_batch(frontier(), "red", workers=0)


@pytest.mark.parametrize("boards", [[], ["_" * 32] * 2])
def test_batch_validates_player_before_generating(boards):
    with pytest.raises(InvalidPlayerError) as exc:
        generate_moves_batch(boards, "purple", workers=2)
    assert str(exc.value) == 'Invalid player "purple" (expected "red" or "black").'


def test_batch_pool_reraises_invalid_board():
    boards = ["_" * 32, "_" * 31]
    with pytest.raises(InvalidBoardError) as exc:
        generate_moves_batch(boards, "black", workers=2)
    assert str(exc.value) == 'Invalid board "' + "_" * 31 + '".'
    assert exc.value.board == "_" * 31


def test_batch_pool_reraises_chain_depth_error():
    # One capture needs two frames; a single-frame ceiling must fail in the worker
    board = "_" * 17 + "r" + "_" * 4 + "b" + "_" * 9
    with pytest.raises(ChainDepthExceededError) as exc:
        generate_moves_batch([board, board], "black", workers=2,
                             settings=GeneratorSettings(max_chain_depth=1))
    assert exc.value.origin == 22
    assert exc.value.max_depth == 1
