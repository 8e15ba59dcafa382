import pickle

import pytest

from draughts.errors import (
    ChainDepthExceededError,
    DraughtsError,
    InvalidBoardError,
    InvalidPlayerError,
)


@pytest.mark.parametrize("error,message", [
    (InvalidBoardError("rrx"), 'Invalid board "rrx".'),
    (InvalidPlayerError("white"), 'Invalid player "white" (expected "red" or "black").'),
    (ChainDepthExceededError(9, 20), "Capture chain from square 9 exceeded the maximum depth of 20 frames"),
])
def test_errors_survive_pickling(error, message):
    restored = pickle.loads(pickle.dumps(error))
    assert type(restored) is type(error)
    assert restored.args == error.args
    assert str(restored) == str(error) == message
    assert isinstance(restored, DraughtsError)


def test_error_attributes():
    assert InvalidBoardError("rrx").board == "rrx"
    assert InvalidPlayerError(None).player is None
    err = ChainDepthExceededError(25, 4)
    assert (err.origin, err.max_depth) == (25, 4)
    assert isinstance(err, RuntimeError)
    assert isinstance(InvalidPlayerError("x"), ValueError)
