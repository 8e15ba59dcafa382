"""
Exceptions raised by the draughts move generator.

Each error keeps only its raw inputs in ``args`` and builds the message in
``__str__``, so instances survive pickling across a process pool unchanged.
"""
from __future__ import annotations

from typing import Any

from .types import VALID_PLAYERS


class DraughtsError(Exception):
    """Base class for all move generator errors."""


class InvalidBoardError(DraughtsError, ValueError):
    """Board has the wrong length or contains an unknown symbol."""

    def __init__(self, board: Any) -> None:
        super().__init__(board)

    @property
    def board(self) -> Any:
        return self.args[0]

    def __str__(self) -> str:
        return f'Invalid board "{_echo(self.board)}".'


class InvalidPlayerError(DraughtsError, ValueError):
    """Player selector is neither red nor black."""

    def __init__(self, player: Any) -> None:
        super().__init__(player)

    @property
    def player(self) -> Any:
        return self.args[0]

    def __str__(self) -> str:
        expected = " or ".join(f'"{p}"' for p in VALID_PLAYERS)
        return f'Invalid player "{self.player}" (expected {expected}).'


class ChainDepthExceededError(DraughtsError, RuntimeError):
    """A capture chain grew past the configured stack ceiling."""

    def __init__(self, origin: int, max_depth: int) -> None:
        super().__init__(origin, max_depth)

    @property
    def origin(self) -> int:
        return self.args[0]

    @property
    def max_depth(self) -> int:
        return self.args[1]

    def __str__(self) -> str:
        return (f"Capture chain from square {self.origin} exceeded "
                f"the maximum depth of {self.max_depth} frames")


def _echo(board: Any) -> str:
    if isinstance(board, str):
        return board
    try:
        return "".join(str(getattr(cell, "value", cell)) for cell in board)
    except TypeError:
        return repr(board)
