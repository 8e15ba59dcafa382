"""
Immutable board representation and the parse/validate boundary.

Every external encoding (32-character string, sequence of symbols, numpy
array of numeric codes) is converted into a ``Board`` here, so the rest of
the package only ever sees well-formed boards.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .adjacency import PROMOTION_SQUARES
from .errors import InvalidBoardError, InvalidPlayerError
from .types import Color, Piece, PIECE_SYMBOLS, SQUARES, SquareIndex

logger = logging.getLogger(__name__)

_SYMBOLS = frozenset(PIECE_SYMBOLS)


@dataclass(frozen=True)
class Board:
    """Immutable 32-square board (index 0..31, dark squares row-major)."""

    squares: Tuple[Piece, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.squares, tuple):
            try:
                object.__setattr__(self, "squares", tuple(self.squares))
            except TypeError:
                raise InvalidBoardError(self.squares) from None
        if len(self.squares) != SQUARES or not all(isinstance(p, Piece) for p in self.squares):
            raise InvalidBoardError(self.squares)

    # -----------------------------
    # Conversions
    # -----------------------------
    @classmethod
    def from_array(cls, codes: Any) -> "Board":
        """Build a board from 32 numeric codes (see ``Piece.code``)."""
        arr = np.asarray(codes)
        pieces = _pieces_from_codes(arr)
        if pieces is None:
            raise InvalidBoardError(arr.tolist())
        return cls(pieces)

    def to_string(self) -> str:
        return "".join(p.value for p in self.squares)

    def to_array(self) -> np.ndarray:
        return np.fromiter((p.code for p in self.squares), dtype=np.int8, count=SQUARES)

    def __str__(self) -> str:
        return self.to_string()

    # -----------------------------
    # Access
    # -----------------------------
    def __len__(self) -> int:
        return SQUARES

    def __iter__(self) -> Iterator[Piece]:
        return iter(self.squares)

    def __getitem__(self, idx: SquareIndex) -> Piece:
        return self.squares[idx]

    def piece_at(self, idx: SquareIndex) -> Piece:
        return self.squares[idx]

    def squares_of(self, color: Color) -> Iterator[SquareIndex]:
        """Indices holding a piece of ``color``, ascending."""
        return (i for i, p in enumerate(self.squares) if p.belongs_to(color))

    def count_pieces(self) -> Tuple[int, int, int, int]:
        """Count pieces of each type on the board.

        Returns:
            Tuple of (black_men, black_kings, red_men, red_kings)
        """
        return (
            self.squares.count(Piece.BLACK_MAN),
            self.squares.count(Piece.BLACK_KING),
            self.squares.count(Piece.RED_MAN),
            self.squares.count(Piece.RED_KING),
        )

    # -----------------------------
    # Derived boards
    # -----------------------------
    def with_pieces(self, updates: Dict[SquareIndex, Piece]) -> "Board":
        """Return a copy with the given squares replaced."""
        cells = list(self.squares)
        for idx, piece in updates.items():
            cells[idx] = piece
        return Board(tuple(cells))

    def promote_back_ranks(self) -> "Board":
        """Crown every black man on squares 0..3 and every red man on 28..31."""
        updates: Dict[SquareIndex, Piece] = {}
        for color, squares in PROMOTION_SQUARES.items():
            for idx in squares:
                piece = self.squares[idx]
                if piece.is_man and piece.belongs_to(color):
                    updates[idx] = piece.promoted()
        return self.with_pieces(updates) if updates else self


# -----------------------------
# Validation and parsing
# -----------------------------
def _pieces_from_codes(arr: np.ndarray) -> Optional[Tuple[Piece, ...]]:
    if arr.shape != (SQUARES,) or not np.issubdtype(arr.dtype, np.integer):
        return None
    try:
        return tuple(Piece.from_code(int(v)) for v in arr)
    except KeyError:
        return None


def _to_pieces(board: Any) -> Optional[Tuple[Piece, ...]]:
    if isinstance(board, Board):
        return board.squares
    if isinstance(board, np.ndarray) and np.issubdtype(board.dtype, np.integer):
        return _pieces_from_codes(board)
    try:
        cells = list(board)
    except TypeError:
        return None
    if len(cells) != SQUARES:
        return None
    pieces: List[Piece] = []
    for cell in cells:
        symbol = getattr(cell, "value", cell)
        if not isinstance(symbol, str) or symbol not in _SYMBOLS:
            return None
        pieces.append(Piece(symbol))
    return tuple(pieces)


def is_valid(board: Any) -> bool:
    """True iff ``board`` has exactly 32 cells and every cell is a legal symbol."""
    return _to_pieces(board) is not None


def parse_board(board: Any) -> Board:
    """Convert any supported encoding into a ``Board``, raising ``InvalidBoardError``."""
    pieces = _to_pieces(board)
    if pieces is None:
        logger.debug("Rejected malformed board %r", board)
        raise InvalidBoardError(board)
    if isinstance(board, Board):
        return board
    return Board(pieces)


def parse_player(player: Any) -> Color:
    """Convert ``"red"``/``"black"`` (or a ``Color``) into a ``Color``."""
    if isinstance(player, Color):
        return player
    if isinstance(player, str):
        try:
            return Color(player)
        except ValueError:
            pass
    raise InvalidPlayerError(player)


# -----------------------------
# Board setup and utilities
# -----------------------------
def empty_board() -> Board:
    return Board((Piece.EMPTY,) * SQUARES)


def initial_board() -> Board:
    """Initial position: red men on squares 0..11, black men on 20..31."""
    return Board((Piece.RED_MAN,) * 12 + (Piece.EMPTY,) * 8 + (Piece.BLACK_MAN,) * 12)


def stack_boards(boards: Iterable[Any]) -> np.ndarray:
    """Stack boards into an (n, 32) int8 array of numeric codes."""
    rows = [parse_board(b).to_array() for b in boards]
    if not rows:
        return np.zeros((0, SQUARES), dtype=np.int8)
    return np.stack(rows)
