"""
Static board topology: square coordinates and the two diagonal lookup tables.

Directions are indexed 0..3:
    0 = up-left, 1 = up-right      (toward row 0, decreasing index)
    2 = down-right, 3 = down-left  (toward row 7, increasing index)

``MOVE_ADJACENCY[sq][d]`` is the neighbouring square one step away and
``JUMP_ADJACENCY[sq][d]`` the landing square two steps away, or ``None``
when the step leaves the board.
"""
from __future__ import annotations

from typing import Dict, FrozenSet, List, Optional, Tuple

from .types import (
    Color,
    Direction,
    Piece,
    Position,
    ROWS,
    SQUARES,
    SQUARES_PER_ROW,
    SquareIndex,
)

DIRECTIONS: Tuple[Position, ...] = ((-1, -1), (-1, 1), (1, 1), (1, -1))
ALL_DIRECTIONS: Tuple[Direction, ...] = (0, 1, 2, 3)
TOWARD_ROW_0: Tuple[Direction, ...] = (0, 1)
TOWARD_ROW_7: Tuple[Direction, ...] = (2, 3)

AdjacencyTable = Tuple[Tuple[Optional[SquareIndex], ...], ...]

# -----------------------------
# Board indexing
# -----------------------------
_rc_of: List[Position] = []
idx_map: Dict[Position, SquareIndex] = {}


def _build_mappings() -> None:
    i: int = 0
    for r in range(ROWS):
        for c in range(ROWS):
            if (r + c) % 2 == 1:
                _rc_of.append((r, c))
                idx_map[(r, c)] = i
                i += 1


_build_mappings()


def rc(i: SquareIndex) -> Position:
    """Convert square index to row/column coordinates."""
    return _rc_of[i]


def _offset(idx: SquareIndex, dr: int, dc: int) -> Optional[SquareIndex]:
    r, c = rc(idx)
    return idx_map.get((r + dr, c + dc))


def _build_table(steps: int) -> AdjacencyTable:
    return tuple(
        tuple(_offset(sq, dr * steps, dc * steps) for dr, dc in DIRECTIONS)
        for sq in range(SQUARES)
    )


MOVE_ADJACENCY: AdjacencyTable = _build_table(1)
JUMP_ADJACENCY: AdjacencyTable = _build_table(2)

# Squares on which a man of the given colour is crowned
PROMOTION_SQUARES: Dict[Color, FrozenSet[SquareIndex]] = {
    Color.BLACK: frozenset(range(0, SQUARES_PER_ROW)),
    Color.RED: frozenset(range(SQUARES - SQUARES_PER_ROW, SQUARES)),
}


def legal_directions(piece: Piece) -> Tuple[Direction, ...]:
    """Directions a piece may move or capture in. Empty squares have none."""
    if piece.is_king:
        return ALL_DIRECTIONS
    if piece is Piece.BLACK_MAN:
        return TOWARD_ROW_0
    if piece is Piece.RED_MAN:
        return TOWARD_ROW_7
    return ()


def is_promotion_square(color: Color, idx: SquareIndex) -> bool:
    return idx in PROMOTION_SQUARES[color]
