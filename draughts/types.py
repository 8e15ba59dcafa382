"""
Type definitions for the draughts move generator.

This module provides:
- Tagged piece and colour variants replacing raw board symbols
- Type aliases shared across the package
- Board geometry constants
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Tuple

# Basic type aliases
SquareIndex = int  # 0..31, dark squares numbered row-major
Direction = int    # 0..3, see draughts.adjacency
Position = Tuple[int, int]  # (row, col) coordinates

# Board geometry
SQUARES: int = 32
ROWS: int = 8
SQUARES_PER_ROW: int = 4
MAX_CHAIN_DEPTH: int = 20


class Color(str, Enum):
    """Side to move. The value doubles as the external player selector."""

    RED = "red"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.RED else Color.RED

    def __str__(self) -> str:
        return self.value


# Players are identified by their colour
Player = Color


class Piece(str, Enum):
    """Contents of a single square: empty, a man or a king of either colour."""

    EMPTY = "_"
    RED_MAN = "r"
    RED_KING = "R"
    BLACK_MAN = "b"
    BLACK_KING = "B"

    @property
    def is_empty(self) -> bool:
        return self is Piece.EMPTY

    @property
    def is_king(self) -> bool:
        return self in (Piece.RED_KING, Piece.BLACK_KING)

    @property
    def is_man(self) -> bool:
        return self in (Piece.RED_MAN, Piece.BLACK_MAN)

    @property
    def code(self) -> int:
        """Numeric code: black positive, red negative, kings have magnitude 2."""
        return _CODE_OF[self]

    def belongs_to(self, color: Color) -> bool:
        return _COLOR_OF[self] is color

    def is_opponent_of(self, other: "Piece") -> bool:
        """True when both squares hold pieces and their colours differ."""
        mine = _COLOR_OF[self]
        theirs = _COLOR_OF[other]
        return mine is not None and theirs is not None and mine is not theirs

    def promoted(self) -> "Piece":
        """King variant of a man; kings and empty squares are returned unchanged."""
        return _PROMOTED.get(self, self)

    @classmethod
    def man(cls, color: Color) -> "Piece":
        return cls.RED_MAN if color is Color.RED else cls.BLACK_MAN

    @classmethod
    def from_code(cls, code: int) -> "Piece":
        return _PIECE_OF_CODE[code]

    def __str__(self) -> str:
        return self.value


_COLOR_OF: Dict[Piece, Optional[Color]] = {
    Piece.EMPTY: None,
    Piece.RED_MAN: Color.RED,
    Piece.RED_KING: Color.RED,
    Piece.BLACK_MAN: Color.BLACK,
    Piece.BLACK_KING: Color.BLACK,
}

_CODE_OF: Dict[Piece, int] = {
    Piece.EMPTY: 0,
    Piece.BLACK_MAN: 1,
    Piece.BLACK_KING: 2,
    Piece.RED_MAN: -1,
    Piece.RED_KING: -2,
}

_PIECE_OF_CODE: Dict[int, Piece] = {code: piece for piece, code in _CODE_OF.items()}

_PROMOTED: Dict[Piece, Piece] = {
    Piece.RED_MAN: Piece.RED_KING,
    Piece.BLACK_MAN: Piece.BLACK_KING,
}

# Constants for validation
PIECE_SYMBOLS: str = "".join(p.value for p in Piece)
VALID_PLAYERS: List[str] = [c.value for c in Color]
