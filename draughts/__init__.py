"""Draughts package: legal-move generation for English checkers.

Usage examples:
    from draughts import generate_moves, initial_board
    from draughts import MoveGenerator, Board, Color
"""
from __future__ import annotations

from .adjacency import JUMP_ADJACENCY, MOVE_ADJACENCY, idx_map, legal_directions, rc
from .batch import generate_moves_batch
from .board import (
    Board,
    empty_board,
    initial_board,
    is_valid,
    parse_board,
    parse_player,
    stack_boards,
)
from .captures import find_captures
from .config import DraughtsConfig, get_config, setup_logging
from .errors import (
    ChainDepthExceededError,
    DraughtsError,
    InvalidBoardError,
    InvalidPlayerError,
)
from .moves import MoveGenerator, generate_moves
from .perft import perft
from .types import Color, Piece, Player

__all__ = [
    "JUMP_ADJACENCY",
    "MOVE_ADJACENCY",
    "idx_map",
    "legal_directions",
    "rc",
    "generate_moves_batch",
    "Board",
    "empty_board",
    "initial_board",
    "is_valid",
    "parse_board",
    "parse_player",
    "stack_boards",
    "find_captures",
    "DraughtsConfig",
    "get_config",
    "setup_logging",
    "ChainDepthExceededError",
    "DraughtsError",
    "InvalidBoardError",
    "InvalidPlayerError",
    "MoveGenerator",
    "generate_moves",
    "perft",
    "Color",
    "Piece",
    "Player",
]
