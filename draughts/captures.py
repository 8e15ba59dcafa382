"""
Capture-chain search.

From a single origin square, enumerate every maximal sequence of captures
using an explicit frame stack. Each frame holds the square the capturing
piece stands on, the board after the captures made so far, and the next
direction to try. Promotion is applied only to the final board of a chain,
so a man that passes over the back rank mid-chain keeps moving as a man.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .adjacency import JUMP_ADJACENCY, MOVE_ADJACENCY, legal_directions
from .board import Board
from .errors import ChainDepthExceededError
from .types import Direction, MAX_CHAIN_DEPTH, Piece, SquareIndex

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    square: SquareIndex
    board: Board
    direction: Direction = 0


def capture_landing(board: Board, square: SquareIndex, direction: Direction) -> Optional[SquareIndex]:
    """Landing square if the piece on ``square`` can capture in ``direction``."""
    piece = board[square]
    if direction not in legal_directions(piece):
        return None
    victim = MOVE_ADJACENCY[square][direction]
    landing = JUMP_ADJACENCY[square][direction]
    if victim is None or landing is None:
        return None
    if not board[victim].is_opponent_of(piece) or not board[landing].is_empty:
        return None
    return landing


def _jump(board: Board, square: SquareIndex, direction: Direction, landing: SquareIndex) -> Board:
    victim = MOVE_ADJACENCY[square][direction]
    return board.with_pieces({
        square: Piece.EMPTY,
        victim: Piece.EMPTY,  # type: ignore[dict-item]
        landing: board[square],
    })


def find_captures(board: Board, origin: SquareIndex,
                  max_depth: int = MAX_CHAIN_DEPTH) -> Tuple[List[Board], bool]:
    """Enumerate the final boards of every capture chain starting at ``origin``.

    Returns the resulting boards (depth-first, direction ascending) and whether
    at least one capture was found. Raises ``ChainDepthExceededError`` if a chain
    would need more than ``max_depth`` stack frames.
    """
    results: List[Board] = []
    stack: List[_Frame] = [_Frame(origin, board)]
    found: bool = False

    while True:
        frame = stack[-1]
        pushed = False
        while frame.direction < 4:
            landing = capture_landing(frame.board, frame.square, frame.direction)
            if landing is not None:
                if len(stack) >= max_depth:
                    raise ChainDepthExceededError(origin, max_depth)
                found = True
                stack.append(_Frame(landing, _jump(frame.board, frame.square, frame.direction, landing)))
                pushed = True
                break
            frame.direction += 1
        if pushed:
            continue

        # Top frame exhausted: a leaf below at least one capture completes a chain
        if len(stack) > 1 and found:
            found = False
            results.append(frame.board.promote_back_ranks())
        if len(stack) == 1:
            break
        stack.pop()
        stack[-1].direction += 1

    if results:
        logger.debug("Square %d: %d capture chain(s)", origin, len(results))
    return results, bool(results)
