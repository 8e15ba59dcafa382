from __future__ import annotations

from typing import Optional, Union

from .board import Board, parse_board, parse_player
from .config import GeneratorSettings
from .moves import MoveGenerator
from .types import Color


def perft(board: Union[Board, str], player: Union[str, Color], depth: int,
          settings: Optional[GeneratorSettings] = None) -> int:
    """Count the boards reachable in exactly ``depth`` plies.

    - depth == 0 returns 1 (the current board).
    - depth > 0 sums perft(depth-1) over every generated board, with the
      other side to move.

    A side with no legal moves contributes no leaves.
    """
    if depth < 0:
        raise ValueError("depth must be >= 0")
    gen = MoveGenerator(settings)
    return _perft(gen, parse_board(board), parse_player(player), depth)


def _perft(gen: MoveGenerator, board: Board, player: Color, depth: int) -> int:
    if depth == 0:
        return 1
    children = gen.legal_boards(board, player)
    if depth == 1:
        return len(children)
    return sum(_perft(gen, child, player.opponent, depth - 1) for child in children)
