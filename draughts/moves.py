from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple, Union

from .adjacency import MOVE_ADJACENCY, is_promotion_square, legal_directions
from .board import Board, parse_board, parse_player
from .captures import find_captures
from .config import GeneratorSettings, get_generator_settings
from .types import Color, Piece

logger = logging.getLogger(__name__)


class MoveGenerator:
    """Generates every board reachable by one legal turn.

    Capturing is mandatory: if any piece of the side to move can capture, only
    capture-chain results are returned. Otherwise each piece is tried in its
    legal directions for a one-step move, crowning on arrival at the far rank.
    """

    def __init__(self, settings: Optional[GeneratorSettings] = None) -> None:
        self.settings: GeneratorSettings = settings or get_generator_settings()

    def captures(self, board: Board, player: Color) -> Tuple[List[Board], bool]:
        boards: List[Board] = []
        found: bool = False
        for idx in board.squares_of(player):
            chains, jumped = find_captures(board, idx, self.settings.max_chain_depth)
            boards.extend(chains)
            found |= jumped
        return boards, found

    def simple_moves(self, board: Board, player: Color) -> List[Board]:
        boards: List[Board] = []
        for idx in board.squares_of(player):
            piece: Piece = board[idx]
            for d in legal_directions(piece):
                dest = MOVE_ADJACENCY[idx][d]
                if dest is None or not board[dest].is_empty:
                    continue
                moved = piece.promoted() if is_promotion_square(player, dest) else piece
                boards.append(board.with_pieces({idx: Piece.EMPTY, dest: moved}))
        return boards

    def legal_boards(self, board: Board, player: Color) -> List[Board]:
        boards, found = self.captures(board, player)
        if not found:
            boards = self.simple_moves(board, player)
        logger.debug("%s to move: %d result(s)%s", player, len(boards), " (captures)" if found else "")
        return boards


# Convenience functional API

def generate_moves(board: Any, player: Union[str, Color],
                   settings: Optional[GeneratorSettings] = None) -> List[Any]:
    """Generate every board reachable by ``player`` in one turn.

    ``board`` may be a ``Board``, a 32-character string, a sequence of symbols
    or a numpy array of numeric codes. ``Board`` input yields ``Board`` results;
    any other encoding yields 32-character strings.

    Raises ``InvalidPlayerError`` for a player other than red/black and
    ``InvalidBoardError`` for a malformed board.
    """
    side = parse_player(player)
    parsed = parse_board(board)
    results = MoveGenerator(settings).legal_boards(parsed, side)
    if isinstance(board, Board):
        return results
    return [b.to_string() for b in results]
