"""
Batch move generation over many boards, optionally across worker processes.

Each board is generated independently, so boards from a search frontier can
be farmed out to a process pool without any coordination.
"""
from __future__ import annotations

import logging
from multiprocessing import Pool
from typing import Any, List, Optional, Sequence, Union

from .board import parse_player
from .config import GeneratorSettings, get_generator_settings
from .moves import generate_moves
from .types import Color

logger = logging.getLogger(__name__)


def _generate_worker(board: Any, player: str, settings: GeneratorSettings) -> List[Any]:
    return generate_moves(board, player, settings)


def generate_moves_batch(boards: Sequence[Any], player: Union[str, Color],
                         workers: Optional[int] = None,
                         settings: Optional[GeneratorSettings] = None) -> List[List[Any]]:
    """Run ``generate_moves`` for every board; results keep the input order.

    ``workers`` defaults to the configured worker count. With one worker (or a
    single board) generation runs in-process.
    """
    side = parse_player(player).value
    settings = settings or get_generator_settings()
    num_workers: int = workers if workers is not None else settings.workers
    if num_workers < 1:
        raise ValueError("workers must be >= 1")

    if num_workers == 1 or len(boards) <= 1:
        return [generate_moves(b, side, settings) for b in boards]

    logger.debug("Generating moves for %d boards on %d workers", len(boards), num_workers)
    with Pool(min(num_workers, len(boards))) as pool:
        return pool.starmap(_generate_worker, [(b, side, settings) for b in boards])
