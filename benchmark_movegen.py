from __future__ import annotations

import argparse
import time

from draughts import Color, MoveGenerator, initial_board, parse_player, perft, setup_logging
from draughts.batch import generate_moves_batch


def parse_args() -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Time move generation with perft node counts")
    ap.add_argument("--depth", type=int, default=6, help="Maximum perft depth")
    ap.add_argument("--player", default="black", choices=["red", "black"], help="Side to move first")
    ap.add_argument("--workers", type=int, default=1, help="Worker processes for the frontier batch")
    return ap.parse_args()


def main() -> None:
    setup_logging()
    args = parse_args()
    board = initial_board()
    side: Color = parse_player(args.player)

    print("=== MOVE GENERATION BENCHMARK ===")
    for depth in range(1, args.depth + 1):
        start = time.time()
        nodes = perft(board, side, depth)
        elapsed = time.time() - start
        rate = nodes / elapsed if elapsed > 0 else float("inf")
        print(f"perft({depth}) = {nodes:8d} | {elapsed:7.3f}s | {rate:10.0f} nodes/s")

    # Two plies deep, so the batch has a frontier worth spreading over workers
    frontier = [
        grandchild
        for child in MoveGenerator().legal_boards(board, side)
        for grandchild in MoveGenerator().legal_boards(child, side.opponent)
    ]
    start = time.time()
    results = generate_moves_batch(frontier, side, workers=args.workers)
    elapsed = time.time() - start
    print(f"batch: {len(frontier)} boards -> {sum(len(r) for r in results)} children "
          f"in {elapsed:.3f}s ({args.workers} workers)")


if __name__ == "__main__":
    main()
