"""
Demonstration script: solve bundled levels and print diagnostics.

Usage:
    python demo.py              # solve every bundled level
    python demo.py level1       # solve one level and show each step
    python demo.py level1 -v    # same, with search logging
"""

from __future__ import annotations

import logging
import sys
from itertools import islice

from ascii_render import render_level, render_solution
from block_game import BlockGame, infinite_terrain
from block_types import Pos
from levels import LEVELS
from solver import SearchConfig, Solver
from terrain_parser import Level, parse_levels


def summarize(level: Level) -> None:
    """Print a level, its shortest solution and the size of its state space."""
    solver = Solver(BlockGame.from_level(level))
    moves = solver.solution()

    print(f"=== {level.id} ({level.rows}x{level.cols})")
    print(render_level(level))
    if moves:
        print(f"Solution ({len(moves)} moves): {' '.join(m.value for m in moves)}")
    elif solver.problem.done(solver.problem.initial_state):
        print("Already solved")
    else:
        print("No solution")

    paths = solver.paths_from_start()
    reachable = sum(1 for _ in paths)
    print(f"Reachable block positions: {reachable}, deepest level: {paths.depth}")
    print()


def demo_steps(level: Level) -> None:
    """Print every frame of the shortest solution."""
    moves = Solver(BlockGame.from_level(level)).solution()
    print(render_solution(level, moves))


def demo_infinite() -> None:
    """Show that exploration is lazy: take the first few paths of an unbounded search."""
    game = BlockGame(infinite_terrain, Pos(0, 0), Pos(1000, 1000))
    solver = Solver(game, SearchConfig(max_depth=3))

    print("=== infinite terrain, first 10 paths")
    for block, history in islice(solver.paths_from_start(), 10):
        moves = " ".join(m.value for m in reversed(history)) or "(start)"
        print(f"  {block.b1.row},{block.b1.col} -> {block.b2.row},{block.b2.col}: {moves}")

    paths = solver.paths_from_start()
    count = sum(1 for _ in paths)
    print(f"Paths up to depth 3: {count} ({paths.termination_reason.value})")
    print()


if __name__ == "__main__":
    args = [a for a in sys.argv[1:] if not a.startswith("-")]
    verbose = "-v" in sys.argv[1:]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    store = parse_levels(LEVELS)
    if args:
        summarize(store[args[0]])
        demo_steps(store[args[0]])
    else:
        for level in store.values():
            summarize(level)
        demo_infinite()
