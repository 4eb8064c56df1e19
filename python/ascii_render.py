"""
ASCII rendering for levels and blocks.

Each cell is drawn as a single character:
  #  - block
  T  - target (when not covered by the block)
  S  - start (when not covered by the block)
  o  - playable cell
  .  - void
"""

from __future__ import annotations

import logging
from typing import Callable

from simple_chalk import chalk  # type: ignore[import-untyped]

from block_types import Block, Move, Pos
from block_game import BlockGame
from terrain_parser import Level

logger = logging.getLogger(__name__)

Colorizer = Callable[[str], str]


def _plain(s: str) -> str:
    return s


def render_level(
    level: Level,
    block: Block | None = None,
    color: bool = True,
) -> str:
    """
    Render a level, optionally with the block drawn on top.

    Block cells off the level grid are not drawn.

    Args:
        level: The level to draw
        block: Block to overlay, or None for the bare level
        color: If False, return plain text without ANSI codes

    Returns:
        Rendered string, one line per level row
    """
    palette: dict[str, Colorizer] = {
        "#": chalk.bgWhite.black if color else _plain,
        "T": chalk.red if color else _plain,
        "S": chalk.cyan if color else _plain,
        "o": chalk.green if color else _plain,
        ".": chalk.blue if color else _plain,
    }
    covered = set(block.cells) if block is not None else set()

    lines: list[str] = []
    for r in range(level.rows):
        chars: list[str] = []
        for c in range(level.cols):
            pos = Pos(r, c)
            if pos in covered:
                ch = "#"
            elif level.terrain(pos):
                ch = level.char_at(pos)
            else:
                ch = "."
            chars.append(palette[ch](ch))
        lines.append("".join(chars))
    return "\n".join(lines)


def render_solution(level: Level, moves: list[Move], color: bool = True) -> str:
    """
    Render every step of a move sequence, one frame per block position.

    Raises:
        ValueError: If a move leaves the terrain
    """
    blocks = BlockGame.from_level(level).trace(moves)
    frames = [f"start\n{render_level(level, blocks[0], color)}"]
    for i, (move, block) in enumerate(zip(moves, blocks[1:])):
        frames.append(f"{i + 1}: {move.value}\n{render_level(level, block, color)}")

    logger.debug("render_solution: %d frames for level %s", len(frames), level.id)
    return "\n\n".join(frames)
