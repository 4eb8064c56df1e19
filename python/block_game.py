"""
Game rules for the block-rolling puzzle: legality of block positions,
legal moves, and the winning condition.
"""

from __future__ import annotations

from dataclasses import dataclass

from block_types import Block, Move, Pos, Terrain
from terrain_parser import Level


def infinite_terrain(pos: Pos) -> bool:
    """Terrain where every cell is playable."""
    return True


@dataclass(frozen=True)
class BlockGame:
    """A terrain with a start cell and a goal cell."""

    terrain: Terrain
    start: Pos
    goal: Pos

    @classmethod
    def from_level(cls, level: Level) -> BlockGame:
        return cls(level.terrain, level.start, level.goal)

    @property
    def start_block(self) -> Block:
        return Block.standing(self.start)

    # Start state for the solver
    initial_state = start_block

    def is_legal(self, block: Block) -> bool:
        """True if both cells of the block are on the terrain."""
        return self.terrain(block.b1) and self.terrain(block.b2)

    def legal_neighbors(self, block: Block) -> list[tuple[Block, Move]]:
        # Nothing is reachable from a block that is already off the terrain
        if not self.is_legal(block):
            return []
        return [(b, m) for b, m in block.neighbors() if self.is_legal(b)]

    def done(self, block: Block) -> bool:
        return block.is_standing and block.b1 == self.goal and self.is_legal(block)

    def trace(self, moves: list[Move]) -> list[Block]:
        """
        Apply moves in order from the start block.

        Returns:
            Every block visited, starting with the start block

        Raises:
            ValueError: If a move leaves the terrain
        """
        blocks = [self.start_block]
        for i, move in enumerate(moves):
            block = blocks[-1].move(move)
            if not self.is_legal(block):
                raise ValueError(
                    f"Move {i} ({move.value}) leaves the terrain\n"
                    f"  Block would cover {block.b1} and {block.b2}"
                )
            blocks.append(block)
        return blocks

    def play(self, moves: list[Move]) -> Block:
        """Final block after applying moves; see trace()."""
        return self.trace(moves)[-1]

    def resume_from(self, block: Block) -> ResumedGame:
        """The same game, continuing from an arbitrary block instead of the start."""
        return ResumedGame(self, block)


@dataclass(frozen=True)
class ResumedGame:
    """A BlockGame whose search starts from a given block."""

    game: BlockGame
    initial_state: Block

    def done(self, block: Block) -> bool:
        return self.game.done(block)

    def legal_neighbors(self, block: Block) -> list[tuple[Block, Move]]:
        return self.game.legal_neighbors(block)
