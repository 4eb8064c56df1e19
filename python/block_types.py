"""
Shared type definitions for the block-rolling puzzle.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable


class Move(Enum):
    """Tilt direction for the block."""

    LEFT = "Left"  # Decreasing col
    RIGHT = "Right"  # Increasing col
    UP = "Up"  # Decreasing row
    DOWN = "Down"  # Increasing row


# =============================================================================
# Positions and Terrain
# =============================================================================


@dataclass(frozen=True)
class Pos:
    """A cell coordinate on the terrain."""

    row: int
    col: int

    def delta_row(self, d: int) -> Pos:
        return Pos(self.row + d, self.col)

    def delta_col(self, d: int) -> Pos:
        return Pos(self.row, self.col + d)


# True where the block may rest
Terrain = Callable[[Pos], bool]


# =============================================================================
# Block Geometry
# =============================================================================


@dataclass(frozen=True)
class Block:
    """
    A 1x1x2 block occupying one cell (standing) or two adjacent cells (lying).

    b1 is always the top-left cell: b1.row <= b2.row and b1.col <= b2.col.
    """

    b1: Pos
    b2: Pos

    def __post_init__(self) -> None:
        if self.b1.row > self.b2.row or self.b1.col > self.b2.col:
            raise ValueError(
                f"Invalid block cells: {self.b1} must not be below or right of {self.b2}\n"
                f"  b1 is the top-left cell of the block"
            )
        offset = (self.b2.row - self.b1.row, self.b2.col - self.b1.col)
        if offset not in ((0, 0), (0, 1), (1, 0)):
            raise ValueError(
                f"Invalid block cells: {self.b1} and {self.b2} are not adjacent\n"
                f"  A lying block covers two cells sharing an edge"
            )

    @classmethod
    def standing(cls, pos: Pos) -> Block:
        return cls(pos, pos)

    @property
    def is_standing(self) -> bool:
        return self.b1 == self.b2

    @property
    def cells(self) -> tuple[Pos, ...]:
        """Distinct cells covered by the block."""
        return (self.b1,) if self.is_standing else (self.b1, self.b2)

    def delta_row(self, d1: int, d2: int) -> Block:
        return Block(self.b1.delta_row(d1), self.b2.delta_row(d2))

    def delta_col(self, d1: int, d2: int) -> Block:
        return Block(self.b1.delta_col(d1), self.b2.delta_col(d2))

    def left(self) -> Block:
        if self.is_standing:
            return self.delta_col(-2, -1)
        elif self.b1.row == self.b2.row:
            return self.delta_col(-1, -2)
        else:
            return self.delta_col(-1, -1)

    def right(self) -> Block:
        if self.is_standing:
            return self.delta_col(1, 2)
        elif self.b1.row == self.b2.row:
            return self.delta_col(2, 1)
        else:
            return self.delta_col(1, 1)

    def up(self) -> Block:
        if self.is_standing:
            return self.delta_row(-2, -1)
        elif self.b1.row == self.b2.row:
            return self.delta_row(-1, -1)
        else:
            return self.delta_row(-1, -2)

    def down(self) -> Block:
        if self.is_standing:
            return self.delta_row(1, 2)
        elif self.b1.row == self.b2.row:
            return self.delta_row(1, 1)
        else:
            return self.delta_row(2, 1)

    def move(self, move: Move) -> Block:
        """Apply a single tilt."""
        tilts = {
            Move.LEFT: self.left,
            Move.RIGHT: self.right,
            Move.UP: self.up,
            Move.DOWN: self.down,
        }
        return tilts[move]()

    def neighbors(self) -> list[tuple[Block, Move]]:
        """All blocks one tilt away, legal or not, in Left/Right/Up/Down order."""
        return [
            (self.left(), Move.LEFT),
            (self.right(), Move.RIGHT),
            (self.up(), Move.UP),
            (self.down(), Move.DOWN),
        ]
