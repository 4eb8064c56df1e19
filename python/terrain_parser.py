"""
Level parsing utilities.

Levels are written one row per line (or rows separated by |) using single characters:
  o  - playable cell
  S  - start cell (playable); the block starts standing here
  T  - target cell (playable); the block must end standing here
  -  - void (not playable)
"""

from __future__ import annotations

from dataclasses import dataclass

from block_types import Pos

__all__ = ["Level", "LevelStore", "parse_level", "parse_levels"]

PLAYABLE = "oST"
VOID = "-"


@dataclass(frozen=True)
class Level:
    """A parsed level: a rectangular character grid plus start and goal."""

    id: str
    rows_text: tuple[str, ...]
    start: Pos
    goal: Pos

    @property
    def rows(self) -> int:
        return len(self.rows_text)

    @property
    def cols(self) -> int:
        return len(self.rows_text[0]) if self.rows_text else 0

    def char_at(self, pos: Pos) -> str:
        """Character at pos, or VOID outside the grid."""
        if 0 <= pos.row < self.rows and 0 <= pos.col < self.cols:
            return self.rows_text[pos.row][pos.col]
        return VOID

    def terrain(self, pos: Pos) -> bool:
        return self.char_at(pos) in PLAYABLE


LevelStore = dict[str, Level]


def _split_rows(definition: str) -> list[str]:
    """Split a definition into rows, accepting newlines or | separators."""
    text = definition.strip()
    if "\n" in text:
        raw = text.split("\n")
    else:
        raw = text.split("|")
    return [line.strip() for line in raw if line.strip()]


def _find_char(rows: list[str], char: str, level_id: str) -> Pos:
    found = [
        Pos(r, c)
        for r, row in enumerate(rows)
        for c, ch in enumerate(row)
        if ch == char
    ]
    if len(found) != 1:
        where = ", ".join(f"({p.row}, {p.col})" for p in found) or "none"
        raise ValueError(
            f"Level '{level_id}' must contain exactly one '{char}'\n"
            f"  Found {len(found)}: {where}"
        )
    return found[0]


def parse_level(definition: str, level_id: str = "level") -> Level:
    """
    Parse a single level definition.

    Example:
        \"\"\"
        ooo-------
        oSoooo----
        ooooooooo-
        -ooooooooo
        -----ooToo
        ------ooo-
        \"\"\"

    Rows shorter than the widest row are padded with void cells.

    Args:
        definition: Level text, rows separated by newlines or |
        level_id: Name used in error messages and stored on the Level

    Returns:
        The parsed Level

    Raises:
        ValueError: If the level is empty, contains unknown characters,
                    or does not have exactly one start and one target
    """
    rows = _split_rows(definition)
    if not rows:
        raise ValueError(f"Empty level definition for '{level_id}'")

    for row_idx, row in enumerate(rows):
        for col_idx, char in enumerate(row):
            if char not in PLAYABLE and char != VOID:
                raise ValueError(
                    f"Invalid character '{char}' in level '{level_id}'\n"
                    f"  Row {row_idx}: \"{row}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Valid characters: 'o' (playable), 'S' (start), 'T' (target), '-' (void)"
                )

    # Pad ragged rows with void
    width = max(len(row) for row in rows)
    rows = [row.ljust(width, VOID) for row in rows]

    start = _find_char(rows, "S", level_id)
    goal = _find_char(rows, "T", level_id)
    return Level(level_id, tuple(rows), start, goal)


def parse_levels(definitions: dict[str, str]) -> LevelStore:
    """Parse a dict of named level definitions."""
    return {level_id: parse_level(text, level_id) for level_id, text in definitions.items()}
