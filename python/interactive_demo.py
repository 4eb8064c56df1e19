"""
Interactive demo: roll the block with the keyboard, ask the solver for hints.
"""

import logging
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_level
from block_game import BlockGame
from block_types import Move
from levels import LEVELS
from solver import Solver
from terrain_parser import Level, parse_level


class InteractiveDemo:
    """Interactive demo for rolling the block."""

    def __init__(self, level: Level) -> None:
        self.level = level
        self.game = BlockGame.from_level(level)
        self.block = self.game.start_block
        self.move_count = 0
        self.console = Console()
        self.status_message = "Ready"

    def solver_from_here(self) -> Solver:
        """Solver for the same terrain, starting at the current block."""
        return Solver(self.game.resume_from(self.block))

    def generate_display(self) -> Panel:
        """Generate the current display with level and status."""
        status = Text()
        status.append("Block: ", style="bold")
        shape = "standing" if self.block.is_standing else "lying"
        status.append(f"{self.block.b1.row},{self.block.b1.col} ({shape})\n")
        status.append("Moves: ", style="bold")
        status.append(f"{self.move_count}\n\n")

        status.append(Text.from_ansi(render_level(self.level, self.block)))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  W/A/S/D - Roll Up/Left/Down/Right\n")
        status.append("  H - Hint (next move of a shortest solution)\n")
        status.append("  P - Play the rest of a shortest solution\n")
        status.append("  R - Reset\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title=f"Block Roll - {self.level.id}", border_style="green", width=80)

    def attempt_move(self, move: Move) -> None:
        """Roll the block if the result stays on the terrain."""
        moved = self.block.move(move)
        if not self.game.is_legal(moved):
            self.status_message = f"✗ {move.value} would roll off the terrain"
            return

        self.block = moved
        self.move_count += 1
        if self.game.done(self.block):
            self.status_message = f"✓ Solved in {self.move_count} moves!"
        else:
            self.status_message = f"✓ Rolled {move.value}"

    def hint(self) -> None:
        moves = self.solver_from_here().solution()
        if moves:
            self.status_message = f"Hint: {moves[0].value} ({len(moves)} moves left)"
        elif self.game.done(self.block):
            self.status_message = "Already solved"
        else:
            self.status_message = "No solution from here - press R to reset"

    def play_solution(self, live: Live) -> None:
        moves = self.solver_from_here().solution()
        if not moves:
            self.hint()
            return
        for move in moves:
            self.attempt_move(move)
            live.update(self.generate_display())
            readchar.readkey()

    def reset(self) -> None:
        self.block = self.game.start_block
        self.move_count = 0
        self.status_message = "Level reset"

    def run(self) -> None:
        """Run the interactive demo."""
        keys = {
            "w": Move.UP,
            "a": Move.LEFT,
            "s": Move.DOWN,
            "d": Move.RIGHT,
        }
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())
                    key = readchar.readkey().lower()

                    if key == "q":
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key == "r":
                        self.reset()
                    elif key == "h":
                        self.hint()
                    elif key == "p":
                        self.status_message = "Playing solution - press any key to step"
                        self.play_solution(live)
                    elif key in keys:
                        self.attempt_move(keys[key])
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    name = sys.argv[1] if len(sys.argv) > 1 else "level1"
    InteractiveDemo(parse_level(LEVELS[name], name)).run()
