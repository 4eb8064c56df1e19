"""Tests for the interactive demo's game logic (no keyboard input)."""

from block_types import Block, Move, Pos
from interactive_demo import InteractiveDemo
from levels import LEVELS
from terrain_parser import parse_level


def make_demo() -> InteractiveDemo:
    return InteractiveDemo(parse_level(LEVELS["level0"], "level0"))


class TestInteractiveDemo:
    """Tests for moves, hints and reset."""

    def test_illegal_move_leaves_block_in_place(self) -> None:
        demo = make_demo()
        demo.attempt_move(Move.LEFT)
        assert demo.block == Block.standing(Pos(1, 2))
        assert demo.move_count == 0
        assert "roll off" in demo.status_message

    def test_moves_to_goal(self) -> None:
        demo = make_demo()
        for move in [Move.DOWN, Move.RIGHT, Move.UP]:
            demo.attempt_move(move)
        assert demo.block == Block.standing(Pos(1, 3))
        assert "Solved in 3 moves" in demo.status_message

    def test_hint_from_current_block(self) -> None:
        demo = make_demo()
        demo.hint()
        assert demo.status_message == "Hint: Down (3 moves left)"

        demo.attempt_move(Move.DOWN)
        demo.hint()
        assert demo.status_message == "Hint: Right (2 moves left)"

    def test_reset(self) -> None:
        demo = make_demo()
        demo.attempt_move(Move.DOWN)
        demo.reset()
        assert demo.block == demo.game.start_block
        assert demo.move_count == 0

    def test_display_builds(self) -> None:
        panel = make_demo().generate_display()
        assert panel.title == "Block Roll - level0"
