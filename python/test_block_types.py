"""Tests for block_types module."""

import pytest

from block_types import Block, Move, Pos


class TestPos:
    """Tests for cell positions."""

    def test_equality_is_coordinate_wise(self) -> None:
        assert Pos(1, 2) == Pos(1, 2)
        assert Pos(1, 2) != Pos(2, 1)
        assert len({Pos(1, 2), Pos(1, 2)}) == 1

    def test_deltas(self) -> None:
        assert Pos(3, 3).delta_row(-2) == Pos(1, 3)
        assert Pos(3, 3).delta_col(4) == Pos(3, 7)


class TestBlockShape:
    """Tests for block construction and orientation."""

    def test_standing(self) -> None:
        block = Block.standing(Pos(2, 2))
        assert block.is_standing
        assert block.cells == (Pos(2, 2),)

    def test_lying(self) -> None:
        block = Block(Pos(2, 2), Pos(2, 3))
        assert not block.is_standing
        assert block.cells == (Pos(2, 2), Pos(2, 3))

    def test_misordered_cells_raise_error(self) -> None:
        with pytest.raises(ValueError, match="top-left"):
            Block(Pos(2, 3), Pos(2, 2))

    @pytest.mark.parametrize("b2", [Pos(5, 5), Pos(0, 2), Pos(2, 0), Pos(1, 1)])
    def test_non_adjacent_cells_raise_error(self, b2: Pos) -> None:
        with pytest.raises(ValueError, match="not adjacent"):
            Block(Pos(0, 0), b2)

    def test_blocks_are_hashable(self) -> None:
        assert Block(Pos(0, 0), Pos(0, 1)) in {Block(Pos(0, 0), Pos(0, 1))}


class TestBlockMoves:
    """Tests for tilting the block in each orientation."""

    @pytest.mark.parametrize(
        "move,expected",
        [
            (Move.LEFT, Block(Pos(5, 3), Pos(5, 4))),
            (Move.RIGHT, Block(Pos(5, 6), Pos(5, 7))),
            (Move.UP, Block(Pos(3, 5), Pos(4, 5))),
            (Move.DOWN, Block(Pos(6, 5), Pos(7, 5))),
        ],
    )
    def test_standing_tips_over(self, move: Move, expected: Block) -> None:
        assert Block.standing(Pos(5, 5)).move(move) == expected

    @pytest.mark.parametrize(
        "move,expected",
        [
            (Move.LEFT, Block.standing(Pos(5, 4))),
            (Move.RIGHT, Block.standing(Pos(5, 7))),
            (Move.UP, Block(Pos(4, 5), Pos(4, 6))),
            (Move.DOWN, Block(Pos(6, 5), Pos(6, 6))),
        ],
    )
    def test_lying_in_row(self, move: Move, expected: Block) -> None:
        assert Block(Pos(5, 5), Pos(5, 6)).move(move) == expected

    @pytest.mark.parametrize(
        "move,expected",
        [
            (Move.LEFT, Block(Pos(5, 4), Pos(6, 4))),
            (Move.RIGHT, Block(Pos(5, 6), Pos(6, 6))),
            (Move.UP, Block.standing(Pos(4, 5))),
            (Move.DOWN, Block.standing(Pos(7, 5))),
        ],
    )
    def test_lying_in_column(self, move: Move, expected: Block) -> None:
        assert Block(Pos(5, 5), Pos(6, 5)).move(move) == expected

    def test_opposite_moves_cancel(self) -> None:
        """Rolling there and back returns to the same block in every orientation."""
        opposite = {Move.LEFT: Move.RIGHT, Move.RIGHT: Move.LEFT, Move.UP: Move.DOWN, Move.DOWN: Move.UP}
        blocks = [Block.standing(Pos(5, 5)), Block(Pos(5, 5), Pos(5, 6)), Block(Pos(5, 5), Pos(6, 5))]
        for block in blocks:
            for move, back in opposite.items():
                assert block.move(move).move(back) == block

    def test_neighbors_order_and_pairing(self) -> None:
        block = Block.standing(Pos(5, 5))
        neighbors = block.neighbors()
        assert [m for _, m in neighbors] == [Move.LEFT, Move.RIGHT, Move.UP, Move.DOWN]
        for neighbor, move in neighbors:
            assert block.move(move) == neighbor
