"""Tests for the Board module."""

from term_snake.board import Board
from term_snake.snake import Direction


class TestBoardGeometry:
    def test_interior_bounds(self):
        board = Board()
        assert (board.min_x, board.max_x) == (4, 58)
        assert (board.min_y, board.max_y) == (2, 19)

    def test_capacity(self):
        board = Board()
        assert board.columns == 28
        assert board.rows == 18
        assert board.interior_capacity == 28 * 18

    def test_start_is_midpoint(self):
        assert Board().start == (30, 10)

    def test_contains(self):
        board = Board()
        assert board.contains(4, 2)
        assert board.contains(58, 19)
        assert not board.contains(5, 2)  # odd column
        assert not board.contains(2, 10)
        assert not board.contains(60, 10)
        assert not board.contains(30, 1)
        assert not board.contains(30, 20)


class TestBoardWrap:
    def test_inside_is_unchanged(self):
        assert Board().wrap(30, 10) == (30, 10)

    def test_wrap_right_edge(self):
        assert Board().wrap(60, 10) == (4, 10)

    def test_wrap_left_edge(self):
        assert Board().wrap(2, 10) == (58, 10)

    def test_wrap_top_edge(self):
        assert Board().wrap(30, 1) == (30, 19)

    def test_wrap_bottom_edge(self):
        assert Board().wrap(30, 20) == (30, 2)

    def test_wrap_is_total(self):
        board = Board()
        for x, y in [(-1000, 1000), (999, -7), (0, 0), (62, 40)]:
            wx, wy = board.wrap(x, y)
            assert board.min_x <= wx <= board.max_x
            assert board.min_y <= wy <= board.max_y

    def test_wrap_keeps_even_columns(self):
        board = Board()
        for x in range(-200, 200, 2):
            assert board.contains(*board.wrap(x, 10))


class TestBoardStep:
    def test_steps_scale_per_axis(self):
        board = Board()
        assert board.step((30, 10), Direction.RIGHT) == (32, 10)
        assert board.step((30, 10), Direction.LEFT) == (28, 10)
        assert board.step((30, 10), Direction.UP) == (30, 9)
        assert board.step((30, 10), Direction.DOWN) == (30, 11)

    def test_idle_stays_put(self):
        assert Board().step((30, 10), Direction.IDLE) == (30, 10)

    def test_step_across_each_edge(self):
        board = Board()
        assert board.step((58, 10), Direction.RIGHT) == (4, 10)
        assert board.step((4, 10), Direction.LEFT) == (58, 10)
        assert board.step((30, 2), Direction.UP) == (30, 19)
        assert board.step((30, 19), Direction.DOWN) == (30, 2)


class TestBoardSerialization:
    def test_to_dict(self):
        d = Board().to_dict()
        assert d["frame"] == [1, 1, 60, 20]
        assert d["interior"] == [4, 2, 58, 19]
        assert d["step"] == [2, 1]
