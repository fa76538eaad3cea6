import pytest

from fiverow.game.board import Board
from fiverow.game.rules import WinDetector
from fiverow.game.types import Cell


def board_with(size: int = 15, black=(), white=()) -> Board:
    b = Board(size)
    for r, c in black:
        assert b.set_cell(r, c, Cell.BLACK)
    for r, c in white:
        assert b.set_cell(r, c, Cell.WHITE)
    return b


class TestWinDetector:
    def test_horizontal_five(self):
        b = board_with(black=[(5, c) for c in range(5, 10)])
        assert WinDetector(b).check_win(5, 9, Cell.BLACK)

    def test_vertical_five(self):
        b = board_with(white=[(r, 10) for r in range(10, 15)])
        assert WinDetector(b).check_win(14, 10, Cell.WHITE)

    def test_main_diagonal_five(self):
        b = board_with(black=[(i, i) for i in range(2, 7)])
        assert WinDetector(b).check_win(2, 2, Cell.BLACK)

    def test_anti_diagonal_five(self):
        b = board_with(white=[(4, 0), (3, 1), (2, 2), (1, 3), (0, 4)])
        assert WinDetector(b).check_win(0, 4, Cell.WHITE)

    @pytest.mark.parametrize("dr,dc", [(0, 1), (1, 0), (1, 1), (1, -1)])
    def test_win_from_middle_of_run(self, dr, dc):
        cells = [(7 + dr * i, 7 + dc * i) for i in range(-2, 3)]
        b = board_with(black=cells)
        assert WinDetector(b).check_win(7, 7, Cell.BLACK)

    def test_blocked_four_is_not_a_win(self):
        b = board_with(black=[(8, c) for c in range(8, 12)], white=[(8, 12)])
        assert not WinDetector(b).check_win(8, 11, Cell.BLACK)

    def test_four_is_not_a_win(self):
        b = board_with(black=[(3, c) for c in range(0, 4)])
        assert not WinDetector(b).check_win(3, 3, Cell.BLACK)

    def test_six_in_a_row_wins(self):
        b = board_with(black=[(0, c) for c in range(6)])
        assert WinDetector(b).check_win(0, 5, Cell.BLACK)

    def test_wrong_player(self):
        b = board_with(black=[(5, c) for c in range(5, 10)])
        assert not WinDetector(b).check_win(5, 9, Cell.WHITE)

    def test_empty_player_never_wins(self):
        b = board_with(black=[(5, c) for c in range(5, 10)])
        assert not WinDetector(b).check_win(5, 9, Cell.EMPTY)
        assert not WinDetector(Board(15)).check_win(0, 0, Cell.EMPTY)

    def test_run_broken_by_gap(self):
        b = board_with(black=[(5, 5), (5, 6), (5, 8), (5, 9), (5, 10)])
        assert not WinDetector(b).check_win(5, 10, Cell.BLACK)

    def test_run_at_board_edge(self):
        b = board_with(size=5, black=[(r, 4) for r in range(5)])
        assert WinDetector(b).check_win(4, 4, Cell.BLACK)

    def test_custom_win_length(self):
        b = board_with(size=6, black=[(1, 1), (1, 2), (1, 3)])
        assert WinDetector(b, win_length=3).check_win(1, 2, Cell.BLACK)
        assert not WinDetector(b, win_length=4).check_win(1, 2, Cell.BLACK)
