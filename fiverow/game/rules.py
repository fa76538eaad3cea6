"""Win detection from the last placed stone."""

from __future__ import annotations

from .board import WIN_LENGTH, Board
from .types import Cell

# Four line families: horizontal, vertical, main diagonal (\), anti-diagonal (/)
DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]


class WinDetector:
    def __init__(self, board: Board, win_length: int = WIN_LENGTH) -> None:
        self.board = board
        self.win_length = win_length

    def check_win(self, last_row: int, last_col: int, player: Cell) -> bool:
        """True if `player` has a run of at least win_length through the cell.

        The stone at (last_row, last_col) must already be on the board.
        """
        if player is Cell.EMPTY:
            return False
        return any(
            self._check_direction(last_row, last_col, player, dr, dc)
            for dr, dc in DIRECTIONS
        )

    def _count(self, row: int, col: int, player: Cell, dr: int, dc: int) -> int:
        """Consecutive `player` cells stepping away from (row, col), origin excluded."""
        board = self.board
        count = 0
        for step in range(1, self.win_length):
            r, c = row + dr * step, col + dc * step
            if not board.is_valid(r, c) or board.get_cell(r, c) is not player:
                break
            count += 1
        return count

    def _check_direction(self, row: int, col: int, player: Cell, dr: int, dc: int) -> bool:
        streak = 1 + self._count(row, col, player, dr, dc)
        if streak >= self.win_length:
            return True
        streak += self._count(row, col, player, -dr, -dc)
        return streak >= self.win_length
