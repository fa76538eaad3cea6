from __future__ import annotations

import re
from typing import Iterator, Optional

from .types import Cell, Move

BOARD_SIZE = 15
WIN_LENGTH = 5

# Column labels: A-Z, so boards up to 26 wide have letter coordinates
COL_LABELS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_NUMERIC_COORD = re.compile(r"^\s*(\d+)\s*[, ]\s*(\d+)\s*$")


class OutOfBoundsError(IndexError):
    """Raised when a coordinate lies outside the board."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(f"Invalid coordinates: ({row}, {col}) on a {size}x{size} board")
        self.row = row
        self.col = col
        self.size = size


def parse_coordinate(text: str, size: int = BOARD_SIZE) -> Optional[Move]:
    """Parse a coordinate string into a Move.

    Accepts either letter+number form like 'H8' (column letter, 1-indexed row)
    or two 0-indexed integers 'row,col' / 'row col'.
    Returns None if the string is invalid or off the board.
    """
    match = _NUMERIC_COORD.match(text)
    if match:
        row, col = int(match.group(1)), int(match.group(2))
    else:
        text = text.strip().upper()
        if len(text) < 2 or len(text) > 3:
            return None
        col_char = text[0]
        if col_char not in COL_LABELS[:size]:
            return None
        try:
            row = int(text[1:]) - 1
        except ValueError:
            return None
        col = COL_LABELS.index(col_char)
    if not (0 <= row < size and 0 <= col < size):
        return None
    return Move(row, col)


def format_move(move: Move) -> str:
    """Format a Move as a coordinate string like 'H8'."""
    return f"{COL_LABELS[move.col]}{move.row + 1}"


class Board:
    """Square Gomoku grid. Every cell always holds one Cell member.

    set_cell() is the only mutation path, used both to place a stone and to
    retract it (by setting Cell.EMPTY).
    """

    def __init__(self, size: int = BOARD_SIZE) -> None:
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self._size = size
        self._grid: list[list[Cell]] = [[Cell.EMPTY] * size for _ in range(size)]

    @property
    def size(self) -> int:
        return self._size

    def get_cell(self, row: int, col: int) -> Cell:
        if not self.is_valid(row, col):
            raise OutOfBoundsError(row, col, self._size)
        return self._grid[row][col]

    def set_cell(self, row: int, col: int, cell: Cell) -> bool:
        """Place `cell` at (row, col). Returns False for an illegal placement.

        Setting Cell.EMPTY always succeeds on a valid coordinate, whoever
        occupied the cell before.
        """
        if not self.is_valid(row, col):
            return False
        if cell is Cell.EMPTY:
            self._grid[row][col] = Cell.EMPTY
            return True
        if self._grid[row][col] is not Cell.EMPTY:
            return False
        self._grid[row][col] = cell
        return True

    def is_valid(self, row: int, col: int) -> bool:
        return 0 <= row < self._size and 0 <= col < self._size

    def is_empty(self, row: int, col: int) -> bool:
        return self.get_cell(row, col) is Cell.EMPTY

    def occupied(self) -> Iterator[tuple[Move, Cell]]:
        """Yield (move, cell) for every stone, in row-major order."""
        for r, line in enumerate(self._grid):
            for c, cell in enumerate(line):
                if cell is not Cell.EMPTY:
                    yield Move(r, c), cell

    @property
    def occupied_count(self) -> int:
        return sum(1 for _ in self.occupied())

    def is_full(self) -> bool:
        return self.first_empty_cell() is None

    def first_empty_cell(self) -> Optional[Move]:
        for r, line in enumerate(self._grid):
            for c, cell in enumerate(line):
                if cell is Cell.EMPTY:
                    return Move(r, c)
        return None

    @property
    def center(self) -> Move:
        return Move(self._size // 2, self._size // 2)

    def render_text(self) -> str:
        """Plain-text board with 0-indexed row and column headers."""
        lines = ["   " + "".join(f"{c:2d} " for c in range(self._size))]
        for r, line in enumerate(self._grid):
            lines.append(f"{r:2d} " + "".join(f" {cell.symbol} " for cell in line))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render_text()
