"""Static position evaluation by sliding windows.

Every line of the board (rows, columns, both diagonal families) is cut into
overlapping windows of win-length cells, and each window is scored once per
side. A window holding stones of both sides can never become a winning run
and scores nothing. Tiers are an order of magnitude apart so a single higher
threat outweighs any number of lower ones. Open ends are not modelled.
"""

from __future__ import annotations

import functools
from typing import Iterator, Sequence

from fiverow.game.board import WIN_LENGTH, Board
from fiverow.game.types import Cell, Move

# ---------------------------------------------------------------------------
# Window scores, keyed by how many cells of the window one side holds
# ---------------------------------------------------------------------------

WIN = 100_000
FOUR = 10_000
THREE = 1_000
TWO = 100

WINDOW_SCORES: dict[int, int] = {
    5: WIN,
    4: FOUR,
    3: THREE,
    2: TWO,
}

# Tiers below a full window, nearest-to-complete first
_NEAR_TIERS = (FOUR, THREE, TWO)


def _count_score(count: int, length: int) -> int:
    """Score for `count` stones of one side in a clean window of `length` cells."""
    if length == WIN_LENGTH:
        return WINDOW_SCORES.get(count, 0)
    if count >= length:
        return WIN
    missing = length - count
    if count < 2 or missing > len(_NEAR_TIERS):
        return 0
    return _NEAR_TIERS[missing - 1]


def score_window(cells: Sequence[Cell], player: Cell) -> int:
    """Score one window for `player`. Dead windows (both sides present) are 0."""
    player_count = 0
    opponent_count = 0
    for cell in cells:
        if cell is player:
            player_count += 1
        elif cell is not Cell.EMPTY:
            opponent_count += 1
    if player_count > 0 and opponent_count > 0:
        return 0
    return _count_score(player_count, len(cells))


# ---------------------------------------------------------------------------
# Line geometry
# ---------------------------------------------------------------------------

@functools.lru_cache(maxsize=None)
def board_lines(size: int, length: int) -> tuple[tuple[Move, ...], ...]:
    """All lines long enough to hold a window, one entry per line per orientation."""
    lines: list[tuple[Move, ...]] = []
    # Horizontals and verticals
    for i in range(size):
        lines.append(tuple(Move(i, c) for c in range(size)))
        lines.append(tuple(Move(r, i) for r in range(size)))
    # Main diagonals (\): start on the top row or the left column
    starts = [(0, c) for c in range(size)] + [(r, 0) for r in range(1, size)]
    for r0, c0 in starts:
        span = size - max(r0, c0)
        lines.append(tuple(Move(r0 + i, c0 + i) for i in range(span)))
    # Anti-diagonals (/): start on the top row or the right column
    starts = [(0, c) for c in range(size)] + [(r, size - 1) for r in range(1, size)]
    for r0, c0 in starts:
        span = min(size - r0, c0 + 1)
        lines.append(tuple(Move(r0 + i, c0 - i) for i in range(span)))
    return tuple(line for line in lines if len(line) >= length)


def iter_windows(size: int, length: int = WIN_LENGTH) -> Iterator[tuple[Move, ...]]:
    """Yield every window of `length` cells on a size x size board."""
    for line in board_lines(size, length):
        for start in range(len(line) - length + 1):
            yield line[start:start + length]


# ---------------------------------------------------------------------------
# Evaluator
# ---------------------------------------------------------------------------

class Evaluator:
    """Net window score: positive favours `player`, negative favours `opponent`."""

    def __init__(self, player: Cell, opponent: Cell, win_length: int = WIN_LENGTH) -> None:
        self.player = player
        self.opponent = opponent
        self.win_length = win_length

    def evaluate(self, board: Board) -> int:
        player_score = 0
        opponent_score = 0
        length = self.win_length
        for line in board_lines(board.size, length):
            cells = [board.get_cell(r, c) for r, c in line]
            for start in range(len(cells) - length + 1):
                window = cells[start:start + length]
                player_score += score_window(window, self.player)
                opponent_score += score_window(window, self.opponent)
        return player_score - opponent_score
