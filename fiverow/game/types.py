from __future__ import annotations

import enum
from typing import NamedTuple


class Cell(enum.Enum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def other(self) -> Cell:
        if self is Cell.BLACK:
            return Cell.WHITE
        if self is Cell.WHITE:
            return Cell.BLACK
        return Cell.EMPTY

    @property
    def is_side(self) -> bool:
        return self is not Cell.EMPTY

    @property
    def symbol(self) -> str:
        return {Cell.EMPTY: ".", Cell.BLACK: "X", Cell.WHITE: "O"}[self]

    def __str__(self) -> str:
        return self.name.capitalize()


class Move(NamedTuple):
    row: int  # 0-indexed, 0 = top
    col: int  # 0-indexed, 0 = left


class ScoredMove(NamedTuple):
    move: Move
    score: int
