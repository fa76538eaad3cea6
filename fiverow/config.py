"""Game settings shared by the console and web front ends."""

from __future__ import annotations

import os
from dataclasses import dataclass

from fiverow.game.board import BOARD_SIZE, COL_LABELS, WIN_LENGTH
from fiverow.game.types import Cell

# Search depth in plies. Each extra ply multiplies work by the candidate count,
# so the pure-Python search stays shallow by default.
DEFAULT_DEPTH = 2
MOVE_GENERATION_RADIUS = 2

_HUMAN_CHOICES = {"black": Cell.BLACK, "white": Cell.WHITE}


@dataclass(frozen=True)
class GameSettings:
    board_size: int = BOARD_SIZE
    win_length: int = WIN_LENGTH
    ai_depth: int = DEFAULT_DEPTH
    human_player: Cell = Cell.BLACK
    move_radius: int = MOVE_GENERATION_RADIUS

    def __post_init__(self) -> None:
        if not 1 <= self.board_size <= len(COL_LABELS):
            raise ValueError(f"board_size must be between 1 and {len(COL_LABELS)}, got {self.board_size}")
        if self.win_length < 1:
            raise ValueError(f"win_length must be positive, got {self.win_length}")
        if self.ai_depth < 0:
            raise ValueError(f"ai_depth must be non-negative, got {self.ai_depth}")
        if self.move_radius < 1:
            raise ValueError(f"move_radius must be positive, got {self.move_radius}")
        if not self.human_player.is_side:
            raise ValueError("human_player must be BLACK or WHITE")

    @property
    def ai_player(self) -> Cell:
        return self.human_player.other

    @classmethod
    def from_env(cls, environ: dict | None = None) -> GameSettings:
        """Build settings from FIVEROW_* environment variables over the defaults."""
        env = os.environ if environ is None else environ
        kwargs: dict = {}
        if "FIVEROW_BOARD_SIZE" in env:
            kwargs["board_size"] = int(env["FIVEROW_BOARD_SIZE"])
        if "FIVEROW_WIN_LENGTH" in env:
            kwargs["win_length"] = int(env["FIVEROW_WIN_LENGTH"])
        if "FIVEROW_DEPTH" in env:
            kwargs["ai_depth"] = int(env["FIVEROW_DEPTH"])
        if "FIVEROW_HUMAN" in env:
            choice = env["FIVEROW_HUMAN"].strip().lower()
            if choice not in _HUMAN_CHOICES:
                raise ValueError(f"FIVEROW_HUMAN must be 'black' or 'white', got {choice!r}")
            kwargs["human_player"] = _HUMAN_CHOICES[choice]
        return cls(**kwargs)
