"""Game controller: turn order, win/draw detection, undo, background AI moves."""

from __future__ import annotations

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from fiverow.config import GameSettings

from .board import Board, format_move
from .rules import WinDetector
from .types import Cell, Move

if TYPE_CHECKING:
    from fiverow.agent.base import Agent

logger = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Raised when a move is rejected by the game controller."""


@dataclass
class PlayedMove:
    move: Move
    player: Cell
    elapsed: Optional[float] = None  # seconds spent choosing the move

    def __str__(self) -> str:
        return f"{self.player}: {format_move(self.move)}"


class GomokuGame:
    """Full game state: one board, the move list, and whose turn it is.

    Black always moves first.
    """

    def __init__(self, settings: Optional[GameSettings] = None) -> None:
        self.settings = settings or GameSettings()
        self.board = Board(self.settings.board_size)
        self.detector = WinDetector(self.board, self.settings.win_length)
        self.current_player = Cell.BLACK
        self.moves: list[PlayedMove] = []
        self._winner: Optional[Cell] = None
        self._is_over = False

    @property
    def win_length(self) -> int:
        return self.settings.win_length

    @property
    def is_over(self) -> bool:
        return self._is_over

    @property
    def winner(self) -> Optional[Cell]:
        return self._winner

    @property
    def is_draw(self) -> bool:
        return self._is_over and self._winner is None

    @property
    def last_move(self) -> Optional[PlayedMove]:
        return self.moves[-1] if self.moves else None

    def legal_moves(self) -> list[Move]:
        if self._is_over:
            return []
        size = self.board.size
        return [
            Move(r, c)
            for r in range(size)
            for c in range(size)
            if self.board.is_empty(r, c)
        ]

    def apply_move(self, move: Move, elapsed: Optional[float] = None) -> PlayedMove:
        """Place a stone for the current player and advance the turn."""
        if self._is_over:
            raise IllegalMoveError("Game is already over")
        if not self.board.is_valid(move.row, move.col):
            raise IllegalMoveError(f"{move} is off the board")

        player = self.current_player
        if not self.board.set_cell(move.row, move.col, player):
            raise IllegalMoveError(f"{format_move(move)} is occupied")
        played = PlayedMove(move=move, player=player, elapsed=elapsed)
        self.moves.append(played)

        if self.detector.check_win(move.row, move.col, player):
            self._winner = player
            self._is_over = True
            logger.info("%s wins with %s after %d moves", player, format_move(move), len(self.moves))
        elif self.board.is_full():
            self._is_over = True
            logger.info("Draw: board full after %d moves", len(self.moves))

        self.current_player = player.other
        return played

    def undo_move(self) -> Optional[PlayedMove]:
        """Undo the last move. Returns the undone move, or None if there is none."""
        if not self.moves:
            return None
        played = self.moves.pop()
        self.board.set_cell(played.move.row, played.move.col, Cell.EMPTY)
        self.current_player = played.player
        self._winner = None
        self._is_over = False
        return played

    def resign(self, player: Cell) -> None:
        if self._is_over:
            raise IllegalMoveError("Game is already over")
        self._winner = player.other
        self._is_over = True
        logger.info("%s resigns", player)


class AsyncMoveRunner:
    """Runs an agent's move search on one background thread.

    The search mutates the game's board while it runs, so at most one search
    may be pending, and the board must not be touched until it finishes.
    """

    def __init__(self) -> None:
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="fiverow-search")
        self._pending: Optional[Future] = None

    @property
    def is_thinking(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def submit(self, agent: Agent, game: GomokuGame) -> Future:
        if self.is_thinking:
            raise RuntimeError("A search is already running for this game")
        self._pending = self._executor.submit(agent.select_move, game)
        return self._pending

    def play(self, agent: Agent, game: GomokuGame) -> PlayedMove:
        """Search in the background, wait for the result, then apply it."""
        started = time.perf_counter()
        move = self.submit(agent, game).result()
        return game.apply_move(move, elapsed=time.perf_counter() - started)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> AsyncMoveRunner:
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()
