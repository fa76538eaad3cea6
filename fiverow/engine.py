"""Functional entry points for embedding the engine in another front end."""

from __future__ import annotations

from fiverow.agent.minimax_agent import SearchEngine
from fiverow.game.board import BOARD_SIZE, WIN_LENGTH, Board
from fiverow.game.rules import WinDetector
from fiverow.game.types import Cell, Move


def create_board(size: int = BOARD_SIZE) -> Board:
    """Return a new size x size board with every cell empty."""
    return Board(size)


def place(board: Board, row: int, col: int, side: Cell) -> bool:
    """Place `side` at (row, col). Cell.EMPTY clears the cell and always succeeds."""
    return board.set_cell(row, col, side)


def check_win(board: Board, row: int, col: int, side: Cell, win_length: int = WIN_LENGTH) -> bool:
    return WinDetector(board, win_length).check_win(row, col, side)


def find_best_move(
    board: Board,
    searching_side: Cell,
    opponent_side: Cell,
    ply_depth: int,
    win_length: int = WIN_LENGTH,
) -> Move:
    """Search `ply_depth` plies and return the best move for `searching_side`.

    Runs synchronously on the caller's thread and mutates `board` while it
    searches; no other code may touch the board until it returns.
    """
    engine = SearchEngine(searching_side, opponent_side, depth=ply_depth, win_length=win_length)
    return engine.find_best_move(board)
