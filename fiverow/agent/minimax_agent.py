"""Minimax agent: depth-limited alpha-beta search over local candidate moves.

The search explores a single shared board in place: every move is placed
right before recursing and cleared right after, so the board is left exactly
as it was found. One search may run against a given board at a time.
"""

from __future__ import annotations

import logging
import math
import time
from typing import Optional

from fiverow.agent.base import Agent
from fiverow.agent.evaluator import Evaluator
from fiverow.config import DEFAULT_DEPTH, MOVE_GENERATION_RADIUS
from fiverow.game.board import WIN_LENGTH, Board
from fiverow.game.rules import WinDetector
from fiverow.game.session import GomokuGame
from fiverow.game.types import Cell, Move, ScoredMove

logger = logging.getLogger(__name__)

# Decisive band for forced wins/losses. Scaled by (remaining depth + 1) and
# kept far above the largest window total any practical board can reach.
WIN_SCORE = 1_000_000_000

INF = math.inf


# ---------------------------------------------------------------------------
# Candidate generation
# ---------------------------------------------------------------------------

def generate_moves(board: Board, radius: int = MOVE_GENERATION_RADIUS) -> list[Move]:
    """Return empty cells within Chebyshev distance `radius` of any stone.

    Deduplicated and in row-major order. On an empty board, returns the center.
    """
    candidates: set[Move] = set()
    has_stone = False

    for (r, c), _ in board.occupied():
        has_stone = True
        for dr in range(-radius, radius + 1):
            for dc in range(-radius, radius + 1):
                if dr == 0 and dc == 0:
                    continue
                nr, nc = r + dr, c + dc
                if board.is_valid(nr, nc) and board.is_empty(nr, nc):
                    candidates.add(Move(nr, nc))

    if not has_stone:
        return [board.center]
    return sorted(candidates)


# ---------------------------------------------------------------------------
# Search engine
# ---------------------------------------------------------------------------

class SearchEngine:
    """Alpha-beta minimax for `player` (the maximizer) against `opponent`.

    With prune=False the same search runs without cutoffs, i.e. plain minimax
    over the identical candidate sets.
    """

    def __init__(
        self,
        player: Cell,
        opponent: Cell,
        depth: int = DEFAULT_DEPTH,
        win_length: int = WIN_LENGTH,
        radius: int = MOVE_GENERATION_RADIUS,
        prune: bool = True,
    ) -> None:
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")
        if not player.is_side or opponent is not player.other:
            raise ValueError(f"Invalid sides: player={player}, opponent={opponent}")
        self.player = player
        self.opponent = opponent
        self.depth = depth
        self.win_length = win_length
        self.radius = radius
        self.prune = prune
        self.evaluator = Evaluator(player, opponent, win_length)
        self.nodes = 0
        # Root score of the last find_best_move; None after a fallback
        self.last_score: Optional[float] = None
        self._detector: Optional[WinDetector] = None

    def _detector_for(self, board: Board) -> WinDetector:
        if self._detector is None or self._detector.board is not board:
            self._detector = WinDetector(board, self.win_length)
        return self._detector

    def order_moves(
        self,
        board: Board,
        moves: list[Move],
        side: Cell,
        maximizing: bool,
    ) -> list[ScoredMove]:
        """Score each move by a one-stone lookahead and sort best-first for `side`.

        Descending for the maximizer, ascending for the minimizer. The sort is
        stable, so equal scores keep generation order.
        """
        scored: list[ScoredMove] = []
        for move in moves:
            board.set_cell(move.row, move.col, side)
            scored.append(ScoredMove(move, self.evaluator.evaluate(board)))
            board.set_cell(move.row, move.col, Cell.EMPTY)
        scored.sort(key=lambda sm: sm.score, reverse=maximizing)
        return scored

    def search(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        last_row: int,
        last_col: int,
    ) -> float:
        """Minimax value of the position reached by the move at (last_row, last_col).

        `maximizing` is True when `player` is to move, so the stone at
        (last_row, last_col) belongs to `opponent`, and vice versa.
        """
        self.nodes += 1

        # Win by the side that just moved; shallower wins weigh more
        just_moved = self.opponent if maximizing else self.player
        if self._detector_for(board).check_win(last_row, last_col, just_moved):
            if maximizing:
                return -WIN_SCORE * (depth + 1)
            return WIN_SCORE * (depth + 1)

        moves = generate_moves(board, self.radius)
        if depth == 0 or not moves:
            return self.evaluator.evaluate(board)

        if maximizing:
            ordered = self.order_moves(board, moves, self.player, maximizing=True)
            max_eval = -INF
            for move, _ in ordered:
                board.set_cell(move.row, move.col, self.player)
                score = self.search(board, depth - 1, alpha, beta, False, move.row, move.col)
                board.set_cell(move.row, move.col, Cell.EMPTY)

                max_eval = max(max_eval, score)
                alpha = max(alpha, score)
                if self.prune and beta <= alpha:
                    break
            return max_eval

        ordered = self.order_moves(board, moves, self.opponent, maximizing=False)
        min_eval = INF
        for move, _ in ordered:
            board.set_cell(move.row, move.col, self.opponent)
            score = self.search(board, depth - 1, alpha, beta, True, move.row, move.col)
            board.set_cell(move.row, move.col, Cell.EMPTY)

            min_eval = min(min_eval, score)
            beta = min(beta, score)
            if self.prune and beta <= alpha:
                break
        return min_eval

    def find_winning_move(self, board: Board, moves: list[Move]) -> Optional[Move]:
        """First move in `moves` that completes a run for `player`, if any."""
        detector = self._detector_for(board)
        for move in moves:
            board.set_cell(move.row, move.col, self.player)
            wins = detector.check_win(move.row, move.col, self.player)
            board.set_cell(move.row, move.col, Cell.EMPTY)
            if wins:
                return move
        return None

    def find_best_move(self, board: Board) -> Move:
        """Best move for `player` on `board`. The board is left unchanged."""
        self.nodes = 0
        started = time.perf_counter()
        self.last_score = None

        moves = generate_moves(board, self.radius)

        winning = self.find_winning_move(board, moves)
        if winning is not None:
            logger.debug("Immediate win for %s at %s", self.player, winning)
            self.last_score = WIN_SCORE * (self.depth + 1)
            return winning

        ordered = self.order_moves(board, moves, self.player, maximizing=True)

        best_score = -INF
        best_move: Optional[Move] = None
        for move, shallow in ordered:
            if self.depth == 0:
                score: float = shallow
            else:
                # Root alpha tracks the best score so far; a child that cannot
                # beat it may return a bound, which never wins the strict > below.
                alpha = best_score if self.prune else -INF
                board.set_cell(move.row, move.col, self.player)
                score = self.search(board, self.depth - 1, alpha, INF, False, move.row, move.col)
                board.set_cell(move.row, move.col, Cell.EMPTY)

            if score > best_score:
                best_score = score
                best_move = move

        if best_move is None:
            if moves:
                logger.warning("No scored candidate for %s; falling back to %s", self.player, moves[0])
                return moves[0]
            fallback = board.first_empty_cell()
            if fallback is None:
                raise ValueError("No empty cell left on the board")
            logger.warning("No candidate moves for %s; falling back to %s", self.player, fallback)
            return fallback

        self.last_score = best_score
        logger.debug(
            "%s plays %s (score=%s, depth=%d, nodes=%d, %.3fs)",
            self.player, best_move, best_score, self.depth, self.nodes,
            time.perf_counter() - started,
        )
        return best_move


# ---------------------------------------------------------------------------
# MinimaxAgent
# ---------------------------------------------------------------------------

class MinimaxAgent(Agent):
    """Alpha-beta agent with window evaluation, playing the side to move."""

    def __init__(
        self,
        depth: int = DEFAULT_DEPTH,
        radius: int = MOVE_GENERATION_RADIUS,
        prune: bool = True,
    ) -> None:
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")
        self.depth = depth
        self.radius = radius
        self.prune = prune

    @property
    def name(self) -> str:
        return f"MinimaxAgent(d={self.depth})"

    def engine_for(self, player: Cell, win_length: int = WIN_LENGTH) -> SearchEngine:
        return SearchEngine(
            player,
            player.other,
            depth=self.depth,
            win_length=win_length,
            radius=self.radius,
            prune=self.prune,
        )

    def select_move(self, game: GomokuGame) -> Move:
        assert not game.is_over, "Game is already over"
        engine = self.engine_for(game.current_player, game.win_length)
        return engine.find_best_move(game.board)
