"""Console game: human vs the minimax agent.

Usage: fiverow [--size 15] [--depth 2] [--human black|white] [--verbose]
"""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Optional

from fiverow.agent.base import Agent
from fiverow.agent.minimax_agent import MinimaxAgent
from fiverow.config import GameSettings
from fiverow.game.board import format_move, parse_coordinate
from fiverow.game.session import AsyncMoveRunner, GomokuGame
from fiverow.game.types import Cell, Move

logger = logging.getLogger(__name__)


def _ask_human_move(
    game: GomokuGame,
    input_fn: Callable[[str], str],
    out: Callable[[str], None],
) -> Optional[Move]:
    """Prompt until the human enters an empty on-board cell. None on end of input."""
    size = game.board.size
    while True:
        try:
            text = input_fn(f"Your move ({game.current_player}), e.g. H8 or '7 7' (0-{size - 1}): ")
        except EOFError:
            return None
        move = parse_coordinate(text, size)
        if move is None:
            out(f"Invalid coordinate: '{text.strip()}'. Try again.")
            continue
        if not game.board.is_empty(move.row, move.col):
            out(f"{format_move(move)} is already occupied. Try again.")
            continue
        return move


def run_game(
    settings: GameSettings,
    agent: Agent,
    input_fn: Callable[[str], str] = input,
    out: Callable[[str], None] = print,
) -> Optional[Cell]:
    """Play one game on the console. Returns the winner, or None for a draw or abort."""
    game = GomokuGame(settings)
    human = settings.human_player

    out("--- GOMOKU ---")
    out(f"You are playing as '{human.symbol}' ({human}). AI is '{settings.ai_player.symbol}'.")
    out(f"Win condition: {settings.win_length} in a row.")

    with AsyncMoveRunner() as runner:
        while not game.is_over:
            if game.current_player is human:
                out(game.board.render_text())
                move = _ask_human_move(game, input_fn, out)
                if move is None:
                    out("Input closed. Game abandoned.")
                    return None
                game.apply_move(move)
                out(f"You played at {format_move(move)} ({move.row}, {move.col}).")
            else:
                out(f"AI's turn ({game.current_player})... Thinking...")
                played = runner.play(agent, game)
                out(f"AI moved to {format_move(played.move)} ({played.move.row}, {played.move.col}).")

    out(game.board.render_text())
    if game.winner is None:
        out("It's a draw! The board is full.")
    elif game.winner is human:
        out("YOU WIN!")
    else:
        out("AI WINS!")
    out("Game over.")
    return game.winner


def build_parser(defaults: Optional[GameSettings] = None) -> argparse.ArgumentParser:
    if defaults is None:
        defaults = GameSettings()
    parser = argparse.ArgumentParser(prog="fiverow", description="Play five-in-a-row against the computer.")
    parser.add_argument("--size", type=int, default=defaults.board_size, help="board side length")
    parser.add_argument("--win-length", type=int, default=defaults.win_length, help="stones in a row to win")
    parser.add_argument("--depth", type=int, default=defaults.ai_depth, help="AI search depth in plies")
    parser.add_argument(
        "--human",
        choices=["black", "white"],
        default=defaults.human_player.name.lower(),
        help="your colour (black moves first)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log search details")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    try:
        defaults = GameSettings.from_env()
    except ValueError as exc:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logger.error("Invalid FIVEROW_* environment setting: %s", exc)
        return 2
    args = build_parser(defaults).parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = GameSettings(
            board_size=args.size,
            win_length=args.win_length,
            ai_depth=args.depth,
            human_player=Cell[args.human.upper()],
        )
    except ValueError as exc:
        logger.error("Invalid settings: %s", exc)
        return 2
    try:
        run_game(settings, MinimaxAgent(depth=settings.ai_depth, radius=settings.move_radius))
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
