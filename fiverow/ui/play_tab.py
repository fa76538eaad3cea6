"""Gradio Play tab: a human against MinimaxAgent on a clickable SVG board."""

from __future__ import annotations

import logging
import random as _random
import time as _time
from dataclasses import dataclass, field, replace
from typing import Optional

import gradio as gr

from fiverow.agent.minimax_agent import MinimaxAgent
from fiverow.config import GameSettings
from fiverow.game.board import format_move, parse_coordinate
from fiverow.game.session import AsyncMoveRunner, GomokuGame
from fiverow.game.types import Cell
from fiverow.ui.board_component import render_board_svg

logger = logging.getLogger(__name__)

THINKING_MESSAGE = "Wait, the AI is thinking."

DEPTH_CHOICES: dict[str, int] = {
    "Depth 1 (instant)": 1,
    "Depth 2 (default)": 2,
    "Depth 3 (slow)": 3,
    "Depth 4 (very slow)": 4,
}


def _default_settings() -> GameSettings:
    try:
        return GameSettings.from_env()
    except ValueError as exc:
        logger.warning("Ignoring invalid FIVEROW_* settings: %s", exc)
        return GameSettings()


@dataclass
class GameSession:
    """Game, settings and agent for one browser tab (stored in gr.State)."""

    settings: GameSettings = field(default_factory=_default_settings)
    game: Optional[GomokuGame] = None
    agent: Optional[MinimaxAgent] = None
    _turn_start: float = field(default_factory=_time.time)
    # Set while a search runs against game.board
    thinking: bool = False

    def __post_init__(self) -> None:
        if self.game is None:
            self.game = GomokuGame(self.settings)
        if self.agent is None:
            self.agent = MinimaxAgent(depth=self.settings.ai_depth, radius=self.settings.move_radius)

    @property
    def human_player(self) -> Cell:
        return self.settings.human_player

    def reset(self, human_player: Optional[Cell] = None, depth: Optional[int] = None) -> None:
        changes: dict = {}
        if human_player is not None:
            changes["human_player"] = human_player
        if depth is not None:
            changes["ai_depth"] = depth
        self.settings = replace(self.settings, **changes)
        self.agent = MinimaxAgent(depth=self.settings.ai_depth, radius=self.settings.move_radius)
        self.game = GomokuGame(self.settings)
        self._turn_start = _time.time()

    def mark_turn_start(self) -> None:
        self._turn_start = _time.time()

    def elapsed_since_turn_start(self) -> float:
        return _time.time() - self._turn_start

    @property
    def game_over_banner(self) -> str:
        """Banner text drawn over a finished board; empty while the game runs."""
        g = self.game
        if not g.is_over:
            return ""
        if g.winner is not None:
            return "You win!" if g.winner is self.human_player else "AI wins!"
        return "Draw!"

    @property
    def status_text(self) -> str:
        g = self.game
        if g.is_over:
            if g.winner is not None:
                who = "You win!" if g.winner is self.human_player else "AI wins!"
                return f"Game over: {who} ({g.winner})"
            return "Game over: Draw!"
        if g.current_player is self.human_player:
            return f"Your turn ({g.current_player})"
        return f"AI is thinking... ({g.current_player})"

    @property
    def move_history_table(self) -> list[list[str]]:
        rows: list[list[str]] = []
        for i, played in enumerate(self.game.moves):
            t = f"{played.elapsed:.2f}" if played.elapsed is not None else "-"
            rows.append([str(i + 1), str(played.player), format_move(played.move), t])
        return rows

    def play_ai_move(self) -> None:
        """Let the AI move if it is its turn. The search runs on a worker thread."""
        if self.game.is_over or self.game.current_player is self.human_player:
            return
        self.thinking = True
        try:
            with AsyncMoveRunner() as runner:
                runner.play(self.agent, self.game)
        finally:
            self.thinking = False
        self.mark_turn_start()


def _make_board_html(session: GameSession) -> str:
    clickable = (
        not session.game.is_over
        and session.game.current_player is session.human_player
    )
    return render_board_svg(
        session.game,
        clickable=clickable,
        game_over_message=session.game_over_banner,
    )


def _busy_outputs(session: GameSession):
    # The board is mid-search; leave the board and history untouched
    return (gr.update(), THINKING_MESSAGE, gr.update(), session)


def _outputs(session: GameSession, status: Optional[str] = None):
    return (
        _make_board_html(session),
        status if status is not None else session.status_text,
        session.move_history_table,
        session,
    )


def _apply_human_move(coord_text: str, session: GameSession):
    """Validate and play the submitted coordinate, then run the AI reply."""
    if session.thinking:
        return _busy_outputs(session) + (gr.update(),)

    game = session.game
    if game.is_over:
        return _outputs(session) + ("",)

    if game.current_player is not session.human_player:
        return _outputs(session, "Wait, it's the AI's turn.") + ("",)

    move = parse_coordinate(coord_text, game.board.size)
    if move is None:
        return _outputs(session, f"Invalid coordinate: '{coord_text}'. Use a format like H8.") + ("",)

    if not game.board.is_empty(move.row, move.col):
        return _outputs(session, f"{format_move(move)} is already occupied.") + ("",)

    game.apply_move(move, elapsed=session.elapsed_since_turn_start())
    session.play_ai_move()
    return _outputs(session) + ("",)


def _new_game(color_choice: str, depth_choice: str, session: GameSession):
    """Start a new game. color_choice is 'Black', 'White', or 'Random'."""
    if session.thinking:
        return _busy_outputs(session) + (gr.update(),)

    if color_choice == "Random":
        human = _random.choice([Cell.BLACK, Cell.WHITE])
    elif color_choice == "White":
        human = Cell.WHITE
    else:
        human = Cell.BLACK

    session.reset(human_player=human, depth=DEPTH_CHOICES.get(depth_choice))
    # Black moves first, so the AI opens when the human is White
    session.play_ai_move()
    session.mark_turn_start()
    return _outputs(session) + (f"You are {human}.",)


def _undo_move(session: GameSession):
    """Take back the human's last move together with the AI reply to it."""
    if session.thinking:
        return _busy_outputs(session)

    game = session.game
    if not game.moves:
        return _outputs(session, "Nothing to undo.")

    if game.last_move.player is not session.human_player:
        game.undo_move()  # AI reply
    if game.moves:
        game.undo_move()  # human move
    # The AI may have opened the game; let it move again if it is its turn
    session.play_ai_move()
    session.mark_turn_start()
    return _outputs(session)


def _resign(session: GameSession):
    if session.thinking:
        return _busy_outputs(session)
    if not session.game.is_over:
        session.game.resign(session.human_player)
    return _outputs(session)


def build_play_tab() -> None:
    """Add the Play tab components and event wiring to the enclosing gr.Blocks."""

    initial = GameSession()
    initial.play_ai_move()
    session_state = gr.State(initial)

    with gr.Row():
        with gr.Column(scale=3):
            board_html = gr.HTML(value=render_board_svg(initial.game), label="Board")
        with gr.Column(scale=1):
            status_text = gr.Textbox(
                value=initial.status_text,
                label="Status",
                interactive=False,
                lines=2,
            )
            color_info = gr.Textbox(
                value=f"You are {initial.human_player}.",
                label="Color",
                interactive=False,
                lines=1,
            )

            gr.Markdown("### New Game")
            color_choice = gr.Radio(
                choices=["Random", "Black", "White"],
                value="Black",
                label="Play as",
            )
            depth_choice = gr.Dropdown(
                choices=list(DEPTH_CHOICES.keys()),
                value="Depth 2 (default)",
                label="AI strength",
            )
            new_game_btn = gr.Button("New Game", variant="primary")

            with gr.Row():
                undo_btn = gr.Button("Undo")
                resign_btn = gr.Button("Resign", variant="stop")

            gr.Markdown("### Enter Move")
            coord_input = gr.Textbox(
                label="Coordinate (e.g. H8)",
                placeholder="H8",
                elem_id="coord-input",
                lines=1,
            )
            coord_submit = gr.Button("Submit Move", elem_id="coord-submit")

            gr.Markdown("### Move History")
            move_table = gr.Dataframe(
                headers=["#", "Player", "Move", "Time (s)"],
                datatype=["number", "str", "str", "str"],
                interactive=False,
            )

    board_outputs = [board_html, status_text, move_table, session_state]

    coord_submit.click(
        fn=_apply_human_move,
        inputs=[coord_input, session_state],
        outputs=board_outputs + [coord_input],
        concurrency_id="play",
    )
    new_game_btn.click(
        fn=_new_game,
        inputs=[color_choice, depth_choice, session_state],
        outputs=board_outputs + [color_info],
        concurrency_id="play",
    )
    undo_btn.click(fn=_undo_move, inputs=[session_state], outputs=board_outputs, concurrency_id="play")
    resign_btn.click(fn=_resign, inputs=[session_state], outputs=board_outputs, concurrency_id="play")
