"""SVG board renderer + JavaScript click handler for Gradio."""

from __future__ import annotations

from fiverow.game.board import format_move
from fiverow.game.session import GomokuGame
from fiverow.game.types import Cell, Move

# Layout constants
CELL_SIZE = 40
MARGIN = 40
STONE_RADIUS = 17
CLICK_RADIUS = 18  # Invisible click target radius

# Colors
BG_COLOR = "#DCB35C"
LINE_COLOR = "#4A3728"
BLACK_STONE = "#1A1A1A"
WHITE_STONE = "#F5F5F5"
WHITE_STROKE = "#888"

# Game-over banner colors
BANNER_BG = "rgba(0, 0, 0, 0.6)"
WIN_TEXT = "#4ADE80"
LOSS_TEXT = "#F87171"
DRAW_TEXT = "#FFFFFF"


def board_pixels(size: int) -> int:
    return MARGIN * 2 + CELL_SIZE * (size - 1)


def _coord(row: int, col: int) -> tuple[int, int]:
    """Convert 0-indexed board coordinates to SVG pixel coordinates (row 0 on top)."""
    return MARGIN + col * CELL_SIZE, MARGIN + row * CELL_SIZE


def _banner_color(message: str) -> str:
    if message.startswith("You win"):
        return WIN_TEXT
    if message.startswith("AI wins"):
        return LOSS_TEXT
    return DRAW_TEXT


def render_board_svg(
    game: GomokuGame,
    clickable: bool = True,
    highlight_last: bool = True,
    game_over_message: str = "",
) -> str:
    """Render the board as an SVG string."""
    board = game.board
    size = board.size
    px = board_pixels(size)
    parts: list[str] = []

    parts.append(
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{px}" height="{px}" '
        f'viewBox="0 0 {px} {px}" '
        f'id="gomoku-board">'
    )
    parts.append(f'<rect width="{px}" height="{px}" fill="{BG_COLOR}" rx="4"/>')

    # Grid lines
    far = MARGIN + (size - 1) * CELL_SIZE
    for i in range(size):
        offset = MARGIN + i * CELL_SIZE
        parts.append(
            f'<line x1="{offset}" y1="{MARGIN}" x2="{offset}" y2="{far}" '
            f'stroke="{LINE_COLOR}" stroke-width="1"/>'
        )
        parts.append(
            f'<line x1="{MARGIN}" y1="{offset}" x2="{far}" y2="{offset}" '
            f'stroke="{LINE_COLOR}" stroke-width="1"/>'
        )

    cx, cy = _coord(*board.center)
    parts.append(f'<circle cx="{cx}" cy="{cy}" r="4" fill="{LINE_COLOR}"/>')

    # Column letters on top, row numbers on the left
    for i in range(size):
        label = format_move(Move(i, i))
        x, y = _coord(i, i)
        parts.append(
            f'<text x="{x}" y="{MARGIN - 15}" text-anchor="middle" '
            f'font-size="14" font-family="monospace" fill="{LINE_COLOR}">{label[0]}</text>'
        )
        parts.append(
            f'<text x="{MARGIN - 22}" y="{y + 5}" text-anchor="middle" '
            f'font-size="14" font-family="monospace" fill="{LINE_COLOR}">{label[1:]}</text>'
        )

    # Stones
    last = game.last_move.move if game.last_move else None
    for move, cell in board.occupied():
        x, y = _coord(*move)
        fill = BLACK_STONE if cell is Cell.BLACK else WHITE_STONE
        stroke = "none" if cell is Cell.BLACK else WHITE_STROKE
        parts.append(
            f'<circle cx="{x}" cy="{y}" r="{STONE_RADIUS}" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="1.5"/>'
        )
        if highlight_last and move == last:
            marker = WHITE_STONE if cell is Cell.BLACK else BLACK_STONE
            parts.append(f'<circle cx="{x}" cy="{y}" r="5" fill="{marker}" opacity="0.7"/>')

    # Clickable intersection targets (invisible circles)
    if clickable and not game.is_over:
        for move in game.legal_moves():
            x, y = _coord(*move)
            coord_str = format_move(move)
            parts.append(
                f'<circle cx="{x}" cy="{y}" r="{CLICK_RADIUS}" '
                f'fill="transparent" class="board-click" '
                f'data-coord="{coord_str}" style="cursor:pointer">'
                f'<title>{coord_str}</title></circle>'
            )

    if game_over_message:
        parts.append(f'<rect x="0" y="{px // 2 - 35}" width="{px}" height="70" fill="{BANNER_BG}"/>')
        parts.append(
            f'<text x="{px // 2}" y="{px // 2 + 12}" text-anchor="middle" '
            f'font-size="36" font-weight="bold" font-family="sans-serif" '
            f'fill="{_banner_color(game_over_message)}">{game_over_message}</text>'
        )

    parts.append("</svg>")
    return "\n".join(parts)


# JavaScript that handles clicks on the SVG and writes the coordinate to
# a hidden Gradio Textbox, then triggers the submit button.
BOARD_CLICK_JS = """
() => {
    if (window._gomokuClickBound) return;
    window._gomokuClickBound = true;

    document.addEventListener('click', function(e) {
        const circle = e.target.closest('.board-click');
        if (!circle) return;
        const coord = circle.getAttribute('data-coord');
        if (!coord) return;

        const container = document.querySelector('#coord-input textarea, #coord-input input');
        if (container) {
            // Native setter so Gradio notices the change
            const proto = container.tagName === "TEXTAREA"
                ? window.HTMLTextAreaElement.prototype
                : window.HTMLInputElement.prototype;
            const nativeSetter = Object.getOwnPropertyDescriptor(proto, "value")?.set;
            if (nativeSetter) {
                nativeSetter.call(container, coord);
            } else {
                container.value = coord;
            }
            container.dispatchEvent(new Event('input', { bubbles: true }));
            const btn = document.querySelector('#coord-submit');
            if (btn) btn.click();
        }
    });
}
"""
