from fiverow.config import GameSettings
from fiverow.game.session import GomokuGame
from fiverow.game.types import Move
from fiverow.ui.board_component import board_pixels, render_board_svg


def _black_wins(game: GomokuGame) -> None:
    for i in range(4):
        game.apply_move(Move(1, i + 1))
        game.apply_move(Move(2, i + 1))
    game.apply_move(Move(1, 5))


def test_empty_board_svg():
    g = GomokuGame()
    html = render_board_svg(g)
    assert html.startswith("<svg")
    assert html.endswith("</svg>")
    assert "gomoku-board" in html
    # One click target per intersection
    assert html.count('class="board-click"') == 225


def test_svg_with_stones():
    g = GomokuGame()
    g.apply_move(Move(7, 7))
    g.apply_move(Move(7, 8))
    html = render_board_svg(g)
    assert html.count('class="board-click"') == 223
    assert 'data-coord="H8"' not in html
    assert 'data-coord="A1"' in html


def test_row_zero_drawn_on_top():
    g = GomokuGame(GameSettings(board_size=9))
    g.apply_move(Move(0, 0))
    html = render_board_svg(g, clickable=False)
    assert '<circle cx="40" cy="40" r="17"' in html


def test_board_size_sets_svg_size():
    g = GomokuGame(GameSettings(board_size=9))
    px = board_pixels(9)
    assert px == 400
    assert f'width="{px}"' in render_board_svg(g)


def test_svg_not_clickable_when_game_over():
    g = GomokuGame()
    _black_wins(g)
    html = render_board_svg(g)
    assert html.count('class="board-click"') == 0


def test_svg_not_clickable_when_disabled():
    g = GomokuGame()
    html = render_board_svg(g, clickable=False)
    assert html.count('class="board-click"') == 0


def test_last_move_marker():
    g = GomokuGame()
    g.apply_move(Move(7, 7))
    assert 'r="5"' in render_board_svg(g)
    assert 'r="5"' not in render_board_svg(g, highlight_last=False)


def test_game_over_banner_displayed():
    g = GomokuGame()
    _black_wins(g)
    html = render_board_svg(g, game_over_message="You win!")
    assert "You win!" in html
    # Green for a human win
    assert "#4ADE80" in html


def test_game_over_banner_ai_wins():
    g = GomokuGame()
    html = render_board_svg(g, game_over_message="AI wins!")
    assert "#F87171" in html


def test_game_over_banner_draw():
    g = GomokuGame()
    html = render_board_svg(g, game_over_message="Draw!")
    assert "Draw!" in html
    assert "#FFFFFF" in html


def test_no_banner_while_playing():
    html = render_board_svg(GomokuGame())
    assert "rgba(0, 0, 0, 0.6)" not in html
