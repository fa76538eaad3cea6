"""fiverow: Gradio web app entry point."""

import logging

import gradio as gr

from fiverow.ui.board_component import BOARD_CLICK_JS
from fiverow.ui.play_tab import build_play_tab

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

with gr.Blocks(title="fiverow") as demo:
    gr.Markdown("# fiverow")
    gr.Markdown("Five in a row against an alpha-beta search. Black moves first.")

    with gr.Tab("Play"):
        build_play_tab()

    # Bind board click handler JS on page load
    demo.load(fn=None, js=BOARD_CLICK_JS)

if __name__ == "__main__":
    demo.launch(theme=gr.themes.Soft())
