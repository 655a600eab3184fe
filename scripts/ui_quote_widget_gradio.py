from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

REPO_ROOT = Path(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

import gradio as gr

from quotify.api.config import load_settings
from quotify.api.deps import build_store
from scripts.ui_helpers_quote_widget import (
    WIDGET_CSS,
    load_session,
    open_session,
    render_loading_html,
    widget_state,
)

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Gradio quote-of-the-day widget")
    parser.add_argument("--server_port", type=int, default=7863)
    parser.add_argument("--log_level", default="INFO")
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # source and cache are shared; each browser session gets its own batch and cursor
    shared = build_store(load_settings())

    def _outputs(state):
        quote_html, copy_text, share_md, has_prev, has_next = state
        return (
            quote_html,
            copy_text,
            share_md,
            gr.update(interactive=has_prev),
            gr.update(interactive=has_next),
        )

    def _session(store):
        return store if store is not None else open_session(shared)

    def _load(store, force: bool = False):
        store = _session(store)
        state, busy = load_session(store, force=force)
        if busy:
            gr.Warning("Quotes are already loading")
        return (store, *_outputs(state))

    def _refresh(store):
        return _load(store, force=True)

    def _previous(store):
        store = _session(store)
        if store.is_ready:
            store.retreat()
        return (store, *_outputs(widget_state(store)))

    def _next(store):
        store = _session(store)
        if store.is_ready:
            store.advance()
        return (store, *_outputs(widget_state(store)))

    def _show_loading():
        return render_loading_html()

    with gr.Blocks(title="Quotify", css=WIDGET_CSS) as demo:
        session = gr.State(None)
        gr.Markdown("## Quote of the day")
        quote_html = gr.HTML(render_loading_html())
        with gr.Row():
            prev_btn = gr.Button("Previous", interactive=False)
            next_btn = gr.Button("Next", interactive=False)
            new_btn = gr.Button("New quotes", variant="primary")
        copy_box = gr.Textbox(label="Copy quote", interactive=False, show_copy_button=True)
        share_md = gr.Markdown()

        outputs = [session, quote_html, copy_box, share_md, prev_btn, next_btn]
        demo.load(_load, inputs=[session], outputs=outputs)
        prev_btn.click(_previous, inputs=[session], outputs=outputs)
        next_btn.click(_next, inputs=[session], outputs=outputs)
        new_btn.click(_show_loading, inputs=[], outputs=[quote_html]).then(
            _refresh, inputs=[session], outputs=outputs
        )

    demo.launch(server_port=args.server_port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
