"""Line-based front end driving a Headlines app from a terminal."""

from __future__ import annotations

import logging
from typing import Callable

from .app import Headlines

logger = logging.getLogger(__name__)

PROMPT = "[enter] redraw  [r] refresh  [t] theme  [q] close > "


def render_config(app: Headlines, read: Callable[[str], str], write: Callable[[str], None]) -> None:
    """Ask for the API key until a non-empty one is entered."""
    write("Enter your API_KEY for newsapi.org")
    write("If you have not registered, head over to https://newsapi.org")
    while not app.api_key_initialized:
        app.submit_api_key(read("API_KEY: "))


def run_app(app: Headlines, read: Callable[[str], str] = input, write: Callable[[str], None] = print) -> None:
    app.setup()
    if not app.api_key_initialized:
        render_config(app, read, write)

    try:
        while True:
            write(app.update())
            choice = read(PROMPT).strip().lower()
            if choice == "q":
                break
            if choice == "r":
                app.refresh()
            elif choice == "t":
                app.toggle_theme()
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed")
    finally:
        app.close()
