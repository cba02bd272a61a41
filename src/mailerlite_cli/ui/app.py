"""
MailerLite dashboard — Textual application shell.

Launched by ``mailerlite dashboard``.  The shell owns no state of its own: it
forwards every key, resize and timer tick to DashboardModel, runs the
commands the model returns in thread workers, and re-renders the model into
a handful of Static widgets.

Widget tree::

    #header      (Static — title + active profile)
    #main        (Horizontal)
      #sidebar   (Static — view list)
      #content   (Static — active view, or the help overlay)
    #statusbar   (Static — view count / spinner / key hints)

Keybindings: every key goes through DashboardModel (see ui/model.py);
ctrl+c quits unconditionally.
"""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Any

import structlog
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Static

from mailerlite_cli import __version__
from mailerlite_cli.ui.model import TITLE as DASHBOARD_TITLE
from mailerlite_cli.ui.model import DashboardModel
from mailerlite_cli.ui.state import (
    Command,
    ErrorMessage,
    KeyPress,
    SpinnerTick,
    WindowSize,
)

logger = structlog.get_logger()

SPINNER_INTERVAL = 0.1


class FetchCompleted(Message, bubble=False):
    """Carries a command's result from a worker thread back to the loop."""

    def __init__(self, payload: object) -> None:
        super().__init__()
        self.payload = payload


class DashboardApp(App):  # type: ignore[type-arg]
    """Interactive MailerLite dashboard."""

    TITLE = f"{DASHBOARD_TITLE} {__version__}"
    CSS_PATH = str(Path(__file__).parent / "css" / "dashboard.tcss")

    BINDINGS = [
        Binding("ctrl+c", "app.quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, client: Any | None, profile: str = "", **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.model = DashboardModel(client, profile)

    # ------------------------------------------------------------------
    # Compose
    # ------------------------------------------------------------------

    def compose(self) -> ComposeResult:
        yield Static(id="header")
        with Horizontal(id="main"):
            yield Static(id="sidebar")
            yield Static(id="content")
        yield Static(id="statusbar")

    def on_mount(self) -> None:
        self._run_commands(self.model.init())
        self.set_interval(SPINNER_INTERVAL, self._tick)
        self.send(WindowSize(self.size.width, self.size.height))

    # ------------------------------------------------------------------
    # Event plumbing
    # ------------------------------------------------------------------

    def on_resize(self, event: events.Resize) -> None:
        self.send(WindowSize(event.size.width, event.size.height))

    async def on_key(self, event: events.Key) -> None:
        # Suppress App/Screen default bindings (tab focus cycling etc.).
        event.prevent_default()
        event.stop()
        self.send(KeyPress(event.key))

    def on_fetch_completed(self, message: FetchCompleted) -> None:
        self.send(message.payload)

    def _tick(self) -> None:
        if self.model.spinner.running:
            self.send(SpinnerTick())

    def send(self, msg: object) -> None:
        """Feed one message through the model, then re-render."""
        commands = self.model.update(msg)
        self._run_commands(commands)
        if self.model.should_quit:
            self.exit()
            return
        self._render_model()

    def _run_commands(self, commands: list[Command]) -> None:
        for cmd in commands:
            self.run_worker(partial(self._perform, cmd), thread=True, exclusive=False, group="fetch")

    def _perform(self, cmd: Command) -> None:
        # Runs in a worker thread; post_message is thread-safe.
        try:
            result: object = cmd()
        except Exception as exc:
            logger.error("command_failed", error=str(exc), exc_info=True)
            result = ErrorMessage(exc)
        self.post_message(FetchCompleted(result))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render_model(self) -> None:
        model = self.model
        self.query_one("#header", Static).update(model.render_header())
        self.query_one("#sidebar", Static).update(model.render_sidebar())
        content = model.render_help() if model.show_help else model.render_content()
        self.query_one("#content", Static).update(content)
        self.query_one("#statusbar", Static).update(model.render_status())


def run(client: Any | None, profile: str = "") -> int:
    """Run the dashboard until the user quits; returns the process exit code."""
    app = DashboardApp(client, profile)
    app.run()
    return app.return_code or 0
