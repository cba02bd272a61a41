"""
Dashboard chrome owned by the model: sidebar, status bar, spinner, help.

Layout (header and status bar are fixed two-row strips)::

    ┌ header ─────────────────────────────────────┐
    │ sidebar │ active view                        │
    │         │                                    │
    └ status bar ─────────────────────────────────┘
"""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table as RichTable
from rich.text import Text

from mailerlite_cli.ui.keys import HELP_ENTRIES
from mailerlite_cli.ui.state import SpinnerTick, ViewType

SIDEBAR_WIDTH = 22
SPINNER_FRAMES = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"


class Sidebar:
    """Vertical list of views; the selection always mirrors the active view."""

    def __init__(self) -> None:
        self.selected = ViewType.SUBSCRIBERS
        self.focused = False
        self.width = SIDEBAR_WIDTH
        self.height = 0

    def set_active(self, view: ViewType) -> None:
        self.selected = view

    def set_focused(self, focused: bool) -> None:
        self.focused = focused

    def set_height(self, height: int) -> None:
        self.height = max(height, 0)

    def next(self) -> ViewType:
        if self.selected < max(ViewType):
            self.selected = ViewType(self.selected + 1)
        return self.selected

    def prev(self) -> ViewType:
        if self.selected > min(ViewType):
            self.selected = ViewType(self.selected - 1)
        return self.selected

    def render(self) -> RenderableType:
        lines = []
        for view in ViewType:
            label = f" {view.icon} {view.value + 1} {view.label}"
            if view is self.selected:
                style = "bold reverse" if self.focused else "bold cyan"
                lines.append(Text(label.ljust(self.width - 2), style=style))
            else:
                lines.append(Text(label, style="dim" if self.focused else ""))
        return Group(*lines)


class Spinner:
    """Braille spinner; only SpinnerTick advances it, and only while running."""

    def __init__(self) -> None:
        self.frame = 0
        self.running = False
        self.label = ""

    def start(self, label: str = "") -> None:
        self.running = True
        if label:
            self.label = label

    def stop(self) -> None:
        self.running = False
        self.frame = 0

    def set_label(self, label: str) -> None:
        self.label = label

    def update(self, msg: object) -> None:
        if self.running and isinstance(msg, SpinnerTick):
            self.frame = (self.frame + 1) % len(SPINNER_FRAMES)

    def render(self) -> Text:
        if not self.running:
            return Text("")
        return Text(f"{SPINNER_FRAMES[self.frame]} {self.label}", style="yellow")


class StatusBar:
    def __init__(self) -> None:
        self.view_label = ""
        self.count: int | None = None
        self.profile = ""
        self.width = 0

    def set_view(self, label: str, count: int | None) -> None:
        """``count`` is None while the view is loading."""
        self.view_label = label
        self.count = count

    def set_width(self, width: int) -> None:
        self.width = max(width, 0)

    def render(self, spinner: Spinner) -> RenderableType:
        left = Text()
        if self.count is None:
            left.append(self.view_label, style="bold")
            if spinner.running:
                left.append("  ")
                left.append_text(spinner.render())
        else:
            left.append(f"{self.view_label} ({self.count})", style="bold")
        right = Text("tab focus · 1-5 views · ? help · q quit", style="dim")

        grid = RichTable.grid(expand=True)
        grid.add_column(ratio=1)
        grid.add_column(justify="right")
        grid.add_row(left, right)
        return grid


class HelpOverlay:
    def render(self) -> RenderableType:
        grid = RichTable.grid(padding=(0, 3))
        grid.add_column(style="bold cyan", no_wrap=True)
        grid.add_column()
        for keys, description in HELP_ENTRIES:
            grid.add_row(keys, description)
        return Panel(
            grid,
            title="[bold]Keyboard shortcuts[/bold]",
            subtitle="[dim]? or esc to close[/dim]",
            border_style="cyan",
            expand=False,
        )
