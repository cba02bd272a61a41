"""Key/value detail panel shown when a table row is opened."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table as RichTable
from rich.text import Text


@dataclass(frozen=True)
class DetailRow:
    label: str
    value: str


class DetailPanel:
    def __init__(self) -> None:
        self.title = ""
        self.rows: list[DetailRow] = []
        self.width = 0
        self.height = 0

    def set_title(self, title: str) -> None:
        self.title = title

    def set_rows(self, rows: list[DetailRow]) -> None:
        self.rows = rows

    def set_size(self, width: int, height: int) -> None:
        self.width = max(width, 0)
        self.height = max(height, 0)

    def render(self) -> RenderableType:
        grid = RichTable.grid(padding=(0, 2))
        grid.add_column(style="bold cyan", no_wrap=True)
        grid.add_column(overflow="fold")
        for row in self.rows:
            grid.add_row(Text(row.label), Text(row.value or "-"))
        return Panel(
            grid,
            title=Text(self.title, style="bold"),
            title_align="left",
            subtitle="[dim]esc to go back[/dim]",
            subtitle_align="left",
            width=self.width or None,
            height=self.height or None,
            border_style="cyan",
        )
