"""
Scrollable table with a row cursor.

Invariants:
  * with rows present, ``0 <= cursor < len(rows)``; with no rows, cursor == 0
  * the cursor row is always inside the visible window
    ``[offset, offset + visible_rows)``
"""

from __future__ import annotations

from dataclasses import dataclass

from rich import box
from rich.console import RenderableType
from rich.table import Table as RichTable
from rich.text import Text

Cell = str | Text

# Header line plus the rule under it.
HEADER_ROWS = 2


def _cell(value: Cell) -> Text:
    # API strings are data, never Rich markup.
    return value if isinstance(value, Text) else Text(value)


@dataclass(frozen=True)
class Column:
    title: str
    width: int


class Table:
    def __init__(self, columns: list[Column], empty_message: str = "No items.") -> None:
        self.columns = columns
        self.empty_message = empty_message
        self.rows: list[list[Cell]] = []
        self.cursor = 0
        self.offset = 0
        self.width = 0
        self.height = 0
        self.focused = False
        self.loading = False

    # -- state --

    def set_rows(self, rows: list[list[Cell]]) -> None:
        self.rows = rows
        if not rows:
            self.cursor = 0
        else:
            self.cursor = min(self.cursor, len(rows) - 1)
        self._ensure_visible()

    def set_size(self, width: int, height: int) -> None:
        self.width = max(width, 0)
        self.height = max(height, 0)
        self._ensure_visible()

    def set_focused(self, focused: bool) -> None:
        self.focused = focused

    def set_loading(self, loading: bool) -> None:
        self.loading = loading

    @property
    def visible_rows(self) -> int:
        return max(self.height - HEADER_ROWS, 1)

    def selected_index(self) -> int:
        """Index of the cursor row, or -1 when the table is empty."""
        return self.cursor if self.rows else -1

    # -- navigation --

    def move_down(self) -> None:
        if self.cursor < len(self.rows) - 1:
            self.cursor += 1
            self._ensure_visible()

    def move_up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1
            self._ensure_visible()

    def goto_top(self) -> None:
        self.cursor = 0
        self._ensure_visible()

    def goto_bottom(self) -> None:
        self.cursor = max(len(self.rows) - 1, 0)
        self._ensure_visible()

    def _ensure_visible(self) -> None:
        n = len(self.rows)
        if n == 0:
            self.offset = 0
            return
        view_h = self.visible_rows
        if self.cursor < self.offset:
            self.offset = self.cursor
        elif self.cursor >= self.offset + view_h:
            self.offset = self.cursor - view_h + 1
        self.offset = min(max(self.offset, 0), max(n - view_h, 0))

    # -- rendering --

    def render(self) -> RenderableType:
        if self.loading and not self.rows:
            return Text("Loading...", style="dim")
        if not self.rows:
            return Text(self.empty_message, style="dim")

        table = RichTable(
            box=box.SIMPLE_HEAD,
            show_edge=False,
            pad_edge=False,
            header_style="bold cyan",
            expand=False,
        )
        for col in self.columns:
            table.add_column(col.title, width=col.width, no_wrap=True, overflow="ellipsis")

        end = self.offset + self.visible_rows
        for index in range(self.offset, min(end, len(self.rows))):
            style = ""
            if index == self.cursor:
                style = "reverse" if self.focused else "bold"
            table.add_row(*(_cell(c) for c in self.rows[index]), style=style)
        return table
