"""
ResourceView — the behaviour every dashboard view shares.

A view owns one resource list, a Table showing it and a DetailPanel for the
selected item.  Subclasses declare their columns and message type and
implement four hooks:

  load(client, scope, deadline)   runs off the UI thread, returns items
  row(item)                       table cells for one item
  detail_title(item)              heading of the detail panel
  detail_rows(item)               key/value rows of the detail panel

State machine::

    ┌──────────┐  enter (row selected)   ┌────────┐
    │  table   │ ──────────────────────▶ │ detail │
    │          │ ◀────────────────────── │        │
    └──────────┘   esc / backspace / q   └────────┘

``fetch()`` may be called from either state; results land via ``update()``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar, Generic, TypeVar

import structlog
from rich.console import Group, RenderableType
from rich.text import Text

from mailerlite_cli.api.pagination import Deadline
from mailerlite_cli.core.exceptions import MailerLiteCLIError
from mailerlite_cli.ui import keys
from mailerlite_cli.ui.components import Cell, Column, DetailPanel, DetailRow, Table
from mailerlite_cli.ui.state import Command, LoadedMessage, ViewType

logger = structlog.get_logger()

T = TypeVar("T")

FETCH_LIMIT = 100
FETCH_TIMEOUT_SECONDS = 30.0
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def parse_timestamp(value: str) -> datetime | None:
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except (TypeError, ValueError):
        return None


def format_date(value: str) -> str:
    """Table cell: the date part, or blank when unparseable."""
    parsed = parse_timestamp(value)
    return parsed.strftime("%Y-%m-%d") if parsed else ""


def format_timestamp(value: str) -> str:
    """Detail row: the normalised timestamp, or the raw value when unparseable."""
    parsed = parse_timestamp(value)
    return parsed.strftime(TIMESTAMP_FORMAT) if parsed else value


def yes_no(flag: bool) -> Text:
    return Text("yes", style="green") if flag else Text("no", style="red")


# ---------------------------------------------------------------------------
# Base view
# ---------------------------------------------------------------------------


class ResourceView(Generic[T]):
    view_type: ClassVar[ViewType]
    loaded_message: ClassVar[type[LoadedMessage]]
    columns: ClassVar[list[Column]]
    noun: ClassVar[str]
    # Rows the view draws above its table (tab strips and the like).
    chrome_rows: ClassVar[int] = 0

    def __init__(self, client: Any | None) -> None:
        self.client = client
        self.items: list[T] = []
        self.table = Table(self.columns, empty_message=f"No {self.noun} found.")
        self.detail = DetailPanel()
        self.showing_detail = False
        self.loading = True
        self.error: Exception | None = None
        self.focused = False
        self.width = 0
        self.height = 0
        self._generation = 0
        self.table.set_loading(True)

    # -- hooks --

    def load(self, client: Any, scope: Any, deadline: Deadline) -> list[T]:
        raise NotImplementedError

    def row(self, item: T) -> list[Cell]:
        raise NotImplementedError

    def detail_title(self, item: T) -> str:
        raise NotImplementedError

    def detail_rows(self, item: T) -> list[DetailRow]:
        raise NotImplementedError

    def fetch_scope(self) -> Any:
        """Extra request parameters captured when a fetch is dispatched."""
        return None

    # -- queries --

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def is_loading(self) -> bool:
        return self.loading

    @property
    def generation(self) -> int:
        return self._generation

    def selected(self) -> T | None:
        index = self.table.selected_index()
        if 0 <= index < len(self.items):
            return self.items[index]
        return None

    # -- geometry / focus --

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        inner = max(height - self.chrome_rows, 0)
        self.table.set_size(width, inner)
        self.detail.set_size(width, inner)

    def set_focused(self, focused: bool) -> None:
        self.focused = focused
        self.table.set_focused(focused)

    # -- fetch / update --

    def fetch(self) -> Command:
        """Mark the view loading and return the command that performs the fetch."""
        self.loading = True
        self.table.set_loading(True)
        self._generation += 1

        client = self.client
        scope = self.fetch_scope()
        generation = self._generation
        message_type = self.loaded_message
        view_name = self.view_type.label

        def command() -> LoadedMessage:
            if client is None:
                return message_type(items=[], generation=generation)
            try:
                items = self.load(client, scope, Deadline(FETCH_TIMEOUT_SECONDS))
            except MailerLiteCLIError as exc:
                logger.warning("fetch_failed", view=view_name, error=str(exc))
                return message_type(error=exc, generation=generation)
            except Exception as exc:
                # Decoder bugs and malformed payloads still settle the view.
                logger.error("fetch_crashed", view=view_name, error=str(exc), exc_info=True)
                return message_type(error=exc, generation=generation)
            logger.debug("fetch_completed", view=view_name, count=len(items))
            return message_type(items=items, generation=generation)

        return command

    def update(self, msg: object) -> Command | None:
        if not isinstance(msg, self.loaded_message):
            return None
        if msg.generation is not None and msg.generation != self._generation:
            logger.debug(
                "stale_fetch_dropped",
                view=self.view_type.label,
                generation=msg.generation,
                current=self._generation,
            )
            return None

        self.loading = False
        self.table.set_loading(False)
        self.error = msg.error
        if msg.error is None:
            self.items = list(msg.items)
            self.table.set_rows([self.row(item) for item in self.items])
        return None

    # -- keys --

    def handle_key(self, key: str) -> Command | None:
        if self.showing_detail:
            if key in keys.CLOSE_DETAIL:
                self.showing_detail = False
            return None

        if key in keys.DOWN:
            self.table.move_down()
        elif key in keys.UP:
            self.table.move_up()
        elif key in keys.TOP:
            self.table.goto_top()
        elif key in keys.BOTTOM:
            self.table.goto_bottom()
        elif key in keys.OPEN:
            self.open_detail()
        elif key in keys.REFRESH:
            return self.fetch()
        return None

    def open_detail(self) -> None:
        item = self.selected()
        if item is None:
            return
        self.detail.set_title(self.detail_title(item))
        self.detail.set_rows(self.detail_rows(item))
        self.detail.set_size(self.width, max(self.height - self.chrome_rows, 0))
        self.showing_detail = True

    # -- rendering --

    def render_body(self) -> RenderableType:
        return self.table.render()

    def render(self) -> RenderableType:
        body = self.detail.render() if self.showing_detail else self.render_body()
        if self.error is None:
            return body
        return Group(Text(f"Error: {self.error}", style="bold red"), Text(""), body)
