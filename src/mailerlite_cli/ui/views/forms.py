"""
Forms view — one table per form type, switched with a tab strip.

    Popup  Embedded  Promotion          ← tab strip
    ← → to switch types | 12 forms      ← hint
                                        ← spacer
    NAME  TYPE  ACTIVE ...              ← table

Switching tabs keeps the current rows on screen until the new type's fetch
lands; the fetch generation guarantees a slow earlier tab cannot overwrite
the newer one.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from rich.console import Group, RenderableType
from rich.text import Text

from mailerlite_cli.api.models import Form
from mailerlite_cli.api.pagination import Deadline, fetch_all
from mailerlite_cli.ui import keys
from mailerlite_cli.ui.components import Cell, Column, DetailRow
from mailerlite_cli.ui.state import Command, FormsLoaded, ViewType
from mailerlite_cli.ui.views.base import FETCH_LIMIT, ResourceView, format_timestamp, yes_no


class FormType(StrEnum):
    POPUP = "popup"
    EMBEDDED = "embedded"
    PROMOTION = "promotion"

    @property
    def label(self) -> str:
        return self.value.capitalize()


_TAB_ORDER = list(FormType)


class FormsView(ResourceView[Form]):
    view_type = ViewType.FORMS
    loaded_message = FormsLoaded
    noun = "forms"
    chrome_rows = 4
    columns = [
        Column("NAME", 28),
        Column("TYPE", 12),
        Column("ACTIVE", 8),
        Column("CONVERSIONS", 12),
        Column("OPENS", 8),
    ]

    def __init__(self, client: Any | None) -> None:
        super().__init__(client)
        self.active_tab = FormType.POPUP

    def fetch_scope(self) -> FormType:
        return self.active_tab

    def load(self, client: Any, scope: FormType, deadline: Deadline) -> list[Form]:
        return fetch_all(
            lambda page, per_page: client.list_forms(
                scope.value, page, per_page, timeout=deadline.remaining()
            ),
            FETCH_LIMIT,
        )

    # -- tabs --

    def next_tab(self) -> None:
        index = _TAB_ORDER.index(self.active_tab)
        self.active_tab = _TAB_ORDER[(index + 1) % len(_TAB_ORDER)]

    def prev_tab(self) -> None:
        index = _TAB_ORDER.index(self.active_tab)
        self.active_tab = _TAB_ORDER[(index - 1) % len(_TAB_ORDER)]

    def handle_key(self, key: str) -> Command | None:
        if not self.showing_detail:
            if key in keys.TAB_NEXT:
                self.next_tab()
                return self.fetch()
            if key in keys.TAB_PREV:
                self.prev_tab()
                return self.fetch()
        return super().handle_key(key)

    # -- rows --

    def row(self, item: Form) -> list[Cell]:
        return [
            item.name,
            item.type,
            yes_no(item.active),
            str(item.conversions_count),
            str(item.opens_count),
        ]

    def detail_title(self, item: Form) -> str:
        return f"Form: {item.name}"

    def detail_rows(self, item: Form) -> list[DetailRow]:
        return [
            DetailRow("ID", item.id),
            DetailRow("Name", item.name),
            DetailRow("Type", item.type),
            DetailRow("Active", "Yes" if item.active else "No"),
            DetailRow("Conversions", str(item.conversions_count)),
            DetailRow("Conversion Rate", item.conversions_rate.text),
            DetailRow("Opens", str(item.opens_count)),
            DetailRow("Created", format_timestamp(item.created_at)),
        ]

    # -- rendering --

    def render_tabs(self) -> Text:
        strip = Text()
        for form_type in _TAB_ORDER:
            label = f" {form_type.label} "
            if form_type is self.active_tab:
                strip.append(label, style="bold reverse cyan")
            else:
                strip.append(label, style="dim")
            strip.append(" ")
        return strip

    def render_body(self) -> RenderableType:
        hint = Text(f"← → to switch types | {len(self.items)} forms", style="dim")
        return Group(self.render_tabs(), hint, Text(""), self.table.render())
