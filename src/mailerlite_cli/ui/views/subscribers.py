"""Subscribers view — string-cursor paginated subscriber list."""

from __future__ import annotations

from typing import Any

from rich.text import Text

from mailerlite_cli.api.models import Subscriber
from mailerlite_cli.api.pagination import Deadline, fetch_all_string_cursor
from mailerlite_cli.ui.components import Cell, Column, DetailRow
from mailerlite_cli.ui.state import SubscribersLoaded, ViewType
from mailerlite_cli.ui.views.base import (
    FETCH_LIMIT,
    ResourceView,
    format_date,
    format_timestamp,
)

_BADGES = {
    "active": ("active", "green"),
    "unsubscribed": ("unsub", "yellow"),
    "unconfirmed": ("unconf", "cyan"),
    "bounced": ("bounced", "red"),
    "junk": ("junk", "red"),
}


def status_badge(status: str) -> Text:
    label, style = _BADGES.get(status, (status, ""))
    return Text(label, style=style)


class SubscribersView(ResourceView[Subscriber]):
    view_type = ViewType.SUBSCRIBERS
    loaded_message = SubscribersLoaded
    noun = "subscribers"
    columns = [
        Column("EMAIL", 30),
        Column("STATUS", 10),
        Column("SOURCE", 12),
        Column("OPENS", 8),
        Column("CLICKS", 8),
        Column("SUBSCRIBED", 12),
    ]

    def load(self, client: Any, scope: Any, deadline: Deadline) -> list[Subscriber]:
        return fetch_all_string_cursor(
            lambda cursor, per_page: client.list_subscribers(
                cursor, per_page, timeout=deadline.remaining()
            ),
            FETCH_LIMIT,
        )

    def row(self, item: Subscriber) -> list[Cell]:
        return [
            item.email,
            status_badge(item.status),
            item.source,
            str(item.opens_count),
            str(item.clicks_count),
            format_date(item.subscribed_at),
        ]

    def detail_title(self, item: Subscriber) -> str:
        return f"Subscriber: {item.email}"

    def detail_rows(self, item: Subscriber) -> list[DetailRow]:
        return [
            DetailRow("ID", item.id),
            DetailRow("Email", item.email),
            DetailRow("Status", item.status),
            DetailRow("Source", item.source),
            DetailRow("Opens", str(item.opens_count)),
            DetailRow("Clicks", str(item.clicks_count)),
            DetailRow("Open Rate", f"{item.open_rate:.1f}%"),
            DetailRow("Click Rate", f"{item.click_rate:.1f}%"),
            DetailRow("Subscribed", format_timestamp(item.subscribed_at)),
        ]
