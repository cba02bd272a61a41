"""Groups view."""

from __future__ import annotations

from typing import Any

from mailerlite_cli.api.models import Group
from mailerlite_cli.api.pagination import Deadline, fetch_all
from mailerlite_cli.ui.components import Cell, Column, DetailRow
from mailerlite_cli.ui.state import GroupsLoaded, ViewType
from mailerlite_cli.ui.views.base import (
    FETCH_LIMIT,
    ResourceView,
    format_date,
    format_timestamp,
)


class GroupsView(ResourceView[Group]):
    view_type = ViewType.GROUPS
    loaded_message = GroupsLoaded
    noun = "groups"
    columns = [
        Column("NAME", 28),
        Column("ACTIVE", 8),
        Column("SENT", 8),
        Column("OPENS", 8),
        Column("CLICK RATE", 12),
        Column("CREATED", 12),
    ]

    def load(self, client: Any, scope: Any, deadline: Deadline) -> list[Group]:
        return fetch_all(
            lambda page, per_page: client.list_groups(page, per_page, timeout=deadline.remaining()),
            FETCH_LIMIT,
        )

    def row(self, item: Group) -> list[Cell]:
        return [
            item.name,
            str(item.active_count),
            str(item.sent_count),
            str(item.opens_count),
            item.click_rate.text,
            format_date(item.created_at),
        ]

    def detail_title(self, item: Group) -> str:
        return f"Group: {item.name}"

    def detail_rows(self, item: Group) -> list[DetailRow]:
        return [
            DetailRow("ID", item.id),
            DetailRow("Name", item.name),
            DetailRow("Active", str(item.active_count)),
            DetailRow("Sent", str(item.sent_count)),
            DetailRow("Opens", str(item.opens_count)),
            DetailRow("Open Rate", item.open_rate.text),
            DetailRow("Clicks", str(item.clicks_count)),
            DetailRow("Click Rate", item.click_rate.text),
            DetailRow("Unsubscribed", str(item.unsubscribed_count)),
            DetailRow("Bounced", str(item.bounced_count)),
            DetailRow("Created", format_timestamp(item.created_at)),
        ]
