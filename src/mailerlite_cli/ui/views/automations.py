"""Automations view."""

from __future__ import annotations

from typing import Any

from mailerlite_cli.api.models import Automation
from mailerlite_cli.api.pagination import Deadline, fetch_all
from mailerlite_cli.ui.components import Cell, Column, DetailRow
from mailerlite_cli.ui.state import AutomationsLoaded, ViewType
from mailerlite_cli.ui.views.base import FETCH_LIMIT, ResourceView, format_timestamp, yes_no


class AutomationsView(ResourceView[Automation]):
    view_type = ViewType.AUTOMATIONS
    loaded_message = AutomationsLoaded
    noun = "automations"
    columns = [
        Column("NAME", 30),
        Column("ENABLED", 9),
        Column("EMAILS", 8),
        Column("COMPLETED", 10),
        Column("IN QUEUE", 10),
    ]

    def load(self, client: Any, scope: Any, deadline: Deadline) -> list[Automation]:
        return fetch_all(
            lambda page, per_page: client.list_automations(
                page, per_page, timeout=deadline.remaining()
            ),
            FETCH_LIMIT,
        )

    def row(self, item: Automation) -> list[Cell]:
        return [
            item.name,
            yes_no(item.enabled),
            str(item.emails_count),
            str(item.stats.completed_subscribers_count),
            str(item.stats.subscribers_in_queue_count),
        ]

    def detail_title(self, item: Automation) -> str:
        return f"Automation: {item.name}"

    def detail_rows(self, item: Automation) -> list[DetailRow]:
        return [
            DetailRow("ID", item.id),
            DetailRow("Name", item.name),
            DetailRow("Enabled", "Yes" if item.enabled else "No"),
            DetailRow("Emails", str(item.emails_count)),
            DetailRow("Completed", str(item.stats.completed_subscribers_count)),
            DetailRow("In Queue", str(item.stats.subscribers_in_queue_count)),
            DetailRow("Sent", str(item.stats.sent)),
            DetailRow("Opens", str(item.stats.opens_count)),
            DetailRow("Clicks", str(item.stats.clicks_count)),
            DetailRow("Created", format_timestamp(item.created_at)),
        ]
