"""Campaigns view."""

from __future__ import annotations

from typing import Any

from mailerlite_cli.api.models import Campaign
from mailerlite_cli.api.pagination import Deadline, fetch_all
from mailerlite_cli.ui.components import Cell, Column, DetailRow
from mailerlite_cli.ui.state import CampaignsLoaded, ViewType
from mailerlite_cli.ui.views.base import FETCH_LIMIT, ResourceView, format_timestamp


class CampaignsView(ResourceView[Campaign]):
    view_type = ViewType.CAMPAIGNS
    loaded_message = CampaignsLoaded
    noun = "campaigns"
    columns = [
        Column("NAME", 28),
        Column("TYPE", 10),
        Column("STATUS", 12),
        Column("SENT", 8),
        Column("OPENS", 8),
        Column("CLICKS", 8),
    ]

    def load(self, client: Any, scope: Any, deadline: Deadline) -> list[Campaign]:
        return fetch_all(
            lambda page, per_page: client.list_campaigns(
                page, per_page, timeout=deadline.remaining()
            ),
            FETCH_LIMIT,
        )

    def row(self, item: Campaign) -> list[Cell]:
        return [
            item.name,
            item.type_for_humans,
            item.status,
            str(item.stats.sent),
            str(item.stats.opens_count),
            str(item.stats.clicks_count),
        ]

    def detail_title(self, item: Campaign) -> str:
        return f"Campaign: {item.name}"

    def detail_rows(self, item: Campaign) -> list[DetailRow]:
        rows = [
            DetailRow("ID", item.id),
            DetailRow("Name", item.name),
            DetailRow("Type", item.type_for_humans),
            DetailRow("Status", item.status),
            DetailRow("Sent", str(item.stats.sent)),
            DetailRow("Opens", str(item.stats.opens_count)),
            DetailRow("Clicks", str(item.stats.clicks_count)),
            DetailRow("Open Rate", item.stats.open_rate.text),
            DetailRow("Click Rate", item.stats.click_rate.text),
            DetailRow("Created", format_timestamp(item.created_at)),
        ]
        if item.scheduled_for:
            rows.append(DetailRow("Scheduled For", format_timestamp(item.scheduled_for)))
        return rows
