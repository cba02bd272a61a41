"""
CLI commands: ``mailerlite <resource> list``.

Every list command drains the API through the same pagination fetchers the
dashboard uses.  ``--limit 0`` fetches everything.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any

import click
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from mailerlite_cli.api.client import FORM_TYPES, MailerLiteClient
from mailerlite_cli.api.pagination import fetch_all, fetch_all_cursor, fetch_all_string_cursor
from mailerlite_cli.cli._common import console, open_client, print_json
from mailerlite_cli.core.exceptions import MailerLiteCLIError

_limit_option = click.option(
    "--limit", default=25, show_default=True, type=click.IntRange(min=0), help="Max items (0 = all)."
)
_json_option = click.option("--json", "as_json", is_flag=True, default=False, help="Output as JSON")


def _list(
    ctx: click.Context,
    load: Callable[[MailerLiteClient], list[Any]],
    title: str,
    headers: list[str],
    to_row: Callable[[Any], list[str]],
    as_json: bool,
) -> None:
    client = open_client(ctx)
    try:
        items = load(client)
    except MailerLiteCLIError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)
    finally:
        client.close()

    if as_json:
        print_json(items)
        return

    if not items:
        console.print(f"[dim]No {title.lower()} found.[/dim]")
        return

    table = Table(title=title, show_lines=False)
    for i, header in enumerate(headers):
        table.add_column(header, style="cyan" if i == 0 else None, no_wrap=i == 0)
    for item in items:
        table.add_row(*(Text(cell) for cell in to_row(item)))
    console.print(table)


# ---------------------------------------------------------------------------
# subscriber
# ---------------------------------------------------------------------------


@click.group("subscriber")
def subscriber_group() -> None:
    """Subscribers."""


@subscriber_group.command("list")
@_limit_option
@click.option("--status", default="", help="Filter by status (active, unsubscribed, ...).")
@click.option("--email", default="", help="Filter by email address.")
@_json_option
@click.pass_context
def subscriber_list(ctx: click.Context, limit: int, status: str, email: str, as_json: bool) -> None:
    """List subscribers."""
    _list(
        ctx,
        lambda client: fetch_all_string_cursor(
            lambda cursor, per_page: client.list_subscribers(
                cursor, per_page, status=status, email=email
            ),
            limit,
        ),
        "Subscribers",
        ["ID", "EMAIL", "STATUS", "SOURCE", "OPENS", "CLICKS", "SUBSCRIBED AT"],
        lambda s: [
            s.id,
            s.email,
            s.status,
            s.source,
            str(s.opens_count),
            str(s.clicks_count),
            s.subscribed_at,
        ],
        as_json,
    )


# ---------------------------------------------------------------------------
# campaign
# ---------------------------------------------------------------------------


@click.group("campaign")
def campaign_group() -> None:
    """Campaigns."""


@campaign_group.command("list")
@_limit_option
@click.option("--status", default="", help="Filter by status (sent, draft, ready).")
@_json_option
@click.pass_context
def campaign_list(ctx: click.Context, limit: int, status: str, as_json: bool) -> None:
    """List campaigns."""
    _list(
        ctx,
        lambda client: fetch_all(
            lambda page, per_page: client.list_campaigns(page, per_page, status=status), limit
        ),
        "Campaigns",
        ["ID", "NAME", "TYPE", "STATUS", "SENT", "OPEN RATE", "CLICK RATE", "CREATED AT"],
        lambda c: [
            c.id,
            c.name,
            c.type_for_humans,
            c.status,
            str(c.stats.sent),
            c.stats.open_rate.text,
            c.stats.click_rate.text,
            c.created_at,
        ],
        as_json,
    )


# ---------------------------------------------------------------------------
# automation
# ---------------------------------------------------------------------------


@click.group("automation")
def automation_group() -> None:
    """Automations."""


@automation_group.command("list")
@_limit_option
@_json_option
@click.pass_context
def automation_list(ctx: click.Context, limit: int, as_json: bool) -> None:
    """List automations."""
    _list(
        ctx,
        lambda client: fetch_all(client.list_automations, limit),
        "Automations",
        ["ID", "NAME", "ENABLED", "EMAILS", "COMPLETED", "IN QUEUE", "CREATED AT"],
        lambda a: [
            a.id,
            a.name,
            "yes" if a.enabled else "no",
            str(a.emails_count),
            str(a.stats.completed_subscribers_count),
            str(a.stats.subscribers_in_queue_count),
            a.created_at,
        ],
        as_json,
    )


# ---------------------------------------------------------------------------
# group
# ---------------------------------------------------------------------------


@click.group("group")
def group_group() -> None:
    """Subscriber groups."""


@group_group.command("list")
@_limit_option
@_json_option
@click.pass_context
def group_list(ctx: click.Context, limit: int, as_json: bool) -> None:
    """List groups."""
    _list(
        ctx,
        lambda client: fetch_all(client.list_groups, limit),
        "Groups",
        ["ID", "NAME", "ACTIVE", "SENT", "OPEN RATE", "CLICK RATE", "CREATED AT"],
        lambda g: [
            g.id,
            g.name,
            str(g.active_count),
            str(g.sent_count),
            g.open_rate.text,
            g.click_rate.text,
            g.created_at,
        ],
        as_json,
    )


# ---------------------------------------------------------------------------
# form
# ---------------------------------------------------------------------------


@click.group("form")
def form_group() -> None:
    """Signup forms."""


@form_group.command("list")
@click.option(
    "--type",
    "form_type",
    default="popup",
    show_default=True,
    type=click.Choice(FORM_TYPES),
    help="Form type.",
)
@_limit_option
@_json_option
@click.pass_context
def form_list(ctx: click.Context, form_type: str, limit: int, as_json: bool) -> None:
    """List forms of one type."""
    _list(
        ctx,
        lambda client: fetch_all(
            lambda page, per_page: client.list_forms(form_type, page, per_page), limit
        ),
        "Forms",
        ["ID", "NAME", "TYPE", "ACTIVE", "CONVERSIONS", "CONVERSION RATE", "OPENS"],
        lambda f: [
            f.id,
            f.name,
            f.type,
            "yes" if f.active else "no",
            str(f.conversions_count),
            f.conversions_rate.text,
            str(f.opens_count),
        ],
        as_json,
    )


# ---------------------------------------------------------------------------
# segment
# ---------------------------------------------------------------------------


@click.group("segment")
def segment_group() -> None:
    """Segments."""


@segment_group.command("list")
@_limit_option
@_json_option
@click.pass_context
def segment_list(ctx: click.Context, limit: int, as_json: bool) -> None:
    """List segments."""
    _list(
        ctx,
        lambda client: fetch_all(client.list_segments, limit),
        "Segments",
        ["ID", "NAME", "TOTAL", "OPEN RATE", "CLICK RATE", "CREATED AT"],
        lambda s: [
            s.id,
            s.name,
            str(s.total),
            s.open_rate.text,
            s.click_rate.text,
            s.created_at,
        ],
        as_json,
    )


@segment_group.command("subscribers")
@click.argument("segment_id")
@_limit_option
@_json_option
@click.pass_context
def segment_subscribers(ctx: click.Context, segment_id: str, limit: int, as_json: bool) -> None:
    """List the subscribers in a segment."""
    _list(
        ctx,
        lambda client: fetch_all_cursor(
            lambda after, per_page: client.list_segment_subscribers(segment_id, after, per_page),
            limit,
        ),
        "Segment subscribers",
        ["ID", "EMAIL", "STATUS", "SUBSCRIBED AT", "CREATED AT"],
        lambda s: [s.id, s.email, s.status, s.subscribed_at, s.created_at],
        as_json,
    )
