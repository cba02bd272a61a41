"""CLI commands: ``mailerlite profile add|list|switch|remove``."""

from __future__ import annotations

import json
import os
import sys

import click
from rich.markup import escape
from rich.table import Table

from mailerlite_cli.cli._common import CliOptions, console, get_options
from mailerlite_cli.core.config import (
    MailerLiteConfig,
    Profile,
    default_config_path,
    load_config_or_default,
    save_config,
)
from mailerlite_cli.core.exceptions import ConfigError


def _mask(token: str) -> str:
    if len(token) <= 8:
        return "*" * len(token)
    return f"{token[:4]}…{token[-4:]}"


def _load(opts: CliOptions) -> MailerLiteConfig:
    # The file as written; env overrides must not leak into a save.
    try:
        return load_config_or_default(opts.config_path, apply_env=False)
    except ConfigError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


def _require(config: MailerLiteConfig, name: str) -> None:
    if name not in config.profiles:
        console.print(f"[red]Profile {escape(repr(name))} not found.[/red]")
        sys.exit(1)


@click.group("profile")
def profile_group() -> None:
    """Manage authentication profiles."""


@profile_group.command("add")
@click.argument("name")
@click.option("--token", prompt="API token", hide_input=True, help="API token for this profile.")
@click.option("--base-url", default="", help="API base URL (defaults to the public API).")
@click.option("--yes", "-y", is_flag=True, default=False, help="Overwrite without asking.")
@click.pass_context
def profile_add(ctx: click.Context, name: str, token: str, base_url: str, yes: bool) -> None:
    """Add a profile, or replace one with the same name."""
    opts = get_options(ctx)
    if not token:
        console.print("[red]Error: --token is required[/red]")
        sys.exit(1)

    config = _load(opts)
    if name in config.profiles and not yes:
        if not click.confirm(f"Profile {name!r} already exists. Overwrite?", default=False):
            return

    # First profile in an empty config becomes the active one.
    if config.active_profile not in config.profiles:
        config.active_profile = name
    config.profiles[name] = Profile(name=name, api_token=token, base_url=base_url)

    path = save_config(config, opts.config_path)
    console.print(f"[green]Profile added:[/green] {escape(name)} [dim]({path})[/dim]")


@profile_group.command("list")
@click.option("--json", "as_json", is_flag=True, default=False, help="Output as JSON")
@click.pass_context
def profile_list(ctx: click.Context, as_json: bool) -> None:
    """List profiles from the config file."""
    opts = get_options(ctx)
    try:
        config = load_config_or_default(opts.config_path)
    except ConfigError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    rows = [
        {
            "name": p.name,
            "active": p.name == config.active_profile,
            "base_url": p.api_base_url,
            "token": _mask(p.api_token),
        }
        for p in sorted(config.profiles.values(), key=lambda p: p.name)
    ]

    if as_json:
        print(json.dumps(rows, indent=2))
        return

    if not rows:
        path = opts.config_path or default_config_path()
        console.print(f"[dim]No profiles configured in {path}.[/dim]")
        console.print("[dim]Run 'mailerlite profile add <name>' to create one.[/dim]")
        if os.environ.get("MAILERLITE_API_TOKEN"):
            console.print("[dim]Using MAILERLITE_API_TOKEN from the environment.[/dim]")
        return

    table = Table(title="Profiles", show_lines=False)
    table.add_column("Name", style="cyan")
    table.add_column("Active", justify="center")
    table.add_column("Base URL", style="dim")
    table.add_column("Token", style="dim")
    for row in rows:
        table.add_row(
            escape(row["name"]),
            "[green]●[/green]" if row["active"] else "",
            escape(row["base_url"]),
            row["token"],
        )
    console.print(table)


@profile_group.command("switch")
@click.argument("name")
@click.pass_context
def profile_switch(ctx: click.Context, name: str) -> None:
    """Make NAME the active profile."""
    opts = get_options(ctx)
    config = _load(opts)
    _require(config, name)

    config.active_profile = name
    save_config(config, opts.config_path)
    console.print(f"[green]Switched to profile:[/green] {escape(name)}")


@profile_group.command("remove")
@click.argument("name")
@click.option("--yes", "-y", is_flag=True, default=False, help="Remove without asking.")
@click.pass_context
def profile_remove(ctx: click.Context, name: str, yes: bool) -> None:
    """Delete a profile from the config file."""
    opts = get_options(ctx)
    config = _load(opts)
    _require(config, name)

    if not yes and not click.confirm(f"Remove profile {name!r}?", default=False):
        return

    del config.profiles[name]
    if config.active_profile == name:
        remaining = sorted(config.profiles)
        config.active_profile = remaining[0] if remaining else ""

    save_config(config, opts.config_path)
    console.print(f"[green]Removed:[/green] {escape(name)}")
