"""Helpers shared by the CLI commands."""

from __future__ import annotations

import json
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.markup import escape

from mailerlite_cli.api.client import MailerLiteClient
from mailerlite_cli.core.config import MailerLiteConfig, Profile, load_config_or_default
from mailerlite_cli.core.exceptions import ConfigError

console = Console()


@dataclass
class CliOptions:
    profile: str = ""
    verbose: bool = False
    config_path: Path | None = None


def get_options(ctx: click.Context) -> CliOptions:
    obj = ctx.find_object(CliOptions)
    return obj if obj is not None else CliOptions()


def load_settings(opts: CliOptions) -> tuple[MailerLiteConfig, Profile]:
    """Load config and resolve the profile, or print the error and exit 1."""
    try:
        config = load_config_or_default(opts.config_path)
        return config, config.resolve_profile(opts.profile)
    except ConfigError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        console.print("Set MAILERLITE_API_TOKEN or add a profile to ~/.mailerlite/config.toml")
        sys.exit(1)


def open_client(ctx: click.Context) -> MailerLiteClient:
    opts = get_options(ctx)
    _, profile = load_settings(opts)
    return MailerLiteClient(profile.api_token, profile.api_base_url, verbose=opts.verbose)


def print_json(items: list[Any]) -> None:
    print(json.dumps([asdict(item) for item in items], indent=2, default=str))
