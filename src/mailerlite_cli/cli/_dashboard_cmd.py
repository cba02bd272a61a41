"""CLI command: ``mailerlite dashboard``."""

from __future__ import annotations

import sys

import click
import structlog
from rich.markup import escape

from mailerlite_cli.cli._common import console, get_options, load_settings
from mailerlite_cli.core.config import load_config_or_default
from mailerlite_cli.core.exceptions import ConfigError
from mailerlite_cli.core.logging import configure_logging

logger = structlog.get_logger()


@click.command("dashboard")
@click.option(
    "--demo",
    is_flag=True,
    default=False,
    help="Run without an API client (empty views, no network).",
)
@click.pass_context
def dashboard_cmd(ctx: click.Context, demo: bool) -> None:
    """Launch the interactive MailerLite dashboard."""
    from mailerlite_cli.api.client import MailerLiteClient
    from mailerlite_cli.ui.app import run

    opts = get_options(ctx)

    if demo:
        try:
            config = load_config_or_default(opts.config_path)
        except ConfigError as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            sys.exit(1)
        client = None
        profile_name = "demo"
    else:
        config, profile = load_settings(opts)
        client = MailerLiteClient(profile.api_token, profile.api_base_url, verbose=opts.verbose)
        profile_name = profile.name

    # The dashboard owns the terminal; logs go to a file.
    level = "DEBUG" if opts.verbose else config.logging.level
    configure_logging(level, log_file=config.logging.log_path)
    logger.info("dashboard_started", profile=profile_name, demo=demo)

    try:
        code = run(client, profile_name)
    finally:
        if client is not None:
            client.close()

    logger.info("dashboard_stopped", profile=profile_name, return_code=code)
    if code:
        console.print(f"[red]Dashboard exited with status {code}.[/red]")
        sys.exit(code)
