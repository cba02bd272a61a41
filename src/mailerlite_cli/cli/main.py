"""
mailerlite — command-line entry point.

    mailerlite [--profile NAME] [-v] [--config PATH] COMMAND

Commands:
  dashboard        interactive terminal dashboard
  subscriber list  campaign list  automation list  group list
  form list        segment list   segment subscribers
  profile list
"""

from __future__ import annotations

import os
from pathlib import Path

import click

from mailerlite_cli import __version__
from mailerlite_cli.cli._common import CliOptions
from mailerlite_cli.cli._dashboard_cmd import dashboard_cmd
from mailerlite_cli.cli._profile_cmd import profile_group
from mailerlite_cli.cli._resources_cmd import (
    automation_group,
    campaign_group,
    form_group,
    group_group,
    segment_group,
    subscriber_group,
)
from mailerlite_cli.core.logging import configure_logging


@click.group()
@click.version_option(__version__, prog_name="mailerlite")
@click.option("--profile", default="", help="Config profile to use (default: active_profile).")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log HTTP requests and responses.")
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to config.toml (default: ~/.mailerlite/config.toml).",
)
@click.pass_context
def cli(ctx: click.Context, profile: str, verbose: bool, config_path: Path | None) -> None:
    """MailerLite from the terminal."""
    level = "DEBUG" if verbose else os.environ.get("MAILERLITE_LOG_LEVEL", "WARNING")
    configure_logging(level)
    ctx.obj = CliOptions(profile=profile, verbose=verbose, config_path=config_path)


cli.add_command(dashboard_cmd)
cli.add_command(subscriber_group)
cli.add_command(campaign_group)
cli.add_command(automation_group)
cli.add_command(group_group)
cli.add_command(form_group)
cli.add_command(segment_group)
cli.add_command(profile_group)


def main() -> None:
    cli()
