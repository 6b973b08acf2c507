"""Command-line entry point."""

from __future__ import annotations

import click

from .config import ConfigError, get_config
from .first_run import ensure_app_can_run
from .launcher import launch_project
from .scanner import scan_project_directories
from .selector import SelectionCancelled, SelectionError, get_selection_from_user

VERSION = "Development"
PROG_NAME = "tmux-too-young"


@click.group()
@click.version_option(VERSION, prog_name=PROG_NAME)
def cli() -> None:
    """The Very Special tmux Session Opener..."""


@cli.command("open")
@click.option("--search", "-s", default="", help="Initial search term.")
@click.pass_context
def open_command(ctx: click.Context, search: str) -> None:
    """Open a tmux session."""
    ensure_app_can_run()
    try:
        configuration = get_config()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    projects = scan_project_directories(configuration)
    try:
        selected = get_selection_from_user(projects, search)
    except SelectionCancelled:
        ctx.exit(0)
    except SelectionError as exc:
        raise click.ClickException(str(exc)) from exc
    launch_project(selected)


def main(argv=None):
    """Run the command line with the given arguments."""
    return cli.main(args=argv, prog_name=PROG_NAME)