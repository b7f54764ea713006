#!/usr/bin/env python3
"""
friends CLI
-----------

Command-line interface for the friends journal.

This module provides the main CLI group and shared context setup for all
commands. The journal is loaded once per run and passed to every command
through ``ctx.obj``; mutating commands only mark the run dirty, and the
file is written once after the command has succeeded.

Command Structure:
    - list friends | favorites | activities
    - add friend | activity | nickname
    - remove nickname
    - graph, suggest, clean, stats

Usage:
    # Get general help
    friends --help

    # Get help for a specific command group
    friends add --help

    # Use another journal file
    friends --filename ~/notes/friends.md list favorites --limit 5
"""
from pathlib import Path

import click

from friendlog import __version__
from friendlog.core.cli_options import (
    config_option,
    debug_option,
    filename_option,
    log_dir_option,
    quiet_option,
)
from friendlog.core.config import FriendsConfig, load_config
from friendlog.core.exceptions import FriendsError
from friendlog.core.logging_manager import FriendsLogger, handle_cli_error
from friendlog.journal import FriendsJournal, JournalAnalytics


@click.group()
@filename_option
@config_option
@log_dir_option
@quiet_option
@debug_option
@click.version_option(version=__version__, prog_name="friends")
@click.pass_context
def cli(ctx, filename, config_path, log_dir, quiet, debug):
    """Keep track of your friends and the things you do together."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["dirty"] = False

    try:
        config = load_config(Path(config_path) if config_path else None)
    except FriendsError as e:
        handle_cli_error(ctx, e, "load_config", {"config": config_path})

    ctx.obj["config"] = config
    ctx.obj["filename"] = Path(filename).expanduser() if filename else config.filename
    ctx.obj["logger"] = FriendsLogger(
        Path(log_dir) if log_dir else config.log_dir, "friends"
    )
    ctx.call_on_close(ctx.obj["logger"].close)


@cli.result_callback()
@click.pass_context
def save_if_dirty(ctx, *args, **kwargs):
    """Write the journal once, after a successful mutating command."""
    if not ctx.obj.get("dirty"):
        return

    journal: FriendsJournal = ctx.obj["journal"]
    try:
        path = journal.save()
    except OSError as e:
        handle_cli_error(ctx, e, "save", {"path": str(journal.path)})

    say(ctx, f"💾 Saved {path}")


def get_journal(ctx) -> FriendsJournal:
    """Get or load the journal for this run."""
    obj = ctx.find_root().obj
    if "journal" not in obj:
        obj["journal"] = FriendsJournal.load(obj["filename"], logger=obj.get("logger"))
    return obj["journal"]


def get_analytics(ctx) -> JournalAnalytics:
    """Analytics over the loaded journal, using the configured policy."""
    config: FriendsConfig = ctx.find_root().obj["config"]
    return JournalAnalytics(get_journal(ctx), policy=config.suggest)


def get_config(ctx) -> FriendsConfig:
    return ctx.find_root().obj["config"]


def mark_dirty(ctx) -> None:
    """Flag the run as mutating; the journal is saved once at the end."""
    ctx.find_root().obj["dirty"] = True


def say(ctx, message: str) -> None:
    """Echo a confirmation message unless --quiet was given."""
    if ctx.find_root().obj.get("quiet"):
        return
    click.echo(message)


# Import and register command modules
# These imports must come after CLI group definition
from .listing import list_group  # noqa: E402
from .add import add  # noqa: E402
from .remove import remove  # noqa: E402
from .maintenance import graph, suggest, clean, stats  # noqa: E402

# Register command groups
cli.add_command(list_group)
cli.add_command(add)
cli.add_command(remove)

# Register top-level commands
cli.add_command(graph)
cli.add_command(suggest)
cli.add_command(clean)
cli.add_command(stats)


if __name__ == "__main__":
    cli(obj={})
