"""
Listing Commands
----------------

Read-only views of the journal.

Commands:
    - friends: All friends, alphabetically
    - favorites: Most active friends with activity counts
    - activities: Most recent activities, optionally with one friend
"""
import click

from friendlog.core.cli_options import limit_option
from friendlog.core.exceptions import FriendsError
from friendlog.core.logging_manager import handle_cli_error
from . import get_analytics, get_config, get_journal


@click.group("list")
@click.pass_context
def list_group(ctx: click.Context) -> None:
    """List friends, favorites or activities."""
    pass


@list_group.command("friends")
@click.pass_context
def friends(ctx):
    """List all friends alphabetically."""
    try:
        journal = get_journal(ctx)
        for friend in journal.friends:
            click.echo(str(friend))

    except FriendsError as e:
        handle_cli_error(ctx, e, "list_friends")


@list_group.command("favorites")
@limit_option(help_text="Number of favorites to show")
@click.pass_context
def favorites(ctx, limit):
    """List your most active friends."""
    try:
        if limit is None:
            limit = get_config(ctx).favorites_limit
        analytics = get_analytics(ctx)

        ranked = analytics.favorite_counts(limit)
        if not ranked:
            return

        width = len(str(len(ranked)))
        for position, (name, count) in enumerate(ranked, 1):
            noun = "activity" if count == 1 else "activities"
            click.echo(f"{position:>{width}}. {name} ({count} {noun})")

    except FriendsError as e:
        handle_cli_error(ctx, e, "list_favorites", {"limit": limit})


@list_group.command("activities")
@limit_option(help_text="Number of activities to show")
@click.option("--with", "with_friend", default=None, help="Only activities with this friend")
@click.pass_context
def activities(ctx, limit, with_friend):
    """List your most recent activities."""
    try:
        if limit is None:
            limit = get_config(ctx).activities_limit
        analytics = get_analytics(ctx)

        for line in analytics.list_activities(limit=limit, with_friend=with_friend):
            click.echo(line)

    except FriendsError as e:
        handle_cli_error(
            ctx, e, "list_activities", {"limit": limit, "with": with_friend}
        )
