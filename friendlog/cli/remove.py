"""
Remove Commands
---------------

Commands:
    - nickname: Remove a nickname from a friend
"""
import click

from friendlog.core.exceptions import FriendsError
from friendlog.core.logging_manager import handle_cli_error
from . import get_journal, mark_dirty, say


@click.group()
@click.pass_context
def remove(ctx: click.Context) -> None:
    """Remove nicknames."""
    pass


@remove.command("nickname")
@click.argument("name")
@click.argument("nickname")
@click.pass_context
def remove_nickname(ctx, name, nickname):
    """Remove NICKNAME from friend NAME."""
    try:
        journal = get_journal(ctx)
        canonical = journal.remove_nickname(name, nickname)
        mark_dirty(ctx)
        say(ctx, f"✅ Nickname removed: {canonical} is no longer '{nickname}'")

    except FriendsError as e:
        handle_cli_error(
            ctx, e, "remove_nickname", {"name": name, "nickname": nickname}
        )
