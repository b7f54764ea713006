"""
Add Commands
------------

Commands that add friends, activities and nicknames.

Commands:
    - friend: Add a new friend
    - activity: Record something you did (prompts when no text is given)
    - nickname: Give a friend another name

Every command only changes the loaded journal; the file is written once
by the CLI group after the command succeeds.
"""
import click

from friendlog.core.cli_options import date_option
from friendlog.core.exceptions import FriendsError
from friendlog.core.logging_manager import handle_cli_error
from . import get_journal, mark_dirty, say


@click.group()
@click.pass_context
def add(ctx: click.Context) -> None:
    """Add friends, activities and nicknames."""
    pass


@add.command("friend")
@click.argument("name", nargs=-1, required=True)
@click.pass_context
def add_friend(ctx, name):
    """Add a new friend named NAME."""
    name = " ".join(name)
    try:
        journal = get_journal(ctx)
        friend = journal.add_friend(name)
        mark_dirty(ctx)
        say(ctx, f"✅ Friend added: {friend.name}")

    except FriendsError as e:
        handle_cli_error(ctx, e, "add_friend", {"name": name})


@add.command("activity")
@click.argument("description", nargs=-1)
@date_option
@click.pass_context
def add_activity(ctx, description, on):
    """
    Record an activity.

    Mention friends with @Name, @Nickname or @"Full Name". Without a
    DESCRIPTION you are prompted for one.
    """
    description = " ".join(description)
    try:
        journal = get_journal(ctx)
        activity = journal.add_activity(description, on=on)

        if not activity.description:
            text = click.prompt(
                f"What did you do on {activity.display()}?",
                default="",
                show_default=False,
            )
            journal.set_description(activity, text)

        mark_dirty(ctx)
        say(ctx, f"✅ Activity added: {activity.display()}")
        if activity.friends:
            say(ctx, f"👥 With: {', '.join(activity.friends)}")

    except FriendsError as e:
        handle_cli_error(
            ctx,
            e,
            "add_activity",
            {"description": description, "date": on.date() if on else None},
        )


@add.command("nickname")
@click.argument("name")
@click.argument("nickname")
@click.pass_context
def add_nickname(ctx, name, nickname):
    """Give friend NAME the nickname NICKNAME."""
    try:
        journal = get_journal(ctx)
        canonical = journal.add_nickname(name, nickname)
        mark_dirty(ctx)
        say(ctx, f"✅ Nickname added: {canonical} (a.k.a. {nickname})")

    except FriendsError as e:
        handle_cli_error(ctx, e, "add_nickname", {"name": name, "nickname": nickname})
