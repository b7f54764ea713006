"""
Analytics & Maintenance Commands
--------------------------------

Commands:
    - graph: Monthly activity chart for one friend
    - suggest: Friends you might want to reach out to
    - clean: Rewrite the journal file in canonical form
    - stats: Journal statistics
"""
import random

import click

from friendlog.core.exceptions import FriendsError
from friendlog.core.logging_manager import handle_cli_error
from friendlog.utils.charts import ascii_bar_chart
from . import get_analytics, get_config, get_journal, say

_BUCKET_TITLES = (
    ("distant", "🕰️  Haven't seen in a while"),
    ("moderate", "📆 Due for a catch-up"),
    ("close", "🤝 Seen recently"),
)


@click.command()
@click.argument("name", nargs=-1, required=True)
@click.pass_context
def graph(ctx, name):
    """Show how often you've done things with NAME, month by month."""
    name = " ".join(name)
    try:
        analytics = get_analytics(ctx)
        friend = get_journal(ctx).find_friend(name)
        series = analytics.graph(name)

        if not series:
            click.echo(f"⚠️  No activities with {friend.name} yet")
            return

        click.echo(f"\n📈 Activities with {friend.name}:\n")
        for line in ascii_bar_chart(series):
            click.echo(f"  {line}")

    except FriendsError as e:
        handle_cli_error(ctx, e, "graph", {"name": name})


@click.command()
@click.option(
    "-c", "--count",
    type=int,
    default=None,
    help="Friends to suggest per group (default: 5 or config 'suggest_count')",
)
@click.pass_context
def suggest(ctx, count):
    """Suggest friends to reach out to, by how long it has been."""
    try:
        if count is None:
            count = get_config(ctx).suggest_count
        buckets = get_analytics(ctx).suggest().to_dict()

        if not any(buckets.values()):
            click.echo("⚠️  No activities recorded yet")
            return

        for bucket, title in _BUCKET_TITLES:
            names = buckets[bucket]
            if not names or count <= 0:
                continue
            picks = random.sample(names, min(count, len(names)))
            click.echo(f"\n{title}:")
            for name in picks:
                click.echo(f"  • {name}")

    except FriendsError as e:
        handle_cli_error(ctx, e, "suggest", {"count": count})


@click.command()
@click.pass_context
def clean(ctx):
    """Rewrite the journal file in canonical form."""
    try:
        journal = get_journal(ctx)
        path = journal.clean()
        say(ctx, f"🧹 File cleaned: {path}")

    except (FriendsError, OSError) as e:
        handle_cli_error(ctx, e, "clean")


@click.command()
@click.pass_context
def stats(ctx):
    """Display journal statistics."""
    try:
        summary = get_analytics(ctx).stats()

        click.echo("\n📊 Journal Statistics:\n")
        click.echo(f"  Friends: {summary['total_friends']}")
        click.echo(f"  Activities: {summary['total_activities']}")
        click.echo(f"  Elapsed days: {summary['elapsed_days']}")
        if "first_activity" in summary:
            click.echo(f"  First activity: {summary['first_activity']}")
            click.echo(f"  Last activity: {summary['last_activity']}")

    except FriendsError as e:
        handle_cli_error(ctx, e, "stats")
