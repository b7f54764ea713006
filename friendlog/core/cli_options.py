#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click option decorators for the friends CLI.

Usage:
    from friendlog.core.cli_options import limit_option, quiet_option

    @list_group.command("favorites")
    @limit_option(help_text="Number of favorites to show")
    def favorites(ctx, limit):
        pass
"""
import click

from friendlog.core.paths import LOG_DIR


# ═══════════════════════════════════════════════════════════════════════════
# GLOBAL OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

filename_option = click.option(
    "--filename",
    type=click.Path(dir_okay=False),
    default=None,
    help="Journal file to use (default: ./friends.md or config 'filename')",
)

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML config file (default: ~/.friendlog/config.yaml if present)",
)

log_dir_option = click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=None,
    help=f"Directory for log files (default: {LOG_DIR})",
)

quiet_option = click.option(
    "-q", "--quiet",
    is_flag=True,
    help="Suppress confirmation messages",
)

debug_option = click.option(
    "--debug",
    is_flag=True,
    help="Show full tracebacks on errors",
)


# ═══════════════════════════════════════════════════════════════════════════
# COMMAND OPTIONS (FACTORIES)
# ═══════════════════════════════════════════════════════════════════════════

def limit_option(help_text="Maximum number of results"):
    """
    Factory function for a result limit option.

    The default is None so commands can fall back to the configured limit.

    Args:
        help_text: Custom help text

    Returns:
        Click option decorator
    """
    return click.option(
        "-n", "--limit",
        type=int,
        default=None,
        help=help_text,
    )


date_option = click.option(
    "--date",
    "on",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Activity date as YYYY-MM-DD (default: today)",
)
