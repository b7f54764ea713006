#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Rotating file logs for journal mutations, and the CLI's error exit path.

Each run writes two files under the log directory:

    <component>.log   every operation, at DEBUG and above
    errors.log        failures only, with context and traceback

Engine code never checks whether it was given a logger: ``safe_logger``
hands back a shared no-op stand-in when it was not.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click

_FILE_FORMAT = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
_CONSOLE_FORMAT = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
)


def _with_details(label: str, message: str, details: Optional[Dict[str, Any]]) -> str:
    if not details:
        return f"{label} - {message}"
    return f"{label} - {message}: {json.dumps(details, default=str)}"


def format_cli_error(error: Exception, show_traceback: bool = False) -> str:
    """
    One-line terminal message for a failed command.

    Examples:
        >>> format_cli_error(NotFoundError("No friend found for 'Bob'"))
        "❌ NotFoundError: No friend found for 'Bob'"
    """
    message = f"❌ {type(error).__name__}: {error}"
    if show_traceback:
        return f"{message}\n\n{traceback.format_exc()}"
    return message


class FriendsLogger:
    """
    Operation and error logs for one component, rotated by size.

    Warnings from the operations logger are echoed to stderr as well.
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "friends",
        max_bytes: int = 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.main_logger = self._file_logger(
            "operations", f"{component_name}.log", logging.DEBUG
        )
        self.error_logger = self._file_logger("errors", "errors.log", logging.ERROR)

        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(_CONSOLE_FORMAT)
        self.main_logger.addHandler(console)

    def _file_logger(self, suffix: str, filename: str, level: int) -> logging.Logger:
        logger = logging.getLogger(f"{self.component_name}.{suffix}")
        logger.setLevel(level)
        # A second instance for the same component replaces, not duplicates
        logger.handlers = []

        handler = RotatingFileHandler(
            self.log_dir / filename,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(_FILE_FORMAT)
        logger.addHandler(handler)
        return logger

    def close(self) -> None:
        """Flush and release the log files."""
        for logger in (self.main_logger, self.error_logger):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.info(_with_details("OPERATION", operation, details))

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.debug(_with_details("DEBUG", message, details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.info(_with_details("INFO", message, details))

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """Write the error, its context as ``key=value`` pairs and the traceback."""
        self.error_logger.error(f"ERROR - {type(error).__name__}: {error}")
        if context:
            pairs = ", ".join(f"{k}={v}" for k, v in context.items())
            self.error_logger.error(f"Context: {pairs}")
        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """Log the error to errors.log and return its terminal message."""
        self.log_error(error, context or {"source": "cli"})
        return format_cli_error(error, show_traceback)


class NullLogger:
    """Stand-in with FriendsLogger's methods that writes nothing."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return format_cli_error(error, show_traceback)


_null_logger = NullLogger()


def safe_logger(logger: Optional[FriendsLogger]) -> FriendsLogger:
    """Return ``logger``, or the shared NullLogger when it is None."""
    return logger if logger is not None else _null_logger  # type: ignore[return-value]


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Log a command failure, print it to stderr and exit.

    The logger and the ``--debug`` flag come from ``ctx.obj``; with
    ``--debug`` the traceback is printed too. Never returns.

    Args:
        ctx: Click context of the failing command
        error: Exception that stopped the command
        operation: Command name recorded in the error context
        additional_context: Extra ``key=value`` pairs for errors.log
        exit_code: Process exit status
    """
    obj = ctx.obj or {}
    context = {"operation": operation, **(additional_context or {})}

    message = safe_logger(obj.get("logger")).log_cli_error(
        error, context, show_traceback=obj.get("debug", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code)
