#!/usr/bin/env python3
"""
decorators.py
--------------------
Shared decorators for journal operations.
"""
from functools import wraps
from typing import Callable
from datetime import datetime

from friendlog.core.logging_manager import safe_logger


def log_journal_operation(operation_name: str):
    """
    Decorator to log journal operations with timing and context.

    Expects the decorated method's instance to carry a ``logger``
    attribute (a FriendsLogger or None).

    Args:
        operation_name: Name of the operation being logged

    Returns:
        Decorator function
    """

    def decorator(function: Callable) -> Callable:
        @wraps(function)
        def wrapper(self, *args, **kwargs):
            log = safe_logger(getattr(self, "logger", None))
            start_time = datetime.now()
            operation_id = f"{operation_name}_{start_time.strftime('%Y%m%d_%H%M%S_%f')}"

            log.log_debug(
                f"Starting {operation_name}",
                {"operation_id": operation_id, "args": [str(a) for a in args]},
            )

            try:
                result = function(self, *args, **kwargs)
            except Exception as e:
                log.log_error(
                    e,
                    {
                        "operation": operation_name,
                        "operation_id": operation_id,
                        "duration_seconds": (datetime.now() - start_time).total_seconds(),
                    },
                )
                raise

            log.log_operation(
                f"{operation_name}_completed",
                {
                    "operation_id": operation_id,
                    "duration_seconds": (datetime.now() - start_time).total_seconds(),
                    "success": True,
                },
            )
            return result

        return wrapper

    return decorator
