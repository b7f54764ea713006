#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the friendlog project.

The journal itself lives wherever the user runs the command (``./friends.md``
by default); configuration and logs live under the user's home directory:

    ~/.friendlog/
    ├── config.yaml    # Optional CLI defaults
    └── logs/          # Operation and error logs

``FRIENDLOG_HOME`` overrides the home-directory location.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path


def _get_config_dir() -> Path:
    """Resolve the per-user configuration directory."""
    override = os.environ.get("FRIENDLOG_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".friendlog"


# ---- Journal ----
DEFAULT_JOURNAL_PATH = Path("friends.md")

# ---- Config & Logs ----
CONFIG_DIR: Path = _get_config_dir()
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.yaml"
LOG_DIR = CONFIG_DIR / "logs"
