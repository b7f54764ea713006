#!/usr/bin/env python3
"""
activity.py
-------------------
Dataclass representing one shared activity.

An activity is a dated, free-text description. The friends it involves are
derived from the @mentions in the description by the MentionResolver; the
description itself is stored with every mention in canonical form.
Activities carry no key: they are identified by their place in the
journal's most-recent-first order.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import date
from typing import List

# --- Local imports ---
from friendlog.utils.name_matching import identity_key
from friendlog.utils.txt import format_date


@dataclass
class Activity:
    """
    A dated activity shared with zero or more friends.

    Attributes:
        date: Day the activity happened
        description: Free text with canonical @mentions
        friends: Canonical names mentioned, in order of first mention
    """

    date: date
    description: str = ""
    friends: List[str] = field(default_factory=list)

    def involves(self, name: str) -> bool:
        """Check whether the activity mentions a friend (canonical name)."""
        target = identity_key(name)
        return any(identity_key(f) == target for f in self.friends)

    def to_line(self) -> str:
        """Render the activity's bullet for the Activities section."""
        return f"- {self.description}".rstrip()

    def display(self) -> str:
        """Render for listings, e.g. "March 3rd, 2024: Lunch with @Anna"."""
        if not self.description:
            return format_date(self.date)
        return f"{format_date(self.date)}: {self.description}"

    def __str__(self) -> str:
        return self.display()
