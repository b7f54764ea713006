#!/usr/bin/env python3
"""
friend.py
-------------------
Dataclass representing a friend and their nicknames.

A friend's identity is the canonical name (compared case-insensitively).
Nicknames are aliases used only to resolve @mentions and name lookups;
they are never displayed in place of the name.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from typing import List

# --- Local imports ---
from friendlog.utils import parsers
from friendlog.utils.name_matching import identity_key, names_match


@dataclass
class Friend:
    """
    A friend in the journal.

    Attributes:
        name: Canonical name
        nicknames: Aliases, in the order they were added
    """

    name: str
    nicknames: List[str] = field(default_factory=list)

    @property
    def key(self) -> str:
        """Case-insensitive identity of this friend."""
        return identity_key(self.name)

    @property
    def spellings(self) -> List[str]:
        """Canonical name followed by every nickname."""
        return [self.name, *self.nicknames]

    def has_nickname(self, nickname: str) -> bool:
        """Check whether the friend has a nickname (case-insensitively)."""
        return any(names_match(n, nickname) for n in self.nicknames)

    def answers_to(self, name: str) -> bool:
        """Check whether a name or nickname refers to this friend."""
        return any(names_match(s, name) for s in self.spellings)

    def to_line(self) -> str:
        """Render the friend's bullet for the Friends section."""
        return parsers.format_friend_line(self.name, self.nicknames)

    def __str__(self) -> str:
        return self.name
