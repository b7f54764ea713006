#!/usr/bin/env python3
"""
parsers.py
--------------------
Parsing utilities for the journal's line formats.

Functions:
    extract_name_and_expansion: Parse "Name (expansion)" format
    split_nicknames: Split "a.k.a. X a.k.a. Y" into ["X", "Y"]
    format_friend_line: Render "- Name (a.k.a. X a.k.a. Y)"
    parse_friend_line: Parse a friend bullet back into name and nicknames
    name_problem: Explain why a name cannot be stored in the journal
    format_mention: Render a canonical @mention for a friend name
    spaces_to_hyphenated: Convert spaces to hyphens (smart handling)

Usage:
    from friendlog.utils.parsers import parse_friend_line, format_mention

    name, nicknames = parse_friend_line("- Grace Hopper (a.k.a. The Admiral)")
    # ("Grace Hopper", ["The Admiral"])

    format_mention("Grace Hopper")  # '@Grace-Hopper'
    format_mention("O'Brien")       # '@"O\\'Brien"'
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from typing import List, Optional, Sequence, Tuple

NICKNAME_SEPARATOR = "a.k.a."
RESERVED_NAME_CHARS = ('"', "(", ")", "@", "\n", "\r")

_BARE_MENTION_NAME = re.compile(r"^\w+(?:[ \-]\w+)*$")
_NICKNAME_SPLIT = re.compile(r"\s*\ba\.k\.a\.\s*", re.IGNORECASE)


def extract_name_and_expansion(text: str) -> Tuple[str, Optional[str]]:
    """
    Extract name and expansion from text with optional parenthetical notation.

    Handles format: "Name (Expansion)" or just "Name"

    Args:
        text: Text potentially containing parenthetical expansion

    Returns:
        Tuple of (name, expansion) where expansion is None if no parentheses

    Examples:
        >>> extract_name_and_expansion("Grace Hopper (a.k.a. The Admiral)")
        ('Grace Hopper', 'a.k.a. The Admiral')
        >>> extract_name_and_expansion("Anna")
        ('Anna', None)
    """
    text = text.strip()

    if "(" in text and text.endswith(")"):
        name, expansion = text.split("(", 1)
        return name.strip(), expansion[:-1].strip()

    return text, None


def split_nicknames(expansion: str) -> List[str]:
    """
    Split an "a.k.a." expansion into nicknames.

    Examples:
        >>> split_nicknames("a.k.a. The Admiral a.k.a. Amazing Grace")
        ['The Admiral', 'Amazing Grace']
        >>> split_nicknames("")
        []
    """
    parts = _NICKNAME_SPLIT.split(expansion.strip())
    return [p.strip() for p in parts if p.strip()]


def format_friend_line(name: str, nicknames: Sequence[str]) -> str:
    """
    Render a friend bullet.

    Examples:
        >>> format_friend_line("Anna", [])
        '- Anna'
        >>> format_friend_line("Anna", ["Banana", "Annie"])
        '- Anna (a.k.a. Banana a.k.a. Annie)'
    """
    if not nicknames:
        return f"- {name}"
    akas = " ".join(f"{NICKNAME_SEPARATOR} {n}" for n in nicknames)
    return f"- {name} ({akas})"


def parse_friend_line(line: str) -> Tuple[str, List[str]]:
    """
    Parse a friend bullet into its name and nicknames.

    Args:
        line: Line starting with "- " or "* "

    Returns:
        Tuple of (name, nicknames); name is "" for a malformed bullet
    """
    body = line.strip()
    if body.startswith(("-", "*")):
        body = body[1:]
    name, expansion = extract_name_and_expansion(body)
    if expansion is None:
        return name, []
    return name, split_nicknames(expansion)


def name_problem(name: str) -> Optional[str]:
    """
    Say why a friend name or nickname cannot be stored, or None if it can.

    A stored name has to survive the friend line and every @mention form:
    it cannot hold quotes, parentheses, '@' or the nickname separator, and
    cannot start like a bullet or header. Leading or trailing '-' and '_'
    would be read back as plain text after a bare mention.

    Examples:
        >>> name_problem("Jean-Pierre")
        >>> name_problem("Kim_")
        "cannot end with '_'"
    """
    bad = [c for c in RESERVED_NAME_CHARS if c in name]
    if bad:
        return f"cannot contain {', '.join(repr(c) for c in bad)}"
    if NICKNAME_SEPARATOR in name.lower():
        return f"cannot contain '{NICKNAME_SEPARATOR}'"
    if name.startswith(("-", "_", "*", "#")):
        return f"cannot start with '{name[0]}'"
    if name.endswith(("-", "_")):
        return f"cannot end with '{name[-1]}'"
    return None


def format_mention(name: str, quoted: bool = False) -> str:
    """
    Render the canonical @mention for a friend name.

    Names made only of word characters, spaces and hyphens use the bare
    hyphenated form; anything else (apostrophes, dots, ...) is quoted.

    Examples:
        >>> format_mention("Anna")
        '@Anna'
        >>> format_mention("Grace Hopper")
        '@Grace-Hopper'
        >>> format_mention("Jean-Pierre Martin")
        '@Jean-Pierre_Martin'
        >>> format_mention("Dr. Who")
        '@"Dr. Who"'
    """
    if quoted or not _BARE_MENTION_NAME.match(name):
        return f'@"{name}"'
    return f"@{spaces_to_hyphenated(name)}"


def spaces_to_hyphenated(text: str) -> str:
    """
    Convert spaces to hyphens, preserving existing hyphens with underscores.

    Examples:
        >>> spaces_to_hyphenated("Grace Hopper")
        'Grace-Hopper'
        >>> spaces_to_hyphenated("Jean-Pierre Martin")
        'Jean-Pierre_Martin'
    """
    if not text:
        return text

    if "-" in text:
        return text.replace(" ", "_")
    return text.replace(" ", "-")
