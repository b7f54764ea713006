#!/usr/bin/env python3
"""
name_matching.py
----------------
Name normalization used for friend uniqueness and @mention lookup.

Two keys are derived from every name or nickname:

    identity_key: "Grace Hopper" -> "grace hopper"
        Case-insensitive only. Two names with the same identity key are
        the same name; the journal never holds both.

    lookup_key: "Jean-Pierre_Martin" -> "jean pierre martin"
        Also treats hyphens, underscores and runs of whitespace as a
        single space, so "@Grace-Hopper" can find "Grace Hopper". Distinct
        names may share a lookup key ("Marc-Antoine" / "Marc Antoine");
        a mention that hits such a key is ambiguous.

Usage:
    from friendlog.utils.name_matching import identity_key, lookup_key, names_match

    identity_key("ANNA")            # "anna"
    lookup_key("Marc-Antoine")      # "marc antoine"
    names_match("anna", "Anna")     # True
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from typing import Dict, Iterable, List

_SEPARATORS = re.compile(r"[\s\-_]+")


def identity_key(name: str) -> str:
    """
    Case-insensitive identity of a name.

    Args:
        name: Friend name or nickname

    Returns:
        Casefolded, stripped name
    """
    if not name:
        return ""
    return name.strip().casefold()


def lookup_key(name: str) -> str:
    """
    Normalize a name for @mention matching.

    Transformations:
        - Casefold
        - Hyphens, underscores and whitespace runs become one space
        - Leading/trailing separators removed

    Args:
        name: Name, nickname or mention token

    Returns:
        Normalized key
    """
    if not name:
        return ""
    return _SEPARATORS.sub(" ", name.casefold()).strip()


def names_match(name: str, other: str) -> bool:
    """Check if two names are the same name (case-insensitively)."""
    return identity_key(name) == identity_key(other)


def sort_names(names: Iterable[str]) -> List[str]:
    """
    Sort names alphabetically, case-insensitively.

    Ties between names that differ only in case fall back to the raw
    string so the order is total.
    """
    return sorted(names, key=lambda n: (identity_key(n), n))


def build_lookup_table(aliases: Dict[str, Iterable[str]]) -> Dict[str, List[str]]:
    """
    Map every lookup key to the canonical names that own it.

    Args:
        aliases: Canonical name -> all of its spellings (name and nicknames)

    Returns:
        lookup key -> canonical names (more than one means ambiguous)

    Example:
        >>> build_lookup_table({"Grace Hopper": ["Grace Hopper", "The Admiral"]})
        {"grace hopper": ["Grace Hopper"], "the admiral": ["Grace Hopper"]}
    """
    table: Dict[str, List[str]] = {}
    for canonical, spellings in aliases.items():
        for spelling in spellings:
            key = lookup_key(spelling)
            if not key:
                continue
            owners = table.setdefault(key, [])
            if canonical not in owners:
                owners.append(canonical)
    return table
