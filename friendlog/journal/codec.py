#!/usr/bin/env python3
"""
codec.py
--------
Parsing and canonical serialization of the journal file.

The journal is a single human-editable Markdown file:

    # Friends

    - Anna (a.k.a. Banana)
    - Grace Hopper

    # Activities

    ## March 3rd, 2024

    - Lunch with @Anna and @Grace-Hopper.

    ## February 28th, 2024

    - Called @Anna.

Parsing is two-pass: the Friends section is read first so the mention
resolver knows every name before any activity description is resolved.
Serialization always produces the same layout (friends sorted by name,
activities most-recent-first grouped by day), which makes

    serialize(parse(serialize(j))) == serialize(j)

hold for every journal. That law is what ``clean`` relies on.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

# --- Local imports ---
from friendlog.core.exceptions import AmbiguousMentionError, ParseError
from friendlog.dataclasses import Activity, Friend
from friendlog.journal.resolver import MentionResolver
from friendlog.utils.name_matching import lookup_key, sort_names
from friendlog.utils.parsers import name_problem, parse_friend_line
from friendlog.utils.txt import format_date, parse_date

logger = logging.getLogger(__name__)

FRIENDS_HEADER = "# Friends"
ACTIVITIES_HEADER = "# Activities"

_SECTION = re.compile(r"^#\s+(?P<title>.+?)\s*:?\s*$")
_DATE_HEADER = re.compile(r"^##\s+(?P<date>.*?)\s*:?\s*$")
_BULLET = re.compile(r"^[-*](?:\s+(?P<body>.*))?$")


@dataclass
class ParsedJournal:
    """
    Friends and activities read from journal text.

    Attributes:
        friends: Friends in file order
        activities: Activities in canonical order
    """

    friends: List[Friend] = field(default_factory=list)
    activities: List[Activity] = field(default_factory=list)


def sort_activities(activities: Iterable[Activity]) -> List[Activity]:
    """Most recent first; activities on the same day keep their order."""
    return sorted(activities, key=lambda a: a.date, reverse=True)


def _split_sections(lines: List[str]) -> Dict[str, List[Tuple[int, str]]]:
    """
    Group non-blank lines by top-level section.

    Returns:
        "friends"/"activities" -> list of (line number, line)

    Raises:
        ParseError: On unknown sections, repeated sections or stray lines
    """
    sections: Dict[str, List[Tuple[int, str]]] = {}
    current: Optional[str] = None

    for number, raw in enumerate(lines, 1):
        line = raw.rstrip()
        if not line.strip():
            continue

        match = _SECTION.match(line)
        if match:
            title = match.group("title").strip().lower()
            if title not in ("friends", "activities"):
                raise ParseError(
                    f"Unknown section '{match.group('title')}'",
                    line_number=number,
                    line=raw,
                )
            if title in sections:
                raise ParseError(
                    f"Section '{title}' appears more than once",
                    line_number=number,
                    line=raw,
                )
            sections[title] = []
            current = title
            continue

        if current is None:
            raise ParseError(
                "Line outside of the Friends or Activities section",
                line_number=number,
                line=raw,
            )
        sections[current].append((number, line))

    return sections


def _parse_friends(entries: List[Tuple[int, str]]) -> List[Friend]:
    """
    Build friends from the Friends section.

    Raises:
        ParseError: On malformed bullets, unstorable names, or two spellings
            that share a lookup key
    """
    friends: List[Friend] = []
    taken: Dict[str, str] = {}

    for number, line in entries:
        if not _BULLET.match(line.strip()):
            raise ParseError("Expected a friend bullet", line_number=number, line=line)

        name, nicknames = parse_friend_line(line)
        if not name:
            raise ParseError("Friend bullet has no name", line_number=number, line=line)

        for spelling in [name, *nicknames]:
            problem = name_problem(spelling)
            if problem:
                raise ParseError(
                    f"Name '{spelling}' {problem}", line_number=number, line=line
                )
            key = lookup_key(spelling)
            if key in taken:
                raise ParseError(
                    f"Duplicate name '{spelling}' (already used by '{taken[key]}')",
                    line_number=number,
                    line=line,
                )
            taken[key] = name
        friends.append(Friend(name=name, nicknames=nicknames))

    return friends


def _parse_activities(
    entries: List[Tuple[int, str]], resolver: MentionResolver
) -> List[Activity]:
    """
    Build activities from the Activities section.

    Raises:
        ParseError: On malformed date headers, orphan bullets or bad mentions
    """
    activities: List[Activity] = []
    current_date = None

    for number, line in entries:
        header = _DATE_HEADER.match(line)
        if header:
            parsed = parse_date(header.group("date"))
            if parsed is None:
                raise ParseError(
                    f"Malformed date header '{header.group('date')}'",
                    line_number=number,
                    line=line,
                )
            current_date = parsed
            continue

        bullet = _BULLET.match(line.strip())
        if not bullet:
            raise ParseError(
                "Expected a date header or an activity bullet",
                line_number=number,
                line=line,
            )
        if current_date is None:
            raise ParseError(
                "Activity appears before any date header",
                line_number=number,
                line=line,
            )

        body = (bullet.group("body") or "").strip()
        try:
            resolved = resolver.resolve(body)
        except AmbiguousMentionError as e:
            raise ParseError(str(e), line_number=number, line=line) from e

        activities.append(
            Activity(
                date=current_date,
                description=resolved.description,
                friends=resolved.friends,
            )
        )

    return sort_activities(activities)


def parse(text: str) -> ParsedJournal:
    """
    Parse journal text.

    Args:
        text: Full journal file content (may be empty)

    Returns:
        ParsedJournal with friends and canonically ordered activities

    Raises:
        ParseError: Identifying the offending line
    """
    sections = _split_sections(text.splitlines())

    friends = _parse_friends(sections.get("friends", []))
    resolver = MentionResolver.from_friends(friends)
    activities = _parse_activities(sections.get("activities", []), resolver)

    logger.debug(
        "Parsed journal: %d friends, %d activities", len(friends), len(activities)
    )
    return ParsedJournal(friends=friends, activities=activities)


def serialize(friends: Iterable[Friend], activities: Iterable[Activity]) -> str:
    """
    Render friends and activities in canonical form.

    Args:
        friends: Journal friends (any order)
        activities: Journal activities (any order; re-sorted stably)

    Returns:
        Canonical journal text ("" for an empty journal)
    """
    by_name = {f.name: f for f in friends}
    blocks: List[str] = []

    if by_name:
        lines = [FRIENDS_HEADER, ""]
        lines.extend(by_name[name].to_line() for name in sort_names(by_name))
        blocks.append("\n".join(lines))

    ordered = sort_activities(activities)
    if ordered:
        lines = [ACTIVITIES_HEADER]
        current = None
        for activity in ordered:
            if activity.date != current:
                current = activity.date
                lines.extend(["", f"## {format_date(current)}", ""])
            lines.append(activity.to_line())
        blocks.append("\n".join(lines))

    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"
