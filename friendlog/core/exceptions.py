#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the friendlog project.

Every error the journal engine can raise derives from FriendsError, so the
command-line layer can catch a single type, report it and exit non-zero.

Exception Hierarchy:
    Exception (built-in)
    └── FriendsError - Base for all journal errors
        ├── ParseError - Malformed journal text (reports the line)
        ├── DuplicateNameError - Friend/nickname collision
        ├── NotFoundError - Unknown friend or nickname
        ├── AmbiguousMentionError - @mention with zero or several matches
        ├── ValidationError - Friend/nickname text the file cannot hold
        └── ConfigError - Unreadable or invalid YAML configuration

Usage:
    from friendlog.core.exceptions import DuplicateNameError, NotFoundError

    try:
        journal.add_nickname("Grace Hopper", "The Admiral")
    except NotFoundError as e:
        logger.error(f"No such friend: {e}")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import List, Optional


class FriendsError(Exception):
    """
    Base exception for journal errors.

    Catch this to handle any error raised by the engine, or catch the
    specific subclasses for more granular handling.
    """

    pass


class ParseError(FriendsError):
    """
    Exception for malformed journal text.

    Raised while loading the journal file when a line cannot be understood:
    - Malformed date headers
    - Activity bullets before any date header
    - Duplicate friend or nickname declarations (compared by lookup key)
    - Names holding characters the file layout reserves
    - Unresolvable or ambiguous @mentions

    Attributes:
        line_number: 1-based line number of the offending line (or None)
        line: The offending line's text (or None)

    Examples:
        >>> raise ParseError("Invalid date header", line_number=12, line="## Marchember 3rd")
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
            if line is not None:
                message = f"{message} ({line.strip()!r})"
        super().__init__(message)


class DuplicateNameError(FriendsError):
    """
    Exception for friend or nickname collisions.

    Names and nicknames share one case-insensitive namespace across the
    whole journal.

    Examples:
        >>> raise DuplicateNameError("Friend 'anna' already exists as 'Anna'")
    """

    pass


class NotFoundError(FriendsError):
    """
    Exception for references to friends or nicknames that do not exist.

    Examples:
        >>> raise NotFoundError("No friend found for 'Bob'")
        >>> raise NotFoundError("'Anna' has no nickname 'Annie'")
    """

    pass


class AmbiguousMentionError(FriendsError):
    """
    Exception for @mentions that do not resolve to exactly one friend.

    Unknown mentions (no candidate at all) and collisions (several friends
    share the matched lookup key) are both rejected; mentions are never
    guessed or dropped.

    Attributes:
        mention: The mention text as typed (without the @)
        candidates: Canonical names that matched (empty when unknown)
    """

    def __init__(
        self, message: str, mention: str = "", candidates: Optional[List[str]] = None
    ) -> None:
        self.mention = mention
        self.candidates = list(candidates or [])
        super().__init__(message)


class ValidationError(FriendsError):
    """
    Exception for friend or nickname text that cannot be stored.

    Raised when a name is empty or contains characters reserved by the
    journal layout (newlines, quotes, parentheses, '@', "a.k.a.").

    Examples:
        >>> raise ValidationError("Friend name cannot be empty")
    """

    pass


class ConfigError(FriendsError):
    """
    Exception for configuration file failures.

    Raised when the YAML config cannot be parsed or holds invalid values.

    Examples:
        >>> raise ConfigError("suggest.close_ratio must be positive")
    """

    pass
