#!/usr/bin/env python3
"""
manager.py
--------------------
In-memory journal of friends and activities, with its mutation API.

FriendsJournal is constructed once per run from the journal file, mutated
in memory, and written back only when the caller asks for it. It never
saves as a side effect of a mutation: the caller keeps a dirty flag and
calls ``save()`` once at the end of the run.

Key Features:
    - Friend and nickname management in one case-insensitive namespace
    - Activity creation with @mention extraction
    - Two-phase activity add (empty description now, text later)
    - Canonical serialization and atomic save

Usage:
    journal = FriendsJournal.load(Path("friends.md"), logger=logger)

    journal.add_friend("Grace Hopper")
    journal.add_nickname("Grace Hopper", "The Admiral")
    journal.add_activity("Lunch with @The-Admiral", on=date(2024, 3, 3))

    journal.save()  # once, only if something changed
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
import tempfile
from datetime import date, datetime
from pathlib import Path
from typing import Iterable, List, Optional

# --- Local imports ---
from friendlog.core.exceptions import (
    DuplicateNameError,
    NotFoundError,
    ValidationError,
)
from friendlog.core.logging_manager import FriendsLogger, safe_logger
from friendlog.core.paths import DEFAULT_JOURNAL_PATH
from friendlog.dataclasses import Activity, Friend
from friendlog.journal import codec
from friendlog.journal.decorators import log_journal_operation
from friendlog.journal.resolver import MentionResolver
from friendlog.utils.name_matching import lookup_key, names_match, sort_names
from friendlog.utils.parsers import name_problem


class FriendsJournal:
    """
    The journal's friends and activities.

    Activities are kept in canonical order (most recent first, stable on
    ties) at all times.

    Attributes:
        path: File the journal was loaded from and saves to
        logger: Optional FriendsLogger for operation logging
    """

    def __init__(
        self,
        friends: Optional[Iterable[Friend]] = None,
        activities: Optional[Iterable[Activity]] = None,
        path: Optional[Path] = None,
        logger: Optional[FriendsLogger] = None,
    ) -> None:
        self.path = Path(path) if path is not None else DEFAULT_JOURNAL_PATH
        self.logger = logger
        self._friends: List[Friend] = list(friends or [])
        self._activities: List[Activity] = codec.sort_activities(activities or [])

    # =========================================================================
    # CONSTRUCTION & PERSISTENCE
    # =========================================================================

    @classmethod
    def from_text(
        cls,
        text: str,
        path: Optional[Path] = None,
        logger: Optional[FriendsLogger] = None,
    ) -> "FriendsJournal":
        """
        Build a journal from journal text.

        Raises:
            ParseError: If the text is malformed
        """
        parsed = codec.parse(text)
        return cls(parsed.friends, parsed.activities, path=path, logger=logger)

    @classmethod
    def load(
        cls, path: Optional[Path] = None, logger: Optional[FriendsLogger] = None
    ) -> "FriendsJournal":
        """
        Load a journal file; a missing file is an empty journal.

        Args:
            path: Journal file (default: ./friends.md)
            logger: Optional logger

        Returns:
            Loaded FriendsJournal

        Raises:
            ParseError: If the file is malformed
        """
        path = Path(path) if path is not None else DEFAULT_JOURNAL_PATH
        text = path.read_text(encoding="utf-8") if path.exists() else ""

        journal = cls.from_text(text, path=path, logger=logger)
        safe_logger(logger).log_info(
            "Journal loaded",
            {
                "path": str(path),
                "friends": journal.total_friends(),
                "activities": journal.total_activities(),
            },
        )
        return journal

    def serialize(self) -> str:
        """Render the journal in canonical text form."""
        return codec.serialize(self._friends, self._activities)

    @log_journal_operation("save_journal")
    def save(self, path: Optional[Path] = None) -> Path:
        """
        Write the canonical text to disk.

        The text goes to a temporary sibling first and then replaces the
        target, so an interrupted save never leaves a partial file.

        Args:
            path: Target file (default: the path the journal was loaded from)

        Returns:
            Path written
        """
        target = Path(path) if path is not None else self.path
        target.parent.mkdir(parents=True, exist_ok=True)

        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp.write(self.serialize())
            tmp_path = Path(tmp.name)

        os.replace(tmp_path, target)
        return target

    def clean(self, path: Optional[Path] = None) -> Path:
        """Re-render the loaded journal over its file (no semantic change)."""
        return self.save(path)

    # =========================================================================
    # LOOKUPS
    # =========================================================================

    @property
    def friends(self) -> List[Friend]:
        """Friends sorted by name."""
        by_name = {f.name: f for f in self._friends}
        return [by_name[n] for n in sort_names(by_name)]

    @property
    def activities(self) -> List[Activity]:
        """Activities in canonical order."""
        return list(self._activities)

    def resolver(self) -> MentionResolver:
        """Mention resolver for the current friend table."""
        return MentionResolver.from_friends(self._friends)

    def _lookup(self, name: str) -> Optional[Friend]:
        """Friend owning a name or nickname, or None."""
        for friend in self._friends:
            if friend.answers_to(name):
                return friend
        return None

    def find_friend(self, name: str) -> Friend:
        """
        Find a friend by canonical name or nickname (any case).

        Raises:
            NotFoundError: If nothing matches
        """
        friend = self._lookup(name)
        if friend is None:
            raise NotFoundError(f"No friend found for '{name}'")
        return friend

    def activities_with(self, name: str) -> List[Activity]:
        """
        Activities mentioning a friend, in canonical order.

        Raises:
            NotFoundError: If ``name`` matches no friend
        """
        friend = self.find_friend(name)
        return [a for a in self._activities if a.involves(friend.name)]

    def _ensure_available(self, name: str) -> None:
        """
        Raise DuplicateNameError if any name or nickname shares ``name``'s
        lookup key.

        Spellings that differ only in case or in space/hyphen/underscore
        would both answer the same @mention, so they count as taken.
        """
        key = lookup_key(name)
        for friend in self._friends:
            for spelling in friend.spellings:
                if lookup_key(spelling) != key:
                    continue
                if spelling == friend.name:
                    raise DuplicateNameError(
                        f"Friend '{name}' already exists as '{friend.name}'"
                    )
                raise DuplicateNameError(
                    f"'{name}' is already a nickname of '{friend.name}'"
                )

    @staticmethod
    def _clean_name(name: str, kind: str = "Friend name") -> str:
        """
        Normalize whitespace and reject text the file layout cannot hold.

        Raises:
            ValidationError: If the name is empty or uses reserved characters
        """
        if any(c in (name or "") for c in ("\n", "\r")):
            raise ValidationError(f"{kind} cannot contain line breaks")
        cleaned = " ".join((name or "").split())
        if not cleaned:
            raise ValidationError(f"{kind} cannot be empty")
        problem = name_problem(cleaned)
        if problem:
            raise ValidationError(f"{kind} '{cleaned}' {problem}")
        return cleaned

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    @log_journal_operation("add_friend")
    def add_friend(self, name: str) -> Friend:
        """
        Add a friend with no nicknames.

        Raises:
            ValidationError: If the name cannot be stored
            DuplicateNameError: If the name collides with a name or nickname
        """
        name = self._clean_name(name)
        self._ensure_available(name)

        friend = Friend(name=name)
        self._friends.append(friend)
        return friend

    @log_journal_operation("add_activity")
    def add_activity(self, description: str = "", on: Optional[date] = None) -> Activity:
        """
        Add an activity, extracting its @mentions.

        An empty description is accepted; the caller may prompt for text and
        fill it in with ``set_description``.

        Args:
            description: Free text (newlines are collapsed)
            on: Activity date (default: today)

        Returns:
            The new Activity, placed first among activities on its date

        Raises:
            AmbiguousMentionError: If a mention is unknown or ambiguous
        """
        on = on or date.today()
        if isinstance(on, datetime):
            on = on.date()
        resolved = self.resolver().resolve(" ".join((description or "").split()))

        activity = Activity(
            date=on, description=resolved.description, friends=resolved.friends
        )
        index = next(
            (i for i, a in enumerate(self._activities) if a.date <= on),
            len(self._activities),
        )
        self._activities.insert(index, activity)
        return activity

    @log_journal_operation("set_description")
    def set_description(self, activity: Activity, description: str) -> Activity:
        """
        Replace an activity's description and re-extract its mentions.

        Raises:
            NotFoundError: If the activity is not part of this journal
            AmbiguousMentionError: If a mention is unknown or ambiguous
        """
        if not any(a is activity for a in self._activities):
            raise NotFoundError("Activity is not part of this journal")

        resolved = self.resolver().resolve(" ".join((description or "").split()))
        activity.description = resolved.description
        activity.friends = resolved.friends
        return activity

    @log_journal_operation("add_nickname")
    def add_nickname(self, name: str, nickname: str) -> str:
        """
        Add a nickname to a friend.

        Returns:
            The friend's canonical name

        Raises:
            NotFoundError: If ``name`` matches no friend
            ValidationError: If the nickname cannot be stored
            DuplicateNameError: If the nickname is already a name or nickname
        """
        friend = self.find_friend(name)
        nickname = self._clean_name(nickname, kind="Nickname")
        self._ensure_available(nickname)

        friend.nicknames.append(nickname)
        return friend.name

    @log_journal_operation("remove_nickname")
    def remove_nickname(self, name: str, nickname: str) -> str:
        """
        Remove a nickname from a friend.

        Activity descriptions always store canonical names, so existing
        activities are unaffected.

        Returns:
            The friend's canonical name

        Raises:
            NotFoundError: If the friend or the nickname does not exist
        """
        friend = self.find_friend(name)
        if not friend.has_nickname(nickname):
            raise NotFoundError(f"'{friend.name}' has no nickname '{nickname}'")

        friend.nicknames = [n for n in friend.nicknames if not names_match(n, nickname)]
        return friend.name

    # =========================================================================
    # COUNTS
    # =========================================================================

    def list_friends(self) -> List[str]:
        """All canonical names, sorted case-insensitively."""
        return sort_names(f.name for f in self._friends)

    def total_friends(self) -> int:
        return len(self._friends)

    def total_activities(self) -> int:
        return len(self._activities)

    def elapsed_days(self) -> int:
        """Days between the earliest and latest activity (0 for < 2 dates)."""
        dates = {a.date for a in self._activities}
        if len(dates) < 2:
            return 0
        return (max(dates) - min(dates)).days
