"""
friendlog
=========

A personal log of friends and shared activities, kept in a single
human-editable Markdown file.

Main Components:
    - journal: Mention resolver, codec, FriendsJournal and analytics
    - dataclasses: Friend and Activity
    - core: Exceptions, logging, paths and configuration
    - utils: Name matching, line formats, dates and charts
    - cli: The ``friends`` command-line interface

Example Usage:
    >>> from pathlib import Path
    >>> from friendlog import FriendsJournal, JournalAnalytics
    >>> journal = FriendsJournal.load(Path("friends.md"))
    >>> journal.add_friend("Grace Hopper")
    >>> journal.add_activity("Lunch with @Grace-Hopper")
    >>> JournalAnalytics(journal).list_favorites(5)
    ['Grace Hopper']
    >>> journal.save()
"""

__version__ = "0.1.0"

from friendlog.journal import FriendsJournal, JournalAnalytics

__all__ = ["FriendsJournal", "JournalAnalytics"]
