"""
journal package
---------------
The friends journal engine.

- resolver: @mention tokenizer and longest-match lookup
- codec: Journal text parsing and canonical serialization
- manager: FriendsJournal, the in-memory store and mutation API
- analytics: JournalAnalytics, read-only queries
"""
from friendlog.journal.manager import FriendsJournal
from friendlog.journal.analytics import JournalAnalytics, SuggestionBuckets
from friendlog.journal.resolver import MentionResolver

__all__ = ["FriendsJournal", "JournalAnalytics", "MentionResolver", "SuggestionBuckets"]
