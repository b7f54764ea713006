"""
dataclasses package
-------------------
Dataclass definitions for the journal's domain objects.

- Friend: Canonical name plus nicknames
- Activity: Dated description with the friends it mentions
"""
from friendlog.dataclasses.activity import Activity
from friendlog.dataclasses.friend import Friend

__all__ = ["Activity", "Friend"]
