#!/usr/bin/env python3
"""
resolver.py
-----------
@mention resolution against the journal's friend table.

A mention is an ``@`` that starts the text or follows a non-word character,
followed by either:

    - a quoted name:  @"Grace Hopper"   (matched exactly, any case)
    - a bare token:   @Grace-Hopper, @anna, @Jean-Pierre_Martin

A bare token is the run of word characters, hyphens and underscores after
the ``@``. The resolver tries the longest known name or nickname that is a
prefix of the token ending at a token boundary (end, ``-`` or ``_``), so a
friend "Ann" never shadows "@Anna". Whatever is left of the token after the
match stays plain text ("@Anna's" -> Anna + "'s").

Resolution Flow:
    1. Tokenize the description into mention spans
    2. Look up each span by lookup key, longest candidate first
    3. Reject unknown keys and keys shared by several friends
    4. Rewrite each mention in canonical form, collect distinct names

Usage:
    resolver = MentionResolver.from_friends(friends)
    result = resolver.resolve("Lunch with @anna and @Grace-Hopper")
    result.friends      # ["Anna", "Grace Hopper"]
    result.description  # "Lunch with @Anna and @Grace-Hopper"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

# --- Local imports ---
from friendlog.core.exceptions import AmbiguousMentionError
from friendlog.dataclasses import Friend
from friendlog.utils.name_matching import build_lookup_table, lookup_key
from friendlog.utils.parsers import format_mention

logger = logging.getLogger(__name__)

# @ not preceded by a word character, then a quoted name or a bare token
_MENTION = re.compile(r'(?<!\w)@(?:"(?P<quoted>[^"\n]*)"|(?P<bare>[\w\-]+))')
_BOUNDARY = re.compile(r"[\-_]")


@dataclass
class MentionSpan:
    """
    One resolved mention inside a description.

    Attributes:
        start: Offset of the ``@``
        end: Offset just past the consumed text
        text: Consumed text without the ``@`` (quotes stripped)
        friend: Canonical name it resolved to
        quoted: Whether the rewritten mention must be quoted
    """

    start: int
    end: int
    text: str
    friend: str
    quoted: bool = False


@dataclass
class ResolvedText:
    """
    Result of resolving a description.

    Attributes:
        description: Text with every mention in canonical form
        friends: Distinct canonical names in order of first mention
        mentions: Resolved spans against the original text
    """

    description: str
    friends: List[str] = field(default_factory=list)
    mentions: List[MentionSpan] = field(default_factory=list)


class MentionResolver:
    """
    Resolves @mentions to canonical friend names.

    The table maps lookup keys to owning canonical names; a key with more
    than one owner is kept so that mentions hitting it can be reported as
    ambiguous rather than guessed.
    """

    def __init__(self, table: Dict[str, List[str]]) -> None:
        self.table = table

    @classmethod
    def from_friends(cls, friends: Iterable[Friend]) -> "MentionResolver":
        """Build a resolver from the journal's friends and nicknames."""
        return cls(build_lookup_table({f.name: f.spellings for f in friends}))

    def _owner(self, text: str) -> Optional[str]:
        """
        Return the single friend owning ``text``, or None when unknown.

        Raises:
            AmbiguousMentionError: If several friends own the key
        """
        owners = self.table.get(lookup_key(text))
        if not owners:
            return None
        if len(owners) > 1:
            raise AmbiguousMentionError(
                f"Mention '@{text}' is ambiguous between: {', '.join(owners)}",
                mention=text,
                candidates=owners,
            )
        return owners[0]

    def _match_bare(self, token: str) -> Optional[tuple[str, str]]:
        """
        Longest-match a bare token against the table.

        Returns:
            (matched prefix, canonical name), or None when nothing matches
        """
        cuts = [m.start() for m in _BOUNDARY.finditer(token)]
        cuts.append(len(token))
        for cut in sorted(set(cuts), reverse=True):
            prefix = token[:cut]
            if not lookup_key(prefix) or prefix != prefix.strip("-_"):
                continue
            owner = self._owner(prefix)
            if owner is not None:
                return prefix, owner
        return None

    def find_mentions(self, text: str) -> List[MentionSpan]:
        """
        Tokenize and resolve every mention in ``text``.

        Args:
            text: Free-text description

        Returns:
            Resolved spans, in order of appearance

        Raises:
            AmbiguousMentionError: If any mention is unknown or ambiguous
        """
        spans: List[MentionSpan] = []
        for match in _MENTION.finditer(text):
            quoted = match.group("quoted")
            if quoted is not None:
                owner = self._owner(quoted)
                if owner is None:
                    raise AmbiguousMentionError(
                        f'Unknown friend in mention \'@"{quoted}"\'', mention=quoted
                    )
                spans.append(
                    MentionSpan(match.start(), match.end(), quoted, owner, quoted=True)
                )
                continue

            token = match.group("bare")
            if not token.strip("-_"):
                continue
            found = self._match_bare(token)
            if found is None:
                raise AmbiguousMentionError(
                    f"Unknown friend in mention '@{token}'", mention=token
                )
            prefix, owner = found
            end = match.start("bare") + len(prefix)
            # A partial match followed by "-x" must stay delimited
            spans.append(
                MentionSpan(
                    match.start(), end, prefix, owner, quoted=len(prefix) < len(token)
                )
            )
        return spans

    def resolve(self, text: str) -> ResolvedText:
        """
        Resolve a description and rewrite its mentions canonically.

        Args:
            text: Free-text description

        Returns:
            ResolvedText with canonical description and distinct friends

        Raises:
            AmbiguousMentionError: If any mention is unknown or ambiguous
        """
        spans = self.find_mentions(text)

        parts: List[str] = []
        friends: List[str] = []
        cursor = 0
        for span in spans:
            parts.append(text[cursor:span.start])
            parts.append(format_mention(span.friend, quoted=span.quoted))
            cursor = span.end
            if span.friend not in friends:
                friends.append(span.friend)
        parts.append(text[cursor:])

        if spans:
            logger.debug("Resolved %d mention(s) to %s", len(spans), friends)
        return ResolvedText("".join(parts), friends, spans)
