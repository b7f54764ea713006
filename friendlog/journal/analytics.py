#!/usr/bin/env python3
"""
analytics.py
------------------
Read-only queries over a loaded journal.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

# --- Local imports ---
from friendlog.core.config import SuggestPolicy
from friendlog.dataclasses import Activity
from friendlog.journal.manager import FriendsJournal
from friendlog.utils.name_matching import identity_key
from friendlog.utils.txt import month_label


@dataclass
class SuggestionBuckets:
    """
    Friends grouped by how overdue contact is.

    Attributes:
        close: Seen more recently than their usual gap
        moderate: Between one and two usual gaps ago (by default)
        distant: Two usual gaps or longer (by default)
    """

    close: List[str] = field(default_factory=list)
    moderate: List[str] = field(default_factory=list)
    distant: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return {"close": self.close, "moderate": self.moderate, "distant": self.distant}


class JournalAnalytics:
    """
    Favorites, listings, monthly graphs, suggestions and stats.

    Never mutates the journal it is given.
    """

    def __init__(
        self,
        journal: FriendsJournal,
        policy: Optional[SuggestPolicy] = None,
    ) -> None:
        """
        Initialize analytics.

        Args:
            journal: Loaded journal to query
            policy: Suggest thresholds (default: SuggestPolicy())
        """
        self.journal = journal
        self.policy = policy or SuggestPolicy()

    def _activity_counts(self) -> Counter:
        counts: Counter = Counter()
        for activity in self.journal.activities:
            counts.update(activity.friends)
        return counts

    # -------------------------------------------------------------------------
    # Favorites
    # -------------------------------------------------------------------------

    def favorite_counts(self, limit: int) -> List[Tuple[str, int]]:
        """
        Friends with their activity counts, most active first.

        Ties are broken alphabetically (case-insensitive). Friends with no
        activities are included with a count of 0.

        Args:
            limit: Maximum number of friends; <= 0 returns []

        Returns:
            List of (name, count)
        """
        if limit <= 0:
            return []

        counts = self._activity_counts()
        ranked = sorted(
            ((f.name, counts.get(f.name, 0)) for f in self.journal.friends),
            key=lambda item: (-item[1], identity_key(item[0]), item[0]),
        )
        return ranked[:limit]

    def list_favorites(self, limit: int) -> List[str]:
        """Names of the ``limit`` most active friends."""
        return [name for name, _ in self.favorite_counts(limit)]

    # -------------------------------------------------------------------------
    # Activities
    # -------------------------------------------------------------------------

    def recent_activities(
        self, limit: Optional[int] = None, with_friend: Optional[str] = None
    ) -> List[Activity]:
        """
        Most recent activities, optionally only those with one friend.

        Args:
            limit: Maximum number of activities (None for all; <= 0 for none)
            with_friend: Friend name or nickname to filter by

        Raises:
            NotFoundError: If ``with_friend`` matches no friend
        """
        if with_friend is not None:
            activities = self.journal.activities_with(with_friend)
        else:
            activities = self.journal.activities

        if limit is None:
            return activities
        if limit <= 0:
            return []
        return activities[:limit]

    def list_activities(
        self, limit: Optional[int] = None, with_friend: Optional[str] = None
    ) -> List[str]:
        """Rendered "<date>: <description>" lines for ``recent_activities``."""
        return [a.display() for a in self.recent_activities(limit, with_friend)]

    # -------------------------------------------------------------------------
    # Graph
    # -------------------------------------------------------------------------

    def graph(self, name: str) -> List[Tuple[str, int]]:
        """
        Monthly activity counts for one friend.

        Every month from the first to the last mentioning activity is
        present, including months with no activity.

        Args:
            name: Friend name or nickname

        Returns:
            Ordered (month label, count) pairs, oldest first; [] if the
            friend has no activities

        Raises:
            NotFoundError: If ``name`` matches no friend
        """
        activities = self.journal.activities_with(name)
        if not activities:
            return []

        per_month = Counter((a.date.year, a.date.month) for a in activities)
        first = min(per_month)
        last = max(per_month)

        series: List[Tuple[str, int]] = []
        year, month = first
        while (year, month) <= last:
            series.append((month_label(year, month), per_month.get((year, month), 0)))
            month += 1
            if month > 12:
                year, month = year + 1, 1
        return series

    # -------------------------------------------------------------------------
    # Suggest
    # -------------------------------------------------------------------------

    def average_gap(self, dates: List[date]) -> float:
        """
        Mean number of days between consecutive distinct dates.

        Falls back to the policy's default gap with fewer than two dates.
        """
        distinct = sorted(set(dates))
        if len(distinct) < 2:
            return self.policy.default_gap_days
        return (distinct[-1] - distinct[0]).days / (len(distinct) - 1)

    def classify(self, avg_gap: float, overdue: float) -> str:
        """Bucket name for an overdue/avg_gap ratio."""
        ratio = overdue / avg_gap
        if ratio < self.policy.close_ratio:
            return "close"
        if ratio < self.policy.distant_ratio:
            return "moderate"
        return "distant"

    def suggest(self, today: Optional[date] = None) -> SuggestionBuckets:
        """
        Bucket every friend with at least one activity.

        Args:
            today: Reference day for "days since last activity" (default: today)

        Returns:
            SuggestionBuckets; each eligible friend is in exactly one bucket
        """
        today = today or date.today()
        dates: Dict[str, List[date]] = {}
        for activity in self.journal.activities:
            for friend in activity.friends:
                dates.setdefault(friend, []).append(activity.date)

        buckets = SuggestionBuckets()
        for name in self.journal.list_friends():
            seen = dates.get(name)
            if not seen:
                continue
            overdue = max(0, (today - max(seen)).days)
            bucket = self.classify(self.average_gap(seen), overdue)
            getattr(buckets, bucket).append(name)
        return buckets

    # -------------------------------------------------------------------------
    # Stats
    # -------------------------------------------------------------------------

    def stats(self) -> Dict[str, Any]:
        """
        Aggregate journal statistics.

        Returns:
            Dictionary with totals, elapsed days and the activity date range
        """
        stats: Dict[str, Any] = {
            "total_friends": self.journal.total_friends(),
            "total_activities": self.journal.total_activities(),
            "elapsed_days": self.journal.elapsed_days(),
        }

        activities = self.journal.activities
        if activities:
            stats["first_activity"] = activities[-1].date.isoformat()
            stats["last_activity"] = activities[0].date.isoformat()
        return stats
