"""
txt.py
-------------------
Date rendering and parsing for journal date headers.

The journal uses a single rendering for dates ("March 3rd, 2024") and reads
it back leniently: the ordinal suffix is optional, month names are matched
case-insensitively (full or abbreviated), and ISO dates are accepted too.
"""

from __future__ import annotations

# --- Standard library imports ---
import calendar
import re
from datetime import date
from typing import Optional

_MONTHS = {name.lower(): i for i, name in enumerate(calendar.month_name) if name}
_MONTHS.update({abbr.lower(): i for i, abbr in enumerate(calendar.month_abbr) if abbr})

_LONG_DATE = re.compile(
    r"^(?P<month>[A-Za-z]+)\.?\s+(?P<day>\d{1,2})(?:st|nd|rd|th)?,?\s+(?P<year>\d{4})$",
    re.IGNORECASE,
)
_ISO_DATE = re.compile(r"^(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})$")


# ----- Ordinal dates -----
def ordinal(n: int) -> str:
    """
    input: n, an integer day of month
    output: the number with its ordinal suffix ("st", "nd", "rd", "th")
    process: handles English ordinal rules
    """
    if 10 <= n % 100 <= 20:
        return f"{n}th"
    if n % 10 == 1:
        return f"{n}st"
    if n % 10 == 2:
        return f"{n}nd"
    if n % 10 == 3:
        return f"{n}rd"
    return f"{n}th"


def format_date(value: date) -> str:
    """Render a date as "March 3rd, 2024"."""
    return f"{calendar.month_name[value.month]} {ordinal(value.day)}, {value.year:04d}"


def parse_date(text: str) -> Optional[date]:
    """
    Parse a journal date.

    Accepts "March 3rd, 2024", "march 3 2024", "Mar 3rd, 2024" and
    "2024-03-03".

    Returns:
        The date, or None when the text is not a valid date
    """
    text = text.strip()

    match = _ISO_DATE.match(text)
    if match:
        month = int(match.group("month"))
    else:
        match = _LONG_DATE.match(text)
        if not match:
            return None
        month = _MONTHS.get(match.group("month").lower())
        if month is None:
            return None

    try:
        return date(int(match.group("year")), month, int(match.group("day")))
    except ValueError:
        return None


def month_label(year: int, month: int) -> str:
    """Short label for a calendar month, e.g. "Jan 2024"."""
    return f"{calendar.month_abbr[month]} {year}"
