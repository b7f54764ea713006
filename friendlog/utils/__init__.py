"""
Utilities package for friendlog.

This package provides commonly-used utilities organized by domain:
- name_matching: Identity and @mention lookup keys
- parsers: Friend-line and mention formats, hyphenation conventions
- txt: Date rendering and parsing for date headers
- charts: ASCII charts for terminal output

Import commonly-used utilities directly from this package:
    from friendlog.utils import format_date, lookup_key

Or import specific modules:
    from friendlog.utils import parsers, txt
"""

# Name matching utilities
from .name_matching import (
    identity_key,
    lookup_key,
    names_match,
    sort_names,
    build_lookup_table,
)

# Parser utilities
from .parsers import (
    extract_name_and_expansion,
    split_nicknames,
    format_friend_line,
    parse_friend_line,
    name_problem,
    format_mention,
    spaces_to_hyphenated,
)

# Date utilities
from .txt import (
    ordinal,
    format_date,
    parse_date,
    month_label,
)

# Chart utilities
from .charts import ascii_bar_chart

__all__ = [
    # Name matching
    "identity_key",
    "lookup_key",
    "names_match",
    "sort_names",
    "build_lookup_table",
    # Parsers
    "extract_name_and_expansion",
    "split_nicknames",
    "format_friend_line",
    "parse_friend_line",
    "name_problem",
    "format_mention",
    "spaces_to_hyphenated",
    # Dates
    "ordinal",
    "format_date",
    "parse_date",
    "month_label",
    # Charts
    "ascii_bar_chart",
]
