"""
ASCII Chart Utilities
----------------------

Functions for rendering journal analytics in the terminal.

Functions:
    - ascii_bar_chart: Generate horizontal bar chart lines
"""

from typing import List, Sequence, Tuple


def ascii_bar_chart(
    data: Sequence[Tuple[str, int]],
    max_width: int = 30,
    empty_char: str = "░",
    fill_char: str = "█",
) -> List[str]:
    """
    Generate ASCII bar chart lines from ordered (label, count) pairs.

    Bars are scaled to the largest count; zero counts get a single
    ``empty_char`` so gaps stay visible.

    Args:
        data: Ordered (label, count) pairs
        max_width: Maximum bar width in characters
        empty_char: Character for empty/zero values
        fill_char: Character for filled space

    Returns:
        List of formatted chart lines

    Example:
        >>> for line in ascii_bar_chart([("Jan 2024", 2), ("Feb 2024", 0)], max_width=4):
        ...     print(line)
        Jan 2024     ████ (2)
        Feb 2024     ░    (0)
    """
    if not data:
        return []

    max_count = max(count for _, count in data)
    label_width = max(12, max(len(label) for label, _ in data))
    lines = []

    for label, count in data:
        if max_count > 0 and count > 0:
            bar_length = max(1, int((count / max_count) * max_width))
            bar = fill_char * bar_length
        else:
            bar = empty_char

        lines.append(f"{label:{label_width}s} {bar:{max_width}s} ({count})")

    return lines
