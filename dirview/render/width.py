"""Terminal display-width measurement and width-bounded truncation.

Widths are counted in terminal cells: East Asian wide and fullwidth characters
take two cells, combining marks and control characters take none.
"""

from __future__ import annotations

import unicodedata

ELLIPSIS = "…"
CONTROL_PLACEHOLDER = "?"


def printable_text(text: str) -> str:
    """Replace control characters (newline, tab, ESC, ...) with a placeholder."""
    return "".join(CONTROL_PLACEHOLDER if unicodedata.category(ch) == "Cc" else ch for ch in text)


def char_display_width(ch: str) -> int:
    """Return the number of terminal columns ``ch`` occupies."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.category(ch) in {"Cc", "Cf"}:
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def truncate_to_width(text: str, width: int) -> str:
    """Fit ``text`` into ``width`` columns, marking cuts with an ellipsis.

    Text that already fits is returned as-is. Otherwise whole characters are
    kept while they fit in ``width - 1`` columns and the ellipsis takes the
    last one, so a wide character is never split. A zero width still yields
    the bare ellipsis.
    """
    if display_width(text) <= width:
        return text

    budget = max(0, width - display_width(ELLIPSIS))
    out: list[str] = []
    used = 0
    for ch in text:
        w = char_display_width(ch)
        if used + w > budget:
            break
        out.append(ch)
        used += w
    out.append(ELLIPSIS)
    return "".join(out)
