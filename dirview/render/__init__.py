"""Column layout and text measurement for the listing screen."""

from __future__ import annotations

from .layout import ColumnLayout, compute_layout, render_listing, render_rows, visible_row_budget
from .theme import DEFAULT_THEME, PLAIN_THEME, Theme, theme_for
from .width import ELLIPSIS, char_display_width, display_width, printable_text, truncate_to_width

__all__ = [
    "ColumnLayout",
    "DEFAULT_THEME",
    "ELLIPSIS",
    "PLAIN_THEME",
    "Theme",
    "char_display_width",
    "compute_layout",
    "display_width",
    "printable_text",
    "render_listing",
    "render_rows",
    "theme_for",
    "truncate_to_width",
    "visible_row_budget",
]
