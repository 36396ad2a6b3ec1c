"""Column layout for the directory listing.

Each row is ``[TYPE] name.......  1234.56 KB``: a fixed-width type prefix, a
name column that absorbs whatever width the terminal has left, and a size
column right-aligned to the widest integer part in the listing.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..sizes import FileEntry, format_size, humanize, integer_digits
from .theme import PLAIN_THEME, Theme
from .width import display_width, printable_text, truncate_to_width

DIR_PREFIX = "[DIR]"
FILE_PREFIX = "[FILE]"
TYPE_PREFIX_WIDTH = 7
UNIT_WIDTH = 2
COLUMN_GAPS = 3
RIGHT_MARGIN = 1

# Title plus spacer on top; spacer, command echo and input row at the bottom.
TOP_RESERVED_ROWS = 2
BOTTOM_RESERVED_ROWS = 3


@dataclass(frozen=True)
class ColumnLayout:
    """Column widths derived from terminal size and listing content."""

    name_width: int
    max_digits: int
    visible_rows: int

    @property
    def size_width(self) -> int:
        """Numeric part of the size column: digits, point and two decimals."""
        return self.max_digits + 3


def max_size_digits(entries: Sequence[FileEntry]) -> int:
    return max((integer_digits(humanize(entry.size)[0]) for entry in entries), default=1)


def name_column_width(terminal_cols: int, max_digits: int) -> int:
    """Columns left for names after the fixed overhead, never negative."""
    overhead = TYPE_PREFIX_WIDTH + UNIT_WIDTH + (max_digits + 3) + COLUMN_GAPS + RIGHT_MARGIN
    return max(0, terminal_cols - overhead)


def visible_row_budget(terminal_rows: int) -> int:
    return max(0, terminal_rows - (TOP_RESERVED_ROWS + BOTTOM_RESERVED_ROWS))


def compute_layout(entries: Sequence[FileEntry], terminal_cols: int, terminal_rows: int) -> ColumnLayout:
    max_digits = max_size_digits(entries)
    return ColumnLayout(
        name_width=name_column_width(terminal_cols, max_digits),
        max_digits=max_digits,
        visible_rows=visible_row_budget(terminal_rows),
    )


def render_entry(entry: FileEntry, layout: ColumnLayout, theme: Theme = PLAIN_THEME) -> str:
    """Format one listing row.

    The name is cut to the name column by display width and then padded with
    spaces, so wide characters keep the size column aligned.
    """
    if entry.is_dir:
        prefix = theme.paint(theme.dir_prefix, f"{DIR_PREFIX:<{TYPE_PREFIX_WIDTH}}")
    else:
        prefix = theme.paint(theme.file_prefix, f"{FILE_PREFIX:<{TYPE_PREFIX_WIDTH}}")
    name = truncate_to_width(printable_text(entry.name), layout.name_width)
    padding = " " * max(0, layout.name_width - display_width(name))
    size = theme.paint(theme.size, format_size(entry.size, layout.max_digits))
    return f"{prefix} {name}{padding} {size}"


def render_rows(
    entries: Sequence[FileEntry],
    terminal_cols: int,
    terminal_rows: int,
    theme: Theme = PLAIN_THEME,
) -> list[str]:
    """Render entries in their original order, capped to the visible row budget."""
    layout = compute_layout(entries, terminal_cols, terminal_rows)
    return [render_entry(entry, layout, theme) for entry in entries[: layout.visible_rows]]


def render_listing(
    entries: Sequence[FileEntry],
    terminal_cols: int,
    terminal_rows: int,
    title: str,
    theme: Theme = PLAIN_THEME,
) -> list[str]:
    """Return the title line, a spacer and the visible entry rows."""
    title_width = max(0, terminal_cols - RIGHT_MARGIN)
    header = theme.paint(theme.title, truncate_to_width(printable_text(title), title_width))
    return [header, "", *render_rows(entries, terminal_cols, terminal_rows, theme)]
