"""ANSI palettes for the listing screen.

Colour codes are applied around already padded columns, so they never take
part in width arithmetic.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Semantic ANSI palette used by the layout renderer."""

    name: str
    title: str
    dir_prefix: str
    file_prefix: str
    size: str
    reset: str

    def paint(self, style: str, text: str) -> str:
        if not style:
            return text
        return f"{style}{text}{self.reset}"


DEFAULT_THEME = Theme(
    name="default",
    title="\033[1;38;5;81m",
    dir_prefix="\033[1;34m",
    file_prefix="\033[38;5;252m",
    size="\033[38;5;109m",
    reset="\033[0m",
)

PLAIN_THEME = Theme(
    name="plain",
    title="",
    dir_prefix="",
    file_prefix="",
    size="",
    reset="",
)


def theme_for(no_color: bool) -> Theme:
    return PLAIN_THEME if no_color else DEFAULT_THEME
