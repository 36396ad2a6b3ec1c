"""Recursive size aggregation and human-readable size formatting."""

from __future__ import annotations

from .entries import FileEntry, compute_size, list_entries
from .humanize import SIZE_UNITS, format_size, humanize, integer_digits

__all__ = [
    "FileEntry",
    "SIZE_UNITS",
    "compute_size",
    "format_size",
    "humanize",
    "integer_digits",
    "list_entries",
]
