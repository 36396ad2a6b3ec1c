"""Byte-count to magnitude/unit conversion."""

from __future__ import annotations

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")
SIZE_DECIMALS = 2


def humanize(size: int) -> tuple[float, str]:
    """Scale ``size`` by 1024 until it drops below 1024 or reaches ``PB``."""
    if size < 0:
        raise ValueError("size must be non-negative")
    value = float(size)
    unit_idx = 0
    while value >= 1024.0 and unit_idx < len(SIZE_UNITS) - 1:
        value /= 1024.0
        unit_idx += 1
    return value, SIZE_UNITS[unit_idx]


def integer_digits(value: float) -> int:
    """Digits before the decimal point once ``value`` is printed with two decimals."""
    return max(1, len(f"{value:.{SIZE_DECIMALS}f}") - SIZE_DECIMALS - 1)


def format_size(size: int, digits: int) -> str:
    """Render ``size`` right-aligned to ``digits`` integer digits plus its unit."""
    value, unit = humanize(size)
    return f"{value:>{digits + SIZE_DECIMALS + 1}.{SIZE_DECIMALS}f} {unit}"
