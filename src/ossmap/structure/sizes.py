"""Human-readable byte sizes."""

from __future__ import annotations

_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_size(num_bytes: float) -> str:
    """Format a byte count using binary units with one decimal place.

    Examples
    --------
    >>> format_size(0)
    '0 B'
    >>> format_size(1536)
    '1.5 KB'
    """
    if num_bytes == 0:
        return "0 B"
    size = float(num_bytes)
    unit = 0
    while size >= 1024 and unit < len(_UNITS) - 1:
        size /= 1024
        unit += 1
    return f"{size:.1f} {_UNITS[unit]}"
