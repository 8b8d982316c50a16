"""
audex.utils - Shared formatting helpers for console reports.
"""

from __future__ import annotations

from pathlib import Path


def format_duration(seconds: float) -> str:
    """Format seconds as HH:MM:SS or MM:SS.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted string (HH:MM:SS if >= 1 hour, otherwise MM:SS)
    """
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_size(path: Path) -> str:
    """Format file size in human-readable format."""
    if not path.exists():
        return "-"
    size = path.stat().st_size
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TB"


def format_bit_rate(bit_rate: str | None) -> str:
    """Format a bit rate in bits/s as kb/s, or "-" when unknown."""
    if not bit_rate:
        return "-"
    try:
        return f"{int(bit_rate) / 1000:.0f} kb/s"
    except ValueError:
        return "-"
