"""
audex.logging - Diagnostic logging for tool runs.

Console progress and errors go through rich; this logger carries the
diagnostics behind them: each ffprobe/ffmpeg command line, its exit status,
stream counts, and the stderr of a failed tool. Hidden unless --verbose.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("audex")


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the audex package.

    Args:
        verbose: If True, show DEBUG tool diagnostics; otherwise WARNING only
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logger.setLevel(level)
