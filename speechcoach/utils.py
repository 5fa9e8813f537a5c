"""
speechcoach.utils - Shared utility functions.

Contains small helpers used by scoring, validation and reports.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity.

    Python's round() uses banker's rounding; scores and speaking rates
    are rounded the way the practice app always displayed them.
    """
    return int(math.floor(value + 0.5))


def format_duration(seconds: float) -> str:
    """Format seconds as HH:MM:SS or MM:SS.

    Args:
        seconds: Duration in seconds (negative values format as 0:00)

    Returns:
        Formatted string (HH:MM:SS if >= 1 hour, otherwise MM:SS)
    """
    seconds = max(0.0, seconds)
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def get_score_class(score: int | None) -> str:
    """Get CSS class for a 1-10 score badge.

    Args:
        score: Score out of 10, or None when not assessed

    Returns:
        CSS class name: "good" (>= 8), "fair" (>= 6), "poor", or "na"
    """
    if score is None:
        return "na"
    if score >= 8:
        return "good"
    elif score >= 6:
        return "fair"
    return "poor"
