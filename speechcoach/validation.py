"""
speechcoach.validation - Session sanity checks.

Flags sessions whose metrics would be meaningless (no duration) and warns
about ones that are likely to give skewed scores.
"""

from __future__ import annotations

from typing import Any

from speechcoach.session import Session
from speechcoach.utils import format_duration

MIN_SESSION_SECONDS = 60
MAX_SESSION_SECONDS = 2 * 3600


def validate_session(session: Session) -> dict[str, Any]:
    """Check a session before it is analyzed.

    Args:
        session: Loaded session

    Returns:
        Dict with 'valid', 'errors', 'warnings', 'duration_formatted'
    """
    errors: list[str] = []
    warnings: list[str] = []
    duration = session.duration_seconds or 0.0

    if duration <= 0:
        errors.append("Session duration must be positive; speaking rate cannot be computed")
    elif duration < MIN_SESSION_SECONDS:
        warnings.append(
            f"Very short session ({format_duration(duration)}); speaking rate may be unreliable"
        )
    elif duration > MAX_SESSION_SECONDS:
        warnings.append(f"Very long session ({format_duration(duration)})")

    if not session.transcripts:
        warnings.append("No transcripts recorded; all metrics will be zero")
    elif not any(t.strip() for t in session.transcripts):
        warnings.append("All transcripts are blank")

    return {
        "valid": not errors,
        "errors": errors,
        "warnings": warnings,
        "duration_formatted": format_duration(duration),
    }
