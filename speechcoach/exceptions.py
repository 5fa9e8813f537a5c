"""
speechcoach.exceptions - Custom exception classes.

All SpeechCoach exceptions inherit from SpeechCoachError. The speech
analyzer itself never raises; these cover files, config and reports.
"""


class SpeechCoachError(Exception):
    """Base exception for all SpeechCoach errors."""

    pass


class ConfigError(SpeechCoachError):
    """Configuration loading or validation error."""

    pass


class SessionError(SpeechCoachError):
    """Session file missing, unreadable, or malformed."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class ReportError(SpeechCoachError):
    """Report rendering error."""

    pass
