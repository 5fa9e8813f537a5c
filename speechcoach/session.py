"""
speechcoach.session - Practice session model and session files.

A session file records the user's finalized utterances in the order
spoken plus how long the session lasted. JSON, YAML and plain-text
(one utterance per line) files are accepted.
"""

from __future__ import annotations

import json
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from speechcoach.exceptions import SessionError
from speechcoach.logging import logger

SessionMode = Literal["interview", "gd"]

MODE_PROFILES: dict[str, str] = {
    "interview": "interview",
    "gd": "group-discussion",
}


class Session(BaseModel):
    """A completed practice session."""

    mode: SessionMode = "interview"
    transcripts: list[str] = Field(default_factory=list)
    duration_seconds: float | None = None
    started_at: datetime | None = None
    ended_at: datetime | None = None
    camera_enabled: bool = False
    topic: str | None = None

    @field_validator("transcripts", mode="before")
    @classmethod
    def stringify_scalars(cls, v: Any) -> Any:
        # YAML reads bare utterances like "Yes" or "42" as bool and int.
        if isinstance(v, list):
            return [str(item) if isinstance(item, (bool, int, float)) else item for item in v]
        return v

    @model_validator(mode="after")
    def derive_duration(self) -> Session:
        if self.duration_seconds is None and self.started_at and self.ended_at:
            try:
                elapsed = self.ended_at - self.started_at
            except TypeError as e:
                raise ValueError(
                    "started_at and ended_at must both be timezone-aware or both naive"
                ) from e
            self.duration_seconds = elapsed.total_seconds()
        if self.duration_seconds is None:
            raise ValueError(
                "duration_seconds is required (or both started_at and ended_at)"
            )
        return self

    @property
    def utterance_count(self) -> int:
        return len(self.transcripts)

    @property
    def profile(self) -> str:
        """Config profile matching this session's mode."""
        return MODE_PROFILES[self.mode]


def _read_document(path: Path) -> Any:
    suffix = path.suffix.lower()
    with open(path, encoding="utf-8") as f:
        if suffix == ".json":
            return json.load(f)
        return yaml.safe_load(f)


def _read_text_transcripts(path: Path) -> list[str]:
    with open(path, encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def load_session(
    path: Path,
    duration_seconds: float | None = None,
    mode: str | None = None,
) -> Session:
    """Load a session from a JSON, YAML, or text file.

    Args:
        path: Session file
        duration_seconds: Overrides the file's duration; required for .txt
        mode: Overrides the file's mode ("interview" or "gd")

    Returns:
        Validated Session

    Raises:
        SessionError: If the file is missing, unsupported, or malformed
    """
    if not path.exists():
        raise SessionError("Session file not found", str(path))

    suffix = path.suffix.lower()
    try:
        if suffix == ".txt":
            data: dict[str, Any] = {"transcripts": _read_text_transcripts(path)}
        elif suffix in (".json", ".yaml", ".yml"):
            data = _read_document(path)
        else:
            raise SessionError(f"Unsupported session format '{suffix}'", str(path))
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise SessionError(f"Could not parse session: {e}", str(path)) from e

    if not isinstance(data, dict):
        raise SessionError("Session file must contain a mapping", str(path))

    if duration_seconds is not None:
        data["duration_seconds"] = duration_seconds
    if mode is not None:
        data["mode"] = mode

    try:
        session = Session(**data)
    except ValidationError as e:
        raise SessionError(f"Invalid session: {e}", str(path)) from e

    logger.debug(
        "Loaded %s session from %s: %d utterance(s), %.1fs",
        session.mode,
        path,
        session.utterance_count,
        session.duration_seconds,
    )
    return session


def write_evaluation(path: Path, evaluation: dict[str, Any], indent: int = 2) -> None:
    """Write an evaluation as JSON atomically.

    Writes to a temp file first, then renames to prevent corruption
    on interruption.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        delete=False,
        suffix=".tmp",
    ) as tmp:
        tmp_path = Path(tmp.name)
        try:
            json.dump(evaluation, tmp, indent=indent, ensure_ascii=False)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise
    tmp_path.replace(path)
    logger.debug("Wrote evaluation to %s", path)
