"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from speechcoach.config import CoachConfig, load_config
from speechcoach.session import Session


@pytest.fixture
def sample_session_dict() -> dict:
    """Return a sample interview session structure."""
    return {
        "mode": "interview",
        "topic": "Tell me about yourself",
        "camera_enabled": False,
        "duration_seconds": 60.0,
        "transcripts": [
            "I am a backend developer with three years of experience.",
            "Um, I mostly work on payment systems.",
            "Me and my team built a new settlement service last year.",
        ],
    }


@pytest.fixture
def session_file(tmp_path: Path, sample_session_dict: dict) -> Path:
    """Write the sample session to a JSON file."""
    path = tmp_path / "session.json"
    path.write_text(json.dumps(sample_session_dict), encoding="utf-8")
    return path


@pytest.fixture
def interview_session(sample_session_dict: dict) -> Session:
    return Session(**sample_session_dict)


@pytest.fixture
def gd_session() -> Session:
    return Session(
        mode="gd",
        topic="Remote work is here to stay",
        duration_seconds=120.0,
        transcripts=[
            "I think remote work improves focus for most engineers.",
            "Well, offices still matter for onboarding new hires.",
            "We could of tried a hybrid model first.",
            "So the answer depends on the team.",
        ],
    )


@pytest.fixture
def interview_config() -> CoachConfig:
    return load_config(None, profile="interview")


@pytest.fixture
def gd_config() -> CoachConfig:
    return load_config(None, profile="group-discussion")
