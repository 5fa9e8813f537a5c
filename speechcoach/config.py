"""
speechcoach.config - YAML config loading, profile merging, validation.

Handles loading speechcoach.yaml, applying profile defaults (interview or
group-discussion), and validating scoring parameters.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from speechcoach.exceptions import ConfigError
from speechcoach.logging import logger

CONFIG_FILENAME = "speechcoach.yaml"


class ScoringConfig(BaseModel):
    """Thresholds used when turning speech metrics into 1-10 scores."""

    ideal_wpm_min: int = Field(default=120, ge=0)
    ideal_wpm_max: int = Field(default=160, ge=0)
    filler_tolerance: int = Field(default=5, ge=0)
    min_score: int = Field(default=4, ge=0, le=10)

    @model_validator(mode="after")
    def validate_wpm_band(self) -> ScoringConfig:
        if self.ideal_wpm_min > self.ideal_wpm_max:
            raise ValueError("ideal_wpm_min must not exceed ideal_wpm_max")
        return self


class CoachConfig(BaseModel):
    """Resolved configuration for scoring and reporting a session."""

    profile: str = "interview"
    candidate_name: str | None = None
    camera_enabled: bool = False

    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    improvement_tips: list[str] = Field(default_factory=list)

    config_path: Path | None = None

    @field_validator("profile")
    @classmethod
    def validate_profile(cls, v: str) -> str:
        valid = set(BUILTIN_PROFILES)
        if v not in valid:
            raise ValueError(f"profile must be one of: {valid}")
        return v


BUILTIN_PROFILES: dict[str, dict[str, Any]] = {
    "interview": {
        "scoring": {
            "ideal_wpm_min": 120,
            "ideal_wpm_max": 160,
            "filler_tolerance": 5,
            "min_score": 4,
        },
        "improvement_tips": [
            "Practice speaking about your projects for 5-10 minutes daily",
            "Record yourself answering common interview questions and review",
            "Work on reducing filler words by pausing instead of saying 'um'",
            "Study STAR method for structuring behavioral answers",
            "Do mock interviews with friends or mentors weekly",
        ],
    },
    "group-discussion": {
        "scoring": {
            "ideal_wpm_min": 120,
            "ideal_wpm_max": 160,
            "filler_tolerance": 5,
            "min_score": 4,
        },
        "improvement_tips": [
            "Practice speaking on diverse topics daily",
            "Read newspapers to improve vocabulary and current affairs knowledge",
            "Join debate clubs or discussion groups for more practice",
            "Work on reducing filler words by pausing instead",
        ],
    },
}


def load_profile(name: str) -> dict[str, Any]:
    """Return a deep-enough copy of a built-in profile."""
    if name not in BUILTIN_PROFILES:
        raise ConfigError(f"Unknown profile: {name}")
    profile = BUILTIN_PROFILES[name]
    return {
        "scoring": dict(profile["scoring"]),
        "improvement_tips": list(profile["improvement_tips"]),
    }


def merge_config(project_config: dict[str, Any], profile: dict[str, Any]) -> dict[str, Any]:
    """Merge project config with profile defaults. Project config takes precedence."""
    merged = profile.copy()
    for key, value in project_config.items():
        if key == "scoring" and isinstance(value, dict):
            merged["scoring"] = {**merged.get("scoring", {}), **value}
        elif value is not None:
            merged[key] = value
    return merged


def load_config(path: Path | None = None, profile: str | None = None) -> CoachConfig:
    """Load and validate configuration.

    Args:
        path: speechcoach.yaml file, or a directory containing one. None
            resolves to profile defaults only.
        profile: Profile name overriding the one in the file

    Raises:
        ConfigError: If the file is missing, unparsable, or invalid
    """
    raw_config: dict[str, Any] = {}
    config_file: Path | None = None

    if path is not None:
        config_file = path / CONFIG_FILENAME if path.is_dir() else path
        if not config_file.exists():
            raise ConfigError(f"No {CONFIG_FILENAME} found at {path}")
        try:
            with open(config_file, encoding="utf-8") as f:
                raw_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e
        if not isinstance(raw_config, dict):
            raise ConfigError(f"{config_file} must contain a mapping")
        logger.debug("Loaded config from %s", config_file)

    profile_name = profile or raw_config.get("profile", "interview")
    merged = merge_config(raw_config, load_profile(profile_name))
    merged["profile"] = profile_name
    merged["config_path"] = config_file

    try:
        return CoachConfig(**merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def create_default_config(profile: str = "interview") -> dict[str, Any]:
    """Create a default config for a new practice directory."""
    defaults: dict[str, Any] = {
        "profile": profile,
        "candidate_name": None,
        "camera_enabled": False,
    }
    return merge_config(defaults, load_profile(profile))


def write_config(config: dict[str, Any], path: Path) -> None:
    """Write configuration to a YAML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)
