"""
speechcoach.analyze.speech - Transcript speech metrics and confidence.

Treats a session's utterances as one lower-cased stream of speech and
derives filler-word usage, grammar flags, pause markers, words per minute
and sentence count. A second pass turns those metrics into a nervousness
score with confidence and fear classifications.

Both functions are pure: no I/O, no shared mutable state, never raise.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from speechcoach.analyze.rules import (
    DOUBLE_COMMA_PATTERN,
    ELLIPSIS,
    FILLER_PATTERNS,
    GRAMMAR_RULES,
    SENTENCE_SPLIT_PATTERN,
)
from speechcoach.logging import logger
from speechcoach.utils import round_half_up


class ConfidenceLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class FearIndicator(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


class SpeechMetrics(BaseModel):
    """Metrics derived from a session's transcripts."""

    model_config = ConfigDict(frozen=True)

    filler_words: frozenset[str] = Field(default_factory=frozenset)
    filler_count: int = 0
    pause_count: int = 0
    average_words_per_minute: int = 0
    sentence_count: int = 0
    grammar_issues: frozenset[str] = Field(default_factory=frozenset)
    word_count: int = 0


class ConfidenceAssessment(BaseModel):
    """Confidence and fear classification with the habits behind it."""

    model_config = ConfigDict(frozen=True)

    confidence_level: ConfidenceLevel
    fear_indicator: FearIndicator
    nervous_habits: tuple[str, ...] = ()


EXCESSIVE_FILLERS = "Excessive use of filler words (um, uh, like)"
MODERATE_FILLERS = "Moderate use of filler words"
TOO_SLOW = "Speaking too slowly - may indicate uncertainty"
TOO_FAST = "Speaking too fast - may indicate nervousness"
FREQUENT_PAUSES = "Frequent long pauses during speech"


def detect_fillers(text: str) -> list[str]:
    """Return every filler match in text, in filler-list order.

    Phrases are scanned independently, so overlapping fillers such as
    "okay so" and "so" are each counted.
    """
    detected: list[str] = []
    for _, pattern in FILLER_PATTERNS:
        detected.extend(pattern.findall(text))
    return detected


def detect_grammar_issues(text: str) -> set[str]:
    """Return the issue text of every grammar rule that matches text."""
    return {rule.issue for rule in GRAMMAR_RULES if rule.pattern.search(text)}


def ordered_grammar_issues(issues: set[str] | frozenset[str]) -> list[str]:
    """List issues in grammar-table order."""
    return [rule.issue for rule in GRAMMAR_RULES if rule.issue in issues]


def count_pauses(text: str) -> int:
    return text.count(ELLIPSIS) + len(DOUBLE_COMMA_PATTERN.findall(text))


def count_sentences(text: str) -> int:
    return sum(1 for s in SENTENCE_SPLIT_PATTERN.split(text) if s.strip())


def words_per_minute(word_count: int, duration_seconds: float) -> int:
    """Compute rounded words per minute; 0 when duration is not positive."""
    minutes = duration_seconds / 60
    if minutes > 0:
        return round_half_up(word_count / minutes)
    return 0


def analyze_speech(transcripts: Sequence[str], duration_seconds: float) -> SpeechMetrics:
    """Analyze a session's transcripts.

    Args:
        transcripts: Finalized user utterances, in the order spoken
        duration_seconds: Elapsed session time; zero or negative gives 0 WPM

    Returns:
        SpeechMetrics for the whole session
    """
    full_text = " ".join(transcripts).lower()
    words = full_text.split()

    fillers = detect_fillers(full_text)

    metrics = SpeechMetrics(
        filler_words=frozenset(fillers),
        filler_count=len(fillers),
        pause_count=count_pauses(full_text),
        average_words_per_minute=words_per_minute(len(words), duration_seconds),
        sentence_count=count_sentences(full_text),
        grammar_issues=frozenset(detect_grammar_issues(full_text)),
        word_count=len(words),
    )

    logger.debug(
        "Analyzed %d utterance(s): %d words, %d fillers, %d WPM",
        len(transcripts),
        metrics.word_count,
        metrics.filler_count,
        metrics.average_words_per_minute,
    )
    return metrics


def calculate_confidence_indicators(
    metrics: SpeechMetrics,
    duration_seconds: float,
) -> ConfidenceAssessment:
    """Classify confidence and fear from speech metrics.

    Filler rate, speaking rate and pause rate each add to a nervousness
    score independently; within a factor only one tier fires.

    Args:
        metrics: Output of analyze_speech
        duration_seconds: Elapsed session time

    Returns:
        ConfidenceAssessment with habits in detection order
    """
    nervous_habits: list[str] = []
    nervousness_score = 0

    filler_rate = metrics.filler_count / max(metrics.sentence_count, 1)
    if filler_rate > 2:
        nervous_habits.append(EXCESSIVE_FILLERS)
        nervousness_score += 3
    elif filler_rate > 1:
        nervous_habits.append(MODERATE_FILLERS)
        nervousness_score += 1

    wpm = metrics.average_words_per_minute
    if wpm < 100:
        nervous_habits.append(TOO_SLOW)
        nervousness_score += 2
    elif wpm > 180:
        nervous_habits.append(TOO_FAST)
        nervousness_score += 2

    pause_rate = metrics.pause_count / max(duration_seconds / 60, 1)
    if pause_rate > 5:
        nervous_habits.append(FREQUENT_PAUSES)
        nervousness_score += 2

    if nervousness_score <= 2:
        confidence_level = ConfidenceLevel.HIGH
    elif nervousness_score <= 4:
        confidence_level = ConfidenceLevel.MEDIUM
    else:
        confidence_level = ConfidenceLevel.LOW

    if nervousness_score <= 1:
        fear_indicator = FearIndicator.LOW
    elif nervousness_score <= 3:
        fear_indicator = FearIndicator.MODERATE
    else:
        fear_indicator = FearIndicator.HIGH

    logger.debug("Nervousness score %d: %s", nervousness_score, nervous_habits)

    return ConfidenceAssessment(
        confidence_level=confidence_level,
        fear_indicator=fear_indicator,
        nervous_habits=tuple(nervous_habits),
    )
