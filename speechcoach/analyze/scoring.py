"""
speechcoach.analyze.scoring - Interview and group-discussion evaluations.

Combines speech metrics, the confidence assessment and simple
participation arithmetic into 1-10 scores with feedback lists.
Non-verbal scoring is a fixed placeholder that only reflects whether the
camera was on.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from speechcoach.analyze.speech import (
    ConfidenceAssessment,
    ConfidenceLevel,
    FearIndicator,
    SpeechMetrics,
    analyze_speech,
    calculate_confidence_indicators,
    ordered_grammar_issues,
)
from speechcoach.config import CoachConfig, ScoringConfig
from speechcoach.session import Session
from speechcoach.utils import round_half_up

CONFIDENCE_POINTS: dict[ConfidenceLevel, int] = {
    ConfidenceLevel.HIGH: 9,
    ConfidenceLevel.MEDIUM: 7,
    ConfidenceLevel.LOW: 5,
}


class InterviewEvaluation(BaseModel):
    type: Literal["interview"] = "interview"
    grammar_accuracy: int
    speech_clarity: int
    confidence_level: ConfidenceLevel
    fear_indicator: FearIndicator
    non_verbal_score: int
    overall_score: int
    strengths: list[str]
    nervous_habits: list[str]
    grammar_issues: list[str]
    improvement_plan: list[str]


class GDEvaluation(BaseModel):
    type: Literal["gd"] = "gd"
    communication: int
    grammar_usage: int
    leadership: int
    confidence: int
    # Assessed by the remote evaluator, never locally.
    initiative: int | None = None
    listening_ability: int | None = None
    topic_accuracy: int | None = None
    overall_gd_score: int
    what_went_well: list[str]
    lost_points: list[str]
    improvement_tips: list[str]


def grammar_score(metrics: SpeechMetrics, scoring: ScoringConfig) -> int:
    """One point off per distinct grammar issue, floored at min_score."""
    return max(scoring.min_score, 10 - len(metrics.grammar_issues))


def clarity_score(metrics: SpeechMetrics, scoring: ScoringConfig) -> int:
    """Score speaking rate and filler usage out of 10.

    8 points for a rate inside the ideal band (6 otherwise), plus 2 when
    filler usage stays under the tolerance.
    """
    wpm = metrics.average_words_per_minute
    in_band = scoring.ideal_wpm_min <= wpm <= scoring.ideal_wpm_max
    rate_points = 8 if in_band else 6
    filler_points = 2 if metrics.filler_count < scoring.filler_tolerance else 0
    return min(10, rate_points + filler_points)


def evaluate_interview(
    session: Session,
    metrics: SpeechMetrics,
    assessment: ConfidenceAssessment,
    config: CoachConfig,
) -> InterviewEvaluation:
    """Build the interview evaluation for a session."""
    scoring = config.scoring
    grammar = grammar_score(metrics, scoring)
    clarity = clarity_score(metrics, scoring)
    non_verbal = 7 if (session.camera_enabled or config.camera_enabled) else 6
    confidence_points = CONFIDENCE_POINTS[assessment.confidence_level]

    few_fillers = metrics.filler_count < scoring.filler_tolerance
    strengths = [
        "Engaged actively throughout the interview"
        if session.utterance_count >= 5
        else "Participated in the interview",
        "Clear communication with minimal filler words"
        if few_fillers
        else "Attempted to communicate clearly",
        "Provided detailed responses"
        if metrics.sentence_count > 10
        else "Gave structured responses",
    ]

    return InterviewEvaluation(
        grammar_accuracy=grammar,
        speech_clarity=clarity,
        confidence_level=assessment.confidence_level,
        fear_indicator=assessment.fear_indicator,
        non_verbal_score=non_verbal,
        overall_score=round_half_up((grammar + clarity + non_verbal + confidence_points) / 4),
        strengths=strengths,
        nervous_habits=list(assessment.nervous_habits),
        grammar_issues=ordered_grammar_issues(metrics.grammar_issues),
        improvement_plan=list(config.improvement_tips),
    )


def evaluate_group_discussion(
    session: Session,
    metrics: SpeechMetrics,
    assessment: ConfidenceAssessment,
    config: CoachConfig,
) -> GDEvaluation:
    """Build the group-discussion evaluation for a session."""
    scoring = config.scoring
    turns = session.utterance_count

    participation = min(10, round_half_up(turns * 1.5))
    grammar = grammar_score(metrics, scoring)
    communication = clarity_score(metrics, scoring)
    leadership = min(10, participation + (2 if turns > 3 else 0))
    confidence = CONFIDENCE_POINTS[assessment.confidence_level]

    # Overall GD score only distinguishes High confidence from the rest.
    overall_confidence = 9 if assessment.confidence_level == ConfidenceLevel.HIGH else 7
    overall = round_half_up((communication + grammar + participation + overall_confidence) / 4)

    what_went_well = [
        "Good participation - spoke multiple times" if turns >= 3 else "Participated in discussion",
        "Clear speech with minimal filler words"
        if metrics.filler_count < scoring.filler_tolerance
        else "Engaged actively",
        "Stayed on topic throughout the discussion",
    ]

    lost_points = []
    if metrics.grammar_issues:
        lost_points.append("Some grammar issues in responses")
    if turns < 3:
        lost_points.append("Could have participated more actively")
    if metrics.filler_count > scoring.filler_tolerance:
        lost_points.append("Excessive use of filler words")

    return GDEvaluation(
        communication=communication,
        grammar_usage=grammar,
        leadership=leadership,
        confidence=confidence,
        overall_gd_score=overall,
        what_went_well=what_went_well,
        lost_points=lost_points,
        improvement_tips=list(config.improvement_tips),
    )


def evaluate_session(
    session: Session,
    config: CoachConfig,
) -> tuple[SpeechMetrics, ConfidenceAssessment, InterviewEvaluation | GDEvaluation]:
    """Analyze a session and score it according to its mode.

    Returns:
        Tuple of (metrics, assessment, evaluation)
    """
    duration = session.duration_seconds or 0.0
    metrics = analyze_speech(session.transcripts, duration)
    assessment = calculate_confidence_indicators(metrics, duration)

    if session.mode == "gd":
        evaluation: InterviewEvaluation | GDEvaluation = evaluate_group_discussion(
            session, metrics, assessment, config
        )
    else:
        evaluation = evaluate_interview(session, metrics, assessment, config)

    return metrics, assessment, evaluation
