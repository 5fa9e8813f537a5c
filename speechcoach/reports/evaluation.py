"""
speechcoach.reports.evaluation - Session evaluation report.

Scorecard, speech metrics, confidence assessment and feedback lists for
one interview or group-discussion session.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

from speechcoach.analyze.scoring import GDEvaluation, InterviewEvaluation, evaluate_session
from speechcoach.analyze.speech import ConfidenceAssessment, SpeechMetrics
from speechcoach.config import CoachConfig
from speechcoach.reports.generator import ReportGenerator
from speechcoach.session import Session
from speechcoach.utils import format_duration, get_score_class


def _score_card(label: str, score: int | None) -> dict[str, Any]:
    return {
        "label": label,
        "score": score,
        "display": f"{score}/10" if score is not None else "—",
        "css_class": get_score_class(score),
    }


def build_report_data(
    session: Session,
    metrics: SpeechMetrics,
    assessment: ConfidenceAssessment,
    evaluation: InterviewEvaluation | GDEvaluation,
    config: CoachConfig,
) -> dict[str, Any]:
    """Assemble template data for the evaluation report."""
    if isinstance(evaluation, GDEvaluation):
        title = "Group Discussion Scorecard"
        overall = evaluation.overall_gd_score
        scores = [
            _score_card("Communication", evaluation.communication),
            _score_card("Grammar Usage", evaluation.grammar_usage),
            _score_card("Leadership", evaluation.leadership),
            _score_card("Confidence", evaluation.confidence),
            _score_card("Initiative", evaluation.initiative),
            _score_card("Listening Ability", evaluation.listening_ability),
            _score_card("Topic Accuracy", evaluation.topic_accuracy),
        ]
        sections = [
            {"title": "What Went Well", "items": evaluation.what_went_well, "kind": "good"},
            {"title": "Where You Lost Points", "items": evaluation.lost_points, "kind": "warn"},
            {"title": "Improvement Tips", "items": evaluation.improvement_tips, "kind": "tip"},
        ]
    else:
        title = "Interview Evaluation"
        overall = evaluation.overall_score
        scores = [
            _score_card("Grammar Accuracy", evaluation.grammar_accuracy),
            _score_card("Speech Clarity", evaluation.speech_clarity),
            _score_card("Non-Verbal Communication", evaluation.non_verbal_score),
        ]
        sections = [
            {"title": "Strengths", "items": evaluation.strengths, "kind": "good"},
            {"title": "Nervous Habits", "items": evaluation.nervous_habits, "kind": "warn"},
            {"title": "Grammar Issues", "items": evaluation.grammar_issues, "kind": "warn"},
            {"title": "Improvement Plan", "items": evaluation.improvement_plan, "kind": "tip"},
        ]

    return {
        "title": title,
        "mode": session.mode,
        "topic": session.topic,
        "candidate_name": config.candidate_name,
        "generated_at": datetime.now().isoformat(timespec="seconds"),
        "duration": format_duration(session.duration_seconds or 0.0),
        "utterance_count": session.utterance_count,
        "overall": _score_card("Overall", overall),
        "scores": scores,
        "confidence_level": assessment.confidence_level.value,
        "fear_indicator": assessment.fear_indicator.value,
        "nervous_habits": list(assessment.nervous_habits),
        "metrics": {
            "word_count": metrics.word_count,
            "words_per_minute": metrics.average_words_per_minute,
            "sentence_count": metrics.sentence_count,
            "filler_count": metrics.filler_count,
            "filler_words": sorted(metrics.filler_words),
            "pause_count": metrics.pause_count,
            "grammar_issue_count": len(metrics.grammar_issues),
        },
        "sections": sections,
        "transcripts": list(session.transcripts),
    }


def generate_evaluation_report(
    session: Session,
    config: CoachConfig,
    output_path: Path,
    open_browser: bool = False,
) -> Path:
    """Analyze, score and render a session report.

    Args:
        session: Practice session
        config: Resolved configuration
        output_path: Where to write the HTML file
        open_browser: Whether to open in browser

    Returns:
        Path to generated report
    """
    metrics, assessment, evaluation = evaluate_session(session, config)
    data = build_report_data(session, metrics, assessment, evaluation, config)

    generator = ReportGenerator()
    path = generator.render("evaluation.html", data, output_path)

    if open_browser:
        generator.open_in_browser(path)

    return path
