"""
speechcoach.analyze - Speech metrics and evaluation scoring.

Derives filler-word, grammar, speaking-rate, pause and sentence metrics
from session transcripts, classifies confidence, and turns the result
into interview or group-discussion scores.
"""

from __future__ import annotations

from speechcoach.analyze.speech import (
    ConfidenceAssessment,
    ConfidenceLevel,
    FearIndicator,
    SpeechMetrics,
    analyze_speech,
    calculate_confidence_indicators,
)

__all__ = [
    "ConfidenceAssessment",
    "ConfidenceLevel",
    "FearIndicator",
    "SpeechMetrics",
    "analyze_speech",
    "calculate_confidence_indicators",
]
