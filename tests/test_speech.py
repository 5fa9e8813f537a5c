"""Tests for speechcoach.analyze.speech module."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from speechcoach.analyze.rules import FILLER_WORDS, GRAMMAR_RULES
from speechcoach.analyze.speech import (
    EXCESSIVE_FILLERS,
    FREQUENT_PAUSES,
    MODERATE_FILLERS,
    TOO_FAST,
    TOO_SLOW,
    ConfidenceLevel,
    FearIndicator,
    SpeechMetrics,
    analyze_speech,
    calculate_confidence_indicators,
    count_pauses,
    count_sentences,
    detect_fillers,
    ordered_grammar_issues,
)

HE_DONT = "Subject-verb disagreement: 'he don't' should be 'he doesn't'"
I_IS = "Subject-verb disagreement: 'I is' should be 'I am'"


class TestRuleTables:
    def test_filler_list_has_all_phrases(self) -> None:
        assert len(FILLER_WORDS) == 19
        assert "you know" in FILLER_WORDS
        assert "okay so" in FILLER_WORDS

    def test_grammar_table_order(self) -> None:
        phrases = [rule.phrase for rule in GRAMMAR_RULES]
        assert phrases[0] == "i is"
        assert phrases[-1] == "would of"
        assert len(phrases) == 11


class TestAnalyzeSpeechEmpty:
    @pytest.mark.parametrize("duration", [0.0, -10.0, 60.0, 3600.0])
    def test_empty_transcripts(self, duration: float) -> None:
        metrics = analyze_speech([], duration)
        assert metrics.filler_count == 0
        assert metrics.filler_words == set()
        assert metrics.grammar_issues == set()
        assert metrics.pause_count == 0
        assert metrics.sentence_count == 0
        assert metrics.average_words_per_minute == 0
        assert metrics.word_count == 0


class TestFillerDetection:
    def test_whole_word_match(self) -> None:
        metrics = analyze_speech(["I definitely like pizza"], 60)
        assert metrics.filler_count == 1
        assert metrics.filler_words == {"like"}

    def test_substring_does_not_match(self) -> None:
        metrics = analyze_speech(["unlikely"], 60)
        assert metrics.filler_count == 0
        assert "like" not in metrics.filler_words

    def test_case_insensitive(self) -> None:
        metrics = analyze_speech(["UM", "Um", "um"], 60)
        assert metrics.filler_count == 3
        assert metrics.filler_words == {"um"}

    def test_overlapping_phrases_counted_independently(self) -> None:
        fillers = detect_fillers("okay so we start")
        assert sorted(fillers) == ["okay so", "so"]

    def test_multi_word_filler(self) -> None:
        metrics = analyze_speech(["It was kind of hard, you know"], 60)
        assert metrics.filler_words == {"kind of", "you know"}
        assert metrics.filler_count == 2

    def test_fillers_span_utterances(self) -> None:
        metrics = analyze_speech(["I was thinking you", "know what I mean"], 60)
        assert "you know" in metrics.filler_words
        assert "i mean" in metrics.filler_words

    def test_non_ascii_letters_are_boundaries(self) -> None:
        metrics = analyze_speech(["caféum", "naïvely like"], 60)
        assert metrics.filler_words == {"um", "like"}
        assert metrics.filler_count == 2


class TestGrammarDetection:
    def test_case_insensitive_and_deduplicated(self) -> None:
        metrics = analyze_speech(["He don't know. HE DON'T care."], 60)
        assert metrics.grammar_issues == {HE_DONT}

    @pytest.mark.parametrize("text", ["I Is going", "i is going,"])
    def test_i_is_ignores_case_and_punctuation(self, text: str) -> None:
        metrics = analyze_speech([text], 60)
        assert metrics.grammar_issues == {I_IS}

    def test_word_boundary(self) -> None:
        metrics = analyze_speech(["She don't mind. This is fine."], 60)
        assert HE_DONT not in metrics.grammar_issues
        assert I_IS not in metrics.grammar_issues
        assert len(metrics.grammar_issues) == 1

    def test_multiple_rules(self) -> None:
        metrics = analyze_speech(["They was late and I could of helped"], 60)
        assert metrics.grammar_issues == {
            "Subject-verb disagreement: 'they was' should be 'they were'",
            "'could of' should be 'could have'",
        }

    def test_clean_text(self) -> None:
        metrics = analyze_speech(["My colleague and I shipped the release."], 60)
        assert metrics.grammar_issues == set()

    def test_ordered_by_table(self) -> None:
        metrics = analyze_speech(["I would of gone but I is tired and they was late"], 60)
        assert ordered_grammar_issues(metrics.grammar_issues) == [
            I_IS,
            "Subject-verb disagreement: 'they was' should be 'they were'",
            "'would of' should be 'would have'",
        ]


class TestPausesAndSentences:
    def test_pause_markers(self) -> None:
        assert count_pauses("well... i think, , maybe...") == 3

    def test_adjacent_commas(self) -> None:
        assert count_pauses("a ,, b") == 1

    def test_long_ellipsis_counts_once(self) -> None:
        assert count_pauses("hmm....") == 1

    def test_sentence_count(self) -> None:
        metrics = analyze_speech(["Hello there. How are you? Fine!"], 60)
        assert metrics.sentence_count == 3

    def test_punctuation_only_fragments_ignored(self) -> None:
        assert count_sentences("...hello!!! ? .") == 1

    def test_unterminated_text_is_one_sentence(self) -> None:
        assert count_sentences("no punctuation here") == 1


class TestWordsPerMinute:
    def test_one_minute(self) -> None:
        metrics = analyze_speech([" ".join(["word"] * 150)], 60)
        assert metrics.word_count == 150
        assert metrics.average_words_per_minute == 150

    def test_ninety_seconds(self) -> None:
        metrics = analyze_speech([" ".join(["word"] * 150)], 90)
        assert metrics.average_words_per_minute == 100

    def test_half_rounds_up(self) -> None:
        metrics = analyze_speech(["one two three four five"], 120)
        assert metrics.average_words_per_minute == 3

    @pytest.mark.parametrize("duration", [0, -30])
    def test_non_positive_duration(self, duration: float) -> None:
        metrics = analyze_speech(["some words here"], duration)
        assert metrics.average_words_per_minute == 0

    def test_whitespace_runs(self) -> None:
        metrics = analyze_speech(["  spaced   out\twords  ", ""], 60)
        assert metrics.word_count == 3


class TestConfidenceIndicators:
    def test_filler_rate_boundary_is_strict(self) -> None:
        metrics = SpeechMetrics(filler_count=1, sentence_count=1, average_words_per_minute=150)
        assessment = calculate_confidence_indicators(metrics, 60)
        assert assessment.nervous_habits == ()
        assert assessment.confidence_level == ConfidenceLevel.HIGH
        assert assessment.fear_indicator == FearIndicator.LOW

    def test_moderate_fillers(self) -> None:
        metrics = SpeechMetrics(filler_count=2, sentence_count=1, average_words_per_minute=150)
        assessment = calculate_confidence_indicators(metrics, 60)
        assert assessment.nervous_habits == (MODERATE_FILLERS,)
        assert assessment.confidence_level == ConfidenceLevel.HIGH
        assert assessment.fear_indicator == FearIndicator.LOW

    def test_excessive_fillers(self) -> None:
        metrics = SpeechMetrics(filler_count=3, sentence_count=1, average_words_per_minute=150)
        assessment = calculate_confidence_indicators(metrics, 60)
        assert assessment.nervous_habits == (EXCESSIVE_FILLERS,)
        assert assessment.confidence_level == ConfidenceLevel.MEDIUM
        assert assessment.fear_indicator == FearIndicator.MODERATE

    def test_zero_sentences_uses_one(self) -> None:
        metrics = SpeechMetrics(filler_count=3, sentence_count=0, average_words_per_minute=150)
        assessment = calculate_confidence_indicators(metrics, 60)
        assert EXCESSIVE_FILLERS in assessment.nervous_habits

    @pytest.mark.parametrize("wpm", [100, 140, 180])
    def test_comfortable_rate(self, wpm: int) -> None:
        metrics = SpeechMetrics(average_words_per_minute=wpm)
        assessment = calculate_confidence_indicators(metrics, 60)
        assert assessment.nervous_habits == ()

    def test_too_fast(self) -> None:
        metrics = SpeechMetrics(average_words_per_minute=181)
        assessment = calculate_confidence_indicators(metrics, 60)
        assert assessment.nervous_habits == (TOO_FAST,)
        assert assessment.confidence_level == ConfidenceLevel.HIGH
        assert assessment.fear_indicator == FearIndicator.MODERATE

    def test_frequent_pauses(self) -> None:
        metrics = SpeechMetrics(pause_count=6, average_words_per_minute=150)
        assessment = calculate_confidence_indicators(metrics, 60)
        assert assessment.nervous_habits == (FREQUENT_PAUSES,)

    def test_pause_rate_boundary(self) -> None:
        metrics = SpeechMetrics(pause_count=10, average_words_per_minute=150)
        assessment = calculate_confidence_indicators(metrics, 120)
        assert FREQUENT_PAUSES not in assessment.nervous_habits

    def test_short_session_pause_rate_uses_one_minute(self) -> None:
        metrics = SpeechMetrics(pause_count=6, average_words_per_minute=150)
        assessment = calculate_confidence_indicators(metrics, 0)
        assert FREQUENT_PAUSES in assessment.nervous_habits

    def test_score_four(self) -> None:
        metrics = SpeechMetrics(pause_count=6, average_words_per_minute=50)
        assessment = calculate_confidence_indicators(metrics, 60)
        assert assessment.nervous_habits == (TOO_SLOW, FREQUENT_PAUSES)
        assert assessment.confidence_level == ConfidenceLevel.MEDIUM
        assert assessment.fear_indicator == FearIndicator.HIGH

    def test_all_factors_in_order(self) -> None:
        metrics = SpeechMetrics(
            filler_count=10,
            sentence_count=2,
            pause_count=20,
            average_words_per_minute=200,
        )
        assessment = calculate_confidence_indicators(metrics, 60)
        assert assessment.nervous_habits == (EXCESSIVE_FILLERS, TOO_FAST, FREQUENT_PAUSES)
        assert assessment.confidence_level == ConfidenceLevel.LOW
        assert assessment.fear_indicator == FearIndicator.HIGH

    def test_deterministic(self) -> None:
        metrics = analyze_speech(["Um, I guess... it was, like, fine"], 30)
        first = calculate_confidence_indicators(metrics, 30)
        second = calculate_confidence_indicators(metrics, 30)
        assert first == second

    def test_levels_serialize_as_labels(self) -> None:
        assessment = calculate_confidence_indicators(SpeechMetrics(), 60)
        dumped = assessment.model_dump(mode="json")
        assert dumped["nervous_habits"] == [TOO_SLOW]
        assert dumped["confidence_level"] == "High"
        assert dumped["fear_indicator"] == "Moderate"


class TestEndToEnd:
    def test_nervous_short_answer(self) -> None:
        transcripts = ["um so I think uh this is like a good idea you know"]
        metrics = analyze_speech(transcripts, 10)

        assert metrics.word_count == 13
        assert metrics.filler_words == {"um", "so", "uh", "like", "you know"}
        assert metrics.filler_count == 5
        assert metrics.sentence_count == 1
        assert metrics.average_words_per_minute == 78

        assessment = calculate_confidence_indicators(metrics, 10)
        assert assessment.nervous_habits == (EXCESSIVE_FILLERS, TOO_SLOW)
        assert assessment.confidence_level == ConfidenceLevel.LOW
        assert assessment.fear_indicator == FearIndicator.HIGH

    def test_repeated_calls_are_independent(self) -> None:
        first = analyze_speech(["I is here. Me and him left."], 60)
        second = analyze_speech(["I is here. Me and him left."], 60)
        assert first == second
        assert len(first.grammar_issues) == 2

    def test_metrics_are_immutable(self) -> None:
        metrics = analyze_speech(["hello"], 60)
        with pytest.raises(ValidationError):
            metrics.filler_count = 3
