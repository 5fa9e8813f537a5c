"""
speechcoach.analyze.rules - Filler-word list and grammar-pattern table.

Both tables are plain data compiled once at import. Every pattern is
anchored on word boundaries and matched case-insensitively.
"""

from __future__ import annotations

import re
from typing import NamedTuple

FILLER_WORDS: tuple[str, ...] = (
    "um",
    "uh",
    "like",
    "you know",
    "actually",
    "basically",
    "literally",
    "so",
    "well",
    "i mean",
    "kind of",
    "sort of",
    "right",
    "okay so",
    "you see",
    "honestly",
    "frankly",
    "anyway",
    "whatever",
)


class GrammarRule(NamedTuple):
    """A grammar-error pattern and the issue it reports."""

    phrase: str
    issue: str
    pattern: re.Pattern[str]


def _word_pattern(phrase: str) -> re.Pattern[str]:
    # Only ASCII letters, digits and "_" count as word characters.
    return re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE | re.ASCII)


def _rule(phrase: str, issue: str) -> GrammarRule:
    return GrammarRule(phrase, issue, _word_pattern(phrase))


FILLER_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (filler, _word_pattern(filler)) for filler in FILLER_WORDS
)

GRAMMAR_RULES: tuple[GrammarRule, ...] = (
    _rule("i is", "Subject-verb disagreement: 'I is' should be 'I am'"),
    _rule("he don't", "Subject-verb disagreement: 'he don't' should be 'he doesn't'"),
    _rule("she don't", "Subject-verb disagreement: 'she don't' should be 'she doesn't'"),
    _rule("they was", "Subject-verb disagreement: 'they was' should be 'they were'"),
    _rule("me and", "Consider using 'X and I' instead of 'me and X'"),
    _rule("did went", "Double past tense: 'did went' should be 'went' or 'did go'"),
    _rule("more better", "Double comparative: 'more better' should be 'better'"),
    _rule("most best", "Double superlative: 'most best' should be 'best'"),
    _rule("could of", "'could of' should be 'could have'"),
    _rule("should of", "'should of' should be 'should have'"),
    _rule("would of", "'would of' should be 'would have'"),
)

# Textual stand-ins for spoken pauses: an ellipsis, or an empty comma pair.
ELLIPSIS = "..."
DOUBLE_COMMA_PATTERN = re.compile(r",\s*,")

SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]+")
