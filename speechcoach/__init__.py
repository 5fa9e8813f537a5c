"""
SpeechCoach - Interview and group-discussion practice toolkit.

Turns the transcripts of a practice session into speech metrics (filler
words, grammar flags, speaking rate, pauses), a confidence assessment,
a scored evaluation, and an HTML report.
"""

__version__ = "0.1.0"
