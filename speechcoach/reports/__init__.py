"""
speechcoach.reports - HTML report generation.

Generates a self-contained HTML evaluation report for a practice session.
"""

from __future__ import annotations

from speechcoach.reports.evaluation import build_report_data, generate_evaluation_report
from speechcoach.reports.generator import ReportGenerator

__all__ = ["ReportGenerator", "build_report_data", "generate_evaluation_report"]
