"""
Reporting Context

Responsibilities:
- Labels scores (Excellent / Good / Fair / Needs Work)
- Computes per-category coverage percentages
- Renders analyses as plain-text reports or JSON

Owns: Presentation of AnalysisResult instances
Never: Changes scores or re-runs matching
"""

from resumematch.contexts.reporting.report import (
    SCORE_BANDS,
    category_coverage,
    format_report,
    result_to_dict,
    result_to_json,
    score_label,
)

__all__ = [
    "SCORE_BANDS",
    "category_coverage",
    "format_report",
    "result_to_dict",
    "result_to_json",
    "score_label",
]
