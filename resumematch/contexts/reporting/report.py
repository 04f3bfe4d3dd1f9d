"""
Human-readable and JSON renderings of an AnalysisResult.

Score bands, chip-list truncation and per-category coverage follow the match
dashboard: bands at 75/55/35, at most 25 matched, 15 partial and 25 missing
keywords shown before a "+N more" marker.
"""

import json
from typing import Dict

from resumematch.contexts.matching.analysis_data_structure import AnalysisResult, Breakdown
from resumematch.utils.report_formatter import Column, TableFormatter, format_percentage, percentage
from resumematch.utils.text_processing import wrap_words

# (minimum score, label), highest band first
SCORE_BANDS = (
    (75, "Excellent Match"),
    (55, "Good Match"),
    (35, "Fair Match"),
    (0, "Needs Work"),
)

REPORT_WIDTH = 80


def score_label(score: int) -> str:
    """
    Describe a score in words.

    Example:
        >>> score_label(80)
        'Excellent Match'
        >>> score_label(34)
        'Needs Work'
    """
    for threshold, label in SCORE_BANDS:
        if score >= threshold:
            return label
    return SCORE_BANDS[-1][1]


def category_coverage(breakdown: Breakdown) -> Dict[str, int]:
    """
    Percentage of JD-detected terms found in the resume, per category.

    Categories with nothing detected in the job description report 0.
    """
    return {
        name: percentage(len(category.matched), category.total)
        for name, category in breakdown.items()
    }


def format_report(
    result: AnalysisResult,
    max_matched: int = 25,
    max_partial: int = 15,
    max_missing: int = 25,
) -> str:
    """
    Render an analysis as a plain-text report.

    Args:
        result: AnalysisResult from analyze()
        max_matched: Matched keywords listed before "+N more"
        max_partial: Partial matches listed before "+N more"
        max_missing: Missing keywords listed before "+N more"

    Returns:
        Multi-line report string
    """
    total = result.total_jd_keywords
    report = TableFormatter(total_width=REPORT_WIDTH)

    report.add_section_header("ATS MATCH REPORT")
    report.add_text(f"Score: {result.score}/100 ({score_label(result.score)})")
    report.add_text(f"Job description keywords considered: {total}")
    report.add_blank_line()

    report.set_columns([Column("Keywords", 12), Column("Count", 7, ">"), Column("Share", 7, ">")])
    report.add_table_header()
    for label, keywords in (
        ("Matched", result.matched_keywords),
        ("Partial", result.partial_matches),
        ("Missing", result.missing_keywords),
    ):
        report.add_row([label, len(keywords), format_percentage(len(keywords), total)])
    report.add_blank_line()

    report.add_chip_list("Matched", result.matched_keywords, max_matched)
    report.add_chip_list("Partial match", result.partial_matches, max_partial)
    report.add_chip_list("Missing", result.missing_keywords, max_missing)

    report.add_section_header("CATEGORY BREAKDOWN")
    report.set_columns(
        [
            Column("Category", 16),
            Column("Found", 6, ">"),
            Column("Of", 4, ">"),
            Column("Coverage", 9, ">"),
            Column("Missing", 40),
        ]
    )
    report.add_table_header()
    coverage = category_coverage(result.breakdown)
    for name, category in result.breakdown.items():
        report.add_row(
            [
                name.capitalize(),
                len(category.matched),
                category.total,
                f"{coverage[name]}%",
                ", ".join(category.missing) or "-",
            ]
        )

    if result.suggestions:
        report.add_section_header("SUGGESTIONS")
        for i, suggestion in enumerate(result.suggestions, 1):
            for line in wrap_words(f"{i}. {suggestion}", REPORT_WIDTH, indent="   "):
                report.add_text(line)

    return report.render()


def result_to_dict(result: AnalysisResult) -> dict:
    """AnalysisResult as a JSON-ready dict with the score label and category coverage added."""
    data = result.to_dict()
    data["label"] = score_label(result.score)
    data["coverage"] = category_coverage(result.breakdown)
    return data


def result_to_json(result: AnalysisResult, indent: int = 2) -> str:
    """Serialize an analysis to JSON (keys in result order, label and coverage last)."""
    return json.dumps(result_to_dict(result), indent=indent)
