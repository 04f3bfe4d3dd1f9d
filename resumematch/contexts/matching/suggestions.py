"""
Improvement suggestions derived from a scored match.

Rules are evaluated independently and in a fixed order; each contributes at
most one suggestion string.
"""

from typing import List, Optional, Sequence

from resumematch.contexts.matching.analysis_data_structure import Breakdown
from resumematch.contexts.matching.config import DEFAULT_SCORING_CONFIG, ScoringConfig

# Substrings that show a resume already quantifies its achievements
QUANTIFICATION_MARKERS = ("quantif", "%", "$")

QUANTIFY_SUGGESTION = "Quantify your achievements with metrics (%, $, numbers) to stand out"
MIRROR_LANGUAGE_SUGGESTION = (
    "Tailor your resume summary to directly mirror the job description language"
)


def _listing(items: Sequence[str], limit: int) -> str:
    return ", ".join(items[:limit])


def generate_suggestions(
    resume_lower: str,
    missing_keywords: Sequence[str],
    breakdown: Breakdown,
    score: int,
    config: Optional[ScoringConfig] = None,
) -> List[str]:
    """
    Build the ordered suggestion list for an analysis.

    Rules, in order:
        1. Missing skills: name the first few
        2. Many missing keywords: name the first few
        3. No quantified achievements ("quantif", "%" or "$" absent)
        4. Missing certifications: name the first few
        5. Low overall score: mirror the job description's language

    Args:
        resume_lower: Lowercased resume text
        missing_keywords: Missing JD keywords in JD order
        breakdown: Category breakdown of the analysis
        score: Overall score
        config: Limits and thresholds (default: DEFAULT_SCORING_CONFIG)

    Returns:
        Suggestion strings; empty when no rule fires
    """
    config = config or DEFAULT_SCORING_CONFIG
    suggestions = []

    missing_skills = breakdown.skills.missing
    if missing_skills:
        suggestions.append(
            f"Add these missing technical skills: {_listing(missing_skills, config.max_listed_skills)}"
        )

    if len(missing_keywords) > config.missing_keyword_threshold:
        suggestions.append(
            "Include these job-critical keywords: "
            f"{_listing(missing_keywords, config.max_listed_keywords)}"
        )

    if not any(marker in resume_lower for marker in QUANTIFICATION_MARKERS):
        suggestions.append(QUANTIFY_SUGGESTION)

    missing_certs = breakdown.certifications.missing
    if missing_certs:
        suggestions.append(
            f"Consider obtaining: {_listing(missing_certs, config.max_listed_certifications)}"
        )

    if score < config.low_score_threshold:
        suggestions.append(MIRROR_LANGUAGE_SUGGESTION)

    return suggestions
