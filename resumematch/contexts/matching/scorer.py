"""
Keyword matcher and scorer.

analyze() is the entry point of the matching context. It is a pure function of
its two input strings: no I/O, no shared mutable state, and no failure path for
any string input (empty strings included).

Pipeline:
    1. Extract keywords from resume and job description
    2. Select the important JD keywords (long enough or a known skill, capped)
    3. Classify each as matched, partial (stem match) or missing
    4. Build the skills/experience/education/certifications breakdown
    5. Score, then derive suggestions
"""

import math
from typing import List, Optional, Sequence

from resumematch.contexts.matching.analysis_data_structure import (
    AnalysisResult,
    Breakdown,
    CategoryBreakdown,
)
from resumematch.contexts.matching.categories import (
    extract_certifications,
    extract_skills,
    find_context_keywords,
    is_skill,
)
from resumematch.contexts.matching.config import DEFAULT_SCORING_CONFIG, ScoringConfig
from resumematch.contexts.matching.keywords import extract_keywords
from resumematch.contexts.matching.logger import (
    _log_debug,
    _log_warning,
    log_analysis_result,
    log_analysis_start,
)
from resumematch.contexts.matching.patterns import VOCABULARY, Vocabulary
from resumematch.contexts.matching.suggestions import generate_suggestions

MATCHED = "matched"
PARTIAL = "partial"
MISSING = "missing"


def select_important_keywords(
    jd_keywords: Sequence[str],
    vocabulary: Optional[Vocabulary] = None,
    config: Optional[ScoringConfig] = None,
) -> List[str]:
    """
    Filter JD keywords down to the ones worth matching.

    A keyword is kept if it is longer than config.min_keyword_length or contains
    a known skill (so "aws" and "sql" survive). The result is capped at
    config.max_important_keywords in extraction order.
    """
    vocabulary = vocabulary or VOCABULARY
    config = config or DEFAULT_SCORING_CONFIG

    important = [
        kw
        for kw in dict.fromkeys(jd_keywords)
        if len(kw) > config.min_keyword_length or is_skill(kw, vocabulary)
    ]
    return important[: config.max_important_keywords]


def keyword_stem(keyword: str, config: Optional[ScoringConfig] = None) -> str:
    """
    Crude prefix stem used for partial matching.

    Keeps max(min_stem_length, len(keyword) - stem_trim) leading characters,
    so "developer" becomes "develo" and "aws" stays "aws".
    """
    config = config or DEFAULT_SCORING_CONFIG
    return keyword[: max(config.min_stem_length, len(keyword) - config.stem_trim)]


def classify_keyword(
    keyword: str, resume_lower: str, config: Optional[ScoringConfig] = None
) -> str:
    """
    Classify one JD keyword against lowercased resume text.

    Returns:
        MATCHED if the keyword is a substring of the resume, PARTIAL if only its
        stem is, MISSING otherwise
    """
    if keyword in resume_lower:
        return MATCHED
    if keyword_stem(keyword, config) in resume_lower:
        return PARTIAL
    return MISSING


def _split_by_presence(terms: Sequence[str], resume_lower: str) -> CategoryBreakdown:
    return CategoryBreakdown(
        matched=tuple(t for t in terms if t in resume_lower),
        missing=tuple(t for t in terms if t not in resume_lower),
    )


def build_breakdown(
    resume_lower: str, jd_lower: str, vocabulary: Optional[Vocabulary] = None
) -> Breakdown:
    """
    Detect category terms in the job description and check each against the resume.

    Terms that only appear in the resume are ignored: every list is
    JD-detected first, then resume-checked.
    """
    vocabulary = vocabulary or VOCABULARY

    return Breakdown(
        skills=_split_by_presence(extract_skills(jd_lower, vocabulary), resume_lower),
        experience=_split_by_presence(
            find_context_keywords(jd_lower, "experience", vocabulary), resume_lower
        ),
        education=_split_by_presence(
            find_context_keywords(jd_lower, "education", vocabulary), resume_lower
        ),
        certifications=_split_by_presence(
            extract_certifications(jd_lower, vocabulary), resume_lower
        ),
    )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_score(
    matched: int,
    partial: int,
    considered: int,
    skills_matched: int,
    skills_detected: int,
    config: Optional[ScoringConfig] = None,
) -> int:
    """
    Combine match counts into a 0-100 score.

    Full matches count 1, partial matches count config.partial_weight, both as a
    fraction of the considered keywords. Skill overlap adds up to
    config.skill_bonus_weight on top, and the total is capped at 100.

    Args:
        matched: Number of matched JD keywords
        partial: Number of partially matched JD keywords
        considered: Number of important JD keywords
        skills_matched: JD skills found in the resume
        skills_detected: Skills detected in the JD
        config: Weights (default: DEFAULT_SCORING_CONFIG)

    Returns:
        Integer score in [0, 100]
    """
    config = config or DEFAULT_SCORING_CONFIG
    denominator = max(considered, 1)

    match_score = matched / denominator
    partial_score = (partial * config.partial_weight) / denominator
    skill_bonus = skills_matched / max(skills_detected, 1) * config.skill_bonus_weight

    raw = _round_half_up((match_score + partial_score + skill_bonus) * 100)
    return max(0, min(100, raw))


def analyze(
    resume_text: str,
    job_description: str,
    config: Optional[ScoringConfig] = None,
    vocabulary: Optional[Vocabulary] = None,
) -> AnalysisResult:
    """
    Score how well a resume matches a job description.

    Args:
        resume_text: Plain resume text
        job_description: Plain job description text
        config: Scoring settings (default: DEFAULT_SCORING_CONFIG)
        vocabulary: Vocabulary (default: packaged VOCABULARY)

    Returns:
        Immutable AnalysisResult

    Example:
        >>> result = analyze("Python developer, 5 years", "Senior Python developer")
        >>> result.matched_keywords
        ('python', 'developer', 'python developer')
    """
    config = config or DEFAULT_SCORING_CONFIG
    vocabulary = vocabulary or VOCABULARY

    log_analysis_start(len(resume_text), len(job_description))

    resume_lower = resume_text.lower()
    jd_lower = job_description.lower()

    important = select_important_keywords(
        extract_keywords(job_description, vocabulary), vocabulary, config
    )
    _log_debug(f"{len(important)} important JD keyword(s) selected")
    if not important:
        _log_warning("No important keywords found in job description")

    buckets = {MATCHED: [], PARTIAL: [], MISSING: []}
    for keyword in important:
        buckets[classify_keyword(keyword, resume_lower, config)].append(keyword)

    breakdown = build_breakdown(resume_lower, jd_lower, vocabulary)

    score = compute_score(
        matched=len(buckets[MATCHED]),
        partial=len(buckets[PARTIAL]),
        considered=len(important),
        skills_matched=len(breakdown.skills.matched),
        skills_detected=breakdown.skills.total,
        config=config,
    )

    suggestions = generate_suggestions(
        resume_lower, buckets[MISSING], breakdown, score, config
    )

    result = AnalysisResult(
        score=score,
        matched_keywords=tuple(buckets[MATCHED]),
        missing_keywords=tuple(buckets[MISSING]),
        partial_matches=tuple(buckets[PARTIAL]),
        total_jd_keywords=len(important),
        breakdown=breakdown,
        suggestions=tuple(suggestions),
    )
    log_analysis_result(result)

    return result
