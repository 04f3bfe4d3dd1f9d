"""Unit tests for the suggestion rules."""

import pytest

from resumematch.contexts.matching.analysis_data_structure import Breakdown, CategoryBreakdown
from resumematch.contexts.matching.config import ScoringConfig
from resumematch.contexts.matching.suggestions import (
    MIRROR_LANGUAGE_SUGGESTION,
    QUANTIFY_SUGGESTION,
    generate_suggestions,
)

FULL_BREAKDOWN = Breakdown(
    skills=CategoryBreakdown(
        matched=("python",),
        missing=("java", "kotlin", "scala", "ruby", "php", "swift"),
    ),
    certifications=CategoryBreakdown(missing=("pmp", "itil", "ccna", "cissp")),
)

MISSING_KEYWORDS = ["alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf"]


@pytest.mark.unit
def test_all_rules_fire_in_order():
    suggestions = generate_suggestions(
        "no numbers anywhere", MISSING_KEYWORDS, FULL_BREAKDOWN, score=20
    )

    assert suggestions == [
        "Add these missing technical skills: java, kotlin, scala, ruby, php",
        "Include these job-critical keywords: alpha, bravo, charlie, delta, echo",
        QUANTIFY_SUGGESTION,
        "Consider obtaining: pmp, itil, ccna",
        MIRROR_LANGUAGE_SUGGESTION,
    ]


@pytest.mark.unit
def test_no_rule_fires():
    suggestions = generate_suggestions(
        "grew revenue 20%", MISSING_KEYWORDS[:5], Breakdown(), score=80
    )
    assert suggestions == []


@pytest.mark.unit
def test_missing_keyword_threshold_is_strict():
    """Exactly five missing keywords does not trigger the keyword rule."""
    suggestions = generate_suggestions("cut costs 10%", MISSING_KEYWORDS[:5], Breakdown(), 90)
    assert suggestions == []

    suggestions = generate_suggestions("cut costs 10%", MISSING_KEYWORDS[:6], Breakdown(), 90)
    assert suggestions == ["Include these job-critical keywords: alpha, bravo, charlie, delta, echo"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "resume_lower",
    ["managed a $2m budget", "quantified impact of launches", "improved uptime by 5%"],
)
def test_quantification_markers(resume_lower):
    suggestions = generate_suggestions(resume_lower, [], Breakdown(), score=90)
    assert QUANTIFY_SUGGESTION not in suggestions


@pytest.mark.unit
def test_low_score_boundary():
    assert MIRROR_LANGUAGE_SUGGESTION in generate_suggestions("40%", [], Breakdown(), 49)
    assert MIRROR_LANGUAGE_SUGGESTION not in generate_suggestions("40%", [], Breakdown(), 50)


@pytest.mark.unit
def test_custom_limits():
    config = ScoringConfig(max_listed_skills=2, max_listed_certifications=1)
    suggestions = generate_suggestions("40%", [], FULL_BREAKDOWN, 90, config)

    assert suggestions == [
        "Add these missing technical skills: java, kotlin",
        "Consider obtaining: pmp",
    ]
