"""Unit tests for category classification and context keyword lookup."""

import pytest

from resumematch.contexts.matching.categories import (
    extract_category,
    extract_certifications,
    extract_skills,
    find_context_keywords,
    is_skill,
)
from resumematch.contexts.matching.patterns import VOCABULARY


@pytest.mark.unit
def test_extract_category_dedupes_in_first_seen_order():
    found = extract_category("Python, AWS and python scripts", VOCABULARY.skill_patterns)
    assert found == ["python", "aws"]


@pytest.mark.unit
def test_extract_category_merges_patterns():
    patterns = VOCABULARY.skill_patterns + VOCABULARY.certification_patterns
    found = extract_category("PMP holder fluent in SQL", patterns)
    assert found == ["sql", "pmp"]


@pytest.mark.unit
def test_skill_inside_longer_word_not_matched():
    """'rest' in 'interested' and 'restaurants' is not the REST skill."""
    assert extract_skills("I am interested in restaurants") == []


@pytest.mark.unit
def test_longer_skill_wins_over_prefix():
    assert extract_skills("JavaScript") == ["javascript"]
    assert extract_skills("Java and JavaScript") == ["java", "javascript"]


@pytest.mark.unit
def test_symbol_terminated_skills():
    assert extract_skills("Expert in C++ and C#.") == ["c++", "c#"]


@pytest.mark.unit
def test_multiword_skills():
    assert extract_skills("Machine Learning and Power BI dashboards") == [
        "machine learning",
        "power bi",
    ]


@pytest.mark.unit
def test_nextjs_variants():
    assert extract_skills("Next.js and NextJS") == ["next.js", "nextjs"]


@pytest.mark.unit
def test_extract_certifications():
    found = extract_certifications("PMP and AWS Certified Solutions Architect, Six Sigma")
    assert found == ["pmp", "aws certified", "six sigma"]


@pytest.mark.unit
def test_scrum_master_is_certification_not_just_skill():
    assert extract_skills("Scrum Master") == ["scrum"]
    assert extract_certifications("Scrum Master") == ["scrum master"]


@pytest.mark.unit
def test_is_skill():
    assert is_skill("python developer")
    assert is_skill("aws")
    assert not is_skill("developer")


@pytest.mark.unit
class TestFindContextKeywords:
    """Tests for theme vocabulary lookup."""

    def test_experience_in_vocabulary_order(self):
        found = find_context_keywords("Led a team; 5 years of experience", "experience")
        assert found == ["years", "experience", "led"]

    def test_substring_matching_is_loose(self):
        """'led' is found inside 'skilled'."""
        assert find_context_keywords("highly skilled", "experience") == ["led"]

    def test_education(self):
        found = find_context_keywords("Bachelor's degree from a university", "education")
        assert found == ["bachelor", "degree", "university"]

    def test_certifications_theme(self):
        found = find_context_keywords(
            "Certified Kubernetes Administrator certification", "certifications"
        )
        assert found == ["certified", "certification"]

    def test_empty_text(self):
        assert find_context_keywords("", "education") == []

    def test_unknown_theme(self):
        with pytest.raises(ValueError, match="Unknown theme"):
            find_context_keywords("anything", "hobbies")
