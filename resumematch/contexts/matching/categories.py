"""
Category classification and context keyword lookup.

Two views over raw text:
- extract_category() scans with compiled phrase matchers (skills, certifications)
  and returns the literal phrases found.
- find_context_keywords() checks which words of a theme vocabulary
  (experience, education, certifications) occur anywhere in the text.
"""

import re
from typing import Iterable, List, Optional

from resumematch.contexts.matching.patterns import VOCABULARY, Vocabulary


def extract_category(text: str, patterns: Iterable[re.Pattern]) -> List[str]:
    """
    Collect the phrases matched by a set of category patterns.

    Args:
        text: Text to scan (case is ignored by the patterns)
        patterns: Compiled matchers, e.g. Vocabulary.skill_patterns

    Returns:
        Matched substrings, lowercased and trimmed, deduplicated in first-seen order

    Example:
        >>> extract_category("Python, AWS and python scripts", VOCABULARY.skill_patterns)
        ['python', 'aws']
    """
    matches = []
    for pattern in patterns:
        for match in pattern.finditer(text):
            phrase = match.group(0).lower().strip()
            if phrase:
                matches.append(phrase)

    return list(dict.fromkeys(matches))


def extract_skills(text: str, vocabulary: Optional[Vocabulary] = None) -> List[str]:
    """Skills named in the text, in first-seen order."""
    vocabulary = vocabulary or VOCABULARY
    return extract_category(text, vocabulary.skill_patterns)


def extract_certifications(text: str, vocabulary: Optional[Vocabulary] = None) -> List[str]:
    """Certifications named in the text, in first-seen order."""
    vocabulary = vocabulary or VOCABULARY
    return extract_category(text, vocabulary.certification_patterns)


def is_skill(keyword: str, vocabulary: Optional[Vocabulary] = None) -> bool:
    """Check whether any skill phrase occurs in the keyword."""
    vocabulary = vocabulary or VOCABULARY
    return any(p.search(keyword) for p in vocabulary.skill_patterns)


def find_context_keywords(
    text: str, theme: str, vocabulary: Optional[Vocabulary] = None
) -> List[str]:
    """
    Find which words of a theme vocabulary appear in the text.

    Matching is plain substring containment on the lowercased text, so "led"
    is found inside "skilled". That looseness is part of the scoring behavior.

    Args:
        text: Text to search
        theme: "experience", "education" or "certifications"
        vocabulary: Vocabulary supplying theme words (default: packaged VOCABULARY)

    Returns:
        Theme words present in the text, in vocabulary order

    Raises:
        ValueError: If theme is not a known theme name
    """
    vocabulary = vocabulary or VOCABULARY
    lowered = text.lower()
    return [w for w in vocabulary.theme_words(theme) if w in lowered]
