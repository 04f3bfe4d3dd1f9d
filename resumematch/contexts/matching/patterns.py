"""
Vocabularies and phrase matchers for keyword matching.

The vocabulary (skills, certifications, context theme words, stop words) is
data stored in vocabulary.yaml next to this module. It is loaded once at import
into a frozen Vocabulary instance, VOCABULARY, which every matching function
uses by default.

Pattern conventions:
- Dataclasses with frozen=True for immutability
- Compiled re.Pattern attributes
- Helper functions that build patterns from data
"""

import re
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Tuple, Union

import yaml
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException

from resumematch.contexts.matching.exceptions import VocabularyError

VOCABULARY_PATH = Path(__file__).parent / "vocabulary.yaml"

THEMES = ("experience", "education", "certifications")


# =============================================================================
# TEXT CLEANUP PATTERNS
# =============================================================================


@dataclass(frozen=True)
class TokenPatterns:
    """
    Character filters applied before tokenizing lowercased text.

    Unigrams keep +, #, . and / so that tokens like "c++", "c#", "node.js" and
    "ci/cd" survive. N-gram windows are reduced to letters, digits and spaces.
    """

    UNIGRAM_NOISE: re.Pattern = re.compile(r"[^a-z0-9\s+#./]")

    NGRAM_NOISE: re.Pattern = re.compile(r"[^a-z0-9\s]")


# =============================================================================
# PHRASE MATCHERS
# =============================================================================


def build_phrase_pattern(terms: Iterable[str]) -> re.Pattern:
    """
    Compile a case-insensitive whole-phrase alternation from literal terms.

    Terms are escaped and sorted longest first so that "javascript" wins over
    "java" at the same position. Boundaries are lookarounds on letters and
    digits rather than \\b, so terms ending in symbols ("c++", "c#") match
    when followed by a space or punctuation.

    Args:
        terms: Literal phrases (e.g., "machine learning", "ci/cd")

    Returns:
        Compiled pattern matching any of the terms as a whole phrase

    Example:
        >>> pattern = build_phrase_pattern(["java", "javascript", "c++"])
        >>> [m.group(0) for m in pattern.finditer("JavaScript, Java and C++")]
        ['JavaScript', 'Java', 'C++']
    """
    ordered = sorted({t.strip().lower() for t in terms if t.strip()}, key=lambda t: (-len(t), t))
    if not ordered:
        raise ValueError("Cannot build a phrase pattern from an empty term list")

    alternation = "|".join(re.escape(t) for t in ordered)
    return re.compile(rf"(?<![a-z0-9])(?:{alternation})(?![a-z0-9])", re.IGNORECASE)


# =============================================================================
# VOCABULARY
# =============================================================================


@dataclass(frozen=True)
class Vocabulary:
    """
    Immutable vocabulary shared by all matching functions.

    Attributes:
        skills: Technology and tool names
        certifications: Credential names
        themes: Theme name -> words that signal it ("experience", "education", "certifications")
        stop_words: Words dropped during keyword extraction
        skill_patterns: Compiled matchers for skills
        certification_patterns: Compiled matchers for certifications
    """

    skills: Tuple[str, ...]
    certifications: Tuple[str, ...]
    themes: Mapping[str, Tuple[str, ...]]
    stop_words: FrozenSet[str]
    skill_patterns: Tuple[re.Pattern, ...]
    certification_patterns: Tuple[re.Pattern, ...]

    def theme_words(self, theme: str) -> Tuple[str, ...]:
        """Return the word list for a context theme."""
        if theme not in self.themes:
            raise ValueError(f"Unknown theme '{theme}'. Expected one of: {', '.join(THEMES)}")
        return self.themes[theme]


def _read_terms(section, name: str, path: Path) -> Tuple[str, ...]:
    """Validate one vocabulary list and return it as a tuple of lowercase strings."""
    if not isinstance(section, list) or not section:
        raise VocabularyError("Expected a non-empty list of terms", path, name)

    terms = []
    for term in section:
        # YAML turns bare yes/no/on/off into booleans; require strings
        if not isinstance(term, str):
            raise VocabularyError(f"Term {term!r} is not a string (quote it in YAML)", path, name)
        terms.append(term.strip().lower())

    return tuple(dict.fromkeys(t for t in terms if t))


def load_vocabulary(path: Union[str, Path] = VOCABULARY_PATH) -> Vocabulary:
    """
    Load and compile a vocabulary file.

    Args:
        path: YAML file with skills, certifications, themes and stop_words sections

    Returns:
        Frozen Vocabulary with compiled phrase matchers

    Raises:
        VocabularyError: If a section is missing, empty or malformed
    """
    path = Path(path)

    try:
        conf = OmegaConf.load(path)
    except (OmegaConfBaseException, yaml.YAMLError) as e:
        raise VocabularyError(f"Could not parse vocabulary: {e}", path) from e

    if not isinstance(conf, DictConfig):
        raise VocabularyError("Vocabulary must be a mapping of sections", path)

    data = OmegaConf.to_container(conf, resolve=True)

    for section in ("skills", "certifications", "themes", "stop_words"):
        if section not in data:
            raise VocabularyError("Missing section", path, section)

    raw_themes = data["themes"]
    if not isinstance(raw_themes, dict):
        raise VocabularyError("Expected a mapping of theme lists", path, "themes")

    themes = {}
    for theme in THEMES:
        if theme not in raw_themes:
            raise VocabularyError("Missing theme", path, f"themes.{theme}")
        themes[theme] = _read_terms(raw_themes[theme], f"themes.{theme}", path)

    skills = _read_terms(data["skills"], "skills", path)
    certifications = _read_terms(data["certifications"], "certifications", path)

    return Vocabulary(
        skills=skills,
        certifications=certifications,
        themes=MappingProxyType(themes),
        stop_words=frozenset(_read_terms(data["stop_words"], "stop_words", path)),
        skill_patterns=(build_phrase_pattern(skills),),
        certification_patterns=(build_phrase_pattern(certifications),),
    )


VOCABULARY = load_vocabulary()
