"""
Matching Context

Responsibilities:
- Extracts candidate keywords from resume and job description text
- Classifies terms into skills, certifications and context themes
- Buckets JD keywords into matched / partial / missing and scores the match
- Generates ordered improvement suggestions

Owns: Keyword extraction, vocabularies, scoring weights, suggestion rules
Never: Reads files, fetches postings, or renders reports
"""

from resumematch.contexts.matching.analysis_data_structure import (
    AnalysisResult,
    Breakdown,
    CategoryBreakdown,
)
from resumematch.contexts.matching.categories import extract_category, find_context_keywords
from resumematch.contexts.matching.config import (
    DEFAULT_SCORING_CONFIG,
    ScoringConfig,
    load_scoring_config,
)
from resumematch.contexts.matching.exceptions import ScoringConfigError, VocabularyError
from resumematch.contexts.matching.keywords import extract_keywords
from resumematch.contexts.matching.patterns import VOCABULARY, Vocabulary, load_vocabulary
from resumematch.contexts.matching.scorer import analyze
from resumematch.contexts.matching.suggestions import generate_suggestions

__all__ = [
    # Entry point
    "analyze",
    # Pipeline stages
    "extract_keywords",
    "extract_category",
    "find_context_keywords",
    "generate_suggestions",
    # Result data structures
    "AnalysisResult",
    "Breakdown",
    "CategoryBreakdown",
    # Configuration data
    "VOCABULARY",
    "Vocabulary",
    "load_vocabulary",
    "DEFAULT_SCORING_CONFIG",
    "ScoringConfig",
    "load_scoring_config",
    "ScoringConfigError",
    "VocabularyError",
]
