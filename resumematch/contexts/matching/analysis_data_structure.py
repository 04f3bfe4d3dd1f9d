"""
Analysis result data structures for the Matching context.

Provides the immutable records returned by analyze(). A result is created
fresh for each (resume, job description) pair and never mutated afterwards.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

BREAKDOWN_CATEGORIES = ("skills", "experience", "education", "certifications")


@dataclass(frozen=True)
class CategoryBreakdown:
    """JD-detected terms of one category, split by presence in the resume."""

    matched: Tuple[str, ...] = ()
    missing: Tuple[str, ...] = ()

    @property
    def total(self) -> int:
        return len(self.matched) + len(self.missing)

    def to_dict(self) -> Dict[str, list]:
        return {"matched": list(self.matched), "missing": list(self.missing)}


@dataclass(frozen=True)
class Breakdown:
    """Themed view of a match: skills, experience, education and certifications."""

    skills: CategoryBreakdown = field(default_factory=CategoryBreakdown)
    experience: CategoryBreakdown = field(default_factory=CategoryBreakdown)
    education: CategoryBreakdown = field(default_factory=CategoryBreakdown)
    certifications: CategoryBreakdown = field(default_factory=CategoryBreakdown)

    def items(self):
        """Iterate (category name, CategoryBreakdown) pairs in display order."""
        return ((name, getattr(self, name)) for name in BREAKDOWN_CATEGORIES)

    def to_dict(self) -> Dict[str, Dict[str, list]]:
        return {name: category.to_dict() for name, category in self.items()}


@dataclass(frozen=True)
class AnalysisResult:
    """
    Outcome of scoring one resume against one job description.

    Invariant: matched_keywords, partial_matches and missing_keywords are pairwise
    disjoint and together hold exactly the total_jd_keywords considered keywords.

    Attributes:
        score: Overall match score, 0-100
        matched_keywords: JD keywords found verbatim in the resume (JD order)
        missing_keywords: JD keywords with neither a full nor a stem match
        partial_matches: JD keywords whose stem appears in the resume
        total_jd_keywords: Number of important JD keywords considered
        breakdown: Per-category matched/missing terms
        suggestions: Ordered improvement tips
    """

    score: int
    matched_keywords: Tuple[str, ...]
    missing_keywords: Tuple[str, ...]
    partial_matches: Tuple[str, ...]
    total_jd_keywords: int
    breakdown: Breakdown
    suggestions: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dict (tuples become lists)."""
        return {
            "score": self.score,
            "matched_keywords": list(self.matched_keywords),
            "missing_keywords": list(self.missing_keywords),
            "partial_matches": list(self.partial_matches),
            "total_jd_keywords": self.total_jd_keywords,
            "breakdown": self.breakdown.to_dict(),
            "suggestions": list(self.suggestions),
        }
