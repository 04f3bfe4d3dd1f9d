"""
Intake Context

Responsibilities:
- Normalizes pasted or extracted resume and job description text
- Validates that both inputs carry enough content to analyze

Owns: Input cleanup and caller-side validation
Never: Scores, classifies keywords, or reads files
"""

from resumematch.contexts.intake.exceptions import InsufficientInputError
from resumematch.contexts.intake.normalizer import normalize_unicode, prepare_text
from resumematch.contexts.intake.validator import (
    DEFAULT_MIN_LENGTH,
    validate_input,
    validate_inputs,
)

__all__ = [
    "InsufficientInputError",
    "normalize_unicode",
    "prepare_text",
    "DEFAULT_MIN_LENGTH",
    "validate_input",
    "validate_inputs",
]
