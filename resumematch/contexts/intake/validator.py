"""
Input validation for the Intake context.

The matching engine accepts any string, but scoring a few words is
meaningless. Callers check both inputs here before running an analysis.
"""

from typing import Tuple

from resumematch.contexts.intake.exceptions import InsufficientInputError

# Both inputs must be longer than this (characters, after trimming)
DEFAULT_MIN_LENGTH = 50


def validate_input(text: str, label: str, min_length: int = DEFAULT_MIN_LENGTH) -> str:
    """
    Check that an input has enough content to analyze.

    Args:
        text: Resume or job description text
        label: Human-readable input name used in the error message
        min_length: Trimmed text must be longer than this

    Returns:
        The trimmed text

    Raises:
        InsufficientInputError: If the trimmed text has min_length characters or fewer
    """
    trimmed = text.strip()
    if len(trimmed) <= min_length:
        raise InsufficientInputError(
            f"Not enough {label} text to analyze",
            label=label,
            length=len(trimmed),
            min_length=min_length,
        )
    return trimmed


def validate_inputs(
    resume_text: str, job_description: str, min_length: int = DEFAULT_MIN_LENGTH
) -> Tuple[str, str]:
    """Validate resume and job description together; the resume is checked first."""
    return (
        validate_input(resume_text, "resume", min_length),
        validate_input(job_description, "job description", min_length),
    )
