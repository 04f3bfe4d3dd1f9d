"""Custom exceptions for the intake context."""

from typing import Optional


class InsufficientInputError(ValueError):
    """
    Exception raised when a resume or job description is too short to analyze.

    Attributes:
        message: Error description
        label: Which input failed (e.g., 'resume', 'job description')
        length: Length of the trimmed input
        min_length: Length the input had to exceed
    """

    def __init__(
        self,
        message: str,
        label: Optional[str] = None,
        length: Optional[int] = None,
        min_length: Optional[int] = None,
    ):
        self.message = message
        self.label = label
        self.length = length
        self.min_length = min_length

        parts = [message]

        if label is not None and length is not None and min_length is not None:
            parts.append(
                f"{label.capitalize()} has {length} characters; more than {min_length} required"
            )

        super().__init__("\n".join(parts))
