"""Custom exceptions for the matching context's configuration data."""

from pathlib import Path
from typing import Optional


class VocabularyError(ValueError):
    """
    Exception raised when a vocabulary file does not match the expected schema.

    Attributes:
        message: Error description
        vocabulary_path: Path to the vocabulary file that failed to load
        section: Name of the offending section (e.g., 'skills', 'themes.education')
    """

    def __init__(
        self,
        message: str,
        vocabulary_path: Optional[Path] = None,
        section: Optional[str] = None,
    ):
        self.message = message
        self.vocabulary_path = vocabulary_path
        self.section = section

        parts = [message]

        if section:
            parts.append(f"Section: {section}")

        if vocabulary_path:
            parts.append(f"Vocabulary file: {vocabulary_path}")

        super().__init__("\n".join(parts))


class ScoringConfigError(ValueError):
    """
    Exception raised when scoring configuration values are invalid.

    Attributes:
        message: Error description
        field_name: Name of the offending ScoringConfig field
        value: The rejected value
        config_path: Path to the override file, if the value came from one
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        value: Optional[object] = None,
        config_path: Optional[Path] = None,
    ):
        self.message = message
        self.field_name = field_name
        self.value = value
        self.config_path = config_path

        parts = [message]

        if field_name:
            parts.append(f"Field: {field_name} = {value!r}")

        if config_path:
            parts.append(f"Config file: {config_path}")

        super().__init__("\n".join(parts))
