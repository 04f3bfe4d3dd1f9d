"""
Shared utilities for ResumeMatch.

Common functionality used across contexts:
- Logger setup
- Text report formatting
- Text display helpers
"""

from resumematch.utils.logger import setup_logger
from resumematch.utils.report_formatter import Column, TableFormatter
from resumematch.utils.text_processing import truncate_display

__all__ = ["setup_logger", "Column", "TableFormatter", "truncate_display"]
