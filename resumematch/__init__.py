"""
ResumeMatch - ATS-style resume to job description keyword matching

Scores how well a resume matches a job description and suggests improvements.

Architecture:
- Intake Context: Input text normalization and validation
- Matching Context: Keyword extraction, classification, scoring and suggestions
- Reporting Context: Text and JSON rendering of analysis results
"""

from loguru import logger

from resumematch.contexts.matching import AnalysisResult, analyze

__version__ = "0.1.0"

# Library code stays silent until a script calls utils.logger.setup_logger()
logger.disable("resumematch")

__all__ = ["AnalysisResult", "analyze", "__version__"]
