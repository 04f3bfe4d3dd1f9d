"""
Matching context logger.

Provides logging interface for the matching context with automatic [match] prefix.
All matching modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resumematch.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[match]"


def setup_matching_logger(log_dir: Path, config_source: str = "defaults") -> Path:
    """
    Setup logger for the matching context.

    Args:
        log_dir: Directory for this analysis session
        config_source: Where scoring settings came from, recorded in provenance

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="match",
        log_dir=log_dir,
        extra_provenance={"Scoring config": config_source},
    )


# Wrapper functions with automatic [match] prefix


def _log_info(message: str) -> None:
    """Log info message with [match] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [match] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [match] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [match] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level matching-specific logging helpers


def log_analysis_start(resume_chars: int, job_chars: int) -> None:
    """Log start of an analysis with input sizes."""
    _log_debug(f"Analyzing resume ({resume_chars} chars) against job description ({job_chars} chars)")


def log_analysis_result(result) -> None:
    """
    Log a finished analysis.

    Args:
        result: AnalysisResult from analyze()
    """
    _log_debug(
        f"Score {result.score}: {len(result.matched_keywords)} matched, "
        f"{len(result.partial_matches)} partial, {len(result.missing_keywords)} missing "
        f"of {result.total_jd_keywords} JD keywords"
    )
    _log_debug(f"{len(result.suggestions)} suggestion(s) generated")
