"""
Scoring configuration for the matching context.

The numeric knobs of the matcher, scorer and suggestion rules live here as a
frozen dataclass. Defaults are the stock ATS weights; a YAML
file can override any subset of them:

    # scoring.yaml
    max_important_keywords: 80
    skill_bonus_weight: 0.25
"""

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Union

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from resumematch.contexts.matching.exceptions import ScoringConfigError


@dataclass(frozen=True)
class ScoringConfig:
    """
    Tunable constants for keyword selection, scoring and suggestions.

    Attributes:
        max_important_keywords: Cap on JD keywords considered (extraction order)
        min_keyword_length: JD keywords must be longer than this unless they are skills
        min_stem_length: Shortest stem used for partial matching
        stem_trim: Characters dropped from the end of a keyword to form its stem
        partial_weight: Weight of a partial match relative to a full match
        skill_bonus_weight: Maximum bonus (as a fraction of 1.0) for skill overlap
        max_listed_skills: Skills named in the missing-skills suggestion
        max_listed_keywords: Keywords named in the missing-keywords suggestion
        missing_keyword_threshold: Missing keywords needed before that suggestion fires
        max_listed_certifications: Certifications named in the certification suggestion
        low_score_threshold: Scores below this trigger the summary-tailoring suggestion
    """

    max_important_keywords: int = 60
    min_keyword_length: int = 3
    min_stem_length: int = 4
    stem_trim: int = 3
    partial_weight: float = 0.5
    skill_bonus_weight: float = 0.2
    max_listed_skills: int = 5
    max_listed_keywords: int = 5
    missing_keyword_threshold: int = 5
    max_listed_certifications: int = 3
    low_score_threshold: int = 50

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ScoringConfigError("Scoring values must be numeric", f.name, value)
            if f.type is int and not isinstance(value, int):
                raise ScoringConfigError("Scoring value must be an integer", f.name, value)
            if value < 0:
                raise ScoringConfigError("Scoring values must be non-negative", f.name, value)

        if self.max_important_keywords < 1:
            raise ScoringConfigError(
                "At least one keyword must be considered",
                "max_important_keywords",
                self.max_important_keywords,
            )
        if self.min_stem_length < 1:
            raise ScoringConfigError(
                "Stems must keep at least one character",
                "min_stem_length",
                self.min_stem_length,
            )


DEFAULT_SCORING_CONFIG = ScoringConfig()


def load_scoring_config(path: Union[str, Path, None] = None) -> ScoringConfig:
    """
    Load scoring configuration, merging a YAML override file onto the defaults.

    Args:
        path: YAML file with a subset of ScoringConfig fields. None returns defaults.

    Returns:
        ScoringConfig with overrides applied

    Raises:
        ScoringConfigError: If the file is malformed YAML or has unknown keys or invalid values
        FileNotFoundError: If path does not exist
    """
    if path is None:
        return DEFAULT_SCORING_CONFIG

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Scoring config not found: {path}")

    base = OmegaConf.create(asdict(DEFAULT_SCORING_CONFIG))
    OmegaConf.set_struct(base, True)

    try:
        overrides = OmegaConf.load(path)
        merged = OmegaConf.merge(base, overrides)
    except (OmegaConfBaseException, yaml.YAMLError) as e:
        raise ScoringConfigError(f"Invalid scoring config: {e}", config_path=path) from e

    values = OmegaConf.to_container(merged, resolve=True)

    try:
        return ScoringConfig(**values)
    except ScoringConfigError as e:
        raise ScoringConfigError(e.message, e.field_name, e.value, config_path=path) from e
