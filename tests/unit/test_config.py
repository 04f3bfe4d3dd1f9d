"""Unit tests for scoring configuration loading."""

from dataclasses import FrozenInstanceError

import pytest

from resumematch.contexts.matching.config import (
    DEFAULT_SCORING_CONFIG,
    ScoringConfig,
    load_scoring_config,
)
from resumematch.contexts.matching.exceptions import ScoringConfigError


@pytest.mark.unit
def test_defaults():
    config = DEFAULT_SCORING_CONFIG
    assert config.max_important_keywords == 60
    assert config.min_keyword_length == 3
    assert config.min_stem_length == 4
    assert config.stem_trim == 3
    assert config.partial_weight == 0.5
    assert config.skill_bonus_weight == 0.2
    assert config.low_score_threshold == 50


@pytest.mark.unit
def test_config_is_frozen():
    with pytest.raises(FrozenInstanceError):
        DEFAULT_SCORING_CONFIG.max_important_keywords = 10


@pytest.mark.unit
def test_load_without_path_returns_defaults():
    assert load_scoring_config(None) is DEFAULT_SCORING_CONFIG


@pytest.mark.unit
def test_load_overrides(tmp_path):
    path = tmp_path / "scoring.yaml"
    path.write_text("max_important_keywords: 80\nskill_bonus_weight: 0.25\n")

    config = load_scoring_config(path)

    assert config.max_important_keywords == 80
    assert config.skill_bonus_weight == 0.25
    assert config.partial_weight == DEFAULT_SCORING_CONFIG.partial_weight


@pytest.mark.unit
def test_load_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "scoring.yaml"
    path.write_text("")

    assert load_scoring_config(path) == DEFAULT_SCORING_CONFIG


@pytest.mark.unit
def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "scoring.yaml"
    path.write_text("bonus_for_vibes: 1.0\n")

    with pytest.raises(ScoringConfigError) as exc_info:
        load_scoring_config(path)

    assert exc_info.value.config_path == path


@pytest.mark.unit
def test_negative_value_rejected(tmp_path):
    path = tmp_path / "scoring.yaml"
    path.write_text("partial_weight: -0.5\n")

    with pytest.raises(ScoringConfigError) as exc_info:
        load_scoring_config(path)

    assert exc_info.value.field_name == "partial_weight"
    assert exc_info.value.config_path == path


@pytest.mark.unit
def test_non_numeric_value_rejected(tmp_path):
    path = tmp_path / "scoring.yaml"
    path.write_text("skill_bonus_weight: high\n")

    with pytest.raises(ScoringConfigError, match="numeric"):
        load_scoring_config(path)


@pytest.mark.unit
def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_scoring_config(tmp_path / "missing.yaml")


@pytest.mark.unit
@pytest.mark.parametrize(
    "field_name, value",
    [
        ("max_important_keywords", 0),
        ("min_stem_length", 0),
        ("stem_trim", -1),
        ("low_score_threshold", True),
    ],
)
def test_invalid_direct_construction(field_name, value):
    with pytest.raises(ScoringConfigError) as exc_info:
        ScoringConfig(**{field_name: value})

    assert exc_info.value.field_name == field_name


@pytest.mark.unit
@pytest.mark.parametrize(
    "field_name, value",
    [
        ("max_important_keywords", 2.5),
        ("min_keyword_length", 3.0),
        ("stem_trim", 1.5),
        ("max_listed_skills", 4.2),
        ("low_score_threshold", 49.9),
    ],
)
def test_integer_fields_reject_floats(tmp_path, field_name, value):
    path = tmp_path / "scoring.yaml"
    path.write_text(f"{field_name}: {value}\n")

    with pytest.raises(ScoringConfigError, match="integer") as exc_info:
        load_scoring_config(path)

    assert exc_info.value.field_name == field_name
    assert exc_info.value.config_path == path


@pytest.mark.unit
def test_weight_fields_accept_integers(tmp_path):
    path = tmp_path / "scoring.yaml"
    path.write_text("partial_weight: 1\nskill_bonus_weight: 0\n")

    config = load_scoring_config(path)

    assert config.partial_weight == 1
    assert config.skill_bonus_weight == 0


@pytest.mark.unit
def test_malformed_yaml_rejected(tmp_path):
    path = tmp_path / "scoring.yaml"
    path.write_text("partial_weight: [0.5\n")

    with pytest.raises(ScoringConfigError, match="Invalid scoring config") as exc_info:
        load_scoring_config(path)

    assert exc_info.value.config_path == path
