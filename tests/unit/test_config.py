"""Unit tests for run configuration."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from bracket_picks.bracket import DEFAULT_SEMIFINAL_PAIRINGS
from bracket_picks.config import PickConfig, load_config
from bracket_picks.evaluation import DEFAULT_POINTS_TABLE, Outcome, RoundScoring, SeedBonusScoring, register_scoring
from bracket_picks.evaluation.scoring import _SCORING_REGISTRY


@pytest.mark.smoke
class TestPickConfigDefaults:
    """Defaults reproduce the standard pool."""

    def test_defaults(self) -> None:
        config = PickConfig()
        assert config.points_table == DEFAULT_POINTS_TABLE
        assert config.scoring == "seed_bonus"
        assert config.semifinal_pairings == DEFAULT_SEMIFINAL_PAIRINGS
        assert config.restore_prerequisites is False
        assert config.fuzzy_threshold is None
        assert (config.name_column, config.rating_column) == ("name", "rating")

    def test_default_scoring_rule(self) -> None:
        rule = PickConfig().scoring_rule()
        assert isinstance(rule, SeedBonusScoring)
        assert rule.points_table == DEFAULT_POINTS_TABLE

    def test_round_only_scoring_rule(self) -> None:
        rule = PickConfig(scoring="round_only", points_table={1: 1, 2: 2}).scoring_rule()
        assert type(rule) is RoundScoring
        assert rule.round_points(2) == 2.0

    def test_frozen(self) -> None:
        config = PickConfig()
        with pytest.raises(ValidationError):
            config.scoring = "round_only"  # type: ignore[misc]


class TestPickConfigValidation:
    """Invalid overrides are rejected."""

    @pytest.mark.parametrize("table", [{}, {2: 5.0}, {1: 3.0, 3: 8.0}])
    def test_points_table_rounds(self, table: dict[int, float]) -> None:
        with pytest.raises(ValidationError, match="consecutive rounds"):
            PickConfig(points_table=table)

    def test_points_must_be_positive(self) -> None:
        with pytest.raises(ValidationError, match="must be positive"):
            PickConfig(points_table={1: 3.0, 2: 0.0})

    @pytest.mark.parametrize("threshold", [-1.0, 100.5])
    def test_fuzzy_threshold_range(self, threshold: float) -> None:
        with pytest.raises(ValidationError):
            PickConfig(fuzzy_threshold=threshold)

    def test_unknown_scoring(self) -> None:
        with pytest.raises(ValidationError, match="Unknown scoring 'fibonacci'"):
            PickConfig(scoring="fibonacci")

    def test_scoring_rule_comes_from_registry(self) -> None:
        @register_scoring("flat_ten")
        class FlatTen(RoundScoring):
            def points(self, outcome: Outcome) -> float:
                return 10.0

        try:
            rule = PickConfig(scoring="flat_ten").scoring_rule()
            assert isinstance(rule, FlatTen)
            assert rule.points_table == DEFAULT_POINTS_TABLE
        finally:
            _SCORING_REGISTRY.pop("flat_ten")

    def test_columns_must_differ(self) -> None:
        with pytest.raises(ValidationError, match="must differ"):
            PickConfig(name_column="team", rating_column="team")

    def test_unknown_field(self) -> None:
        with pytest.raises(ValidationError):
            PickConfig.model_validate({"seed_bonus": False})


class TestLoadConfig:
    """Tests for `load_config`."""

    def test_none_returns_defaults(self) -> None:
        assert load_config() == PickConfig()

    def test_json_overrides(self, temp_data_dir: Path) -> None:
        path = temp_data_dir / "config.json"
        path.write_text(
            json.dumps(
                {
                    "points_table": {"1": 1, "2": 2, "3": 4, "4": 8, "5": 16, "6": 32},
                    "semifinal_pairings": [["Midwest", "East"], ["West", "South"]],
                    "restore_prerequisites": True,
                }
            )
        )
        config = load_config(path)
        assert config.points_table[6] == 32.0
        assert config.semifinal_pairings == (("Midwest", "East"), ("West", "South"))
        assert config.restore_prerequisites is True
        assert config.scoring == "seed_bonus"

    def test_invalid_json(self, temp_data_dir: Path) -> None:
        path = temp_data_dir / "config.json"
        path.write_text("{")
        with pytest.raises(ValueError):
            load_config(path)

    def test_missing_file(self, temp_data_dir: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(temp_data_dir / "nope.json")
