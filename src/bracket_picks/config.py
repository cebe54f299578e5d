"""Run configuration for pick selection.

:class:`PickConfig` collects every tunable of a run.  Defaults reproduce the
standard pool: 3-5-8-13-21-34 round points plus the winner's seed (the
``seed_bonus`` scoring), Midwest vs West and East vs South semifinals.  The
scoring rule is looked up by name in the scoring registry.  A JSON file can
override any subset of fields; it is validated through the Pydantic model.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from bracket_picks.bracket.build import DEFAULT_SEMIFINAL_PAIRINGS
from bracket_picks.evaluation.scoring import DEFAULT_POINTS_TABLE, ScoringRule, get_scoring, list_scorings


class PickConfig(BaseModel):
    """Validated configuration for one bracket run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    points_table: dict[int, float] = Field(default_factory=lambda: dict(DEFAULT_POINTS_TABLE))
    scoring: str = "seed_bonus"
    semifinal_pairings: tuple[tuple[str, str], tuple[str, str]] = DEFAULT_SEMIFINAL_PAIRINGS
    restore_prerequisites: bool = False
    fuzzy_threshold: float | None = Field(default=None, ge=0.0, le=100.0)
    name_column: str = Field(default="name", min_length=1)
    rating_column: str = Field(default="rating", min_length=1)

    @field_validator("points_table")
    @classmethod
    def _check_points(cls, table: dict[int, float]) -> dict[int, float]:
        if not table or sorted(table) != list(range(1, len(table) + 1)):
            msg = f"points_table must be keyed by consecutive rounds starting at 1, got {sorted(table)}"
            raise ValueError(msg)
        if any(points <= 0 for points in table.values()):
            msg = "points_table values must be positive"
            raise ValueError(msg)
        return table

    @field_validator("scoring")
    @classmethod
    def _check_scoring(cls, name: str) -> str:
        if name not in list_scorings():
            msg = f"Unknown scoring {name!r}. Available: {list_scorings()}"
            raise ValueError(msg)
        return name

    @model_validator(mode="after")
    def _check_columns(self) -> PickConfig:
        if self.name_column == self.rating_column:
            msg = "name_column and rating_column must differ"
            raise ValueError(msg)
        return self

    def scoring_rule(self) -> ScoringRule:
        """Return the scoring rule described by this configuration."""
        rule: ScoringRule = get_scoring(self.scoring)(self.points_table)
        return rule


def load_config(path: Path | None = None) -> PickConfig:
    """Return the default config, overridden by the JSON file at *path*.

    Raises:
        FileNotFoundError: If *path* is given but does not exist.
        pydantic.ValidationError: If the overrides are invalid.
    """
    if path is None:
        return PickConfig()
    overrides = json.loads(path.read_text())
    return PickConfig.model_validate(overrides)
