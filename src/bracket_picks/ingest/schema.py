"""Pydantic v2 schema models for ingested bracket data.

These are the records handed from the file loaders to the core: a rating per
entrant name, and the region/seed layout of the bracket.  Everything
downstream operates on these models regardless of the file format they came
from.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EntrantRecord(BaseModel):
    """One row of the ratings table."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(..., min_length=1, alias="Name")
    rating: float = Field(..., gt=0.0, lt=1.0, alias="Rating")


class BracketLayout(BaseModel):
    """Seed assignments of every region: ``region → {seed → entrant name}``."""

    model_config = ConfigDict(frozen=True)

    regions: dict[str, dict[int, str]]

    @field_validator("regions")
    @classmethod
    def _check_regions(cls, regions: dict[str, dict[int, str]]) -> dict[str, dict[int, str]]:
        if not regions:
            msg = "Bracket layout must define at least one region"
            raise ValueError(msg)
        for region, seeds in regions.items():
            for seed, name in seeds.items():
                if seed < 1:
                    msg = f"Region {region!r} has invalid seed {seed}"
                    raise ValueError(msg)
                if not name.strip():
                    msg = f"Region {region!r} seed {seed} has an empty name"
                    raise ValueError(msg)
        return regions

    @property
    def names(self) -> list[str]:
        """Return every entrant name in layout order."""
        return [name for seeds in self.regions.values() for name in seeds.values()]
