"""Shared pytest fixtures for the bracket_picks test suite.

Fixtures defined here are available to all tests without explicit imports.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator, Sequence
from itertools import count
from pathlib import Path

import pytest

from bracket_picks.bracket import Bracket, Entrant, Game

REGIONS: tuple[str, ...] = ("Midwest", "West", "East", "South")


def balanced_bracket(entrants: Sequence[Entrant], region: str = "Test") -> Bracket:
    """Build a balanced bracket pairing adjacent entrants, then adjacent winners.

    ``len(entrants)`` must be a power of two.  Game numbers run round by round.
    """
    numbers = count(1)
    level = [
        Game(number=next(numbers), round=1, region=region, entrants=(a, b))
        for a, b in zip(entrants[0::2], entrants[1::2])
    ]
    games = list(level)
    round_num = 1
    while len(level) > 1:
        round_num += 1
        level = [
            Game(number=next(numbers), round=round_num, region=region, feeders=(x, y))
            for x, y in zip(level[0::2], level[1::2])
        ]
        games.extend(level)
    return Bracket(games)


def regional_rating(region_idx: int, seed: int) -> float:
    """Return a deterministic rating that falls with the seed line."""
    return round(0.95 - 0.05 * (seed - 1) + 0.004 * region_idx, 4)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo any `configure_logging` call so caplog keeps seeing records."""
    yield
    root = logging.getLogger("bracket_picks")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    root.propagate = True


@pytest.fixture
def temp_data_dir(tmp_path: Path) -> Path:
    """Provide an isolated temporary directory for test data."""
    data_dir = tmp_path / "test_data"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def bracket_factory() -> Callable[[Sequence[Entrant]], Bracket]:
    """Return :func:`balanced_bracket` for building small synthetic brackets."""
    return balanced_bracket


@pytest.fixture
def eight_entrants() -> list[Entrant]:
    """Eight entrants with mixed ratings, seeded 1–8 in bracket order."""
    ratings = (0.9, 0.2, 0.6, 0.5, 0.7, 0.4, 0.8, 0.3)
    return [Entrant(name=f"T{i + 1}", rating=r, seed=i + 1) for i, r in enumerate(ratings)]


@pytest.fixture
def tournament_regions() -> dict[str, dict[int, Entrant]]:
    """Four regions of sixteen seeded entrants each."""
    return {
        region: {
            seed: Entrant(name=f"{region} {seed}", rating=regional_rating(idx, seed), seed=seed)
            for seed in range(1, 17)
        }
        for idx, region in enumerate(REGIONS)
    }


@pytest.fixture
def ratings_csv(temp_data_dir: Path) -> Path:
    """Write a ratings CSV covering every entrant of the tournament layout."""
    path = temp_data_dir / "ratings.csv"
    lines = ["name,rating,record"]
    for idx, region in enumerate(REGIONS):
        for seed in range(1, 17):
            lines.append(f"{region} {seed},{regional_rating(idx, seed)},20-10")
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def bracket_json(temp_data_dir: Path) -> Path:
    """Write a bracket layout JSON matching :func:`ratings_csv`."""
    path = temp_data_dir / "bracket.json"
    layout = {region: {str(seed): f"{region} {seed}" for seed in range(1, 17)} for region in REGIONS}
    path.write_text(json.dumps(layout))
    return path
