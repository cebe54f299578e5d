"""Bracket-pool scoring rules.

A scoring rule assigns points to a correct pick (an :class:`Outcome`).  The
default, :class:`SeedBonusScoring`, awards a per-round base (3-5-8-13-21-34)
plus the winner's seed number as an upset bonus.  Rules are discoverable by
name through a decorator-based registry.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Protocol, TypeVar, runtime_checkable

from bracket_picks.evaluation.outcomes import Outcome

#: Base points per round (round number → points).
DEFAULT_POINTS_TABLE: dict[int, float] = {1: 3.0, 2: 5.0, 3: 8.0, 4: 13.0, 5: 21.0, 6: 34.0}

_ST = TypeVar("_ST")

_SCORING_REGISTRY: dict[str, type] = {}


class ScoringNotFoundError(KeyError):
    """Raised when a requested scoring name is not in the registry."""


def register_scoring(name: str) -> Callable[[_ST], _ST]:
    """Class decorator that registers a scoring rule class.

    Raises:
        ValueError: If *name* is already registered.
    """

    def decorator(cls: _ST) -> _ST:
        if name in _SCORING_REGISTRY:
            msg = f"Scoring name {name!r} is already registered to {_SCORING_REGISTRY[name].__name__}"
            raise ValueError(msg)
        _SCORING_REGISTRY[name] = cls  # type: ignore[assignment]
        return cls

    return decorator


def get_scoring(name: str) -> type:
    """Return the scoring class registered under *name*.

    Raises:
        ScoringNotFoundError: If *name* is not registered.
    """
    try:
        return _SCORING_REGISTRY[name]
    except KeyError:
        msg = f"No scoring registered with name {name!r}. Available: {list_scorings()}"
        raise ScoringNotFoundError(msg) from None


def list_scorings() -> list[str]:
    """Return all registered scoring names (sorted)."""
    return sorted(_SCORING_REGISTRY)


@runtime_checkable
class ScoringRule(Protocol):
    """Protocol for bracket-pool scoring rules."""

    @property
    def name(self) -> str:
        """Human-readable name of the scoring rule."""
        ...

    def points(self, outcome: Outcome) -> float:
        """Return the points a correct pick of *outcome* earns."""
        ...


def _validated_table(points_table: Mapping[int, float]) -> dict[int, float]:
    table = {int(r): float(p) for r, p in points_table.items()}
    if not table or sorted(table) != list(range(1, len(table) + 1)):
        msg = f"Points table must be keyed by consecutive rounds starting at 1, got {sorted(table)}"
        raise ValueError(msg)
    return table


@register_scoring("round_only")
class RoundScoring:
    """Flat per-round points with no seed bonus.

    Args:
        points_table: Mapping of ``round → points``.
    """

    def __init__(self, points_table: Mapping[int, float] | None = None) -> None:
        self._table = _validated_table(points_table if points_table is not None else DEFAULT_POINTS_TABLE)

    @property
    def name(self) -> str:
        """Return ``'round_only'``."""
        return "round_only"

    @property
    def points_table(self) -> dict[int, float]:
        """Return a copy of the per-round base points."""
        return dict(self._table)

    def round_points(self, round_num: int) -> float:
        """Return the base points for *round_num*.

        Raises:
            KeyError: If the table has no entry for the round.
        """
        try:
            return self._table[round_num]
        except KeyError:
            msg = f"No points defined for round {round_num}; table covers rounds 1-{len(self._table)}"
            raise KeyError(msg) from None

    def points(self, outcome: Outcome) -> float:
        """Return the round's base points."""
        return self.round_points(outcome.game.round)


@register_scoring("seed_bonus")
class SeedBonusScoring(RoundScoring):
    """Per-round base points plus the winner's seed number.

    A correct pick of a 12-seed in round 1 scores ``3 + 12 = 15`` under the
    default table.
    """

    @property
    def name(self) -> str:
        """Return ``'seed_bonus'``."""
        return "seed_bonus"

    def points(self, outcome: Outcome) -> float:
        """Return base points plus the winner's seed."""
        return self.round_points(outcome.game.round) + outcome.winner.seed


def expected_points(outcome: Outcome, rule: ScoringRule) -> float:
    """Return ``rule.points(outcome) · outcome.probability``."""
    return rule.points(outcome) * outcome.probability
