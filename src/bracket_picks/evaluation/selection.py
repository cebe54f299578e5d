"""Greedy, prerequisite-aware bracket pick selection.

Turns the outcome distribution of every game into one coherent bracket: a
pick per game such that every picked winner actually reached that game under
the other picks.

Algorithm (greedy, no backtracking):

1. The pool starts as every outcome of every game.
2. Take the pool member with the highest expected points (ties: lower game
   number, then winner name) and remove it from the pool.
3. Build its prerequisite chain: the same winner's outcomes in the feeder
   games below it, down to round 1.  The chain is consumed from the pool.
4. If the candidate or any chain member names a game already picked for a
   different winner, discard the candidate.  Otherwise accept the candidate
   together with its chain.
5. Repeat until the pool is empty, then deduplicate by ``(game, winner)``.

The result is a heuristic, not a guaranteed optimum: a high-value candidate
can be lost purely because of processing order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from bracket_picks.evaluation.outcomes import Outcome
from bracket_picks.evaluation.scoring import ScoringRule, SeedBonusScoring, expected_points
from bracket_picks.utils.logger import VERBOSE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pick:
    """An outcome together with its score under a scoring rule.

    Attributes:
        outcome: The picked outcome.
        points: Points earned if the pick is correct.
        expected_points: ``points · outcome.probability``.
    """

    outcome: Outcome
    points: float
    expected_points: float

    @property
    def key(self) -> tuple[int, str]:
        """Return the ``(game number, winner name)`` identity of the pick."""
        return self.outcome.key


@dataclass(frozen=True)
class PickSet:
    """A consistent bracket prediction.

    Attributes:
        picks: Deduplicated picks ordered by round, then game number.
        total_expected_points: Sum of expected points over ``picks``.
        discarded: Number of candidates rejected because of a conflict.
    """

    picks: tuple[Pick, ...]
    total_expected_points: float
    discarded: int

    def winner_of(self, game_number: int) -> str | None:
        """Return the picked winner's name for a game, if any."""
        for pick in self.picks:
            if pick.outcome.game.number == game_number:
                return pick.outcome.winner.name
        return None

    def picks_for_round(self, round_num: int) -> list[Pick]:
        """Return the picks of one round in game-number order."""
        return [p for p in self.picks if p.outcome.game.round == round_num]

    @property
    def champion(self) -> str | None:
        """Return the picked winner of the highest-round game, if picked."""
        if not self.picks:
            return None
        top = max(self.picks, key=lambda p: (p.outcome.game.round, -p.outcome.game.number))
        return top.outcome.winner.name


def prerequisite_chain(
    outcome: Outcome,
    lookup: Mapping[tuple[int, str], Outcome],
) -> list[Outcome]:
    """Return the earlier-round outcomes *outcome* depends on, nearest first.

    For a round-``r`` outcome this is the ``r - 1`` outcomes in which the same
    entrant wins each game on its path up from round 1.

    Args:
        outcome: The later-round outcome.
        lookup: Every outcome keyed by ``(game number, winner name)``.

    Raises:
        ValueError: If a required feeder outcome is absent from *lookup*.
    """
    chain: list[Outcome] = []
    game = outcome.game
    winner = outcome.winner
    while not game.is_leaf:
        feeder = game.feeder_for(winner)
        prior = lookup.get((feeder.number, winner.name)) if feeder is not None else None
        if feeder is None or prior is None:
            msg = f"No feeder outcome for {winner.name!r} below {game.describe()}"
            raise ValueError(msg)
        chain.append(prior)
        game = feeder
    return chain


def _priority(pick: Pick) -> tuple[float, int, str]:
    return (-pick.expected_points, pick.outcome.game.number, pick.outcome.winner.name)


class SelectionOptimizer:
    """Greedy expected-points optimizer over a bracket's outcomes.

    Args:
        scoring: Scoring rule; defaults to :class:`SeedBonusScoring`.
        restore_prerequisites: When ``False`` (default) the prerequisites of
            a discarded candidate stay consumed and are never reconsidered on
            their own.  When ``True`` they are returned to the pool.
    """

    def __init__(self, scoring: ScoringRule | None = None, *, restore_prerequisites: bool = False) -> None:
        self._scoring: ScoringRule = scoring if scoring is not None else SeedBonusScoring()
        self._restore_prerequisites = restore_prerequisites

    @property
    def scoring(self) -> ScoringRule:
        """Return the scoring rule in use."""
        return self._scoring

    def score(self, outcome: Outcome) -> Pick:
        """Wrap *outcome* with its points and expected points."""
        return Pick(
            outcome=outcome,
            points=self._scoring.points(outcome),
            expected_points=expected_points(outcome, self._scoring),
        )

    def select(self, outcomes: Iterable[Outcome]) -> PickSet:
        """Build a consistent pick set from the outcomes of every game.

        Args:
            outcomes: All outcomes across all games (e.g.
                :meth:`OutcomeEngine.all_outcomes`).

        Returns:
            The deduplicated :class:`PickSet`.
        """
        lookup: dict[tuple[int, str], Outcome] = {}
        for outcome in outcomes:
            lookup[outcome.key] = outcome
        scored = {key: self.score(outcome) for key, outcome in lookup.items()}

        pool: dict[tuple[int, str], Pick] = dict(scored)
        accepted: list[Pick] = []
        picked: dict[int, str] = {}
        discarded = 0

        # Expected points are fixed, so walking the pool in priority order is
        # the same as repeatedly taking its maximum.
        for candidate in sorted(scored.values(), key=_priority):
            if pool.pop(candidate.key, None) is None:
                continue

            chain = [scored[o.key] for o in prerequisite_chain(candidate.outcome, lookup)]
            consumed = [p for p in chain if pool.pop(p.key, None) is not None]

            conflict = _first_conflict([candidate, *chain], picked)
            if conflict is not None:
                discarded += 1
                if self._restore_prerequisites:
                    for pick in consumed:
                        pool[pick.key] = pick
                logger.log(
                    VERBOSE,
                    "selection: discard %s in %s (%.3f EP); %s already picked for %s",
                    candidate.outcome.winner.name,
                    candidate.outcome.game.describe(),
                    candidate.expected_points,
                    picked[conflict.outcome.game.number],
                    conflict.outcome.game.describe(),
                )
                continue

            for pick in (candidate, *chain):
                accepted.append(pick)
                picked[pick.outcome.game.number] = pick.outcome.winner.name
            logger.log(
                VERBOSE,
                "selection: accept %s in %s (%.3f EP) with %d prerequisites",
                candidate.outcome.winner.name,
                candidate.outcome.game.describe(),
                candidate.expected_points,
                len(chain),
            )

        unique: dict[tuple[int, str], Pick] = {}
        for pick in accepted:
            unique.setdefault(pick.key, pick)
        picks = tuple(sorted(unique.values(), key=lambda p: (p.outcome.game.round, p.outcome.game.number)))
        total = sum(p.expected_points for p in picks)

        logger.info(
            "Selected %d picks (%d candidates discarded), expected points %.2f",
            len(picks),
            discarded,
            total,
        )
        return PickSet(picks=picks, total_expected_points=total, discarded=discarded)


def _first_conflict(candidates: list[Pick], picked: Mapping[int, str]) -> Pick | None:
    """Return the first pick whose game is already picked for another winner."""
    for pick in candidates:
        existing = picked.get(pick.outcome.game.number)
        if existing is not None and existing != pick.outcome.winner.name:
            return pick
    return None
