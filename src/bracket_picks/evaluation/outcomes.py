"""Exact outcome probabilities for every game of a bracket.

For a leaf game with entrants X and Y the outcome set is
``{X: p, Y: 1 - p}`` with ``p = log5(X, Y)``.  For a later game fed by
games with outcome sets *L* and *R*::

    P(x wins) = P(x wins its feeder) · Σ_y P(y wins its feeder) · log5(x, y)

summed over the opposite feeder's outcomes *y*, and symmetrically for the
other side.  This is the Phylourny recursion restricted to one game's two
subtrees: the block ``M[x, y] = log5(x, y)`` is evaluated once per game, so
every unordered pair of entrants is evaluated exactly once overall, at their
lowest common game (O(N²) in total).

Each game's outcome set is computed at most once per :class:`OutcomeEngine`
and kept in a write-once slot; later requests (from ancestors or from the
pick optimizer) reuse it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from bracket_picks.bracket.structure import Bracket, Entrant, Game
from bracket_picks.evaluation.probability import win_probability, win_probability_matrix

logger = logging.getLogger(__name__)

#: Absolute tolerance for the per-game sum-to-one check.
PROBABILITY_TOLERANCE: float = 1e-9


@dataclass(frozen=True)
class Outcome:
    """A possible result of one game.

    Attributes:
        game: The game this outcome belongs to.
        winner: The entrant winning that game.
        probability: P(*winner* wins *game*), in ``[0, 1]``.
    """

    game: Game
    winner: Entrant
    probability: float

    @property
    def key(self) -> tuple[int, str]:
        """Return the ``(game number, winner name)`` identity of this outcome."""
        return (self.game.number, self.winner.name)


class OutcomeEngine:
    """Lazily computes and caches outcome sets for the games of a bracket.

    Args:
        bracket: A validated bracket.  The engine never mutates it.

    Attributes:
        compute_count: Number of outcome sets actually computed (cache misses).
    """

    def __init__(self, bracket: Bracket) -> None:
        self._bracket = bracket
        self._slots: dict[int, tuple[Outcome, ...]] = {}
        self.compute_count = 0

    @property
    def bracket(self) -> Bracket:
        """Return the bracket this engine evaluates."""
        return self._bracket

    def outcomes_for(self, game: Game) -> tuple[Outcome, ...]:
        """Return one outcome per entrant of *game*'s subtree.

        Outcomes of the first feeder's entrants come first, then the second
        feeder's; probabilities sum to 1 within floating-point error.

        Raises:
            ValueError: If *game* does not belong to this engine's bracket.
            InvalidRatingError: If an entrant's rating is outside ``(0, 1)``.
        """
        cached = self._slots.get(game.number)
        if cached is not None and cached[0].game is game:
            return cached
        try:
            member = self._bracket.game(game.number)
        except KeyError:
            member = None
        if member is not game:
            msg = f"Game {game.number} is not part of this engine's bracket"
            raise ValueError(msg)

        result = self._compute(game)
        self._slots[game.number] = result
        return result

    def _compute(self, game: Game) -> tuple[Outcome, ...]:
        self.compute_count += 1

        if game.feeders is None:
            assert game.entrants is not None  # guaranteed by Bracket validation
            team_one, team_two = game.entrants
            p = win_probability(team_one.rating, team_two.rating)
            return (Outcome(game, team_one, p), Outcome(game, team_two, 1.0 - p))

        left = self.outcomes_for(game.feeders[0])
        right = self.outcomes_for(game.feeders[1])

        left_reach = np.array([o.probability for o in left], dtype=np.float64)
        right_reach = np.array([o.probability for o in right], dtype=np.float64)
        beats = win_probability_matrix(
            [o.winner.rating for o in left],
            [o.winner.rating for o in right],
        )

        # P(x wins) = reach_x * sum_y reach_y * P(x beats y); P(y beats x) = 1 - P(x beats y)
        left_win = left_reach * (beats @ right_reach)
        right_win = right_reach * ((1.0 - beats).T @ left_reach)

        outcomes = tuple(Outcome(game, o.winner, float(p)) for o, p in zip(left, left_win)) + tuple(
            Outcome(game, o.winner, float(p)) for o, p in zip(right, right_win)
        )
        logger.debug(
            "outcomes: %s -> %d outcomes from %dx%d block",
            game.describe(),
            len(outcomes),
            len(left),
            len(right),
        )
        return outcomes

    def all_outcomes(self) -> list[Outcome]:
        """Return the outcomes of every game, in game-number order."""
        flattened: list[Outcome] = []
        for game in self._bracket.games:
            flattened.extend(self.outcomes_for(game))
        logger.debug(
            "outcomes: %d outcomes across %d games (%d computed)",
            len(flattened),
            len(self._bracket),
            self.compute_count,
        )
        return flattened

    def champion_probabilities(self) -> dict[str, float]:
        """Return P(win the final) per entrant name, highest first."""
        ranked = sorted(self.outcomes_for(self._bracket.root), key=lambda o: (-o.probability, o.winner.name))
        return {o.winner.name: o.probability for o in ranked}

    def outcome_lookup(self) -> dict[tuple[int, str], Outcome]:
        """Return every outcome keyed by ``(game number, winner name)``."""
        return {o.key: o for o in self.all_outcomes()}

    def check_normalised(self, tolerance: float = PROBABILITY_TOLERANCE) -> None:
        """Verify that every game's outcome probabilities sum to 1.

        Raises:
            ValueError: If any game's total deviates by more than *tolerance*.
        """
        for game in self._bracket.games:
            total = sum(o.probability for o in self.outcomes_for(game))
            if abs(total - 1.0) > tolerance:
                msg = f"Outcome probabilities for {game.describe()} sum to {total!r}, expected 1.0"
                raise ValueError(msg)
