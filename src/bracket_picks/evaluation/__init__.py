"""Outcome probabilities, scoring rules, and pick selection."""

from __future__ import annotations

from bracket_picks.evaluation.outcomes import PROBABILITY_TOLERANCE, Outcome, OutcomeEngine
from bracket_picks.evaluation.probability import check_rating, win_probability, win_probability_matrix
from bracket_picks.evaluation.scoring import (
    DEFAULT_POINTS_TABLE,
    RoundScoring,
    ScoringNotFoundError,
    ScoringRule,
    SeedBonusScoring,
    expected_points,
    get_scoring,
    list_scorings,
    register_scoring,
)
from bracket_picks.evaluation.selection import (
    Pick,
    PickSet,
    SelectionOptimizer,
    prerequisite_chain,
)

__all__ = [
    "DEFAULT_POINTS_TABLE",
    "PROBABILITY_TOLERANCE",
    "Outcome",
    "OutcomeEngine",
    "Pick",
    "PickSet",
    "RoundScoring",
    "ScoringNotFoundError",
    "ScoringRule",
    "SeedBonusScoring",
    "SelectionOptimizer",
    "check_rating",
    "expected_points",
    "get_scoring",
    "list_scorings",
    "prerequisite_chain",
    "register_scoring",
    "win_probability",
    "win_probability_matrix",
]
