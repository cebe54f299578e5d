"""Bracket tree structures and tournament construction."""

from __future__ import annotations

from bracket_picks.bracket.build import (
    DEFAULT_SEMIFINAL_PAIRINGS,
    FINAL_FOUR_REGION,
    FIRST_ROUND_SEED_ORDER,
    build_bracket,
)
from bracket_picks.bracket.structure import Bracket, Entrant, Game

__all__ = [
    "DEFAULT_SEMIFINAL_PAIRINGS",
    "FINAL_FOUR_REGION",
    "FIRST_ROUND_SEED_ORDER",
    "Bracket",
    "Entrant",
    "Game",
    "build_bracket",
]
