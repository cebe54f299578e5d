"""Construct the standard four-region, 64-entrant tournament bracket.

Round 1 pairs seed ``s`` against seed ``17 - s`` inside each region, in the
traditional bracket order (1, 8, 5, 4, 6, 3, 7, 2), so that adjacent games
meet in the following round.  Rounds 2–4 pair adjacent winners within a
region down to one regional final; the regional champions then meet across
regions in two semifinals (round 5), whose winners play the final (round 6).

Game numbers are assigned sequentially: every round-1 game region by region,
then each later round in turn.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from bracket_picks.bracket.structure import Bracket, Entrant, Game
from bracket_picks.errors import MalformedBracketError

logger = logging.getLogger(__name__)

#: First-round seed order per region; each seed plays ``17 - seed``.
FIRST_ROUND_SEED_ORDER: tuple[int, ...] = (1, 8, 5, 4, 6, 3, 7, 2)

#: Number of seeds per region.
REGION_SIZE: int = 16

#: Last round played inside a region (the regional final).
REGIONAL_FINAL_ROUND: int = 4

#: Region label shared by the semifinals and the final.
FINAL_FOUR_REGION: str = "Final Four"

#: Regions whose champions meet in each semifinal.
DEFAULT_SEMIFINAL_PAIRINGS: tuple[tuple[str, str], tuple[str, str]] = (
    ("Midwest", "West"),
    ("East", "South"),
)


def build_bracket(
    regions: Mapping[str, Mapping[int, Entrant]],
    semifinal_pairings: Sequence[Sequence[str]] = DEFAULT_SEMIFINAL_PAIRINGS,
) -> Bracket:
    """Build and validate the full tournament tree.

    Args:
        regions: Mapping of ``region → {seed → Entrant}``; every region must
            supply seeds 1–16.  Region iteration order fixes game numbering.
        semifinal_pairings: Two pairs of region names; each pair's regional
            champions meet in one semifinal.

    Returns:
        A validated :class:`Bracket` of 63 games.

    Raises:
        MalformedBracketError: If a seed is missing, an entrant's seed does
            not match its slot, or the pairings do not cover every region
            exactly once.
    """
    _check_pairings(regions, semifinal_pairings)

    games: list[Game] = []
    next_number = 1

    for region, seeds in regions.items():
        for seed in FIRST_ROUND_SEED_ORDER:
            opponent_seed = REGION_SIZE + 1 - seed
            team_one = _seeded(region, seeds, seed)
            team_two = _seeded(region, seeds, opponent_seed)
            games.append(Game(number=next_number, round=1, region=region, entrants=(team_one, team_two)))
            next_number += 1

    for round_num in range(2, REGIONAL_FINAL_ROUND + 1):
        previous = [g for g in games if g.round == round_num - 1]
        for game_one, game_two in zip(previous[0::2], previous[1::2]):
            games.append(
                Game(
                    number=next_number,
                    round=round_num,
                    region=game_one.region,
                    feeders=(game_one, game_two),
                )
            )
            next_number += 1

    regional_finals = {g.region: g for g in games if g.round == REGIONAL_FINAL_ROUND}
    semifinals: list[Game] = []
    for region_one, region_two in semifinal_pairings:
        semifinal = Game(
            number=next_number,
            round=REGIONAL_FINAL_ROUND + 1,
            region=FINAL_FOUR_REGION,
            feeders=(regional_finals[region_one], regional_finals[region_two]),
        )
        semifinals.append(semifinal)
        games.append(semifinal)
        next_number += 1

    games.append(
        Game(
            number=next_number,
            round=REGIONAL_FINAL_ROUND + 2,
            region=FINAL_FOUR_REGION,
            feeders=(semifinals[0], semifinals[1]),
        )
    )

    bracket = Bracket(games)
    logger.info("Built bracket: %d regions, %d games", len(regions), len(bracket))
    return bracket


def _seeded(region: str, seeds: Mapping[int, Entrant], seed: int) -> Entrant:
    entrant = seeds.get(seed)
    if entrant is None:
        msg = f"Region {region!r} is missing seed {seed}"
        raise MalformedBracketError(msg)
    if entrant.seed != seed:
        msg = f"{entrant.name!r} is placed at seed {seed} in {region!r} but carries seed {entrant.seed}"
        raise MalformedBracketError(msg)
    return entrant


def _check_pairings(
    regions: Mapping[str, Mapping[int, Entrant]],
    semifinal_pairings: Sequence[Sequence[str]],
) -> None:
    if len(semifinal_pairings) != 2 or any(len(pair) != 2 for pair in semifinal_pairings):
        msg = f"Expected two semifinal pairs of two regions, got {semifinal_pairings!r}"
        raise MalformedBracketError(msg)
    paired = [region for pair in semifinal_pairings for region in pair]
    if sorted(paired) != sorted(regions) or len(set(paired)) != len(paired):
        msg = f"Semifinal pairings {semifinal_pairings!r} must name each region {sorted(regions)} exactly once"
        raise MalformedBracketError(msg)
