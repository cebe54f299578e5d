"""Join the bracket layout to the ratings table.

Every name in the layout must resolve to exactly one ratings record.
Resolution tries an exact match, then a case-insensitive match, then (only
when a threshold is configured) the best rapidfuzz match scoring at or above
the threshold.  Names that still do not resolve raise
:class:`~bracket_picks.errors.MissingEntrantError`; the core never sees an
entrant without a rating.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rapidfuzz import fuzz, process

from bracket_picks.bracket.build import REGION_SIZE
from bracket_picks.bracket.structure import Entrant
from bracket_picks.errors import MissingEntrantError
from bracket_picks.ingest.schema import BracketLayout, EntrantRecord

logger = logging.getLogger(__name__)


def match_name(
    name: str,
    records: Sequence[EntrantRecord],
    fuzzy_threshold: float | None = None,
) -> EntrantRecord:
    """Return the ratings record for *name*.

    Args:
        name: Name as written in the bracket layout.
        records: Ratings records to search.
        fuzzy_threshold: Minimum rapidfuzz ``ratio`` (0–100) accepted for a
            fuzzy match.  ``None`` disables fuzzy matching.

    Raises:
        MissingEntrantError: If no record matches, or if the only matches
            differ from each other by case alone.
    """
    by_name = {r.name: r for r in records}
    exact = by_name.get(name)
    if exact is not None:
        return exact

    folded = [r for r in records if r.name.lower() == name.lower()]
    if len(folded) > 1:
        msg = f"Ambiguous name {name!r}: ratings hold {sorted(r.name for r in folded)}"
        raise MissingEntrantError(msg)
    if folded:
        return folded[0]

    best = process.extractOne(name, list(by_name), scorer=fuzz.ratio, processor=str.lower)
    if best is not None and fuzzy_threshold is not None and best[1] >= fuzzy_threshold:
        logger.warning("resolve: matched %r to %r (score %.0f)", name, best[0], best[1])
        return by_name[best[0]]

    hint = f"; closest is {best[0]!r} (score {best[1]:.0f})" if best is not None else ""
    msg = f"No rating found for {name!r}{hint}"
    raise MissingEntrantError(msg)


def resolve_entrants(
    layout: BracketLayout,
    records: Sequence[EntrantRecord],
    fuzzy_threshold: float | None = None,
) -> dict[str, dict[int, Entrant]]:
    """Turn the layout into ``region → {seed → Entrant}`` with ratings attached.

    Every layout name must resolve, but seeds beyond the 16-seed draw are
    left out of the result.

    Raises:
        MissingEntrantError: If any layout name has no ratings record.
    """
    regions: dict[str, dict[int, Entrant]] = {}
    for region, seeds in layout.regions.items():
        regions[region] = {}
        for seed, name in seeds.items():
            record = match_name(name, records, fuzzy_threshold)
            if seed > REGION_SIZE:
                continue
            regions[region][seed] = Entrant(name=record.name, rating=record.rating, seed=seed)
    logger.debug("resolve: %d entrants across %d regions", sum(len(s) for s in regions.values()), len(regions))
    return regions
