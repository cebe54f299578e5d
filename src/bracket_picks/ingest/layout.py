"""Load the bracket's region/seed layout from JSON.

Expected shape::

    {
      "Midwest": {"1": "Kansas", "2": "Ohio St.", ..., "16": ["Lehigh", "Winthrop"]},
      "West": {...},
      ...
    }

A list value marks a play-in slot; its ``i``-th name is placed at seed
``seed + i`` (so the second play-in entrant of the 16 line becomes seed 17).
Only seeds 1–16 are drawn into round 1, so such overflow entrants are logged
and otherwise ignored by the bracket builder.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from bracket_picks.errors import MalformedBracketError
from bracket_picks.ingest.schema import BracketLayout

logger = logging.getLogger(__name__)


def parse_bracket_layout(raw: dict[str, Any]) -> BracketLayout:
    """Build a :class:`BracketLayout` from the decoded JSON object.

    Raises:
        MalformedBracketError: If the object does not have the expected shape
            or two names claim the same seed.
    """
    if not isinstance(raw, dict):
        msg = f"Bracket layout must be a JSON object of regions, got {type(raw).__name__}"
        raise MalformedBracketError(msg)

    regions: dict[str, dict[int, str]] = {}
    for region, seeds in raw.items():
        if not isinstance(seeds, dict):
            msg = f"Region {region!r} must map seeds to names"
            raise MalformedBracketError(msg)
        placed: dict[int, str] = {}
        for seed_key, names in seeds.items():
            try:
                seed = int(seed_key)
            except (TypeError, ValueError):
                msg = f"Region {region!r} has non-numeric seed {seed_key!r}"
                raise MalformedBracketError(msg) from None
            entries = names if isinstance(names, list) else [names]
            for offset, name in enumerate(entries):
                slot = seed + offset
                if slot in placed:
                    msg = f"Region {region!r} seed {slot} is claimed by both {placed[slot]!r} and {name!r}"
                    raise MalformedBracketError(msg)
                placed[slot] = str(name).strip()
        regions[str(region)] = dict(sorted(placed.items()))

    try:
        layout = BracketLayout(regions=regions)
    except ValidationError as exc:
        raise MalformedBracketError(str(exc)) from exc

    for region, seeds in layout.regions.items():
        for seed, name in seeds.items():
            if seed > 16:
                logger.warning("layout: %s seed %d (%s) is outside the 16-seed draw; skipped", region, seed, name)
    return layout


def load_bracket_layout(path: Path) -> BracketLayout:
    """Read and parse a bracket layout JSON file.

    Raises:
        FileNotFoundError: If *path* does not exist.
        MalformedBracketError: If the file is not UTF-8 layout JSON.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        msg = f"{path}: not valid UTF-8 ({exc})"
        raise MalformedBracketError(msg) from exc
    except json.JSONDecodeError as exc:
        msg = f"{path}: invalid JSON ({exc})"
        raise MalformedBracketError(msg) from exc
    layout = parse_bracket_layout(raw)
    logger.info("Loaded bracket layout with %d regions from %s", len(layout.regions), path)
    return layout
