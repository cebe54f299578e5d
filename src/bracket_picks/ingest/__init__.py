"""Loading ratings and bracket layouts from files."""

from __future__ import annotations

from bracket_picks.ingest.layout import load_bracket_layout, parse_bracket_layout
from bracket_picks.ingest.ratings import RatingsFormatError, load_ratings
from bracket_picks.ingest.resolve import match_name, resolve_entrants
from bracket_picks.ingest.schema import BracketLayout, EntrantRecord

__all__ = [
    "BracketLayout",
    "EntrantRecord",
    "RatingsFormatError",
    "load_bracket_layout",
    "load_ratings",
    "match_name",
    "parse_bracket_layout",
    "resolve_entrants",
]
