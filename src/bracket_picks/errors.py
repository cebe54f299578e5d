"""Shared exception hierarchy for bracket_picks.

Every error raised by the core or the ingestion layer derives from
:class:`BracketPicksError` so that callers (the CLI in particular) can handle
bad input uniformly.  All of them describe structural data problems that must
be fixed upstream; nothing here is retryable.
"""

from __future__ import annotations


class BracketPicksError(Exception):
    """Base exception for all bracket_picks errors."""


class InvalidRatingError(BracketPicksError, ValueError):
    """A rating outside the open interval (0, 1) reached the win model."""


class MalformedBracketError(BracketPicksError, ValueError):
    """The game tree violates the single-elimination structure."""


class MissingEntrantError(BracketPicksError, KeyError):
    """A bracket name could not be matched to a ratings record."""

    def __str__(self) -> str:
        # KeyError repr-quotes its message; keep it readable.
        return str(self.args[0]) if self.args else ""
