"""Allow ``python -m bracket_picks.cli``."""

from __future__ import annotations

from bracket_picks.cli.main import app

app()
