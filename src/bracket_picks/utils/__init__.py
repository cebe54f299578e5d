"""Shared utilities module."""

from __future__ import annotations

from bracket_picks.utils.assertions import (
    assert_columns,
    assert_no_nulls,
    assert_open_interval,
    assert_unique,
)
from bracket_picks.utils.logger import (
    DEBUG,
    NORMAL,
    QUIET,
    VERBOSE,
    configure_logging,
    get_logger,
    resolve_level,
)

__all__ = [
    "DEBUG",
    "NORMAL",
    "QUIET",
    "VERBOSE",
    "assert_columns",
    "assert_no_nulls",
    "assert_open_interval",
    "assert_unique",
    "configure_logging",
    "get_logger",
    "resolve_level",
]
