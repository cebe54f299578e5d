"""Project-wide logging with configurable verbosity levels.

Wraps Python's standard `logging` module.  Four verbosity levels map to
standard (and one custom) Python log levels:

    ========  ==============  =====
    Project   Python level    Value
    ========  ==============  =====
    QUIET     WARNING          30
    NORMAL    INFO             20
    VERBOSE   VERBOSE (custom) 15
    DEBUG     DEBUG            10
    ========  ==============  =====

Usage:
    Configure once at startup (the CLI does this), then log through
    module-level loggers as usual::

        >>> from bracket_picks.utils.logger import configure_logging, get_logger
        >>> configure_logging("VERBOSE")
        >>> log = get_logger("evaluation.selection")
        >>> log.info("Selecting picks...")

    The verbosity can also be set with the `BRACKET_PICKS_LOG_LEVEL`
    environment variable (case-insensitive).  An explicit `level` argument
    takes precedence over the environment variable, which takes precedence
    over the default (`NORMAL`).
"""

from __future__ import annotations

import logging
import os
import sys

VERBOSE: int = 15
"""Custom log level between INFO and DEBUG for per-decision output."""

logging.addLevelName(VERBOSE, "VERBOSE")

QUIET: int = logging.WARNING
"""Suppresses routine output (maps to WARNING=30)."""

NORMAL: int = logging.INFO
"""Default verbosity (maps to INFO=20)."""

DEBUG: int = logging.DEBUG
"""Full diagnostic output (maps to DEBUG=10)."""

_LEVEL_MAP: dict[str, int] = {
    "QUIET": QUIET,
    "NORMAL": NORMAL,
    "VERBOSE": VERBOSE,
    "DEBUG": DEBUG,
}

_ROOT_LOGGER_NAME: str = "bracket_picks"
_ENV_VAR: str = "BRACKET_PICKS_LOG_LEVEL"
_LOG_FORMAT: str = "%(asctime)s | %(name)s | %(levelname)-8s | %(message)s"


def resolve_level(level: str | None = None) -> int:
    """Translate a project level name into its numeric value.

    Args:
        level: ``"QUIET"``, ``"NORMAL"``, ``"VERBOSE"`` or ``"DEBUG"``
            (case-insensitive).  ``None`` falls through to the
            ``BRACKET_PICKS_LOG_LEVEL`` environment variable, then ``NORMAL``.

    Raises:
        ValueError: If the resolved name is not recognised.
    """
    resolved: str = level if level is not None else os.environ.get(_ENV_VAR, "NORMAL")
    resolved_upper = resolved.upper()
    if resolved_upper not in _LEVEL_MAP:
        msg = f"Unknown log level {resolved!r}. Valid levels: {', '.join(sorted(_LEVEL_MAP))}"
        raise ValueError(msg)
    return _LEVEL_MAP[resolved_upper]


def configure_logging(level: str | None = None) -> None:
    """Configure the ``bracket_picks`` logger hierarchy.

    Installs a single stderr handler on the package root logger; calling
    this again replaces the handler rather than stacking a second one.

    Args:
        level: Project level name, see :func:`resolve_level`.

    Raises:
        ValueError: If the resolved level name is not recognised.
    """
    numeric_level = resolve_level(level)

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(numeric_level)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.addHandler(handler)

    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``bracket_picks`` hierarchy.

    Args:
        name: Dot-separated suffix, e.g. ``"ingest.ratings"`` yields
            ``bracket_picks.ingest.ratings``.  Names already rooted at
            ``bracket_picks`` (such as a module's ``__name__``) are used as-is.
    """
    if name == _ROOT_LOGGER_NAME or name.startswith(f"{_ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
