"""Load entrant ratings from a CSV table.

The table needs one column of entrant names and one column of ratings in
``(0, 1)`` (for example KenPom-style Pythagorean ratings).  Column names are
configurable; extra columns are ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd  # type: ignore[import-untyped]
import pandera.errors

from bracket_picks.errors import BracketPicksError, InvalidRatingError
from bracket_picks.ingest.schema import EntrantRecord
from bracket_picks.utils.assertions import (
    assert_columns,
    assert_no_nulls,
    assert_open_interval,
    assert_unique,
)

logger = logging.getLogger(__name__)


class RatingsFormatError(BracketPicksError, ValueError):
    """The ratings table is missing columns, has gaps, or repeats names."""


def load_ratings(
    path: Path,
    *,
    name_column: str = "name",
    rating_column: str = "rating",
) -> list[EntrantRecord]:
    """Read and validate a ratings CSV.

    Args:
        path: CSV file to read.
        name_column: Column holding entrant names.
        rating_column: Column holding ratings.

    Returns:
        One :class:`EntrantRecord` per row, in file order.

    Raises:
        FileNotFoundError: If *path* does not exist.
        RatingsFormatError: If the file is not UTF-8 CSV, columns are
            missing, values are null, or a name appears twice.
        InvalidRatingError: If any rating is outside ``(0, 1)``.
    """
    try:
        df = pd.read_csv(path, encoding="utf-8")
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as exc:
        msg = f"{path}: unreadable ratings table ({exc})"
        raise RatingsFormatError(msg) from exc
    df = df.rename(columns=str.strip)

    try:
        assert_columns(df, [name_column, rating_column])
        assert_no_nulls(df, [name_column, rating_column])
    except pandera.errors.SchemaError as exc:
        msg = f"{path}: {exc}"
        raise RatingsFormatError(msg) from exc

    df[name_column] = df[name_column].astype(str).str.strip()
    try:
        assert_unique(df, name_column)
    except pandera.errors.SchemaError as exc:
        msg = f"{path}: duplicate entrant names in column {name_column!r}"
        raise RatingsFormatError(msg) from exc

    try:
        assert_open_interval(df, rating_column, lower=0.0, upper=1.0)
    except pandera.errors.SchemaError as exc:
        msg = f"{path}: ratings in column {rating_column!r} must lie strictly between 0 and 1"
        raise InvalidRatingError(msg) from exc

    records = [
        EntrantRecord(name=str(name), rating=float(rating))
        for name, rating in zip(df[name_column], df[rating_column].astype(float))
    ]
    logger.info("Loaded %d ratings from %s", len(records), path)
    return records
