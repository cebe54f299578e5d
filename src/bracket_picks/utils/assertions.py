"""DataFrame validation helpers backed by Pandera.

Used by the ingestion layer to check tabular inputs (the ratings table)
before any row is turned into a domain object.  Every helper propagates
`pandera.errors.SchemaError` on failure.

Usage:
    >>> import pandas as pd
    >>> from bracket_picks.utils.assertions import assert_columns, assert_no_nulls
    >>> df = pd.DataFrame({"name": ["Duke"], "rating": [0.95]})
    >>> assert_columns(df, ["name", "rating"])
    >>> assert_no_nulls(df)
"""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd  # type: ignore[import-untyped]
import pandera.pandas as pa


def assert_columns(df: pd.DataFrame, required: Sequence[str]) -> None:
    """Validate that all required columns exist in the DataFrame.

    Raises:
        pa.errors.SchemaError: If any required column is missing.
    """
    if not required:
        return
    pa.DataFrameSchema(
        {col: pa.Column() for col in required},
        strict=False,
    ).validate(df)


def assert_no_nulls(
    df: pd.DataFrame,
    columns: Sequence[str] | None = None,
) -> None:
    """Validate no null values in the given columns (all columns when ``None``).

    Raises:
        pa.errors.SchemaError: If nulls are found or a column is absent.
    """
    cols = list(df.columns) if columns is None else list(columns)
    if not cols:
        return
    pa.DataFrameSchema(
        {col: pa.Column(nullable=False) for col in cols},
        strict=False,
    ).validate(df)


def assert_unique(df: pd.DataFrame, column: str) -> None:
    """Validate that *column* holds no duplicate values.

    Raises:
        pa.errors.SchemaError: If duplicates are present or the column is absent.
    """
    pa.DataFrameSchema(
        {column: pa.Column(unique=True)},
        strict=False,
    ).validate(df)


def assert_open_interval(
    df: pd.DataFrame,
    column: str,
    *,
    lower: float,
    upper: float,
) -> None:
    """Validate that every value of *column* lies strictly between the bounds.

    Args:
        df: DataFrame to check.
        column: Column whose values to validate.
        lower: Exclusive lower bound.
        upper: Exclusive upper bound.

    Raises:
        pa.errors.SchemaError: If any value is out of range, or the column is
            not present.

    Example:
        >>> import pandas as pd
        >>> from bracket_picks.utils.assertions import assert_open_interval
        >>> df = pd.DataFrame({"rating": [0.2, 0.9]})
        >>> assert_open_interval(df, "rating", lower=0.0, upper=1.0)
    """
    pa.DataFrameSchema(
        {column: pa.Column(float, checks=[pa.Check.gt(lower), pa.Check.lt(upper)], coerce=True)},
        strict=False,
    ).validate(df)
