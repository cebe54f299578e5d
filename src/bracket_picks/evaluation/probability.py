"""Pairwise win probabilities from efficiency ratings (log5).

For ratings ``a`` and ``b`` in the open interval ``(0, 1)``::

    P(a beats b) = (a - a·b) / (a + b - 2·a·b)

The formula is complementary, ``P(a, b) + P(b, a) = 1``, and its
denominator only vanishes when ``a = b = 0`` or ``a = b = 1``, both outside
the valid domain.  Ratings on or beyond the boundary (or non-finite) are
rejected with :class:`~bracket_picks.errors.InvalidRatingError` rather than
yielding NaN or infinity.

References:
    Bill James, "log5" method; see also
    http://www.diamond-mind.com/articles/playoff2002.htm
"""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from bracket_picks.errors import InvalidRatingError


def check_rating(rating: float) -> float:
    """Return *rating* unchanged if it lies strictly inside ``(0, 1)``.

    Raises:
        InvalidRatingError: If the rating is not finite or is out of range.
    """
    if not math.isfinite(rating) or not 0.0 < rating < 1.0:
        msg = f"Rating must lie strictly between 0 and 1, got {rating!r}"
        raise InvalidRatingError(msg)
    return rating


def win_probability(a: float, b: float) -> float:
    """Return P(entrant rated *a* beats entrant rated *b*).

    Args:
        a: First entrant's rating in ``(0, 1)``.
        b: Second entrant's rating in ``(0, 1)``.

    Raises:
        InvalidRatingError: If either rating is outside ``(0, 1)``.

    Example:
        >>> round(win_probability(0.9, 0.1), 5)
        0.9878
    """
    check_rating(a)
    check_rating(b)
    return (a - a * b) / (a + b - 2.0 * a * b)


def win_probability_matrix(
    a_ratings: npt.ArrayLike,
    b_ratings: npt.ArrayLike,
) -> npt.NDArray[np.float64]:
    """Return ``M[i, j] = P(a_i beats b_j)`` for every pair.

    Vectorised form of :func:`win_probability` via broadcasting.

    Args:
        a_ratings: 1-D ratings of the row entrants.
        b_ratings: 1-D ratings of the column entrants.

    Returns:
        Float64 array of shape ``(len(a_ratings), len(b_ratings))``.

    Raises:
        InvalidRatingError: If any rating is outside ``(0, 1)``.
    """
    a = np.asarray(a_ratings, dtype=np.float64)
    b = np.asarray(b_ratings, dtype=np.float64)
    for ratings in (a, b):
        bad = ~(np.isfinite(ratings) & (ratings > 0.0) & (ratings < 1.0))
        if bad.any():
            msg = f"Rating must lie strictly between 0 and 1, got {ratings[bad].tolist()!r}"
            raise InvalidRatingError(msg)

    a_col = a[:, None]
    b_row = b[None, :]
    result: npt.NDArray[np.float64] = (a_col - a_col * b_row) / (a_col + b_row - 2.0 * a_col * b_row)
    return result
