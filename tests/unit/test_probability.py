"""Unit tests for the log5 pairwise win model."""

from __future__ import annotations

import math

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from bracket_picks.errors import InvalidRatingError
from bracket_picks.evaluation.probability import check_rating, win_probability, win_probability_matrix

_ratings = st.floats(min_value=1e-6, max_value=1.0 - 1e-6, allow_nan=False)


@pytest.mark.smoke
class TestWinProbability:
    """Tests for `win_probability`."""

    def test_literal_formula_strong_vs_weak(self) -> None:
        # numerator 0.9 - 0.09 = 0.81, denominator 1.0 - 0.18 = 0.82
        assert win_probability(0.9, 0.1) == pytest.approx(0.81 / 0.82, abs=1e-12)
        assert win_probability(0.9, 0.1) == pytest.approx(0.98780, abs=1e-5)

    def test_weak_vs_strong(self) -> None:
        assert win_probability(0.1, 0.9) == pytest.approx(0.01220, abs=1e-5)

    def test_equal_ratings_are_even(self) -> None:
        assert win_probability(0.5, 0.5) == 0.5
        assert win_probability(0.73, 0.73) == pytest.approx(0.5)

    def test_half_rating_yields_opponent_complement(self) -> None:
        # Against a 0.5 opponent, log5 returns the rating itself.
        assert win_probability(0.8, 0.5) == pytest.approx(0.8)

    def test_higher_rating_is_favoured(self) -> None:
        assert win_probability(0.7, 0.6) > 0.5

    @pytest.mark.parametrize("bad", [0.0, 1.0, -0.2, 1.5, math.nan, math.inf])
    def test_invalid_first_rating_raises(self, bad: float) -> None:
        with pytest.raises(InvalidRatingError, match="strictly between 0 and 1"):
            win_probability(bad, 0.5)

    @pytest.mark.parametrize("bad", [0.0, 1.0, math.nan])
    def test_invalid_second_rating_raises(self, bad: float) -> None:
        with pytest.raises(InvalidRatingError):
            win_probability(0.5, bad)

    def test_invalid_rating_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            check_rating(2.0)

    def test_check_rating_returns_value(self) -> None:
        assert check_rating(0.42) == 0.42


@pytest.mark.property
@given(a=_ratings, b=_ratings)
def test_complementarity(a: float, b: float) -> None:
    """P(a beats b) + P(b beats a) == 1 for every valid pair."""
    assert win_probability(a, b) + win_probability(b, a) == pytest.approx(1.0, abs=1e-9)


@pytest.mark.property
@given(a=_ratings, b=_ratings)
def test_probability_in_unit_interval(a: float, b: float) -> None:
    p = win_probability(a, b)
    assert 0.0 <= p <= 1.0


class TestWinProbabilityMatrix:
    """Tests for `win_probability_matrix`."""

    def test_matches_scalar_formula(self) -> None:
        a = [0.9, 0.4, 0.65]
        b = [0.1, 0.5]
        matrix = win_probability_matrix(a, b)
        assert matrix.shape == (3, 2)
        for i, ra in enumerate(a):
            for j, rb in enumerate(b):
                assert matrix[i, j] == pytest.approx(win_probability(ra, rb), abs=1e-12)

    def test_transpose_complement(self) -> None:
        a = np.array([0.3, 0.8])
        b = np.array([0.55, 0.2, 0.7])
        forward = win_probability_matrix(a, b)
        backward = win_probability_matrix(b, a)
        np.testing.assert_allclose(forward + backward.T, 1.0, atol=1e-12)

    def test_rejects_out_of_range(self) -> None:
        with pytest.raises(InvalidRatingError, match="1.2"):
            win_probability_matrix([0.5, 1.2], [0.5])

    def test_rejects_nan(self) -> None:
        with pytest.raises(InvalidRatingError):
            win_probability_matrix([0.5], [float("nan")])
