"""tests/unit/test_extrapolation.py"""

from __future__ import annotations

import pytest

from popseries.series.extrapolation import extrapolate_future_population
from popseries.series.rounding import round_half_up
from popseries.series.types import GenderedCount


@pytest.fixture
def last_point(make_series):
    return make_series({2020: (5025500, 4663876)})


def test_growth_three_years(last_point) -> None:
    out = extrapolate_future_population(last_point, 3, 1.01)

    assert out == {
        **last_point,
        2021: GenderedCount(female=5075755, male=4710515),
        2022: GenderedCount(female=5126513, male=4757620),
        2023: GenderedCount(female=5177778, male=4805196),
    }


def test_decline_two_years(last_point) -> None:
    out = extrapolate_future_population(last_point, 2, 0.99)

    assert out == {
        **last_point,
        2021: GenderedCount(female=4975245, male=4617237),
        2022: GenderedCount(female=4925493, male=4571065),
    }


def test_growth_five_years(last_point) -> None:
    out = extrapolate_future_population(last_point, 5, 1.02)

    assert out[2021] == GenderedCount(female=5126010, male=4757154)
    assert out[2025] == GenderedCount(female=5548558, male=5149297)
    assert list(out) == [2020, 2021, 2022, 2023, 2024, 2025]


def test_zero_years_returns_equal_copy(last_point) -> None:
    out = extrapolate_future_population(last_point, 0, 1.01)
    assert out == last_point
    assert out is not last_point


def test_each_year_compounds_on_the_rounded_previous_year(make_series) -> None:
    past = make_series({2010: (1001, 999), 2011: (1234, 4321)})
    rate = 1.0137

    out = extrapolate_future_population(past, 6, rate)

    female, male = 1234, 4321
    for k in range(1, 7):
        female, male = round_half_up(female * rate), round_half_up(male * rate)
        assert out[2011 + k] == GenderedCount(female=female, male=male)
    # input years are kept
    assert out[2010] == past[2010]


def test_input_is_not_mutated(last_point) -> None:
    before = dict(last_point)
    extrapolate_future_population(last_point, 4, 1.01)
    assert last_point == before


def test_negative_years_fail_fast(last_point) -> None:
    with pytest.raises(ValueError, match="future_years"):
        extrapolate_future_population(last_point, -1, 1.01)


@pytest.mark.parametrize("rate", [-0.5, float("nan"), float("inf")])
def test_invalid_rate_fails_fast(last_point, rate) -> None:
    with pytest.raises(ValueError, match="rate"):
        extrapolate_future_population(last_point, 1, rate)


def test_non_integer_years_fail_fast(last_point) -> None:
    with pytest.raises(ValueError, match="integer"):
        extrapolate_future_population(last_point, 2.5, 1.01)


def test_empty_series_cannot_be_extrapolated() -> None:
    assert extrapolate_future_population({}, 0, 1.01) == {}
    with pytest.raises(ValueError, match="empty"):
        extrapolate_future_population({}, 1, 1.01)


def test_zero_rate_projects_zero(last_point) -> None:
    out = extrapolate_future_population(last_point, 2, 0.0)
    assert out[2022] == GenderedCount(female=0, male=0)
