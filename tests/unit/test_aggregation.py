"""tests/unit/test_aggregation.py"""

from __future__ import annotations

import pytest

from popseries.series.aggregation import (
    get_population_by_year,
    get_total_population_by_year,
    rate_to_percent,
    sort_by_keys,
    total_population_by_year,
)
from popseries.series.rounding import round_half_up, round_sig


def test_sort_by_keys_numeric() -> None:
    out = sort_by_keys({3: "three", 1: "one", 2: "two"})
    assert list(out) == [1, 2, 3]
    assert out == {1: "one", 2: "two", 3: "three"}


def test_sort_by_keys_strings_and_mixed() -> None:
    assert list(sort_by_keys({"c": 3, "a": 1, "b": 2})) == ["a", "b", "c"]
    assert list(sort_by_keys({"b": 2, 1: "one", "a": 1, 2: "two"})) == [1, 2, "a", "b"]


def test_sort_by_keys_empty_and_sorted_input() -> None:
    assert sort_by_keys({}) == {}
    d = {1980: "a", 1990: "b", 2001: "c"}
    assert list(sort_by_keys(d)) == [1980, 1990, 2001]


def test_totals_and_lookups(make_series) -> None:
    series = make_series({2020: (5025500, 4663876), 2021: (5004102, 4647359)})

    assert total_population_by_year(series) == {2020: 9689376, 2021: 9651461}
    assert get_population_by_year(series, 2020, "female") == 5025500
    assert get_population_by_year(series, 2021, "male") == 4647359
    assert get_total_population_by_year(series, 2021) == 9651461


def test_lookups_fail_for_unknown_year_or_gender(make_series) -> None:
    series = make_series({2020: (1, 2)})
    with pytest.raises(KeyError):
        get_total_population_by_year(series, 1999)
    with pytest.raises(ValueError, match="gender"):
        get_population_by_year(series, 2020, "other")


def test_rate_to_percent() -> None:
    assert rate_to_percent(0.99876) == pytest.approx(-0.124)
    assert rate_to_percent(1.01) == pytest.approx(1.0)
    assert rate_to_percent(1.0) == 0


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(4646375.5) == 4646376
    assert round_half_up(2.4999) == 2
    assert round_half_up(-2.5) == -2
    with pytest.raises(ValueError):
        round_half_up(float("nan"))


def test_round_sig() -> None:
    assert round_sig(0.99608695, 5) == 0.99609
    assert round_sig(100.02000000000001, 5) == 100.02
    assert round_sig(12345678, 3) == 12300000.0
    assert round_sig(-0.39099999999999, 5) == -0.391
    assert round_sig(0.0, 5) == 0.0
