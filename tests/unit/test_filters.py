"""Tests for the filter expectations."""

import pytest

from inghams_e2e.filters import FILTER_TEST_DATA, PERFORMANCE, UNIVERSAL_FILTERS, filter_data_for, valid_rating_options
from inghams_e2e.models import FilterKind, Product


def test_valid_rating_options():
    options = ["Any", "1", "1.5", "3", "4.5", "5", "5.5", "0.5", "4 stars"]
    assert valid_rating_options(options) == ["1", "1.5", "3", "4.5", "5"]


@pytest.mark.parametrize(
    ("product", "expected_range"),
    [("ski", (10, 1000)), ("Walking", (50, 500)), ("lapland", (5, 100)), ("Santa Breaks", (5, 100))],
)
def test_expected_result_ranges(product, expected_range):
    data = filter_data_for(product)
    assert (data.min_results, data.max_results) == expected_range


def test_best_for_lists_do_not_overlap():
    for data in FILTER_TEST_DATA.values():
        assert not set(data.best_for_enabled) & set(data.best_for_disabled), data.product


def test_ratings_filter():
    ratings = UNIVERSAL_FILTERS["ratings"]
    assert ratings.kind is FilterKind.RADIO
    assert ratings.test_option in ratings.options
    assert valid_rating_options(ratings.options) == ratings.options


def test_every_test_option_is_listed():
    for universal in UNIVERSAL_FILTERS.values():
        assert universal.test_option in universal.options


def test_performance_thresholds():
    assert (PERFORMANCE.filter_load_ms, PERFORMANCE.filter_apply_ms, PERFORMANCE.page_navigation_ms) == (5000, 3000, 10_000)


def test_lapland_has_no_best_for_expectations():
    assert FILTER_TEST_DATA[Product.LAPLAND].best_for_enabled == []


@pytest.mark.parametrize("option", ["5.5", "0", "0.5", "6", "4.0"])
def test_ratings_outside_one_to_five_are_dropped(option):
    assert valid_rating_options([option]) == []
