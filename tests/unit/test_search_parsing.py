"""Tests for the text parsing used on the search results page."""

import pytest

from inghams_e2e.pages.search_results import capitalise_location, duration_pattern, parse_criteria_bar, parse_prices


class TestCriteriaBar:
    def test_adults_and_children(self):
        counts = parse_criteria_bar("From London Gatwick 5 adults , 3 children Any date (7 nights)")
        assert (counts.adults, counts.children) == (5, 3)

    def test_single_adult_and_child(self):
        counts = parse_criteria_bar("1 adult, 1 child")
        assert (counts.adults, counts.children) == (1, 1)

    def test_no_guests(self):
        counts = parse_criteria_bar("Any date")
        assert (counts.adults, counts.children) == (0, 0)


@pytest.mark.parametrize(
    ("location", "expected"),
    [
        ("austria", "Austria"),
        ("austria/tyrol", "Austria/Tyrol"),
        ("val d'isere", "Val D'isere"),
        ("", ""),
    ],
)
def test_capitalise_location(location, expected):
    assert capitalise_location(location) == expected


def test_parse_prices_ignores_labels_without_amounts():
    assert parse_prices(["From £1,079 pp", "Call for price", "£899", ""]) == [1079, 899]


def test_duration_pattern_tolerates_spacing():
    pattern = duration_pattern("14 nights")
    assert pattern.search("Any date (14  Nights)")
    assert not pattern.search("Any date (7 nights)")
