"""Tests for the page object helpers that need no browser."""

from unittest.mock import MagicMock

import pytest
from playwright.sync_api import Error as PlaywrightError

from inghams_e2e.errors import ElementNotFoundError, FilterError, GuestCountError
from inghams_e2e.pages import BasePage, SearchResultPage


def failing(message):
    def action():
        raise PlaywrightError(message)

    return action


class TestClickWithFallbacks:
    def test_first_success_wins(self, tmp_path):
        base = BasePage(MagicMock(), failures_dir=tmp_path)
        later = MagicMock()
        winner = base.click_with_fallbacks(
            "Search button",
            [("standard", failing("Timeout 3000ms exceeded")), ("force", lambda: None), ("evaluate", later)],
        )
        assert winner == "force"
        later.assert_not_called()

    def test_all_strategies_fail(self, tmp_path):
        page = MagicMock()
        base = BasePage(page, failures_dir=tmp_path)
        with pytest.raises(ElementNotFoundError) as excinfo:
            base.click_with_fallbacks("Ski tab", [("standard", failing("a")), ("scroll", failing("b"))])

        error = excinfo.value
        assert error.strategies == ["standard", "scroll"]
        assert error.screenshot.parent == tmp_path
        assert error.screenshot.name.startswith("debug-ski-tab_")
        page.screenshot.assert_called_once()

    def test_other_errors_propagate(self, tmp_path):
        base = BasePage(MagicMock(), failures_dir=tmp_path)

        def broken():
            raise KeyError("not a browser error")

        with pytest.raises(KeyError):
            base.click_with_fallbacks("Button", [("standard", broken)])


def test_is_mobile():
    page = MagicMock()
    page.viewport_size = {"width": 390, "height": 844}
    assert BasePage(page).is_mobile
    page.viewport_size = {"width": 1280, "height": 720}
    assert not BasePage(page).is_mobile


class TestSetNumberOfGuests:
    @pytest.fixture
    def results_page(self):
        results = SearchResultPage(MagicMock())
        results.minus_button = MagicMock()
        results.plus_button = MagicMock()
        return results

    def test_steps_down_to_target(self, results_page):
        results_page._adults = MagicMock(side_effect=[4, 3, 2])
        results_page.set_number_of_guests(2)
        assert results_page.minus_button.click.call_count == 2
        results_page.plus_button.click.assert_not_called()

    def test_zero_adults_is_raised_to_one(self, results_page):
        results_page._adults = MagicMock(side_effect=[2, 1])
        results_page.set_number_of_guests(0)
        assert results_page.minus_button.click.call_count == 1

    def test_gives_up_after_max_attempts(self, results_page):
        results_page._adults = MagicMock(return_value=2)
        with pytest.raises(GuestCountError) as excinfo:
            results_page.set_number_of_guests(5, max_attempts=3)
        assert excinfo.value.actual == 2
        assert results_page.plus_button.click.call_count == 3


def rating_card(text):
    card = MagicMock()
    card.locator.return_value.first.text_content.return_value = text
    return card


class TestValidateAccommodationRatings:
    @pytest.fixture
    def results_page(self):
        results = SearchResultPage(MagicMock())
        results.is_visible = MagicMock(return_value=True)
        return results

    def _with_cards(self, results_page, *texts):
        results_page.page.locator.return_value.all.return_value = [rating_card(text) for text in texts]

    def test_all_cards_match(self, results_page):
        self._with_cards(results_page, "4", "4")
        report = results_page.validate_accommodation_ratings("4")
        assert report["is_valid"]
        assert report["invalid_cards"] == 0

    def test_unrated_cards_are_not_counted_as_mismatches(self, results_page):
        self._with_cards(results_page, "", "", "4")
        report = results_page.validate_accommodation_ratings("4")
        assert not report["is_valid"]
        assert report["actual_ratings"] == ["4"]
        assert (report["missing_ratings"], report["mismatched_ratings"]) == (2, 0)
        assert report["invalid_cards"] == 2

    def test_mismatched_rating(self, results_page):
        self._with_cards(results_page, "4", "3.5", "")
        report = results_page.validate_accommodation_ratings("4")
        assert (report["missing_ratings"], report["mismatched_ratings"]) == (1, 1)
        assert report["invalid_cards"] == 2


class TestFilterHelpers:
    @pytest.fixture
    def results_page(self):
        results = SearchResultPage(MagicMock())
        results.open_filter = MagicMock()
        results.close_filter = MagicMock()
        return results

    def test_validate_filter_options_lists_disabled(self, results_page):
        results_page.is_filter_option_enabled = MagicMock(side_effect=lambda option: option != "Spa")
        report = results_page.validate_filter_options("Facilities", ["WiFi", "Spa", "Pool"])
        assert report == {"all_enabled": False, "enabled_count": 2, "total_count": 3, "missing_options": ["Spa"]}
        results_page.close_filter.assert_called_once()

    def test_apply_filter_and_validate(self, results_page):
        results_page.page.url = "https://inghams.example.test/search?product=ski"

        def select(name, option):
            results_page.page.url += "&rating=4"

        results_page.select_filter_option = MagicMock(side_effect=select)
        results_page.get_search_result_count = MagicMock(side_effect=[120, 35])
        results_page.is_filter_tag_visible = MagicMock(return_value=True)

        outcome = results_page.apply_filter_and_validate("Ratings", "4")
        assert outcome.applied
        assert outcome.url_updated
        assert (outcome.initial_count, outcome.final_count) == (120, 35)
        assert outcome.tag_visible
        results_page.is_filter_tag_visible.assert_called_once_with("4")

    def test_disabled_option_is_not_applied(self, results_page):
        results_page.page.url = "https://inghams.example.test/search?product=ski"
        results_page.select_filter_option = MagicMock(side_effect=FilterError("disabled"))
        results_page.get_search_result_count = MagicMock(return_value=120)

        outcome = results_page.apply_filter_and_validate("Ratings", "5")
        assert not outcome.applied
        assert outcome.final_count == 120
        assert not outcome.url_updated

    def test_page_structure_elements(self, results_page):
        results_page.is_visible = MagicMock(side_effect=[True, True, False])
        report = results_page.verify_page_structure_elements()
        assert report == {"found": ["Search filters container", "Results container"], "missing": ["Pagination"]}
