"""Resort results page reached through "View hotels"."""

import logging

from playwright.sync_api import Page, expect

from ..models import SearchValues
from .base import BasePage

logger = logging.getLogger(__name__)


class ResortPage(BasePage):
    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self._bind_locators()
        self.resort_search_bar_values: list[str] = []

    def _bind_locators(self) -> None:
        page = self.page
        self.view_hotels_buttons = page.locator(".c-search-card__footer .c-search-card--resorts-footer").get_by_role(
            "button", name="View hotels"
        )
        self.search_bar = page.locator(".c-search-criteria-bar")
        self.criteria_bar = page.locator('[data-sticky-content="criteriabar"]')
        self.resort_search_bar_details = page.locator(".c-search-criteria-bar__price-basis > span")

    def check_resort_search_bar_availability(self) -> None:
        """Open the first resort in a new tab; its criteria bar starts out relative."""
        button = self.view_hotels_buttons.first
        button.wait_for(state="visible")
        self.page = self.open_in_new_page(button.click)
        self._bind_locators()

        expect(self.search_bar, "Search bar is available").to_be_visible()
        state = self.sticky_state(self.criteria_bar)
        assert state["sticky"] is False, "Search bar is not initially sticky"
        assert state["position"] == "relative"

    def validate_search_bar_sticky(self) -> None:
        expect(self.search_bar, "Search bar is available").to_be_visible()
        state = self.sticky_state(self.criteria_bar)
        assert state["sticky"] is True, "Search bar is sticky"
        assert state["position"] == "fixed"
        assert state["top"] == "0px"

    def validate_resort_search_bar_details(self, search_values: SearchValues) -> None:
        for index in range(3):
            text = self.resort_search_bar_details.nth(index).text_content()
            if text is not None:
                self.resort_search_bar_values.append(text)

        shown = [value.strip().lower() for value in self.resort_search_bar_values]
        missing = [value for value in search_values.resort_summary() if value not in shown]
        logger.info("Resort criteria bar: %s", shown)
        assert not missing, f"Resort search bar is missing {missing}"
