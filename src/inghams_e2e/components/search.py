"""Search block placed on a content page: sticky criteria bar measured by position."""

import re

from playwright.sync_api import Page, expect

from ..models import BoundingBox
from .base import Component


class SearchComponent(Component):
    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.search_bar = page.locator(".c-search-criteria-bar")
        self.search_holiday_button = page.get_by_role("button", name="Search holidays")
        self.search_field_mobile = page.get_by_role("button", name="Search..")
        self.toggle = page.locator('input[value="showDest"]')
        self.initial_box: BoundingBox | None = None

    def _search_bar_box(self) -> BoundingBox:
        box = self.search_bar.bounding_box()
        assert box is not None, "Search bar has no bounding box"
        return BoundingBox(**box)

    def validate_search_result_page_url(self) -> None:
        self.page.wait_for_load_state("domcontentloaded")
        expect(self.page).to_have_url(re.compile(r".*search-results"))

    def check_search_bar_availability(self) -> None:
        expect(self.search_bar, "Search bar is available").to_be_visible()
        self.initial_box = self._search_bar_box()

    def validate_search_bar_sticky(self) -> None:
        """After scrolling the bar stays at the same viewport height."""
        assert self.initial_box is not None, "check_search_bar_availability must run first"
        assert self._search_bar_box().y == self.initial_box.y

    def click_search_holiday_button(self) -> None:
        if not self.search_holiday_button.is_visible():
            self.search_field_mobile.click()
        self.search_holiday_button.click()

    def validate_toggle_value(self, grouped_by_accommodation: bool = False) -> None:
        self.page.wait_for_load_state("domcontentloaded")
        expect(self.toggle, "Toggle is available").to_have_count(1)
        assert self.toggle.is_checked() is grouped_by_accommodation
