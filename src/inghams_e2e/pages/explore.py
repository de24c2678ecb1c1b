"""Explore (en-GB) site: home search, trip search modal, header and footer links."""

import logging

from playwright.sync_api import Page, expect

from ..models import ExploreSearch
from .base import BasePage

logger = logging.getLogger(__name__)

FIELD_TIMEOUT = 10_000
RESULTS_SETTLE_MS = 5000


class _ExploreSearchForm(BasePage):
    """Destination, trip type and month fields shared by the home search and the modal."""

    destination_placeholder = "Search for a destination..."
    go_text = "Let's go!"

    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.destination_field = page.get_by_placeholder(self.destination_placeholder)
        self.destination_option = page.get_by_role("option").locator("span").first
        self.trip_type_field = self._trip_type_field()
        self.month_picker = self._month_picker()
        self.next_year_button = page.get_by_label("Next year")
        self.month_cells = page.get_by_role("gridcell")
        self.select_button = page.get_by_role("button", name="Select")
        self.go_button = page.get_by_text(self.go_text)
        self.filter_panel = page.locator('//div[@class="filter-panel__wrapper"]')

    def _trip_type_field(self):
        return self.page.get_by_role("searchbox", name="Any type")

    def _month_picker(self):
        return self.page.get_by_role("textbox", name="Datepicker input")

    def _fill_destination(self, search: ExploreSearch) -> None:
        if not search.destination:
            logger.info("No destination, skipping destination field")
            return
        self.destination_field.wait_for(state="visible", timeout=FIELD_TIMEOUT)
        self.destination_field.click()
        self.destination_field.fill(search.destination)
        # Keyword searches submit free text instead of picking a suggestion
        if search.query_type == "keyword":
            self.destination_field.click()
        else:
            self.destination_option.click()

    def _fill_trip_type(self, trip_type: str | None) -> None:
        if not trip_type:
            logger.info("No trip type, skipping trip type field")
            return
        self.trip_type_field.wait_for(state="visible", timeout=FIELD_TIMEOUT)
        self.trip_type_field.click()
        self.trip_type_field.fill(trip_type)
        self.page.get_by_role("option", name=trip_type, exact=True).locator("span").first.click()

    def _fill_month(self, monthyear: str | None) -> None:
        if not monthyear:
            logger.info("No month, skipping date picker")
            return
        self.month_picker.wait_for(state="visible", timeout=FIELD_TIMEOUT)
        self.month_picker.click()
        self.next_year_button.click()
        self.month_cells.get_by_text(monthyear).click()
        self.select_button.click()

    def _submit(self) -> None:
        self.go_button.wait_for(state="visible", timeout=FIELD_TIMEOUT)
        self.go_button.hover()
        self.go_button.click()
        self.wait_until_loaded(RESULTS_SETTLE_MS)

    def _fill_and_verify(self, search: ExploreSearch) -> None:
        self._fill_destination(search)
        self._fill_trip_type(search.trip_type)
        self._fill_month(search.monthyear)
        self._submit()
        for value in (search.destination, search.trip_type, search.monthyear):
            if value:
                expect(self.filter_panel).to_contain_text(value)


class ExploreHomePage(_ExploreSearchForm):
    def search_destination(self, destination: str) -> None:
        self._fill_and_verify(ExploreSearch("destination", destination=destination))

    def random_search(self, search: ExploreSearch) -> None:
        """Search with whichever of destination, trip type and month are set; the filter panel shows each."""
        self._fill_and_verify(search)

    def search_function(self) -> None:
        self._submit()


class TripSearchModal(_ExploreSearchForm):
    destination_placeholder = "All destinations"
    go_text = "Search Trips"

    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.trip_search_button = page.locator('//a[@class="header-link js-psearch-openbutton"]')
        self.modal = page.locator('//div[@class="eww-psearch-filters js-psearch-mainpanel open"]')

    def _trip_type_field(self):
        return self.page.locator("#algolia-search-modal").get_by_placeholder("Any type")

    def _month_picker(self):
        return self.page.locator('#algolia-search-modal [data-test="dp-input"]')

    def open(self) -> None:
        self.trip_search_button.wait_for(state="visible", timeout=FIELD_TIMEOUT)
        self.trip_search_button.hover()
        self.trip_search_button.click()
        self.wait_until_loaded(RESULTS_SETTLE_MS)
        expect(self.modal).to_be_visible()

    def trip_search(self, search: ExploreSearch) -> None:
        self.open()
        self._fill_and_verify(search)

    def search_function(self) -> None:
        self.open()
        self._submit()


class LinkPage(BasePage):
    """Mega-menu navigation in the Explore header."""

    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.dropdown = page.locator('div[class="exp-nav-new__tertiary exp-nav-new__tertiary--active"]')
        self.filter_panel = page.locator('//div[@class="filter-panel__wrapper"]')

    def primary_link(self, link_type: str):
        return self.page.locator('a[class="exp-nav-new__primary-link"]').get_by_text(link_type)

    def link(self, name: str):
        return self.page.get_by_role("link", name=name, exact=True)

    def header_link(
        self,
        active: str,
        filtersearch: str,
        link_type: str,
        primary_link: str,
        secondary_link: str,
        url: str,
    ) -> None:
        """Open a header menu and follow its region/country links to the expected URL.

        `active` is "TRUE" when the menu opens with the region already selected.
        """
        self.press(self.primary_link(link_type), timeout=15_000)
        if not secondary_link:
            logger.info("Top-level link only: %s", url)
            return

        expect(self.dropdown).to_be_visible(timeout=30_000)
        if active.upper() == "FALSE":
            self.press(self.link(primary_link))
        self.press(self.link(secondary_link))

        logger.info("Expecting %s", url)
        expect(self.page).to_have_url(url)
        if active.upper() == "FALSE" and filtersearch:
            expect(self.filter_panel).to_contain_text(primary_link)
            expect(self.filter_panel).to_contain_text(secondary_link)


class FooterPage(BasePage):
    def footer_link(self, name: str, url: str | None = None) -> None:
        link = self.page.locator("footer").get_by_role("link", name=name, exact=True).first
        self.press(link, timeout=15_000)
        if url:
            expect(self.page).to_have_url(url)
