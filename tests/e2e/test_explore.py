"""Explore (en-GB) site: homepage search, trip search modal, header and footer links."""

from pathlib import Path

import pytest

from inghams_e2e.data import load_explore_searches

pytestmark = pytest.mark.e2e

SEARCHES = load_explore_searches(Path(__file__).parent / "data" / "searchdata.csv")

# active, filtersearch, link_type, primary_link, secondary_link, expected path
HEADER_LINKS = [
    ("FALSE", "TRUE", "Destinations", "Europe", "Italy", "/destinations/europe/italy"),
    ("FALSE", "TRUE", "Destinations", "Asia", "Japan", "/destinations/asia/japan"),
    ("TRUE", "", "Holiday Types", "Walking", "Self-guided walking", "/holiday-types/walking/self-guided"),
    ("TRUE", "", "Inspiration", "", "", "/inspiration"),
]

FOOTER_LINKS = ["About us", "Contact us", "FAQs"]


@pytest.fixture(autouse=True)
def explore_home(site_page, environment_urls):
    if not environment_urls.en_gb:
        pytest.skip("No Explore URL for this environment")
    site_page.goto(environment_urls.en_gb)
    return environment_urls.en_gb


class TestSearch:
    @pytest.mark.smoke
    def test_search_all_via_homepage(self, explore_home_page):
        explore_home_page.search_function()
        explore_home_page.wait_until_loaded()
        assert explore_home_page.count_result_cards() > 0

    def test_search_all_via_trip_search_modal(self, trip_search_modal):
        trip_search_modal.search_function()
        trip_search_modal.wait_until_loaded()
        assert trip_search_modal.count_result_cards() > 0

    @pytest.mark.parametrize("destination", ["Peru", "Iceland"])
    def test_destination_search(self, explore_home_page, destination):
        explore_home_page.search_destination(destination)

    @pytest.mark.parametrize("search", SEARCHES, ids=lambda s: s.query_type)
    def test_filters_on_homepage(self, explore_home_page, search):
        explore_home_page.random_search(search)

    @pytest.mark.parametrize("search", SEARCHES, ids=lambda s: s.query_type)
    def test_filters_on_trip_search(self, trip_search_modal, search):
        trip_search_modal.trip_search(search)


class TestNavigation:
    @pytest.mark.parametrize(
        ("active", "filtersearch", "link_type", "primary", "secondary", "path"),
        HEADER_LINKS,
        ids=[f"{row[2]}-{row[4] or 'top'}" for row in HEADER_LINKS],
    )
    def test_header_link(self, link_page, explore_home, active, filtersearch, link_type, primary, secondary, path):
        link_page.header_link(active, filtersearch, link_type, primary, secondary, explore_home.rstrip("/") + path)

    @pytest.mark.parametrize("name", FOOTER_LINKS)
    def test_footer_link(self, footer_page, explore_home, name):
        footer_page.footer_link(name)
        assert footer_page.page.url.rstrip("/") != explore_home.rstrip("/"), f"{name} did not navigate"
