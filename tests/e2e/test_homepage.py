"""Inghams home page navigation and site search."""

import pytest

pytestmark = [pytest.mark.e2e, pytest.mark.smoke]


@pytest.fixture
def home(home_page, home_url):
    home_page.page.goto(home_url, wait_until="domcontentloaded")
    home_page.accept_cookies()
    return home_page


def test_our_history_link(home):
    home.click_our_history()
    home.check_our_history()


@pytest.mark.parametrize("keyword", ["Austria", "Lapland"])
def test_site_search(home, keyword):
    home.search(keyword)
