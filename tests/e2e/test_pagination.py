"""Pagination of the search results, whichever style the page uses."""

import pytest

from inghams_e2e.components import compare_page_content
from inghams_e2e.models import PaginationMethod

pytestmark = [pytest.mark.e2e, pytest.mark.regression]


@pytest.mark.parametrize("category", ["Ski", "Walking", "Lapland"])
def test_pagination(search_result_page, pagination_helper, category):
    search_result_page.page.goto("/", wait_until="domcontentloaded")
    search_result_page.accept_cookies()
    search_result_page.wait_for_network_idle()
    search_result_page.navigate_to_search_results(category)
    search_result_page.count_accommodation_cards()

    first_page = pagination_helper.capture_page_content()
    report = pagination_helper.verify_pagination()
    assert report.success, report.details

    if report.method is not PaginationMethod.TRADITIONAL:
        return

    # verify_pagination has already moved to the second page
    comparison = compare_page_content(first_page, pagination_helper.capture_page_content())
    assert comparison.is_different, comparison.details
    assert pagination_helper.current_page_number() >= 1


def test_page_numbers(search_result_page, pagination_helper):
    search_result_page.page.goto("/", wait_until="domcontentloaded")
    search_result_page.accept_cookies()
    search_result_page.navigate_to_search_results("Ski")
    if not pagination_helper.is_pagination_present():
        pytest.skip("Results fit on one page")

    total = pagination_helper.total_pages()
    if total is None or total < 2:
        pytest.skip("Page count is not shown")

    assert pagination_helper.go_to_page(2)
    assert pagination_helper.current_page_number() == 2
    assert pagination_helper.go_to_previous_page()
    assert pagination_helper.current_page_number() == 1
