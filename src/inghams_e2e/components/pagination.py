"""Detects and exercises whichever pagination style a results page uses."""

import logging
import re

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from ..models import ContentComparison, PaginationMethod, PaginationReport
from ..pages.base import RESULT_CARDS, BasePage

logger = logging.getLogger(__name__)

PAGINATION_SELECTORS = [
    ".pagination",
    ".c-pagination",
    '[data-testid*="pagination"]',
    ".pager",
    ".page-navigation",
    'nav[aria-label*="pagination"]',
    'nav[aria-label*="Page"]',
    ".load-more",
    ".show-more",
    'button:has-text("Load more")',
    'button:has-text("Show more")',
    'button:has-text("Next")',
    'a:has-text("Next")',
]

NEXT_SELECTORS = [
    'nav[aria-label*="Pagination"] button:last-child',
    ".pagination button:last-child",
    ".c-pagination button:last-child",
    "navigation button:last-child",
    'button:has-text("Next")',
    'a:has-text("Next")',
    ".next-page",
    ".pagination-next",
    '[aria-label*="next"]',
    '[aria-label*="Next"]',
]

CONTENT_SELECTORS = [
    ".c-search-card h3, .c-search-card h4",
    '.c-search-card [data-testid*="name"]',
    ".search-result .title, .search-result h3",
    ".result-card .name, .result-card h3",
    '[data-testid*="hotel"], [data-testid*="accommodation"]',
    ".accommodation-name, .hotel-name",
    "h3, h4, h5",
]

PAGED_URL_MARKERS = ("page=", "p=", "offset=", "skip=")


def compare_page_content(first: list[str], second: list[str]) -> ContentComparison:
    """Decide whether two pages of results show different items."""
    if not first or not second:
        return ContentComparison(False, "Cannot compare - one or both pages have no content captured")

    common = [item for item in first if item in second]
    unique_to_first = [item for item in first if item not in second]
    unique_to_second = [item for item in second if item not in first]
    is_different = len(common) < min(len(first), len(second))

    verdict = "DIFFERENT" if is_different else "SAME"
    details = (
        f"Content comparison: {len(common)} common, {len(unique_to_first)} unique to page 1, "
        f"{len(unique_to_second)} unique to page 2. Pages are {verdict}"
    )
    return ContentComparison(is_different, details, common, unique_to_first, unique_to_second)


class PaginationHelper(BasePage):
    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.previous_button = page.locator(
            'button:has-text("Previous"), a:has-text("Previous"), .prev-page, .pagination-prev'
        ).first
        self.load_more_button = page.locator(
            'button:has-text("Load more"), button:has-text("Show more"), .load-more, .show-more'
        ).first
        self.page_numbers = page.locator(".pagination a, .page-numbers a").filter(has_text=re.compile(r"^\d+$"))
        self.current_page_indicator = page.locator(
            ".pagination .active, .pagination .current, .page-numbers .current"
        ).first

    def is_pagination_present(self) -> bool:
        for selector in PAGINATION_SELECTORS:
            if self.is_visible(self.page.locator(selector).first):
                logger.info("Pagination found: %s", selector)
                return True
        return False

    def current_page_number(self) -> int:
        try:
            text = self.current_page_indicator.text_content(timeout=5000)
            return int((text or "1").strip())
        except (PlaywrightError, ValueError):
            logger.debug("Could not determine current page number, assuming page 1")
            return 1

    def _after_navigation(self, settle_ms: int = 0) -> None:
        self.wait_for_network_idle()
        if settle_ms:
            self.page.wait_for_timeout(settle_ms)

    def go_to_next_page(self) -> bool:
        for selector in NEXT_SELECTORS:
            button = self.page.locator(selector).first
            if not self.is_visible(button):
                continue
            try:
                if button.is_disabled():
                    logger.debug("Next button %s is disabled", selector)
                    continue
                # Footer links can match the generic selectors
                href = button.get_attribute("href")
                if href and "pre-registration" in href:
                    continue
                button.click()
            except PlaywrightError as e:
                logger.debug("Next button %s failed: %s", selector, e)
                continue
            self._after_navigation(settle_ms=2000)
            logger.info("Moved to the next page via %s", selector)
            return True
        logger.info("No clickable next button found")
        return False

    def go_to_previous_page(self) -> bool:
        if not self.is_visible(self.previous_button):
            return False
        self.previous_button.click()
        self._after_navigation()
        return True

    def go_to_page(self, number: int) -> bool:
        link = self.page.locator(
            f'.pagination a:has-text("{number}"), .page-numbers a:has-text("{number}")'
        ).first
        if not self.is_visible(link):
            return False
        link.click()
        self._after_navigation()
        return True

    def load_more_results(self) -> bool:
        if not self.is_visible(self.load_more_button):
            return False
        before = self.count_result_cards()
        self.load_more_button.click()
        self._after_navigation(settle_ms=2000)
        return self.count_result_cards() > before

    def try_infinite_scroll(self) -> bool:
        before = self.count_result_cards()
        self.page.evaluate("() => window.scrollTo(0, document.body.scrollHeight)")
        self.page.wait_for_timeout(3000)
        after = self.count_result_cards()
        if after > before:
            logger.info("Infinite scroll loaded %d -> %d results", before, after)
            return True
        return False

    def total_pages(self) -> int | None:
        numbers = self.page_numbers.all()
        if numbers:
            return int((numbers[-1].text_content() or "1").strip())

        info = self.page.locator(':has-text("of"), :has-text("Page")').first
        if self.is_visible(info) and (match := re.search(r"of\s+(\d+)", info.text_content() or "")):
            return int(match.group(1))
        return None

    def capture_page_content(self, max_items: int = 10) -> list[str]:
        """Names of the results on the current page, used to tell pages apart."""
        identifiers: list[str] = []
        for selector in CONTENT_SELECTORS:
            for element in self.page.locator(selector).all():
                try:
                    text = (element.text_content(timeout=1000) or "").strip()
                except PlaywrightError:
                    continue
                if len(text) > 3:
                    identifiers.append(text)
            if identifiers:
                logger.debug("Captured content with %s", selector)
                break

        if not identifiers:
            for card in self.page.locator(RESULT_CARDS).all()[:max_items]:
                lines = [line.strip() for line in (card.text_content() or "").splitlines() if len(line.strip()) > 3]
                if lines:
                    identifiers.append(lines[0])

        logger.info("Captured %d content identifiers", len(identifiers))
        return identifiers[:max_items]

    def verify_pagination(self) -> PaginationReport:
        if not self.is_pagination_present():
            count = self.count_result_cards()
            if count:
                return PaginationReport(True, PaginationMethod.SINGLE_PAGE, f"All {count} results displayed on single page")
            return PaginationReport(False, PaginationMethod.NONE, "No results found")

        current = self.current_page_number()
        if self.go_to_next_page():
            new = self.current_page_number()
            url = self.page.url
            if new > current or any(marker in url for marker in PAGED_URL_MARKERS):
                details = f"Successfully navigated pagination - Page: {current} -> {new}, URL: {url}"
            else:
                details = "Pagination button successfully clicked (page change detection inconclusive)"
            return PaginationReport(True, PaginationMethod.TRADITIONAL, details)

        if self.load_more_results():
            return PaginationReport(True, PaginationMethod.LOAD_MORE, "Successfully loaded more results")
        if self.try_infinite_scroll():
            return PaginationReport(True, PaginationMethod.INFINITE_SCROLL, "Successfully detected infinite scroll functionality")
        return PaginationReport(
            False, PaginationMethod.UNKNOWN, "Pagination controls found but functionality could not be verified"
        )
