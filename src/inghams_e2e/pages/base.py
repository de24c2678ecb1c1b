"""Helpers shared by every page object."""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from ..errors import ElementNotFoundError

logger = logging.getLogger(__name__)

Strategy = tuple[str, Callable[[], None]]

RESULT_CARDS = ".c-search-card, .search-result, .result-card"


class BasePage:
    """Wraps a Playwright page; subclasses add locators and actions."""

    def __init__(self, page: Page, failures_dir: Path = Path("failures")):
        self.page = page
        self.failures_dir = failures_dir

    @property
    def is_mobile(self) -> bool:
        viewport = self.page.viewport_size
        return bool(viewport and viewport["width"] < 768)

    def screenshot(self, name: str) -> Path | None:
        """Full-page debug screenshot under the failures directory."""
        self.failures_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = self.failures_dir / f"{name}_{timestamp}.png"
        try:
            self.page.screenshot(path=str(path), full_page=True)
        except PlaywrightError as e:
            logger.warning("Could not take screenshot %s: %s", path, e)
            return None
        return path

    def click_with_fallbacks(self, target: str, strategies: list[Strategy]) -> str:
        """Try each strategy until one succeeds; returns the winning strategy name.

        Raises ElementNotFoundError with a debug screenshot when all of them fail.
        """
        tried = []
        for name, action in strategies:
            tried.append(name)
            try:
                action()
                logger.info("%s: %s succeeded", target, name)
                return name
            except PlaywrightError as e:
                logger.debug("%s: %s failed: %s", target, name, str(e).splitlines()[0])

        slug = target.lower().replace(" ", "-")
        raise ElementNotFoundError(target, tried, self.screenshot(f"debug-{slug}"))

    @staticmethod
    def press(locator: Locator, timeout: float = 10_000) -> None:
        """Wait for, hover and click an element the way a user would."""
        locator.wait_for(state="visible", timeout=timeout)
        locator.hover()
        locator.click()

    def first_visible(self, selectors: list[str], timeout: float = 3000) -> Locator | None:
        """First locator from a selector chain that becomes visible."""
        for selector in selectors:
            locator = self.page.locator(selector).first
            try:
                locator.wait_for(state="visible", timeout=timeout)
                logger.debug("Found %s", selector)
                return locator
            except PlaywrightError:
                continue
        return None

    def is_visible(self, locator: Locator, timeout: float = 3000) -> bool:
        try:
            locator.wait_for(state="visible", timeout=timeout)
            return True
        except PlaywrightError:
            return False

    def wait_until_loaded(self, settle_ms: int = 0) -> None:
        self.page.wait_for_load_state("domcontentloaded")
        self.page.wait_for_load_state("load")
        if settle_ms:
            self.page.wait_for_timeout(settle_ms)

    def wait_for_network_idle(self, timeout: float = 10_000) -> None:
        try:
            self.page.wait_for_load_state("networkidle", timeout=timeout)
        except PlaywrightError:
            logger.debug("Network idle timeout, continuing")

    def accept_cookies(self) -> bool:
        button = self.page.get_by_role("button", name="Accept All Cookies")
        if self.is_visible(button, timeout=5000):
            button.click()
            logger.info("Cookies accepted")
            return True
        logger.debug("No cookies banner found")
        return False

    def open_in_new_page(self, trigger: Callable[[], None]) -> Page:
        """Run an action that opens a new tab and return that tab once loaded."""
        with self.page.context.expect_page() as new_page_info:
            trigger()
        new_page = new_page_info.value
        new_page.wait_for_load_state("domcontentloaded")
        new_page.bring_to_front()
        return new_page

    def scroll_down(self, pixels: int = 300) -> None:
        self.page.evaluate("(y) => window.scrollBy(0, y)", pixels)
        self.page.wait_for_timeout(500)

    def count_result_cards(self) -> int:
        return self.page.locator(RESULT_CARDS).count()

    @staticmethod
    def sticky_state(locator: Locator) -> dict:
        """`sticky-fixed` class, computed position and top of a sticky bar."""
        return locator.evaluate(
            """(element) => {
                const style = window.getComputedStyle(element);
                return {
                    sticky: element.classList.contains('sticky-fixed'),
                    position: style.position,
                    top: style.top,
                };
            }"""
        )
