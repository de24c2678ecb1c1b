"""Public search results page: search widget, result cards, filters and budget."""

import logging
import random
import re
import time
from urllib.parse import urlsplit

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, expect

from ..api import AvailabilityClient
from ..errors import FilterError, GuestCountError, NoResultsError
from ..models import FilterApplication, FilterOptionState, FilterValidation, GuestCounts, Product, SearchValues
from .base import BasePage

logger = logging.getLogger(__name__)

RESULT_CARD_SELECTORS = [
    ".c-search-card",
    '[data-testid="accommodation-card"]',
    ".search-card",
    ".accommodation-card",
    '[class*="search-card"]',
]

NO_RESULTS_MESSAGES = [
    "No results matching your",
    "No accommodations found",
    "No holidays found",
    "Sorry, no results",
    "No results found",
]

RATING_SELECTORS = [".rating > span", '[data-testid="rating"]', ".star-rating", ".accommodation-rating", '[class*="rating"] span']

STICKY_BAR_SELECTORS = [
    ".sticky-bar",
    ".search-criteria",
    ".criteria-bar",
    ".search-bar",
    '[class*="sticky"]',
    '[class*="criteria"]',
    ".c-search-bar",
    ".search-summary",
]

FILTER_URL_PARAMS = ["rating", "bestfor", "board", "facilities", "holiday", "duration", "budget"]

RESULT_COUNT_SELECTORS = [
    ".results-count",
    ".search-results-count",
    '[data-testid="results-count"]',
    "text=/\\d+\\s+results?/i",
    "text=/showing\\s+\\d+/i",
]

PRICE_SELECTORS = ['[class*="price"]', '[data-testid*="price"]', ".c-search-card__price", '[class*="from"]', "text=/£[0-9,]+/"]

MODAL_SELECTORS = [".c-modal", ".modal", '[role="dialog"]', '[data-testid*="modal"]']
FILTER_MODAL_SELECTORS = [".c-modal", ".filter__modal", '[role="dialog"]', ".modal-overlay", ".c-modal-mask"]
ALL_FILTERS_MODAL = ".c-modal.is-topmost"

PAGE_STRUCTURE_ELEMENTS = {
    "Search filters container": '#searchFilters, .filters, [class*="filter"]',
    "Results container": '.results, .search-results, [class*="result"]',
    "Pagination": '.pagination, [class*="pag"]',
}

ADULTS_RE = re.compile(r"(\d+)\s+adults?")
CHILDREN_RE = re.compile(r"(\d+)\s+child(?:ren)?")
PRICE_RE = re.compile(r"£([0-9,]+)")


def parse_criteria_bar(text: str) -> GuestCounts:
    """Adult and child counts from criteria bar text such as "5 adults , 3 children"."""
    counts = GuestCounts()
    if match := ADULTS_RE.search(text):
        counts.adults = int(match.group(1))
    if match := CHILDREN_RE.search(text):
        counts.children = int(match.group(1))
    return counts


def capitalise_location(location: str) -> str:
    """Title-case each word of a location, keeping `/` separated parts ("austria/tyrol" -> "Austria/Tyrol")."""
    return "/".join(
        " ".join(word[:1].upper() + word[1:] for word in part.split(" ")) for part in location.split("/")
    )


def parse_prices(texts: list[str]) -> list[int]:
    """Pound amounts found in price labels like "From £1,079 pp"."""
    prices = []
    for text in texts:
        if match := PRICE_RE.search(text or ""):
            prices.append(int(match.group(1).replace(",", "")))
    return prices


def duration_pattern(duration: str) -> re.Pattern:
    """Case-insensitive pattern for a duration label, tolerant of whitespace changes."""
    escaped = r"\s*".join(re.escape(part) for part in duration.split())
    return re.compile(rf"\b{escaped}\b", re.IGNORECASE)


class SearchResultPage(BasePage):
    """Search widget and results listing of the Inghams site."""

    def __init__(self, page: Page, availability: AvailabilityClient | None = None, **kwargs):
        super().__init__(page, **kwargs)
        self.availability = availability

        self.search_bar = page.locator(".c-search-criteria-bar")
        self.criteria_bar = page.locator('[data-sticky-content="criteriabar"]')
        self.criteria_bar_result = page.locator('//div[@class="c-search-criteria-bar__price-basis"]')
        self.search_holiday_button = page.get_by_role("button", name="Search holidays")
        self.search_field_mobile = page.get_by_role("button", name="Search..")
        self.toggle_value = page.locator('input[value="showDest"]')
        self.toggle_switch = page.locator(".c-toggle-switch")

        self.accommodation_card_titles = page.locator(".c-search-card--resorts .c-search-card .c-header-h3")
        self.resort_card_titles = page.locator(".c-search-card .content .c-header-h3")
        self.view_hotels_buttons = page.locator(".c-search-card__footer .c-search-card--resorts-footer").get_by_role(
            "button", name="View details"
        )
        self.view_accommodations_buttons = page.locator(".c-search-card .c-search-card__footer").get_by_role(
            "button", name="View accommodation(s)"
        )
        self.accommodation_card = page.locator(", ".join(RESULT_CARD_SELECTORS)).first
        self.accommodation_card_image = page.locator(
            '[data-testid="accommodation-image"], [aria-labelledby*="accommodation"], '
            '[aria-labelledby*="accomodation"], .accommodation-image, .search-card img'
        ).first
        self.accommodation_view_hotels_button = page.locator(".c-search-card--resorts-footer > .c-btn")

        self.anywhere_button = page.get_by_role("button", name="Anywhere")
        self.where_to_go_field = page.get_by_role("textbox", name="Start typing..")
        self.take_me_anywhere = page.get_by_text("Take me anywhere")

        self.guests_button = page.get_by_role("button", name=re.compile(r"who's coming\?", re.IGNORECASE))
        self.guests_heading = page.get_by_role("heading", name="Who's coming?")
        self.guests_done_button = page.get_by_role("button", name="Done")
        self.minus_button = page.get_by_role("button", name="-", exact=True)
        self.plus_button = page.get_by_role("button", name="+", exact=True)
        self.number_value = page.locator("div.number-range__value")
        self.add_child_button = page.get_by_role("button", name="Add a child")
        self.child_age_options = page.locator('//datalist[@id="childSelectList"]/option')

        self.departure_value = page.locator(".departure .option--selected")
        self.arrival_value = page.locator(".anywhere-btn")
        self.whos_coming_value = page.locator(".labels")
        self.nights_value = page.locator(".nights-btn")

        self.confirm_button = page.get_by_role("button", name="Confirm")
        self.budget_inputs = page.locator('input[type="number"]')

        self.search_values: SearchValues | None = None

    def product_tab(self, product: str):
        return self.page.get_by_role("button", name=product)

    def location_result(self, location: str):
        return self.page.locator(f'[data-testid="location-result"]:has-text("{location}")').first

    def location_list_item(self, location: str):
        return self.page.locator("li").filter(has_text=location).first

    def option(self, text: str):
        return self.page.locator(f'text="{text}"').first

    # Navigation

    def navigate_to_search_results(self, category: str, location: str = "anywhere") -> None:
        logger.info("Navigating to %s search results", category)
        self.page.goto("/")
        self.page.wait_for_load_state("domcontentloaded")
        self.click_search_product_tab(category)
        self.page.wait_for_timeout(1000)
        if location.lower() != "anywhere":
            self.search_anywhere(location)
        self.click_search_holiday_button()
        self.validate_search_result_page_url()
        self.wait_for_accommodation_results()

    def click_search_product_tab(self, product: str = "Ski") -> str:
        """Click a product tab in the search widget, falling back through several strategies."""
        self.page.wait_for_load_state("domcontentloaded")
        self.wait_for_network_idle()
        if self.is_mobile:
            self.page.wait_for_timeout(3000)

        tab = self.product_tab(product)

        def standard():
            tab.wait_for(state="visible", timeout=15_000)
            tab.click()

        def evaluate():
            clicked = self.page.evaluate(
                """(name) => {
                    const button = Array.from(document.querySelectorAll('button'))
                        .find((btn) => btn.textContent?.trim() === name || btn.innerText?.trim() === name);
                    if (button) { button.click(); return true; }
                    return false;
                }""",
                product,
            )
            if not clicked:
                raise PlaywrightError(f"No button with text {product}")

        def scrolled():
            tab.scroll_into_view_if_needed()
            self.page.wait_for_timeout(1000)
            standard()

        def alternatives():
            for selector in (
                f'button:has-text("{product}")',
                f'[aria-label*="{product}"]',
                f'[data-testid*="{product.lower()}"]',
                f'.product-tab:has-text("{product}")',
            ):
                locator = self.page.locator(selector).first
                if self.is_visible(locator, timeout=5000):
                    locator.click(force=True)
                    return
            raise PlaywrightError(f"No alternative locator for {product} tab")

        strategies = [
            ("standard click", standard),
            ("force click", lambda: tab.click(force=True)),
            ("evaluate click", evaluate),
        ]
        if not self.is_mobile:
            strategies.append(("click after scroll", scrolled))
        strategies.append(("alternative locators", alternatives))
        return self.click_with_fallbacks(f"{product} tab", strategies)

    def _dismiss_blocking_modals(self) -> None:
        for selector in MODAL_SELECTORS:
            modal = self.page.locator(selector).first
            if not self.is_visible(modal, timeout=2000):
                continue
            logger.info("Modal %s is blocking the search button", selector)
            for close in ('button:has-text("×")', '[aria-label*="close"]', ".close", '[data-testid*="close"]'):
                button = modal.locator(close).first
                if self.is_visible(button, timeout=1000):
                    button.click()
                    break
            else:
                self.page.keyboard.press("Escape")
            self.page.wait_for_timeout(1000)

    def click_search_holiday_button(self) -> str:
        self.page.wait_for_load_state("domcontentloaded")
        self._dismiss_blocking_modals()
        button = self.search_holiday_button

        def standard():
            button.wait_for(state="visible", timeout=15_000)
            button.click(timeout=10_000)

        def mobile_then_scroll():
            # Small viewports hide the widget behind a "Search.." button
            if self.is_visible(self.search_field_mobile):
                self.search_field_mobile.click()
                self.page.wait_for_timeout(1000)
            button.scroll_into_view_if_needed()
            self.page.wait_for_timeout(1000)
            button.wait_for(state="visible", timeout=10_000)
            button.click()

        def alternatives():
            for locator in (
                self.page.get_by_role("button", name=re.compile("search", re.IGNORECASE)),
                self.page.locator('button:has-text("Search")'),
                self.page.locator('[data-testid*="search"]'),
                self.page.locator(".search-button"),
                self.page.locator('input[type="submit"]'),
            ):
                if self.is_visible(locator.first):
                    locator.first.click()
                    return
            raise PlaywrightError("No alternative search button")

        def evaluate():
            clicked = self.page.evaluate(
                """() => {
                    for (const text of ['search holidays', 'search']) {
                        const button = Array.from(document.querySelectorAll('button, input[type="submit"]'))
                            .find((el) => el.textContent?.trim().toLowerCase().includes(text)
                                || el.value?.toLowerCase().includes(text));
                        if (button) { button.click(); return true; }
                    }
                    return false;
                }"""
            )
            if not clicked:
                raise PlaywrightError("No search button in the DOM")

        return self.click_with_fallbacks(
            "Search holidays button",
            [
                ("standard click", standard),
                ("mobile field and scroll", mobile_then_scroll),
                ("force click", lambda: button.click(force=True)),
                ("alternative locators", alternatives),
                ("evaluate click", evaluate),
            ],
        )

    def validate_search_result_page_url(self) -> None:
        self.page.wait_for_load_state("domcontentloaded")
        expect(self.page, "User navigated to the search results page").to_have_url(re.compile(r".*search-results"))

    def no_results_message(self, timeout: float = 3000) -> str | None:
        for message in NO_RESULTS_MESSAGES:
            if self.is_visible(self.page.get_by_text(message).first, timeout=timeout):
                return message
        return None

    def wait_for_accommodation_results(self) -> None:
        for selector in RESULT_CARD_SELECTORS:
            if self.is_visible(self.page.locator(selector).first, timeout=10_000):
                logger.info("Results loaded (%s)", selector)
                return
            logger.debug("No results with %s", selector)

        if message := self.no_results_message():
            logger.warning("Search returned no results: %s", message)
            return
        raise NoResultsError("Could not find accommodation results or a no-results message")

    # Result validation

    def validate_accommodation_ratings(self, expected_rating: str) -> dict:
        cards = self.page.locator('.c-search-card, [data-testid="accommodation-card"], .search-card').all()
        ratings: list[str] = []
        missing = mismatched = 0
        for index, card in enumerate(cards, start=1):
            rating = None
            for selector in RATING_SELECTORS:
                element = card.locator(selector).first
                if self.is_visible(element, timeout=1000) and (text := (element.text_content() or "").strip()):
                    rating = text
                    break
            if rating is None:
                logger.warning("Card %d: no rating found", index)
                missing += 1
                continue
            ratings.append(rating)
            if expected_rating not in rating:
                logger.warning("Card %d: expected rating %s, found %s", index, expected_rating, rating)
                mismatched += 1

        logger.info(
            "Ratings: %d/%d rated cards match %s, %d cards without a rating",
            len(ratings) - mismatched,
            len(ratings),
            expected_rating,
            missing,
        )
        invalid = missing + mismatched
        return {
            "is_valid": invalid == 0 and bool(ratings),
            "actual_ratings": ratings,
            "invalid_cards": invalid,
            "missing_ratings": missing,
            "mismatched_ratings": mismatched,
        }

    def validate_no_results_message(self) -> bool:
        return self.no_results_message() is not None

    def validate_accommodation_board_basis(self, expected: str) -> dict:
        cards = self.page.locator(".c-search-card")
        try:
            cards.first.wait_for(timeout=10_000)
        except PlaywrightError:
            logger.warning("No result cards to check board basis against")
            return {"is_valid": False, "total_cards": 0, "without_board_basis": []}

        total = cards.count()
        missing = []
        for index in range(total):
            card = cards.nth(index)
            name = card.locator('h3, .c-search-card__title, [data-testid="accommodation-title"]').first.text_content()
            name = name or f"Accommodation {index + 1}"
            board_basis = card.locator(".c-search-card--resorts__board-basis")
            text = board_basis.text_content() if self.is_visible(board_basis, timeout=2000) else ""
            if expected.lower() not in (text or "").lower():
                logger.info('"%s" shows %r instead of %s', name, text, expected)
                missing.append(name)

        logger.info("Board basis %s: %d/%d cards", expected, total - len(missing), total)
        return {"is_valid": not missing, "total_cards": total, "without_board_basis": missing}

    def validate_accommodation_tags(self, expected_tag: str) -> dict:
        """Every result card shows the tag for the applied Best For filter."""
        self.page.wait_for_timeout(2000)
        cards = self.page.locator(
            '[data-testid="accommodation-card"], .accommodation-card, .search-card, .result-card, .c-search-card'
        )
        total = cards.count()
        without = []
        tag_selectors = [
            f'.pill:has-text("{expected_tag}")',
            f'.tag:has-text("{expected_tag}")',
            f'.c-pill:has-text("{expected_tag}")',
            f'[data-testid="accommodation-tag"]:has-text("{expected_tag}")',
            f'text="{expected_tag}"',
        ]
        for index in range(total):
            card = cards.nth(index)
            name = f"Accommodation {index + 1}"
            for selector in (".c-header-h3", ".accommodation-name", ".search-card-title", "h3"):
                element = card.locator(selector).first
                if self.is_visible(element, timeout=1000) and (text := (element.text_content() or "").strip()):
                    name = text
                    break
            if not any(self.is_visible(card.locator(s).first, timeout=1000) for s in tag_selectors):
                without.append(name)

        logger.info("Tag %s: %d/%d cards", expected_tag, total - len(without), total)
        return {"total_cards": total, "without_tag": without, "validation_passed": not without}

    def validate_sticky_bar_duration_change(self, expected_duration: str) -> bool:
        self.page.wait_for_timeout(2000)
        pattern = duration_pattern(expected_duration)
        for selector in STICKY_BAR_SELECTORS:
            bar = self.page.locator(selector).first
            if self.is_visible(bar, timeout=2000) and pattern.search(bar.text_content() or ""):
                logger.info("Sticky bar shows %s", expected_duration)
                return True

        criteria = self.page.locator("text=/Any date|nights/i")
        for index in range(criteria.count()):
            if pattern.search(criteria.nth(index).text_content() or ""):
                return True
        logger.warning("Duration %s not found in the sticky bar", expected_duration)
        return False

    def check_search_bar_availability(self) -> None:
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

    def _check_guest_counts(self, page: Page, expected: str) -> None:
        page.wait_for_load_state("domcontentloaded")
        page.wait_for_timeout(5000)
        bar = page.locator('//div[@class="c-search-criteria-bar__price-basis"]')
        expect(bar).to_be_visible(timeout=30_000)
        text = bar.text_content() or ""
        logger.info("Criteria bar text: %r", text)

        wanted = parse_criteria_bar(expected)
        shown = parse_criteria_bar(text)
        if ADULTS_RE.search(expected):
            assert shown.adults == wanted.adults, f"Expected {wanted.adults} adults in {text!r}"
        if CHILDREN_RE.search(expected):
            assert shown.children == wanted.children, f"Expected {wanted.children} children in {text!r}"

    def check_criteria_bar_content(self, expected: str) -> None:
        self.wait_until_loaded()
        self._check_guest_counts(self.page, expected)

    def check_accommodation_page_criteria_bar(self, accommodation_page: Page, expected: str) -> None:
        self._check_guest_counts(accommodation_page, expected)

    def count_accommodation_cards(self) -> int:
        self.page.wait_for_load_state("domcontentloaded")
        try:
            self.accommodation_card.wait_for(state="attached", timeout=15_000)
        except PlaywrightError:
            alternative = self.page.locator('.search-result, .result-card, [data-testid*="card"], .card').first
            try:
                alternative.wait_for(state="attached", timeout=10_000)
            except PlaywrightError:
                if self.no_results_message() is not None:
                    logger.warning("No search results found on page")
                    return 0
                raise NoResultsError("No accommodation cards found and no no-results message") from None

        count = self.page.locator(", ".join(RESULT_CARD_SELECTORS)).count()
        logger.info("Accommodation cards: %d", count)
        assert count > 0
        if not self.is_visible(self.accommodation_card_image, timeout=10_000):
            logger.warning("Accommodation card images not visible, but cards are present")
        return count

    def open_accommodation_card(self) -> Page:
        button = self.accommodation_view_hotels_button.first
        expect(button).to_be_visible(timeout=30_000)
        with self.page.expect_popup() as popup:
            button.click()
        return popup.value

    def validate_toggle_value(self, grouped_by_accommodation: bool = False) -> None:
        self.page.wait_for_load_state("domcontentloaded")
        expect(self.toggle_value, "Toggle is available").to_have_count(1)
        checked = self.toggle_value.is_checked()
        label = "Accommodation" if grouped_by_accommodation else "Resort"
        assert checked is grouped_by_accommodation, f"Toggle is grouped by {label}"

    def click_group_toggle(self) -> None:
        self.toggle_switch.wait_for(state="visible")
        self.toggle_switch.click()

    def validate_view_hotels_button_availability(self) -> None:
        for index in range(self.view_hotels_buttons.count()):
            text = self.view_hotels_buttons.nth(index).text_content()
            assert text == "View details", f"View details button is missing on card {index + 1}"

    def validate_view_accommodations_button_availability(self) -> None:
        for index in range(self.view_accommodations_buttons.count()):
            text = self.view_accommodations_buttons.nth(index).text_content()
            assert text == "View accommodation(s)", f"View accommodation(s) button is missing on card {index + 1}"

    # API cross-checks

    def _card_titles(self, titles) -> list[str]:
        self.wait_until_loaded()
        titles.first.wait_for(state="visible")
        # TODO: wait on the results XHR instead of a fixed settle once the search API exposes a stable route
        self.page.wait_for_timeout(5000)
        return [text for i in range(titles.count()) if (text := titles.nth(i).text_content()) is not None]

    def _current_query(self) -> str:
        return urlsplit(self.page.url).query

    def validate_accommodation_api_results(self, product: str | Product = Product.SKI) -> None:
        """Accommodation names on the page equal the availability API names for the same query."""
        if self.availability is None:
            raise ValueError("SearchResultPage needs an AvailabilityClient for API checks")
        product = Product.parse(product)
        self.page.wait_for_load_state("domcontentloaded")
        from_api = self.availability.accommodation_names(product, self._current_query())
        from_ui = self._card_titles(self.accommodation_card_titles)
        assert sorted(from_api) == sorted(from_ui), f"API {sorted(from_api)} != UI {sorted(from_ui)}"

    def validate_resort_api_results(self, product: str | Product = Product.SKI) -> None:
        if self.availability is None:
            raise ValueError("SearchResultPage needs an AvailabilityClient for API checks")
        product = Product.parse(product)
        self.page.wait_for_load_state("domcontentloaded")
        from_api = self.availability.resort_names(product, self._current_query())
        from_ui = self._card_titles(self.resort_card_titles)
        assert sorted(from_api) == sorted(from_ui), f"API {sorted(from_api)} != UI {sorted(from_ui)}"

    # Search widget

    def _adults(self) -> int:
        self.number_value.wait_for(state="visible")
        return int(self.number_value.inner_text().strip())

    def set_number_of_guests(self, adults: int, children: int = 0, max_attempts: int = 20) -> None:
        """Step the adults counter to the target and add children with random ages.

        The site never allows fewer than one adult, so 0 is raised to 1.
        """
        target = max(1, adults)
        if adults < 1:
            logger.warning("Requested %d adults, the site minimum is 1", adults)

        self.guests_button.click()
        self.guests_heading.wait_for(state="visible")

        attempts = 0
        while (current := self._adults()) != target:
            if attempts >= max_attempts:
                raise GuestCountError(target, current, attempts)
            (self.minus_button if current > target else self.plus_button).click()
            self.page.wait_for_timeout(100)
            attempts += 1

        for _ in range(children):
            self.add_child_button.click()
            self.page.wait_for_timeout(300)
            if options := self.child_age_options.count():
                self.child_age_options.nth(random.randrange(min(18, options))).click()

        self.guests_done_button.click()

    def search_anywhere(self, location: str = "anywhere") -> None:
        """Pick a destination in the "Anywhere" modal; unknown places fall back to "Take me anywhere"."""
        self.anywhere_button.wait_for(state="visible", timeout=10_000)
        self.anywhere_button.click()
        self.page.wait_for_timeout(2000)

        if not location or location.lower() == "anywhere":
            if self.is_visible(self.take_me_anywhere, timeout=5000):
                self.take_me_anywhere.click()
            else:
                logger.warning("Take me anywhere option not found, closing the modal")
                self.page.keyboard.press("Escape")
                self.page.wait_for_timeout(1000)
            return

        if not self.is_visible(self.where_to_go_field, timeout=10_000):
            logger.warning("Destination field not available, using Take me anywhere")
            self._take_me_anywhere_or_escape()
            return

        self.where_to_go_field.fill(location)
        self.page.wait_for_timeout(2000)
        capitalised = capitalise_location(location)
        for candidate in (
            self.location_result(capitalised),
            self.location_list_item(capitalised),
            self.location_list_item(location),
        ):
            if self.is_visible(candidate, timeout=5000):
                candidate.click()
                logger.info("Selected location %s", capitalised)
                return
        self._take_me_anywhere_or_escape()

    def _take_me_anywhere_or_escape(self) -> None:
        if self.is_visible(self.take_me_anywhere):
            self.take_me_anywhere.click()
            return
        logger.error("No location selection options found, closing the modal")
        self.page.keyboard.press("Escape")
        self.page.wait_for_timeout(1000)

    def get_default_search_values(self) -> SearchValues:
        self.search_values = SearchValues(
            departure=self.departure_value.text_content(),
            arrival=self.arrival_value.text_content(),
            whos_coming=self.whos_coming_value.text_content(),
            nights=self.nights_value.text_content(),
        )
        return self.search_values

    # Filters

    def verify_filters_presence(self, expected: list[str]) -> list[str]:
        """Names of the expected filter buttons that are missing."""
        missing = [name for name in expected if not self.is_visible(self.page.get_by_role("button", name=name), 5000)]
        logger.info("Filters visible: %d/%d", len(expected) - len(missing), len(expected))
        return missing

    def visible_filters(self, names: list[str]) -> list[str]:
        return [name for name in names if self.is_visible(self.page.get_by_role("button", name=name))]

    def open_filter(self, name: str, wait_ms: int = 1000) -> None:
        self.page.keyboard.press("Escape")
        self.page.wait_for_timeout(300)
        for selector in FILTER_MODAL_SELECTORS:
            if self.is_visible(self.page.locator(selector).first, timeout=1000):
                self.page.keyboard.press("Escape")
                self.page.wait_for_timeout(500)
                break

        button = self.page.get_by_role("button", name=name)
        expect(button).to_be_visible(timeout=10_000)
        for attempt in range(1, 4):
            try:
                button.click(timeout=5000)
                break
            except PlaywrightError as e:
                logger.debug("Attempt %d to open %s failed: %s", attempt, name, e)
                if attempt == 3:
                    raise FilterError(f"Failed to open {name} filter after 3 attempts") from e
                self.page.keyboard.press("Escape")
                self.page.wait_for_timeout(500)
                # An overlay can swallow the click; hit the button centre directly
                if box := button.bounding_box():
                    self.page.mouse.click(box["x"] + box["width"] / 2, box["y"] + box["height"] / 2)
                    break
        self.page.wait_for_timeout(wait_ms)

    def close_filter(self) -> None:
        self.page.keyboard.press("Escape")
        self.page.wait_for_timeout(500)

    def apply_filter(self) -> None:
        if not self.is_visible(self.confirm_button):
            raise FilterError("Confirm button not found for filter application")
        self.confirm_button.click()
        self.page.wait_for_timeout(2000)

    def is_filter_option_enabled(self, text: str) -> bool:
        option = self.option(text)
        if not self.is_visible(option):
            return False
        try:
            return option.evaluate(
                """(el) => {
                    const styles = window.getComputedStyle(el);
                    return styles.pointerEvents !== 'none' && styles.opacity !== '0.5' && !el.hasAttribute('disabled');
                }"""
            )
        except PlaywrightError:
            return False

    def get_filter_options(self, name: str, max_options: int = 20) -> list[FilterOptionState]:
        self.open_filter(name)
        options = self.page.locator('label, [role="checkbox"], [role="radio"]')
        states = []
        for index in range(min(options.count(), max_options)):
            option = options.nth(index)
            if not self.is_visible(option, timeout=1000):
                continue
            text = (option.text_content() or "").strip()
            if not 0 < len(text) < 50:
                continue
            enabled = option.evaluate(
                "(el) => { const s = window.getComputedStyle(el); return s.pointerEvents !== 'none' && s.opacity !== '0.5'; }"
            )
            states.append(FilterOptionState(text, enabled))
        self.close_filter()
        return states

    def validate_filter_states(self, name: str, enabled: list[str], disabled: list[str] | None = None) -> FilterValidation:
        """Strict check: every expected-enabled option is enabled and every expected-disabled one is not."""
        self.open_filter(name)
        result = FilterValidation(name)
        for option in enabled:
            if self.is_filter_option_enabled(option):
                result.enabled_found.append(option)
            else:
                result.unexpected_state.append(option)
        for option in disabled or []:
            if self.is_filter_option_enabled(option):
                result.unexpected_state.append(option)
            else:
                result.disabled_found.append(option)
        self.close_filter()
        return result

    def validate_category_specific_filter(self, name: str, enabled: list[str], disabled: list[str]) -> FilterValidation:
        """Like validate_filter_states, but disabled options may be absent from the dropdown."""
        self.open_filter(name)
        result = FilterValidation(name)
        for option in enabled:
            if self.is_filter_option_enabled(option):
                result.enabled_found.append(option)
            else:
                result.unexpected_state.append(option)
        for option in disabled:
            if not self.is_visible(self.option(option), timeout=1000):
                result.missing.append(option)
            elif self.is_filter_option_enabled(option):
                result.unexpected_state.append(option)
            else:
                result.disabled_found.append(option)
        self.close_filter()
        logger.info(
            "%s: %d/%d enabled, %d disabled confirmed",
            name,
            len(result.enabled_found),
            len(enabled),
            len(result.disabled_found),
        )
        return result

    def select_filter_option(self, name: str, text: str, apply: bool = True) -> None:
        self.open_filter(name)
        option = self.option(text)
        expect(option).to_be_visible(timeout=5000)
        if not self.is_filter_option_enabled(text):
            raise FilterError(f'Filter option "{text}" is disabled and cannot be selected')
        option.click()
        if apply:
            self.apply_filter()
        else:
            self.close_filter()

    def reset_filter(self, name: str, text: str | None = None) -> None:
        """Deselect an option, or use the filter's Clear/Reset button."""
        self.open_filter(name)
        if text is not None:
            target = self.option(text)
        else:
            target = self.page.locator(
                'button:has-text("Clear"), button:has-text("Reset"), button:has-text("Remove")'
            ).first
        if self.is_visible(target):
            target.click()
            self.apply_filter()
        else:
            logger.info("Nothing to reset on %s", name)
            self.close_filter()

    def measure_filter_load_time(self, name: str) -> float:
        """Milliseconds taken to open a filter dropdown."""
        start = time.monotonic()
        self.open_filter(name, wait_ms=500)
        elapsed = (time.monotonic() - start) * 1000
        self.close_filter()
        return elapsed

    def validate_filter_url_update(self, expected_param: str | None = None) -> bool:
        url = self.page.url
        if expected_param:
            return expected_param in url
        return any(param in url for param in FILTER_URL_PARAMS)

    def get_search_result_count(self) -> int:
        """Number of results from the count label, else the card count; -1 when unknown."""
        try:
            label = self.first_visible(RESULT_COUNT_SELECTORS)
            if label is not None and (match := re.search(r"(\d+)", label.text_content() or "")):
                return int(match.group(1))
            return self.page.locator(
                '[data-testid="accommodation-card"], .accommodation-card, .search-card, .result-card'
            ).count()
        except PlaywrightError as e:
            logger.warning("Could not determine search result count: %s", e)
            return -1

    def try_universal_filter_option(self, name: str, option: str) -> dict:
        self.open_filter(name)
        result = {"available": False, "enabled": False, "applied": False}
        if not self.is_visible(self.option(option)):
            self.close_filter()
            return result
        result["available"] = True
        if not self.is_filter_option_enabled(option):
            self.close_filter()
            return result
        result["enabled"] = True
        self.option(option).click()
        self.apply_filter()
        result["applied"] = self.validate_filter_url_update()
        logger.info("Universal filter %s / %s: %s", name, option, result)
        return result

    def is_filter_tag_visible(self, text: str) -> bool:
        """Whether an applied-filter tag with this text shows on the results page."""
        return self.is_visible(self.page.locator(f'text="{text}"').first, timeout=5000)

    def validate_filter_options(self, name: str, expected: list[str]) -> dict:
        """Open a filter and report which of the expected options are enabled."""
        self.open_filter(name)
        missing = [option for option in expected if not self.is_filter_option_enabled(option)]
        self.close_filter()
        logger.info("%s: %d/%d options enabled", name, len(expected) - len(missing), len(expected))
        return {
            "all_enabled": not missing,
            "enabled_count": len(expected) - len(missing),
            "total_count": len(expected),
            "missing_options": missing,
        }

    def apply_filter_and_validate(self, name: str, option: str) -> FilterApplication:
        """Apply one option and record the URL, result count and filter tag around it."""
        outcome = FilterApplication(name, option, self.page.url, self.get_search_result_count())
        try:
            self.select_filter_option(name, option)
        except (FilterError, PlaywrightError, AssertionError) as e:
            logger.warning('Failed to apply filter "%s": %s', option, e)
            outcome.final_url, outcome.final_count = outcome.initial_url, outcome.initial_count
            return outcome
        self.page.wait_for_timeout(2000)
        outcome.applied = True
        outcome.final_url = self.page.url
        outcome.final_count = self.get_search_result_count()
        outcome.tag_visible = self.is_filter_tag_visible(option)
        logger.info(
            'Applied "%s": URL changed %s, results %d -> %d',
            option,
            outcome.url_updated,
            outcome.initial_count,
            outcome.final_count,
        )
        return outcome

    def verify_page_structure_elements(self) -> dict:
        """Names of the key results page elements that are visible and those that are not."""
        found, missing = [], []
        for name, selector in PAGE_STRUCTURE_ELEMENTS.items():
            (found if self.is_visible(self.page.locator(selector).first) else missing).append(name)
        if missing:
            logger.info("Page structure: %s not visible", ", ".join(missing))
        return {"found": found, "missing": missing}

    def view_results_by_resort(self) -> None:
        """Group results by resort unless they already are."""
        self.toggle_value.wait_for(state="attached")
        if self.toggle_value.is_checked():
            self.click_group_toggle()
            self.wait_until_loaded(settle_ms=2000)

    def open_all_filters(self, attempts: int = 3) -> None:
        modal = self.page.locator(ALL_FILTERS_MODAL)
        for attempt in range(1, attempts + 1):
            if self.is_visible(modal, timeout=2000):
                self.page.keyboard.press("Escape")
                self.page.wait_for_timeout(1000)
            try:
                self.page.get_by_role("button", name="All filters").click(force=True, timeout=10_000)
            except PlaywrightError as e:
                logger.debug("Attempt %d to open All filters failed: %s", attempt, e)
                continue
            self.page.wait_for_timeout(2000)
            if self.is_visible(modal) and any(
                self.is_visible(modal.locator(f'text="{section}"').first, timeout=2000)
                for section in ("Ratings", "Best For", "Facilities")
            ):
                return
        raise FilterError(f"Failed to open All filters after {attempts} attempts")

    def apply_combined_filters(self, filters: list[tuple[str, str]]) -> list[str]:
        """Pick several options in the All filters modal and confirm them together.

        ``filters`` pairs a modal section with an option label; the Budget section
        takes a maximum price instead. Options not offered are skipped and the
        ones applied are returned as ``"Section: option"``.
        """
        self.open_all_filters()
        modal = self.page.locator(ALL_FILTERS_MODAL)
        applied = []
        for section, value in filters:
            heading = modal.get_by_role("listitem").filter(has_text=re.compile(rf"^{re.escape(section)}"))
            if not self.is_visible(heading, timeout=5000):
                logger.info("%s is not offered in All filters", section)
                continue
            heading.click()
            self.page.wait_for_timeout(1000)
            if section == "Budget":
                target = modal.locator("#maxInputField")
            elif section == "Ratings":
                target = modal.locator("label").filter(has_text=re.compile(rf"^{re.escape(value)}$"))
            else:
                target = modal.locator("label").filter(has_text=value).first
            if not self.is_visible(target):
                logger.info("%s option %s is not offered", section, value)
                continue
            if section == "Budget":
                target.fill(value)
            else:
                target.click()
            applied.append(f"{section}: {value}")

        if applied:
            modal.get_by_role("button", name="Confirm").click()
            self.page.wait_for_timeout(4000)
        else:
            self.page.keyboard.press("Escape")
        logger.info("Combined filters applied: %s", applied)
        return applied

    # Budget

    def set_budget_min_value(self, value: str) -> None:
        self._set_budget_input(self.budget_inputs.first, value)

    def set_budget_max_value(self, value: str) -> None:
        self._set_budget_input(self.budget_inputs.nth(1), value)

    def _set_budget_input(self, field, value: str) -> None:
        field.clear()
        field.fill(value)
        # Validation runs on blur
        field.press("Tab")
        self.page.wait_for_timeout(500)

    def get_budget_min_value(self) -> str:
        return self.budget_inputs.first.input_value()

    def get_budget_max_value(self) -> str:
        return self.budget_inputs.nth(1).input_value()

    def set_budget_range(self, minimum: str, maximum: str) -> None:
        self.set_budget_min_value(minimum)
        self.set_budget_max_value(maximum)

    def click_budget_filter(self) -> None:
        self.page.get_by_role("listitem").filter(has_text="Budget").first.click()
        self.page.wait_for_timeout(1000)

    def verify_prices_in_range(self, minimum: int, maximum: int) -> bool:
        self.page.wait_for_timeout(2000)
        texts: list[str] = []
        for selector in PRICE_SELECTORS:
            elements = self.page.locator(selector).all()
            if elements:
                texts = [element.text_content() or "" for element in elements]
                break
        if not texts:
            logger.warning("No price elements found on the page")
            return False

        for price in parse_prices(texts):
            if not minimum <= price <= maximum:
                logger.warning("Price %d is outside %d-%d", price, minimum, maximum)
                return False
        return True

    def clear_filters(self) -> None:
        button = self.page.locator(
            '[data-testid="clear-filters"], .clear-filters, button:has-text("Clear"), button:has-text("Reset")'
        ).first
        if self.is_visible(button):
            button.click()
            self.page.wait_for_timeout(1000)
