"""Expected search filter options per product and helpers that exercise them."""

import logging
import re
import time
from dataclasses import dataclass, field

from playwright.sync_api import Error as PlaywrightError

from .errors import FilterError
from .models import FilterKind, FilterValidation, Product
from .pages.search_results import SearchResultPage

logger = logging.getLogger(__name__)

RATING_OPTION_RE = re.compile(r"^(?:[1-4](?:\.5)?|5)$")


@dataclass
class FilterCategoryData:
    """Expected filter behaviour on one product's search results."""

    product: Product
    search_location: str = "anywhere"
    min_results: int = 0
    max_results: int = 0
    best_for_enabled: list[str] = field(default_factory=list)
    best_for_disabled: list[str] = field(default_factory=list)


@dataclass
class UniversalFilter:
    """A filter whose options are the same for every product."""

    name: str
    kind: FilterKind
    options: list[str]
    test_option: str
    expected_disabled: int = 0


@dataclass
class PerformanceThresholds:
    filter_load_ms: int = 5000
    filter_apply_ms: int = 3000
    page_navigation_ms: int = 10_000


FILTER_TEST_DATA = {
    Product.SKI: FilterCategoryData(
        Product.SKI,
        min_results=10,
        max_results=1000,
        best_for_enabled=[
            "Ski In/Ski Out",
            "Central Location",
            "Close to Lifts",
            "Family-Run",
            "Small Hotel",
            "Activities",
            "Spa & Wellness",
            "Inghams Choice",
            "Food & Drink",
        ],
        best_for_disabled=[
            "Rail Options",
            "Self Drive",
            "Large Ski Area",
            "High Altitude",
            "Glacier Skiing",
            "Snowboarders",
            "Advanced Skiers",
            "Intermediate Skiers",
            "Non-Skiers",
            "Apres",
            "Sightseeing",
            "Ski Guiding",
            "Short Transfers",
            "Sports / Pool Complex",
            "Ski School",
            "First Time Skiers",
            "Cross-Country Skiing",
            "Parking",
        ],
    ),
    Product.WALKING: FilterCategoryData(
        Product.WALKING,
        min_results=50,
        max_results=500,
        best_for_enabled=[
            "Family Friendly",
            "Central Location",
            "Small Hotel",
            "Spa & Wellness",
            "Food & Drink",
            "Dog Friendly",
            "Activities",
        ],
        best_for_disabled=[
            "Family-Run",
            "Large Hotel",
            "Beach Location",
            "Mountain Location",
            "Self Catering",
            "Romantic",
            "Adventure",
            "Cultural",
            "Wildlife",
            "Photography",
            "Botanical",
            "Historical",
            "Local Culture",
            "Authentic Experience",
            "Local Guides",
            "Small Groups",
            "Private Groups",
            "Fixed Groups",
            "Flexible Itinerary",
            "Moderate Pace",
        ],
    ),
    # Lapland Best For options are discovered at run time
    Product.LAPLAND: FilterCategoryData(Product.LAPLAND, min_results=5, max_results=100),
}

UNIVERSAL_FILTERS = {
    "ratings": UniversalFilter(
        "Ratings",
        FilterKind.RADIO,
        ["1", "1.5", "2", "2.5", "3", "3.5", "4", "4.5", "5"],
        test_option="4",
    ),
    "boardBasis": UniversalFilter(
        "Board Basis",
        FilterKind.CHECKBOX,
        ["Room Only", "Bed & Breakfast", "Half Board", "Full Board", "All Inclusive", "Self Catering"],
        test_option="Half Board",
    ),
    "facilities": UniversalFilter(
        "Facilities",
        FilterKind.CHECKBOX,
        [
            "Indoor Pool",
            "Outdoor Pool",
            "Spa Facilities",
            "Sauna/Steam Room",
            "Bar",
            "Restaurant",
            "Kids Club",
            "Family Rooms",
            "Single Rooms",
            "Group Holidays",
            "Disabled Access",
            "WiFi",
            "Parking",
            "Pet Friendly",
            "Lift Access",
        ],
        test_option="WiFi",
    ),
    "holidayTypes": UniversalFilter(
        "Holiday Types",
        FilterKind.CHECKBOX,
        [
            "Family Holidays",
            "Romantic Holidays",
            "Group Holidays",
            "Adult Only",
            "All Inclusive",
            "Short Breaks",
            "Long Stays",
            "Luxury",
            "Budget",
            "Mid Range",
            "Adventure",
            "Cultural",
        ],
        test_option="Family Holidays",
        expected_disabled=1,
    ),
}

PERFORMANCE = PerformanceThresholds()


def filter_data_for(product: str | Product) -> FilterCategoryData:
    product = Product.parse(product)
    # Santa breaks are searched through the Lapland tab
    if product is Product.SANTA:
        product = Product.LAPLAND
    return FILTER_TEST_DATA[product]


def valid_rating_options(options: list[str]) -> list[str]:
    """Keep star ratings (1 to 5 in halves) and drop any other labels in the dropdown."""
    return [option for option in options if RATING_OPTION_RE.match(option)]


class FilterTestHelpers:
    """Scenario steps built on SearchResultPage for the filter tests."""

    def __init__(self, search_result_page: SearchResultPage):
        self.search_result_page = search_result_page
        self.page = search_result_page.page

    def setup_category_search(self, product: str | Product, location: str = "anywhere") -> None:
        self.search_result_page.navigate_to_search_results(Product.parse(product).search_tab, location)

    def get_valid_rating_options(self) -> list[str]:
        options = self.search_result_page.get_filter_options("Ratings")
        return valid_rating_options([option.text for option in options if option.enabled])

    def try_single_filter_option(self, filter_name: str, option: str) -> dict:
        """Apply one option; reports the result count, or that no results were shown."""
        try:
            self.search_result_page.select_filter_option(filter_name, option, apply=True)
        except (FilterError, PlaywrightError) as e:
            logger.error('Failed testing "%s": %s', option, e)
            return {"success": False, "result_count": 0, "has_no_results": False}

        self.page.wait_for_timeout(3000)
        has_no_results = self.search_result_page.validate_no_results_message()
        count = 0 if has_no_results else self.search_result_page.get_search_result_count()
        logger.info('"%s" filter: %s', option, "no results" if has_no_results else f"{count} results")
        return {"success": True, "result_count": count, "has_no_results": has_no_results}

    def clear_filter_option(self, filter_name: str, option: str) -> None:
        page = self.search_result_page
        page.open_filter(filter_name)
        target = page.option(option)
        if page.is_visible(target):
            target.click()
        page.apply_filter()
        self.page.wait_for_timeout(2000)

    def check_filter_comprehensively(
        self,
        filter_name: str,
        enabled: list[str],
        disabled: list[str] | None = None,
        test_option: str | None = None,
    ) -> dict:
        """Load time, option states, option count and, optionally, applying one option."""
        page = self.search_result_page
        load_ms = page.measure_filter_load_time(filter_name)
        validation: FilterValidation = page.validate_filter_states(filter_name, enabled, disabled)
        options = page.get_filter_options(filter_name)

        applied, result_count = False, -1
        if test_option and test_option in enabled:
            started = time.monotonic()
            page.select_filter_option(filter_name, test_option)
            logger.info("%s applied in %.0f ms", test_option, (time.monotonic() - started) * 1000)
            applied = page.validate_filter_url_update()
            result_count = page.get_search_result_count()

        return {
            "validation": validation,
            "option_count": len(options),
            "load_ms": load_ms,
            "applied": applied,
            "result_count": result_count,
        }
