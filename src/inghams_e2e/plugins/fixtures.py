"""Pytest plugin injecting configuration, API clients and page objects as fixtures.

Load it from a conftest with ``pytest_plugins = ["inghams_e2e.plugins.fixtures"]``.
Browser fixtures (``browser``, ``page``) come from pytest-playwright.
"""

import logging
import os

import pytest
from playwright.sync_api import expect

from ..api import AvailabilityClient, DeliveryClient
from ..components import (
    AccordionComponent,
    CTAButtonComponent,
    CTBComponent,
    GoodToKnowComponent,
    GreyBoxComponent,
    HeadlineComponent,
    ImageCarouselComponent,
    PaginationHelper,
    PillsComponent,
    RTEComponent,
    SearchComponent,
)
from ..config import load_config
from ..data import load_media
from ..errors import MissingCredentialsError
from ..filters import FilterTestHelpers
from ..log import setup_logging
from ..pages import (
    CountryPage,
    EcmsMainPage,
    ExploreHomePage,
    FooterPage,
    HomePage,
    LinkPage,
    PcmsMainPage,
    RegionPage,
    ResortPage,
    SearchResultPage,
    SharedSteps,
    TripSearchModal,
)

logger = logging.getLogger(__name__)

MARKERS = {
    "smoke": "quick checks of the public site",
    "regression": "full search, filter and component scenarios",
    "uat": "CSV-driven migration checks",
    "page_cleanup": "deletes pages created by the component tests",
    "e2e": "drives a live environment (set INGHAMS_E2E=1 to run)",
}

LIVE_FLAG = "INGHAMS_E2E"


def pytest_configure(config):
    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    if os.environ.get(LIVE_FLAG) == "1":
        return
    skip_live = pytest.mark.skip(reason=f"live-site test, set {LIVE_FLAG}=1 to run")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_live)


# Configuration


@pytest.fixture(scope="session")
def config():
    setup_logging()
    cfg = load_config()
    expect.set_options(timeout=cfg.browser.expect_timeout_ms)
    logger.info("Running against %s", cfg.env)
    return cfg


@pytest.fixture(scope="session")
def environment_urls(config):
    return config.urls


@pytest.fixture(scope="session")
def home_url(environment_urls) -> str:
    return environment_urls.inghams


@pytest.fixture(scope="session")
def media() -> dict[str, str]:
    return load_media()


# REST clients


@pytest.fixture(scope="session")
def api_key(config) -> str:
    try:
        return config.require_api_key()
    except MissingCredentialsError as e:
        pytest.skip(str(e))


@pytest.fixture(scope="session")
def availability_client(environment_urls, api_key):
    with AvailabilityClient(environment_urls.p_cms, api_key) as client:
        yield client


@pytest.fixture(scope="session")
def delivery_client(environment_urls, api_key):
    with DeliveryClient(environment_urls.p_cms, api_key) as client:
        yield client


# Browser pages


def _apply_timeouts(page, config):
    page.set_default_timeout(config.browser.timeout_ms)
    page.set_default_navigation_timeout(config.browser.navigation_timeout_ms)
    return page


@pytest.fixture
def site_page(page, config):
    """pytest-playwright page with the suite's timeouts, for the public sites."""
    return _apply_timeouts(page, config)


def _signed_in_page(browser, browser_context_args, config, system):
    state = config.storage_state_path(system)
    if not state.exists():
        pytest.skip(f"No {system.upper()} storage state at {state}, run `inghams-e2e setup-auth` first")
    context = browser.new_context(**browser_context_args, storage_state=str(state))
    page = _apply_timeouts(context.new_page(), config)
    return context, page


def _open_signed_in(browser, browser_context_args, config, system, url):
    context, page = _signed_in_page(browser, browser_context_args, config, system)
    try:
        page.goto(url)
        yield page
    finally:
        context.close()


@pytest.fixture
def ecms_page(browser, browser_context_args, config):
    """Page signed into the ECMS back-office, opened on the content tree."""
    yield from _open_signed_in(browser, browser_context_args, config, "ecms", config.urls.ecms_content)


@pytest.fixture
def pcms_page(browser, browser_context_args, config):
    yield from _open_signed_in(browser, browser_context_args, config, "pcms", f"{config.urls.p_cms}/umbraco#/content")


def _page_kwargs(config) -> dict:
    return {"failures_dir": config.failures_dir}


# Public site page objects


@pytest.fixture
def home_page(site_page, config, home_url):
    return HomePage(site_page, home_url=home_url, **_page_kwargs(config))


@pytest.fixture
def search_result_page(site_page, config):
    return SearchResultPage(site_page, **_page_kwargs(config))


@pytest.fixture
def resort_page(site_page, config):
    return ResortPage(site_page, **_page_kwargs(config))


@pytest.fixture
def country_page(site_page, config):
    return CountryPage(site_page, **_page_kwargs(config))


@pytest.fixture
def region_page(site_page, config):
    return RegionPage(site_page, **_page_kwargs(config))


@pytest.fixture
def pagination_helper(site_page, config):
    return PaginationHelper(site_page, **_page_kwargs(config))


@pytest.fixture
def filter_helpers(search_result_page):
    return FilterTestHelpers(search_result_page)


@pytest.fixture
def explore_home_page(site_page, config):
    return ExploreHomePage(site_page, **_page_kwargs(config))


@pytest.fixture
def trip_search_modal(site_page, config):
    return TripSearchModal(site_page, **_page_kwargs(config))


@pytest.fixture
def link_page(site_page, config):
    return LinkPage(site_page, **_page_kwargs(config))


@pytest.fixture
def footer_page(site_page, config):
    return FooterPage(site_page, **_page_kwargs(config))


# Back-office page objects


@pytest.fixture
def ecms_main_page(ecms_page, config):
    return EcmsMainPage(ecms_page, **_page_kwargs(config))


@pytest.fixture
def pcms_main_page(pcms_page, config):
    return PcmsMainPage(pcms_page, **_page_kwargs(config))


@pytest.fixture
def shared_steps(ecms_page, config):
    return SharedSteps(ecms_page, **_page_kwargs(config))


@pytest.fixture
def headline_component(ecms_page, config):
    return HeadlineComponent(ecms_page, **_page_kwargs(config))


@pytest.fixture
def accordion_component(ecms_page, config):
    return AccordionComponent(ecms_page, **_page_kwargs(config))


@pytest.fixture
def cta_button_component(ecms_page, config):
    return CTAButtonComponent(ecms_page, google_link=config.urls.google_link, **_page_kwargs(config))


@pytest.fixture
def ctb_component(ecms_page, config):
    return CTBComponent(ecms_page, **_page_kwargs(config))


@pytest.fixture
def good_to_know_component(ecms_page, config):
    return GoodToKnowComponent(ecms_page, google_link=config.urls.google_link, **_page_kwargs(config))


@pytest.fixture
def grey_box_component(ecms_page, config):
    return GreyBoxComponent(ecms_page, **_page_kwargs(config))


@pytest.fixture
def image_carousel_component(ecms_page, config, media):
    return ImageCarouselComponent(ecms_page, media=media, **_page_kwargs(config))


@pytest.fixture
def pills_component(ecms_page, config):
    return PillsComponent(ecms_page, google_link=config.urls.google_link, **_page_kwargs(config))


@pytest.fixture
def rte_component(ecms_page, config):
    return RTEComponent(ecms_page, **_page_kwargs(config))


@pytest.fixture
def search_component(ecms_page, config):
    return SearchComponent(ecms_page, **_page_kwargs(config))
