"""Map migrated CMS source paths to public site URLs and check they resolve."""

import logging
from collections.abc import Callable

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from .models import Product, SourcePathResult

logger = logging.getLogger(__name__)

FAILING_STATUSES = (404, 500, 503)


def _fix_saints(path: str) -> str:
    return path.replace("st.", "st-")


def lapland_path(source_path: str) -> str:
    """Lapland and Santa breaks share one URL scheme."""
    path = source_path.replace("home", "", 1)
    path = path.replace("lapland-", "lapland")
    path = path.replace("laplandholidays", "lapland-holidays", 1)
    return _fix_saints(path)


def ski_path(source_path: str) -> str:
    path = source_path.replace("home", "", 1)
    path = path.replace("ski-resorts", "resorts", 1)
    return _fix_saints(path)


def walking_path(source_path: str) -> str:
    path = source_path.replace("home", "/walking-holidays", 1)
    return _fix_saints(path)


PATH_BUILDERS: dict[Product, Callable[[str], str]] = {
    Product.LAPLAND: lapland_path,
    Product.SANTA: lapland_path,
    Product.SKI: ski_path,
    Product.WALKING: walking_path,
}


def build_url(product: Product, home: str, source_path: str) -> str:
    """Full site URL of a migration source path."""
    return home.rstrip("/") + PATH_BUILDERS[product](source_path)


def error_url(home: str) -> str:
    return f"{home.rstrip('/')}/error-500"


def visit(page: Page, url: str, error_page: str) -> SourcePathResult:
    """Open a URL and record the outcome without asserting."""
    try:
        response = page.goto(url, wait_until="domcontentloaded")
    except PlaywrightError as e:
        logger.warning("Navigation to %s failed: %s", url, e)
        return SourcePathResult(url=url, status=None, final_url=page.url, error=str(e).splitlines()[0])

    status = response.status if response else None
    logger.info("TEST = %s", url)
    logger.info("Response = %s", status)

    error = None
    if page.url.rstrip("/") == error_page.rstrip("/"):
        error = "redirected to error page"
    elif status in FAILING_STATUSES:
        error = f"status {status}"
    return SourcePathResult(url=url, status=status, final_url=page.url, error=error)


def check_source_path(page: Page, product: Product, source_path: str, home: str) -> None:
    """Assert a migrated source path resolves to a live page."""
    url = build_url(product, home, source_path)
    error_page = error_url(home)

    response = page.goto(url, wait_until="domcontentloaded")
    status = response.status if response else None
    logger.info("TEST = %s", url)
    logger.info("Response = %s", status)

    assert page.url.rstrip("/") != error_page.rstrip("/"), f"{url} redirected to {error_page}"
    assert status not in FAILING_STATUSES, f"{url} returned {status}"
