"""Pytest plugin to capture HTML snapshots and screenshots on test failure."""

import logging
from datetime import datetime
from pathlib import Path

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from ..capture.artifacts import TIMESTAMP_FORMAT, snapshot_header

logger = logging.getLogger(__name__)

# Fixtures that may hold the browser page under test, in lookup order
PAGE_FIXTURES = ["page", "site_page", "ecms_page", "pcms_page"]


def pytest_runtest_makereport(item, call):
    """Hook to execute after each test phase."""
    if call.when == "call" and call.excinfo is not None:
        if call.excinfo.errisinstance(pytest.skip.Exception):
            return
        logger.debug("Test failed: %s, capturing snapshot...", item.name)
        _capture_snapshot(item)


def _failures_dir(item) -> Path:
    config = item.funcargs.get("config")
    failures_dir = getattr(config, "failures_dir", None)
    return Path(failures_dir) if failures_dir else Path("failures")


def _capture_snapshot(item) -> None:
    """Save the page of the failed test as HTML and a full-page screenshot."""
    page = next((item.funcargs[name] for name in PAGE_FIXTURES if name in item.funcargs), None)
    if not isinstance(page, Page):
        return

    failure_dir = _failures_dir(item)
    failure_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime(TIMESTAMP_FORMAT)
    clean_name = item.name.replace("::", "_").replace("/", "_").replace("[", "_").replace("]", "")
    html_path = failure_dir / f"{clean_name}_{timestamp}.html"
    screenshot_path = failure_dir / f"{clean_name}_{timestamp}.png"

    try:
        html_path.write_text(snapshot_header(page.url) + page.content(), encoding="utf-8")
        item.user_properties.append(("snapshot_path", str(html_path)))
    except (PlaywrightError, OSError) as e:
        logger.warning("Could not save HTML snapshot for %s: %s", item.name, e)

    try:
        page.screenshot(path=str(screenshot_path), full_page=True)
        item.user_properties.append(("screenshot_path", str(screenshot_path)))
    except PlaywrightError as e:
        logger.warning("Could not save screenshot for %s: %s", item.name, e)
