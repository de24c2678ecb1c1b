"""Back-office sign-in state capture and cleanup of pages created by the suite."""

import logging
from pathlib import Path

from playwright.sync_api import Browser, Page

from .config import Config
from .pages.shared_steps import SharedSteps
from .pages.sign_in import EcmsSignInPage, PcmsSignInPage

logger = logging.getLogger(__name__)

SYSTEMS = ("ecms", "pcms")


def capture_storage_state(browser: Browser, config: Config, system: str) -> Path:
    """Sign into one back-office and save its storage state for later tests."""
    system = system.lower()
    if system == "ecms":
        credentials = config.ecms_credentials()
        login_url = config.urls.ecms_login
        sign_in_cls = EcmsSignInPage
    elif system == "pcms":
        credentials = config.pcms_credentials()
        login_url = f"{config.urls.p_cms}/umbraco/login"
        sign_in_cls = PcmsSignInPage
    else:
        raise ValueError(f"system must be one of {SYSTEMS}, got {system!r}")

    path = config.storage_state_path(system)
    path.parent.mkdir(parents=True, exist_ok=True)

    context = browser.new_context()
    context.set_default_timeout(config.browser.timeout_ms)
    context.set_default_navigation_timeout(config.browser.navigation_timeout_ms)
    try:
        page = context.new_page()
        page.goto(login_url, wait_until="domcontentloaded")
        sign_in_cls(page, failures_dir=config.failures_dir).login(
            credentials.username, credentials.password, settle_ms=config.browser.slow_settle_ms
        )
        context.storage_state(path=str(path))
    finally:
        context.close()

    logger.info("%s user signed in, state saved to %s", system.upper(), path)
    return path


def cleanup_automation_pages(page: Page, config: Config) -> int:
    """Delete every Home child page whose name marks it as created by automation.

    List view is switched on for the Home document type so the children can be
    bulk-selected, then switched back. Returns how many pages were selected.
    """
    steps = SharedSteps(page, failures_dir=config.failures_dir)
    page.goto(config.urls.ecms_content)

    steps.click_home_link()
    steps.click_info_tab()
    steps.click_home_document_type_link()
    steps.change_home_list_view()
    steps.click_home_child_items_button()
    selected = steps.select_automation_page_tiles()
    steps.delete_page_confirmation()
    steps.click_info_tab()
    steps.click_home_document_type_link()
    steps.change_home_list_view()

    logger.info("Cleanup removed %d automation pages", selected)
    return selected
