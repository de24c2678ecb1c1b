"""Umbraco back-office sign-in pages (ECMS and PCMS)."""

import logging

from playwright.sync_api import Page, expect

from .base import BasePage

logger = logging.getLogger(__name__)


class UmbracoSignInPage(BasePage):
    """Login form shared by both back-offices."""

    system = "cms"

    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.email_field = page.get_by_label("Email")
        self.password_field = page.get_by_label("Password")
        self.login_button = page.get_by_label("Login")

        self.start_tour_button = page.get_by_role("button", name="Start tour")
        self.close_tour_button = page.get_by_role("button", name="Close", exact=True)
        self.welcome_heading = page.get_by_role("heading", name="Welcome to Umbraco")

    def login(self, email: str, password: str, settle_ms: int = 10_000) -> None:
        logger.info("Signing into %s as %s", self.system.upper(), email)

        self.email_field.wait_for(state="visible", timeout=10_000)
        self.email_field.fill(email)
        self.password_field.wait_for(state="visible", timeout=10_000)
        self.password_field.fill(password)
        self.login_button.wait_for(state="visible", timeout=10_000)
        self.login_button.hover()
        self.login_button.click()

        self.wait_until_loaded(settle_ms)

        # First login on a fresh profile opens the guided tour
        if self.start_tour_button.is_visible():
            self.close_tour_button.wait_for(state="visible", timeout=10_000)
            self.close_tour_button.hover()
            self.close_tour_button.click()

        expect(self.welcome_heading).to_be_visible(timeout=30_000)


class EcmsSignInPage(UmbracoSignInPage):
    system = "ecms"


class PcmsSignInPage(UmbracoSignInPage):
    system = "pcms"
