"""Inghams home page navigation."""

from playwright.sync_api import Page, expect

from .base import BasePage


class HomePage(BasePage):
    def __init__(self, page: Page, home_url: str = "", **kwargs):
        super().__init__(page, **kwargs)
        self.home_url = home_url.rstrip("/")
        self.our_history_link = page.get_by_role("link", name="Our History").first
        self.about_us_heading = page.get_by_role("heading", name="ABOUT US")
        self.search_field = page.get_by_placeholder("Site search")
        self.search_button = page.get_by_role("button", name="Search")

    def click_our_history(self) -> None:
        self.our_history_link.focus()
        self.our_history_link.click()

    def check_our_history(self) -> None:
        expect(self.page).to_have_url(f"{self.home_url}/about-us")
        expect(self.about_us_heading).to_be_visible()

    def search(self, keyword: str) -> None:
        self.search_field.fill(keyword)
        self.search_button.click()
        self.wait_until_loaded()
        expect(self.page.locator("body")).to_contain_text(keyword, ignore_case=True)
