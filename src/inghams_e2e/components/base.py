"""Shared pieces of the back-office block editors."""

import random

from faker import Faker
from playwright.sync_api import Locator, Page, expect

from ..pages.base import BasePage

fake = Faker("en_GB")


def automation_title(label: str) -> str:
    """Random, recognisable title such as "quiet harbour CTB Automation 412"."""
    return f"{fake.word()} {fake.word()} {label} {fake.random_int(min=50, max=1000)}"


class Component(BasePage):
    """A block editor opened from "Add content" in the ECMS."""

    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.title_field = page.locator("#title")
        self.dropdowns = page.locator('select[name="dropDownList"]')
        self.icon_picker_button = page.locator(".add-link")
        self.icon_picker_items = page.locator(".umb-iconpicker-item")
        self.link_picker_button = page.locator('button[ng-click="openLinkPicker()"]')
        self.link_url_field = page.locator("#urlLinkPicker")
        self.link_title_field = page.locator("#nodeNameLinkPicker")
        self.link_submit_button = page.locator(".btn-success").last
        self.submit_item_button = page.locator(".btn-primary").last

    def rich_text(self, index: int = 0) -> Locator:
        """Body of the n-th TinyMCE editor in the open dialog."""
        return self.page.locator("iframe").nth(index).content_frame.locator("#tinymce")

    def pick_random_icon(self) -> str | None:
        self.icon_picker_button.click()
        expect(self.icon_picker_items.first).to_be_visible()
        item = self.icon_picker_items.nth(random.randrange(self.icon_picker_items.count()))
        name = item.locator("a").get_attribute("title")
        item.click()
        return name

    def add_link(self, url: str, title: str, picker_index: int = 0) -> None:
        self.link_picker_button.nth(picker_index).click()
        self.link_url_field.wait_for(state="visible")
        self.link_url_field.fill(url)
        self.link_title_field.fill(title)
        self.link_submit_button.click()

    @staticmethod
    def expect_text_on(published: Page, *texts: str) -> None:
        body = published.locator("body")
        for text in texts:
            expect(body).to_contain_text(text)
