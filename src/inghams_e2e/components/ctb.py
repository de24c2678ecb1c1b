"""Call-to-book block: title, phone number, layout and description."""

import random

from playwright.sync_api import Page

from .base import Component, automation_title, fake


class CTBComponent(Component):
    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.phone_number_field = page.locator("#phoneNumber")
        self.layout_dropdown = self.dropdowns.nth(2)
        self.title = automation_title("CTB Automation")
        self.phone_number = fake.phone_number()
        self.description = fake.paragraph()
        self.selected_layout: list[str] = []

    def setup_ctb(self) -> None:
        self.title_field.wait_for(state="visible")
        self.title_field.fill(self.title)
        self.phone_number_field.fill(self.phone_number)
        self.layout_dropdown.click()
        self.selected_layout = self.layout_dropdown.select_option(index=random.randint(1, 2))
        self.rich_text().fill(self.description)

    def validate_ctb_availability(self, published: Page) -> None:
        self.expect_text_on(published, self.title, self.phone_number)
