from playwright.sync_api import Page

from .base import Component, fake


class HeadlineComponent(Component):
    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.headline_field = page.get_by_role("textbox", name="Property alias:")
        self.headline_text = ""

    def fill_out_headline_details(self, nested: bool = False) -> str:
        """Fill the headline text and pick the first size and alignment; returns the text used.

        Inside an accordion item the dialog shows one extra pair of dropdowns.
        """
        self.headline_text = f"Automation Headline {fake.random_int(min=50, max=1000)}"
        field = self.headline_field.last if nested else self.headline_field.first
        field.wait_for(state="visible")
        field.fill(self.headline_text)

        offset = 2 if nested else 0
        for index in (2 + offset, 3 + offset):
            dropdown = self.dropdowns.nth(index)
            dropdown.click()
            dropdown.select_option(index=1)
        return self.headline_text

    def validate_headline_availability(self, published: Page) -> None:
        self.expect_text_on(published, self.headline_text)
