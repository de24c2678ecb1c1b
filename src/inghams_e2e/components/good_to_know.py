from playwright.sync_api import Page

from .base import Component, automation_title, fake


class GoodToKnowComponent(Component):
    def __init__(self, page: Page, google_link: str = "https://www.google.com/", **kwargs):
        super().__init__(page, **kwargs)
        self.google_link = google_link
        self.add_item_button = page.locator("#button_iconText")
        self.title = automation_title("Automation")
        self.description = fake.paragraph()
        self.icon_name: str | None = None

    def fill_out_title(self) -> None:
        self.title_field.wait_for(state="visible")
        self.title_field.fill(self.title)

    def fill_out_description(self) -> None:
        editor = self.rich_text()
        editor.wait_for(state="visible")
        editor.fill(self.description)

    def click_add_item(self) -> None:
        self.add_item_button.click()

    def select_item_icon(self) -> None:
        self.icon_name = self.pick_random_icon()

    def fill_out_item_title(self) -> None:
        field = self.title_field.nth(1)
        field.wait_for(state="visible")
        field.fill(automation_title("Title"))

    def fill_out_item_description(self) -> None:
        self.rich_text(1).fill(automation_title("Item Description Automation"))

    def fill_out_item_link(self) -> None:
        self.add_link(self.google_link, automation_title("Good to know Link"))

    def click_submit_item(self) -> None:
        self.submit_item_button.click()

    def setup_good_to_know(self) -> None:
        self.fill_out_title()
        self.fill_out_description()
        self.click_add_item()
        self.select_item_icon()
        self.fill_out_item_title()
        self.fill_out_item_description()
        self.fill_out_item_link()
        self.click_submit_item()

    def validate_good_to_know_availability(self, published: Page) -> None:
        self.expect_text_on(published, self.title, self.description)
