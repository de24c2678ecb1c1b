import random

from playwright.sync_api import Page, expect

from .base import Component, automation_title, fake


class PillsComponent(Component):
    def __init__(self, page: Page, google_link: str = "https://www.google.com/", **kwargs):
        super().__init__(page, **kwargs)
        self.google_link = google_link
        self.link_style_dropdown = self.dropdowns.nth(2)
        self.links_button = page.locator("#button_links")
        self.title = automation_title("Pills Automation")
        self.link_title = automation_title("Pills Link Automation")
        self.description = fake.paragraph()
        self.icon_name: str | None = None

    def setup_pills(self) -> None:
        self.link_style_dropdown.wait_for(state="visible")
        self.link_style_dropdown.select_option(index=random.randint(1, 2))
        self.title_field.fill(self.title)
        self.links_button.click()
        self.icon_name = self.pick_random_icon()
        # The first picker belongs to the pill itself, the second to its CTA
        self.add_link(self.google_link, self.link_title, picker_index=1)
        self.submit_item_button.click()
        self.rich_text().fill(self.description)

    def validate_pill_availability(self, published: Page) -> None:
        self.expect_text_on(published, self.title)
        expect(published.get_by_role("link", name=self.link_title)).to_have_attribute("href", self.google_link)
