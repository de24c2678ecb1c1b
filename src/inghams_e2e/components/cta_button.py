import random

from playwright.sync_api import Page, expect

from .base import Component, automation_title


class CTAButtonComponent(Component):
    def __init__(self, page: Page, google_link: str = "https://www.google.com", **kwargs):
        super().__init__(page, **kwargs)
        self.google_link = google_link
        self.theme_dropdown = page.locator("#theme")
        self.position_dropdown = page.locator("#positionHorizontal")
        self.link_title = automation_title("CTA Button")
        self.icon: str | None = None

    def setup_cta_button(self) -> tuple[int, int]:
        """Pick a random theme and horizontal position, then a link and an icon; returns the option indexes."""
        theme, position = random.randrange(3), random.randrange(4)
        self.theme_dropdown.click()
        self.theme_dropdown.select_option(index=theme)
        self.position_dropdown.click()
        self.position_dropdown.select_option(index=position)
        self.add_link(self.google_link, self.link_title)
        self.icon = self.pick_random_icon()
        return theme, position

    def validate_cta_button_availability(self, published: Page) -> None:
        button = published.get_by_role("link", name=self.link_title)
        expect(button, "CTA button is available").to_be_visible()
        expect(button).to_have_attribute("href", self.google_link)
