import logging
import random

from playwright.sync_api import Page, expect

from .base import Component

logger = logging.getLogger(__name__)

THEMES = ["Grey", "Primary", "Secondary"]


class GreyBoxComponent(Component):
    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.theme_dropdown = page.get_by_role("combobox")

    def setup_grey_box(self) -> str:
        theme = random.choice(THEMES)
        self.theme_dropdown.wait_for(state="visible")
        self.theme_dropdown.select_option(label=theme)
        logger.info("Selected theme: %s", theme)
        return theme

    @staticmethod
    def highlighted_section(published: Page, theme: str):
        return published.locator(f'//div[contains(@class,"highlighted-section--{theme.lower()}")]')

    def validate_grey_box(self, published: Page, theme: str) -> None:
        expect(self.highlighted_section(published, theme)).to_be_visible()
        published.close()
