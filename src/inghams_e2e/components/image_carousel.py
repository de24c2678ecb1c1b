import logging

from playwright.sync_api import Page, expect

from ..data import load_media
from .base import Component

logger = logging.getLogger(__name__)

MEDIA_KEYS = ("IMAGE1", "IMAGE2", "IMAGE3")


class ImageCarouselComponent(Component):
    def __init__(self, page: Page, media: dict[str, str] | None = None, **kwargs):
        super().__init__(page, **kwargs)
        self.media = media or load_media()
        self.add_item_button = page.get_by_role("button", name="Add Image Carousel Item")
        self.select_media_link = page.get_by_role("link", name="Select Image Or Video")
        self.select_button = page.get_by_role("button", name="Select", exact=True)
        self.create_item_button = page.get_by_role("button", name="Create", exact=True).last

    def media_item(self, name: str):
        return self.page.locator(f'//div[@title = "{name}"]')

    def setup_image_carousel(self) -> list[str]:
        """Add one carousel item per configured media item; returns the media names."""
        names = [self.media[key] for key in MEDIA_KEYS]
        for name in names:
            self.press(self.add_item_button)
            self.press(self.select_media_link)
            self.press(self.media_item(name))
            expect(self.select_button).to_be_enabled(timeout=10_000)
            self.select_button.click()
            self.press(self.create_item_button)
        logger.info("Image carousel items: %s", names)
        return names

    def validate_image_carousel(self, published: Page, names: list[str] | None = None) -> None:
        names = names or [self.media[key] for key in MEDIA_KEYS]
        carousel = published.locator('[class*="carousel"]').first
        expect(carousel).to_be_attached(timeout=30_000)
        html = carousel.inner_html().lower()
        missing = [name for name in names if name.lower() not in html]
        assert not missing, f"Carousel does not reference {missing}"
