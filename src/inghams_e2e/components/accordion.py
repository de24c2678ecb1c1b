import logging

from playwright.sync_api import Page, expect

from .base import Component, automation_title

logger = logging.getLogger(__name__)


class AccordionComponent(Component):
    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.add_item_button = page.get_by_role("button", name="Add Accordion Item")
        self.add_content_button = page.get_by_role("button", name="Add content").nth(1)
        self.create_item_button = page.locator(".btn-primary").last
        self.create_entry_button = page.get_by_role("button", name="Create", exact=True).last

    def click_add_accordion_item(self) -> None:
        self.add_item_button.wait_for(state="visible")
        self.add_item_button.click()

    def input_accordion_title(self) -> str:
        title = automation_title("Accordion Title")
        self.title_field.wait_for(state="visible")
        self.title_field.fill(title)
        return title

    def click_add_content(self) -> None:
        self.add_content_button.click()

    def click_create_entry(self) -> None:
        """Create the nested block inside the accordion item."""
        self.create_entry_button.click()

    def click_create_accordion_item(self) -> None:
        self.create_item_button.click()

    def validate_accordion_availability(self, published: Page, titles: list[str], contents: list[str]) -> None:
        accordion = published.locator(".c-accordion").first
        expect(accordion).to_be_visible(timeout=30_000)
        for title in titles:
            expect(accordion).to_contain_text(title)
        # Item bodies are collapsed, so check the DOM text rather than visibility
        text = accordion.text_content() or ""
        missing = [content for content in contents if content not in text]
        assert not missing, f"Accordion is missing {missing}"
        logger.info("Accordion shows %d items", len(titles))
