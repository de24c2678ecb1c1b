"""Umbraco back-office content pages for ECMS and PCMS."""

import logging

from playwright.sync_api import Page, expect

from ..data import load_media
from .base import BasePage

logger = logging.getLogger(__name__)

RTE_ACCORDION_CONTENT = "RTE Test Accordion Item Content: The quick brown fox jumps over the lazy dog."


class ContentTreePage(BasePage):
    """Content tree navigation shared by both back-offices."""

    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.content_fields = page.get_by_label("Content Fields")
        self.content_tab = page.get_by_role("tab", name="Content", exact=True)

    def expansion_arrow(self, target: str):
        return self.page.locator(f'//a[text()="{target}"]//preceding-sibling::button')

    def tree_node(self, target: str):
        return self.page.locator(f'//a[text()="{target}"]')

    def expand(self, target: str) -> None:
        self.press(self.expansion_arrow(target))

    def select_target_page(self, target: str) -> None:
        self.press(self.tree_node(target))
        expect(self.content_fields).to_be_visible(timeout=30_000)

    def open_content_tab(self, settle_ms: int = 2000) -> None:
        self.press(self.content_tab)
        self.page.wait_for_timeout(settle_ms)


class PcmsMainPage(ContentTreePage):
    """PCMS back-office landing page."""


class EcmsMainPage(ContentTreePage):
    """ECMS back-office: tree navigation and the page editors used by the tests."""

    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.secondary_resorts_arrow = page.get_by_role("button", name="Expand child items for Resorts").nth(1)

        self.banner_item = page.locator(
            '//button[@class = "btn-reset umb-outline blockelement-labelblock-editor blockelement__draggable-element"]'
        )
        self.add_banner_button = page.get_by_role("button", name="Add Banner")
        self.banner_layout = page.locator('//option[contains(text(),"Full Bleed")]//parent::select')
        self.banner_vertical_alignment = page.locator('//option[text()="Top"]//parent::select')
        self.banner_horizontal_alignment = page.locator('//option[text()="Full"]//parent::select')
        self.media_tab = page.get_by_role("tab", name="Media")
        self.add_media_button = page.get_by_role("button", name="Add", exact=True)
        self.existing_media = page.locator('//ng-form[@name = "vm.mediaCardForm"]')
        self.remove_media_button = page.get_by_role("button", name="Remove")
        self.select_media_button = page.get_by_role("button", name="Select", exact=True)
        self.submit_button = page.get_by_role("button", name="Submit")
        self.create_button = page.get_by_role("button", name="Create", exact=True)

        self.content_1_actions = page.get_by_role("button", name="Open Property Actions").nth(1)
        self.content_1_add_button = page.get_by_role("button", name="Add content").first
        self.content_2_actions = page.get_by_role("button", name="Open Property Actions").nth(2)
        self.close_property_actions = page.get_by_role("button", name="Close Property Actions")
        self.remove_all_items_button = page.get_by_role("button", name="Remove all items")
        self.delete_heading = page.get_by_role("heading", name="Delete")
        self.delete_button = page.get_by_label("Delete").get_by_role("button", name="Delete")

        self.add_accordion_item_button = page.get_by_role("button", name="Add Accordion Item")
        self.accordion_item_title = page.get_by_label("Title*")
        self.accordion_item_add_content = page.get_by_role("button", name="Add content").nth(2)
        self.accordion_create_button = self.create_button.nth(1)
        self.accordion_component_create_button = self.create_button.nth(2)
        self.accordion_media_create_button = self.create_button.nth(3)
        self.add_carousel_item_button = page.get_by_role("button", name="Add Image Carousel Item")
        self.select_image_or_video = page.get_by_role("link", name="Select Image Or Video")

        self.save_and_publish_button = page.get_by_role("button", name="Save and publish")
        self.published_message = page.get_by_text("Content published: and visible on the website ×")

        self.search_tab = page.get_by_role("tab", name="Search")
        self.add_default_program_button = page.get_by_label("Default Program: Add")
        self.remove_default_program_button = page.locator('//button[@ng-click="onRemove()"]')

    def component(self, name: str):
        return self.page.locator(f'//div[text()="{name}"]')

    def media(self, name: str):
        return self.page.locator(f'//div[@title = "{name}"]')

    def current_default_program(self, program: str):
        return self.page.locator(f'//div[@class="umb-node-preview__content"]//div[text()="{program}"]')

    def default_program_option(self, program: str):
        return self.page.locator(f'//div[contains(@ng-hide,"Search")]//li[@data-element="tree-item-{program}"]')

    def expand_tree(
        self,
        product: str,
        secondary_product: str | None = None,
        country: str | None = None,
        region: str | None = None,
        resort: str | None = None,
    ) -> None:
        """Open the content tree down to a resort, region or country node."""
        self.wait_until_loaded()
        self.expand("Home")
        self.expand(product)
        self.page.wait_for_timeout(500)

        if self.expansion_arrow("Resorts").is_visible() and secondary_product is None:
            self.expand("Resorts")
        elif self.expansion_arrow("Destinations").is_visible():
            self.expand("Destinations")
        elif self.expansion_arrow("Ski Resorts").is_visible():
            self.expand("Ski Resorts")
        self.page.wait_for_timeout(500)

        if secondary_product is not None:
            self.expand(secondary_product)
            self.press(self.secondary_resorts_arrow)

        for node in (country, region, resort):
            if node is not None:
                self.expand(node)

    def save_and_publish(self) -> None:
        self.press(self.save_and_publish_button)
        self.published_message.hover()
        expect(self.published_message).to_be_visible(timeout=30_000)

    def _pick_media(self, name: str) -> None:
        self.press(self.media(name))
        expect(self.select_media_button).to_be_enabled(timeout=10_000)
        self.select_media_button.hover(timeout=10_000)
        self.select_media_button.click(timeout=10_000)

    def modify_hero_banner(
        self,
        media_name: str,
        layout: str = "Full Bleed",
        vertical: str = "Top",
        horizontal: str = "Full",
    ) -> None:
        self.open_content_tab()

        if self.banner_item.is_visible():
            self.banner_item.hover(timeout=10_000)
            self.banner_item.click(timeout=10_000)
        else:
            self.add_banner_button.hover(timeout=10_000)
            self.add_banner_button.click(timeout=10_000)

        self.banner_layout.select_option(label=layout)
        self.banner_vertical_alignment.select_option(label=vertical)
        self.banner_horizontal_alignment.select_option(label=horizontal)

        self.press(self.media_tab)
        self.page.wait_for_timeout(3000)
        if self.existing_media.is_visible():
            self.existing_media.hover()
            self.remove_media_button.click()

        self.press(self.add_media_button)
        self._pick_media(media_name)

        # Editing an existing banner shows Submit, a new one shows Create
        if self.submit_button.is_visible():
            self.submit_button.hover()
            self.submit_button.click()
        else:
            self.create_button.hover()
            self.create_button.click()
        logger.info("Hero banner set to %s (%s / %s / %s)", media_name, layout, vertical, horizontal)

    def add_default_program_header_footer(self, program: str) -> None:
        self.press(self.search_tab)
        self.page.wait_for_timeout(3000)

        if not self.add_default_program_button.is_visible():
            self.remove_default_program_button.hover()
            self.remove_default_program_button.click()
            expect(self.current_default_program(program)).not_to_be_visible(timeout=10_000)
            expect(self.add_default_program_button).to_be_visible(timeout=10_000)

        self.add_default_program_button.hover()
        self.add_default_program_button.click()
        self.press(self.default_program_option(program))
        expect(self.current_default_program(program)).to_be_visible(timeout=10_000)

    def remove_default_program(self, program: str | None = None) -> None:
        self.press(self.search_tab)
        self.page.wait_for_timeout(3000)

        if self.add_default_program_button.is_hidden():
            self.remove_default_program_button.hover()
            self.remove_default_program_button.click()
            expect(self.add_default_program_button).to_be_visible(timeout=10_000)
        if program:
            expect(self.current_default_program(program)).not_to_be_visible(timeout=10_000)

    def _clear_property(self, actions_button, settle_ms: int) -> None:
        actions_button.hover()
        actions_button.click(timeout=10_000)
        self.page.wait_for_timeout(settle_ms)

        if self.remove_all_items_button.is_enabled():
            self.remove_all_items_button.hover()
            self.remove_all_items_button.click()
            self.delete_heading.wait_for(state="visible", timeout=10_000)
            self.delete_button.hover()
            self.delete_button.click()
        else:
            self.close_property_actions.click(timeout=10_000)

    def _add_accordion_item(self, title: str) -> None:
        self.press(self.add_accordion_item_button)
        self.accordion_item_title.wait_for(state="visible", timeout=10_000)
        self.accordion_item_title.fill(title)
        self.accordion_item_add_content.hover()
        self.accordion_item_add_content.click()

    def _finish_accordion_item(self) -> None:
        self.press(self.accordion_component_create_button)
        self.press(self.accordion_create_button)

    def modify_accordions(self, media: dict[str, str] | None = None) -> None:
        """Replace both content properties with an accordion holding an RTE and an image carousel."""
        media = media or load_media()
        self.open_content_tab()

        self._clear_property(self.content_1_actions, settle_ms=3000)
        self.page.wait_for_timeout(1500)
        self._clear_property(self.content_2_actions, settle_ms=1500)

        self.content_1_add_button.hover()
        self.content_1_add_button.click()
        self.press(self.component("Accordion"))

        self._add_accordion_item("RTE Test Accordion Item")
        self.press(self.component("Rich Text Editor"))
        rte = self.page.frame_locator('[title="Rich Text Area"]').locator("#tinymce")
        rte.wait_for(state="visible")
        rte.fill(RTE_ACCORDION_CONTENT)
        self._finish_accordion_item()

        self._add_accordion_item("Image Carousel Test Accordion Item")
        self.press(self.component("Image Carousel"))
        for key in ("IMAGE1", "IMAGE2", "IMAGE3"):
            self.press(self.add_carousel_item_button)
            self.press(self.select_image_or_video)
            self._pick_media(media[key])
            self.press(self.accordion_media_create_button)
        self._finish_accordion_item()

        self.press(self.create_button.first)
        logger.info("Accordions rebuilt with RTE and image carousel items")
