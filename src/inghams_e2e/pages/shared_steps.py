"""Back-office steps reused by the component and cleanup tests."""

import logging

from playwright.sync_api import Page, expect

from .base import BasePage

logger = logging.getLogger(__name__)

GENERIC_CONTENT_PAGE = "vi anne ski components"
AUTOMATION_PAGE_MARKER = "Automation"


class SharedSteps(BasePage):
    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.global_search = page.locator("//*[@data-element='global-search']")
        self.global_search_input = page.get_by_placeholder("Type to search...")
        self.global_search_first_result = page.locator(".umb-search-item").first
        self.add_content_button = page.get_by_role("button", name="Add content")
        self.search_component_field = page.locator("#block-search")
        self.component_result = page.locator("umb-block-card")
        self.content_tab = page.get_by_role("tab", name="Content", exact=True)
        self.create_component_button = page.locator(".btn-primary")
        self.save_and_publish_button = page.locator('[data-element="button-saveAndPublish"]')
        self.publish_notification = page.locator(".umb-notifications__notifications > li")
        self.info_tab = page.locator('[data-element="sub-view-umbInfo"]')
        self.page_link = page.locator('[icon="icon-out"]')

        # Home document type and its list view, used to bulk-delete automation pages
        self.home_link = page.locator('//a[text()="Home"]').first
        self.document_type_link = page.locator('a[ng-click*="openDocumentType"]').first
        self.list_view_app = page.locator('[data-element="sub-view-listView"]')
        self.list_view_toggle = page.locator('[data-element="sub-view-listView"] umb-toggle button, .umb-toggle').first
        self.save_button = page.locator('[data-element="button-save"]')
        self.child_items_app = page.locator('[data-element="sub-view-umbListView"]')
        self.list_view_filter = page.locator('[ng-model="options.filter"]')
        self.list_view_rows = page.locator(".umb-table-body .umb-table-row")
        self.delete_selected_button = page.get_by_role("button", name="Delete", exact=True)
        self.confirm_delete_button = page.locator(".umb-overlay").get_by_role("button", name="Delete")

    def search_and_select_generic_content_page(self, name: str = GENERIC_CONTENT_PAGE) -> None:
        self.global_search.wait_for(state="visible")
        self.global_search.click()
        self.global_search_input.fill(name)
        self.global_search_input.press("Enter")
        expect(self.global_search_first_result).to_be_visible()
        self.global_search_first_result.click()

    def click_content_tab(self) -> None:
        self.content_tab.wait_for(state="visible")
        self.content_tab.click()

    def click_add_content_button(self) -> None:
        self.add_content_button.wait_for(state="visible")
        self.add_content_button.click()

    def search_component(self, component: str) -> None:
        self.search_component_field.press_sequentially(component)

    def select_component(self) -> None:
        self.component_result.wait_for(state="visible")
        self.component_result.click()

    def click_create_button(self) -> None:
        self.create_component_button.wait_for(state="visible")
        self.create_component_button.click()

    def add_component(self, component: str) -> None:
        """Open the block picker and choose a component by name."""
        self.click_add_content_button()
        self.search_component(component)
        self.select_component()

    def click_save_and_publish(self) -> None:
        self.save_and_publish_button.wait_for(state="visible")
        self.save_and_publish_button.click()
        self.publish_notification.wait_for(state="visible")
        expect(self.publish_notification).to_have_count(1)

    def click_info_tab(self) -> None:
        self.info_tab.wait_for(state="visible")
        self.info_tab.click()

    def click_page_link(self) -> Page:
        """Open the published page in a new tab."""
        return self.open_in_new_page(self.page_link.click)

    # Cleanup of pages created by the component tests

    def click_home_link(self) -> None:
        self.press(self.home_link)
        self.wait_until_loaded()

    def click_home_document_type_link(self) -> None:
        self.press(self.document_type_link)
        self.wait_until_loaded()

    def change_home_list_view(self) -> None:
        """Toggle "Enable list view" on the Home document type and save."""
        self.press(self.list_view_app)
        self.press(self.list_view_toggle)
        self.press(self.save_button)
        expect(self.publish_notification.first).to_be_visible(timeout=10_000)
        self.click_home_link()

    def click_home_child_items_button(self) -> None:
        self.press(self.child_items_app)
        self.wait_for_network_idle()

    def select_automation_page_tiles(self, marker: str = AUTOMATION_PAGE_MARKER) -> int:
        """Select every child page whose name contains the marker; returns how many."""
        if self.is_visible(self.list_view_filter):
            self.list_view_filter.fill(marker)
            self.wait_for_network_idle()

        rows = self.list_view_rows.filter(has_text=marker)
        count = rows.count()
        for index in range(count):
            rows.nth(index).locator(".umb-table-cell").first.click()
        logger.info("Selected %d automation pages", count)
        return count

    def delete_page_confirmation(self) -> None:
        if not self.is_visible(self.delete_selected_button):
            logger.info("Nothing selected, skipping delete")
            return

        # Older back-office builds confirm with a native dialog
        self.page.once("dialog", lambda dialog: dialog.accept())
        self.delete_selected_button.click()
        if self.is_visible(self.confirm_delete_button):
            self.confirm_delete_button.click()
        self.wait_for_network_idle()
