from playwright.sync_api import Page, expect

from .base import Component, fake


class RTEComponent(Component):
    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.content = fake.paragraph()

    def setup_rte(self, content: str | None = None) -> str:
        self.content = content or self.content
        editor = self.rich_text()
        editor.wait_for(state="visible")
        editor.fill(self.content)
        return self.content

    def validate_rte(self, published: Page, content: str | None = None) -> None:
        expect(published.locator("body"), "RTE text is available on the page").to_contain_text(content or self.content)
