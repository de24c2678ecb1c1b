"""Country and region pages of the public site."""

import logging

from playwright.sync_api import Page, expect

from ..data import load_media
from ..models import Product
from .base import BasePage
from .cms import RTE_ACCORDION_CONTENT

logger = logging.getLogger(__name__)

VISIBLE_TIMEOUT = 10_000

HEADER_NAVIGATION = {
    Product.WALKING: [
        "Destinations",
        "Holiday Types",
        "Lakes and Mountains",
        "Holiday by Train",
        "Inspire Me",
        "Deals and Offers",
    ],
    Product.SKI: ["Destinations", "Holiday Types", "Ski Chalets", "Late Ski Deals"],
    Product.LAPLAND: [
        "Destinations",
        "Excursions",
        "Santa Breaks",
        "Lapland deals & offers",
        "Insider Guides",
        "Lapland late Deals",
    ],
}

FOOTER_COMMON_LINKS = ["Manage my booking", "Agent login", "Help and FAQs", "Contact us", "About Us"]

FOOTER_PRODUCT_LINKS = {
    Product.WALKING: ["Walking With Inghams", "Walking Deals & offers"],
    Product.SKI: ["Ski Holidays", "Ski deals & offers"],
    Product.LAPLAND: ["Lapland Excursions", "Lapland deals & offers"],
}

FOOTER_BRANDS = ["Ski", "Walking", "Lapland"]

FOOTER_CONTENT_LINKS = [
    "Terms and conditions",
    "Privacy policy",
    "Modern Slavery statement",
    "Accessibility",
    "Sitemap",
    "Cookie settings",
]

BRAND_DETAILS = (
    "Inghams is a brand of Hotelplan Limited, “part of the Hotelplan UK Group” © 2024. "
    "All Rights Reserved. Registered in England and Wales as Hotelplan Ltd. Registered No 350786. "
    "ATOL 0025. ABTA V4871. VAT No: GB 217 4698 42."
)

ACCORDION_TITLES = ["RTE Test Accordion Item", "Image Carousel Test Accordion Item"]


def _site_product(product: Product) -> Product:
    # Santa breaks live on the Lapland site
    return Product.LAPLAND if product is Product.SANTA else product


class GeographyPage(BasePage):
    """Header, footer, hero, at-a-glance and accordion checks of a destination page."""

    more_info_selector = '//a[contains(@class,"more-info")]'

    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.header_home_icon = page.locator('//div[@class="c-home-menu-wrapper"]')
        self.header_logo = page.locator('//a[@class="c-brand__logo"]')
        self.header_product = page.locator('//span[@class="c-brand__product"]')
        self.header_navigation = page.locator('//nav[@data-module="navigation"]')
        self.header_contact = page.locator('//div[@class="c-brand-contact"]')
        self.header_user = page.locator('//span[@class="c-user"]')

        footer = '//footer[contains(@class,"c-footer")]//div[@class="container"]'
        brands = '//div[contains(@class,"c-footer__brand u-margin-top u-margin-bottom")]'
        self.footer_links = page.locator(f'{footer}//div[contains(@class,"c-footer__links")]')
        self.footer_socials = page.locator(f'{footer}//div[contains(@class,"c-footer__socials")]')
        self.footer_brands = page.locator(brands)
        self.footer_brand_symbols = [
            page.locator(f'{brands}//span[@class="s-symbol s-{name}"]') for name in ("ski", "walking", "lapland")
        ]
        self.footer_content_links = page.locator('//div[@class="c-footer__content-links"]')
        self.footer_brand_details = page.locator('//div[@class="c-footer__content"]//p[contains(text(),"Inghams")]')

        self.hero_banner = page.locator('//div[contains(@class,"c-hero ")]')
        self.at_a_glance = page.locator('//div[@class="c-geography-context__glance"]')
        self.at_a_glance_content = page.locator('//div[contains(@class,"glance-content")]')
        self.at_a_glance_more_info = page.locator(self.more_info_selector).first
        self.accordion = page.locator('//div[@class="c-accordion"]')

    def _check_header_frame(self, product: Product, navigation_visible: bool) -> None:
        for locator in (self.header_home_icon, self.header_logo, self.header_product, self.header_contact, self.header_user):
            expect(locator).to_be_visible(timeout=VISIBLE_TIMEOUT)
        if navigation_visible:
            expect(self.header_navigation).to_be_visible(timeout=VISIBLE_TIMEOUT)
        else:
            expect(self.header_navigation).to_be_hidden(timeout=VISIBLE_TIMEOUT)
        expect(self.header_product).to_contain_text(_site_product(product).name)

    def check_header(self, product: Product) -> None:
        product = _site_product(product)
        self._check_header_frame(product, navigation_visible=True)
        for item in HEADER_NAVIGATION[product]:
            expect(self.header_navigation).to_contain_text(item)

    def check_header_not_visible(self, product: Product) -> None:
        """Header after the default program has been removed: no navigation."""
        product = _site_product(product)
        self._check_header_frame(product, navigation_visible=False)
        for item in HEADER_NAVIGATION[product]:
            expect(self.header_navigation).not_to_contain_text(item)

    def _check_footer_frame(self, socials_visible: bool) -> None:
        expect(self.footer_links).to_be_visible(timeout=VISIBLE_TIMEOUT)
        if socials_visible:
            expect(self.footer_socials).to_be_visible(timeout=VISIBLE_TIMEOUT)
        else:
            expect(self.footer_socials).to_be_hidden(timeout=VISIBLE_TIMEOUT)
        expect(self.footer_brands).to_be_visible(timeout=VISIBLE_TIMEOUT)
        for symbol in self.footer_brand_symbols:
            expect(symbol).to_be_visible(timeout=VISIBLE_TIMEOUT)
        expect(self.footer_content_links).to_be_visible(timeout=VISIBLE_TIMEOUT)
        expect(self.footer_brand_details).to_be_visible(timeout=VISIBLE_TIMEOUT)

        for link in FOOTER_COMMON_LINKS:
            expect(self.footer_links).to_contain_text(link)
        for brand in FOOTER_BRANDS:
            expect(self.footer_brands).to_contain_text(brand)
        for link in FOOTER_CONTENT_LINKS:
            expect(self.footer_content_links).to_contain_text(link)
        expect(self.footer_brand_details).to_contain_text(BRAND_DETAILS)

    def check_footer(self, product: Product) -> None:
        product = _site_product(product)
        self._check_footer_frame(socials_visible=True)
        for link in FOOTER_PRODUCT_LINKS[product]:
            expect(self.footer_links).to_contain_text(link)
        expect(self.footer_socials).to_contain_text(product.display_name)

    def check_footer_not_visible(self, product: Product) -> None:
        product = _site_product(product)
        self._check_footer_frame(socials_visible=False)
        for link in FOOTER_PRODUCT_LINKS[product]:
            expect(self.footer_links).not_to_contain_text(link)

    def check_hero_banner(
        self,
        media: str,
        layout: str | None = None,
        vertical: str | None = None,
        horizontal: str | None = None,
    ) -> None:
        """Banner background is the chosen media and alignment classes match the editor choices."""
        expect(self.hero_banner.first).to_be_visible(timeout=30_000)
        class_attribute = self.hero_banner.first.get_attribute("class") or ""
        style = self.hero_banner.first.get_attribute("style") or ""
        logger.info("Hero class=%s style=%s layout=%s", class_attribute, style, layout)

        assert media.lower() in style.lower(), f"Hero style {style!r} does not reference {media!r}"
        if vertical:
            assert f"alignment-vertical-{vertical.lower()}" in class_attribute
        if horizontal:
            assert f"alignment-horizontal-{horizontal.lower()}" in class_attribute

    def check_at_a_glance(self, target: str, language: str, currency: str, timezone: str) -> None:
        expect(self.at_a_glance).to_be_visible(timeout=30_000)
        glance_text = self.at_a_glance.inner_text()
        if target not in glance_text:
            logger.warning("At a glance does not mention %s", target)

        expect(self.at_a_glance_content).to_be_visible(timeout=30_000)
        for value in (language, currency, timezone):
            expect(self.at_a_glance_content).to_contain_text(value)

        expect(self.at_a_glance_more_info).to_be_visible(timeout=30_000)
        expect(self.at_a_glance_more_info).to_be_enabled()
        assert self.at_a_glance_more_info.get_attribute("href") is not None, "More info link has no href"

    def accordion_attribute_values(self) -> list[str]:
        return self.accordion.evaluate(
            """(root) => Array.from(root.querySelectorAll('*'))
                .flatMap((el) => Array.from(el.attributes).map((attr) => attr.value))"""
        )

    def check_accordions(self, media: dict[str, str] | None = None) -> None:
        """Accordion built by the ECMS editor shows the RTE text and all carousel images."""
        media = media or load_media()
        expect(self.accordion).to_be_visible(timeout=30_000)
        for title in ACCORDION_TITLES:
            expect(self.accordion).to_contain_text(title)
        expect(self.accordion).to_contain_text(RTE_ACCORDION_CONTENT)

        values = self.accordion_attribute_values()
        for key in ("IMAGE1", "IMAGE2", "IMAGE3"):
            name = media[key]
            found = [value for value in values if name in value]
            assert found, f"No accordion element references {name}"
            logger.info("Accordion item found: %s", found[0])


class CountryPage(GeographyPage):
    pass


class RegionPage(GeographyPage):
    more_info_selector = '//div[contains(@class,"glance")]//a[contains(@class,"more-info")]'
