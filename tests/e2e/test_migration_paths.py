"""Migrated CMS source paths resolve on the public site and match the PCMS delivery API."""

import pytest

from inghams_e2e.config import load_config
from inghams_e2e.data import (
    COUNTRY_LIST_FILES,
    MIGRATION_FILES,
    content_config_name,
    find_country_code,
    load_content_config,
    load_country_codes,
    load_source_paths,
    rows_for_level,
    unique_codes,
)
from inghams_e2e.models import Product
from inghams_e2e.source_paths import check_source_path

pytestmark = [pytest.mark.e2e, pytest.mark.uat]

DATA_DIR = load_config().data_dir


def _rows(product: Product, level: str | None = None):
    path = DATA_DIR / MIGRATION_FILES[product]
    if not path.exists():
        return []
    rows = load_source_paths(path)
    return rows_for_level(rows, level) if level else rows


def _country_code(product: Product, country: str) -> str | None:
    path = DATA_DIR / COUNTRY_LIST_FILES[product]
    if not path.exists():
        return None
    return find_country_code(load_country_codes(path), country)


def _cases(level: str | None = None):
    return [
        pytest.param(product, row, id=f"{product.value}:{row.source_path}")
        for product in Product
        for row in _rows(product, level)
    ]


@pytest.mark.parametrize(("product", "row"), _cases())
def test_source_path_resolves(site_page, home_url, product, row):
    check_source_path(site_page, product, row.source_path, home_url)


class TestCountryCrossReference:
    @pytest.mark.parametrize(("product", "row"), _cases("country"))
    def test_country_page_and_code(self, site_page, environment_urls, delivery_client, product, row):
        check_source_path(site_page, product, row.source_path, environment_urls.e_cms)

        if (code := _country_code(product, row.country)) is None:
            pytest.skip(f"{row.country} is not in the {product.display_name} country list")
        content = delivery_client.check_code(product, "country", code)
        assert content["name"]


class TestHierarchyCrossReference:
    @pytest.mark.parametrize(("product", "row"), _cases("region") + _cases("resort"))
    def test_page_and_code(self, site_page, environment_urls, delivery_client, product, row):
        check_source_path(site_page, product, row.source_path, environment_urls.e_cms)

        level = row.level
        if not (code := getattr(row, f"{level}_code")):
            pytest.skip(f"No {level} code recorded for {row.source_path}")
        content = delivery_client.check_code(product, level, code)

        exported = load_content_config(DATA_DIR, row.source_path)
        if exported is not None and (name := content_config_name(exported)):
            assert content["name"] == name, f"PCMS name {content['name']!r} != exported {name!r}"


def _hierarchy_codes(level: str):
    return [
        pytest.param(product, code, id=f"{product.value}:{code}")
        for product in Product
        for code in unique_codes(_rows(product), level)
    ]


@pytest.mark.parametrize(("product", "code"), _hierarchy_codes("region"))
def test_pcms_region_code(delivery_client, product, code):
    delivery_client.check_code(product, "region", code)


@pytest.mark.parametrize(("product", "code"), _hierarchy_codes("resort"))
def test_pcms_resort_code(delivery_client, product, code):
    delivery_client.check_code(product, "resort", code)


def _unique_codes(product: Product):
    path = DATA_DIR / COUNTRY_LIST_FILES[product]
    if not path.exists():
        return []
    return sorted({entry.code for entry in load_country_codes(path)})


@pytest.mark.parametrize(
    ("product", "code"),
    [pytest.param(product, code, id=f"{product.value}:{code}") for product in Product for code in _unique_codes(product)],
)
def test_pcms_country_code(delivery_client, product, code):
    delivery_client.check_code(product, "country", code)
