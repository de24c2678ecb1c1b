"""Tests for the availability and delivery API clients."""

import httpx
import pytest

from inghams_e2e.api import (
    AvailabilityClient,
    DeliveryClient,
    brand_segment,
    parse_accommodation_names,
    parse_resort_names,
)
from inghams_e2e.errors import ApiContractError
from inghams_e2e.models import Product

BASE_URL = "https://pcms.example.test"


def make_client(cls, handler):
    return cls(BASE_URL, "key-123", transport=httpx.MockTransport(handler))


class TestBrandSegment:
    def test_ski(self):
        assert brand_segment(Product.SKI) == "GBINA%7CGBINN%7CGBIND"

    def test_santa_uses_lapland_codes(self):
        assert brand_segment(Product.SANTA) == brand_segment(Product.LAPLAND) == "GBINA%7CGBINS"


class TestParsers:
    def test_accommodation_names(self):
        payload = {
            "items": [
                {"accommodationKey": "A1", "accommodation": {"name": "Hotel Alpina"}},
                {"accommodationKey": "A2", "accommodation": {"name": "Chalet Rosa"}},
            ]
        }
        assert parse_accommodation_names(payload) == ["Hotel Alpina", "Chalet Rosa"]

    def test_accommodation_without_key(self):
        with pytest.raises(ApiContractError, match=r"items\[1\]"):
            parse_accommodation_names(
                {"items": [{"accommodationKey": "A1", "accommodation": {"name": "Hotel"}}, {"accommodationKey": None}]}
            )

    def test_accommodation_without_name(self):
        payload = {"items": [{"accommodationKey": "A1", "accommodation": {"name": "Hotel"}}, {"accommodationKey": "A2"}]}
        with pytest.raises(ApiContractError, match=r"items\[1\] has no accommodation name"):
            parse_accommodation_names(payload)

    def test_missing_items(self):
        with pytest.raises(ApiContractError):
            parse_accommodation_names({})

    def test_resort_names_flatten_regions(self):
        payload = {
            "items": [
                {"regions": [{"resorts": [{"name": "Solden"}, {"name": "Obergurgl"}]}]},
                {"regions": [{"resorts": [{"name": "Zermatt"}]}, {"resorts": [{"name": "Saas-Fee"}]}]},
            ]
        }
        assert parse_resort_names(payload) == ["Solden", "Obergurgl", "Zermatt", "Saas-Fee"]

    def test_region_without_resorts(self):
        with pytest.raises(ApiContractError, match="no resorts"):
            parse_resort_names({"items": [{"regions": [{"resorts": []}]}]})

    def test_resort_without_name(self):
        payload = {"items": [{"regions": [{"resorts": [{"name": "Solden"}, {"code": "OBG"}]}]}]}
        with pytest.raises(ApiContractError, match=r"resorts\[1\] has no name"):
            parse_resort_names(payload)


class TestAvailabilityClient:
    def test_request_shape(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["api_key"] = request.headers["api-key"]
            return httpx.Response(200, json={"items": [{"accommodationKey": "A1", "accommodation": {"name": "Hotel"}}]})

        with make_client(AvailabilityClient, handler) as client:
            names = client.accommodation_names(Product.WALKING, "?sort=price")

        assert names == ["Hotel"]
        assert seen["url"] == f"{BASE_URL}/api/Availability/ING/GBINB/accommodations?sort=price"
        assert seen["api_key"] == "key-123"

    def test_resorts_path_keeps_encoded_separator(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            return httpx.Response(200, json={"items": []})

        with make_client(AvailabilityClient, handler) as client:
            assert client.resort_names(Product.LAPLAND) == []
        assert "/ING/GBINA%7CGBINS/resorts" in seen["url"]

    def test_non_200_raises(self):
        with make_client(AvailabilityClient, lambda request: httpx.Response(500)) as client:
            with pytest.raises(ApiContractError, match="500"):
                client.accommodations(Product.SKI)

    def test_nameless_accommodation_is_a_contract_failure(self):
        body = {"items": [{"accommodationKey": "A1", "accommodation": {"name": "Hotel"}}, {"accommodationKey": "A2"}]}
        with make_client(AvailabilityClient, lambda request: httpx.Response(200, json=body)) as client:
            with pytest.raises(ApiContractError, match="accommodation name"):
                client.accommodation_names(Product.SKI)


def content_item(**overrides):
    item = {
        "contentType": "countryLapland",
        "name": "Sweden",
        "createDate": "2024-01-01T00:00:00",
        "updateDate": "2024-02-01T00:00:00",
        "route": {"path": "/sweden/"},
        "id": "b7c1",
        "properties": {"countryCode": "SE"},
    }
    item.update(overrides)
    return item


class TestDeliveryClient:
    def test_check_code(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["filters"] = request.url.params.get_list("filter")
            seen["take"] = request.url.params["take"]
            return httpx.Response(200, json={"items": [content_item()]})

        with make_client(DeliveryClient, handler) as client:
            content = client.check_code(Product.SANTA, "country", "SE")

        assert content["name"] == "Sweden"
        assert seen["filters"] == ["product:santa", "countryCode:SE"]
        assert seen["take"] == "10"

    def test_wrong_content_type(self):
        handler = lambda request: httpx.Response(200, json={"items": [content_item(contentType="countrySki")]})
        with make_client(DeliveryClient, handler) as client:
            with pytest.raises(ApiContractError, match="contentType"):
                client.check_code(Product.LAPLAND, "country", "SE")

    def test_more_than_one_item(self):
        handler = lambda request: httpx.Response(200, json={"items": [content_item(), content_item()]})
        with make_client(DeliveryClient, handler) as client:
            with pytest.raises(ApiContractError, match="got 2"):
                client.check_code(Product.LAPLAND, "country", "SE")

    def test_code_mismatch(self):
        handler = lambda request: httpx.Response(200, json={"items": [content_item(properties={"countryCode": "NO"})]})
        with make_client(DeliveryClient, handler) as client:
            with pytest.raises(ApiContractError, match="countryCode"):
                client.check_code(Product.LAPLAND, "country", "SE")

    def test_unknown_level(self):
        with make_client(DeliveryClient, lambda request: httpx.Response(200)) as client:
            with pytest.raises(ValueError, match="level"):
                client.check_code(Product.SKI, "village", "X")
