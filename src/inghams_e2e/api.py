"""REST clients used to cross-check what the site renders."""

import logging
from typing import Any

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from .errors import ApiContractError
from .models import Product

logger = logging.getLogger(__name__)

BRAND_CODES: dict[Product, tuple[str, ...]] = {
    Product.SKI: ("GBINA", "GBINN", "GBIND"),
    Product.WALKING: ("GBINB",),
    Product.LAPLAND: ("GBINA", "GBINS"),
    Product.SANTA: ("GBINA", "GBINS"),
}

CONTENT_TYPE_SUFFIX = {
    Product.LAPLAND: "Lapland",
    Product.SANTA: "Lapland",
    Product.SKI: "Ski",
    Product.WALKING: "Walking",
}

LEVELS = ("country", "region", "resort")

_transient = retry(
    retry=retry_if_exception_type(httpx.TransportError),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    reraise=True,
)


def brand_segment(product: Product) -> str:
    """Brand codes as the path segment the API expects, e.g. `GBINA%7CGBINS`."""
    return "%7C".join(BRAND_CODES[product])


def parse_accommodation_names(payload: dict) -> list[str]:
    """Accommodation names from an availability response."""
    items = payload.get("items")
    if not isinstance(items, list):
        raise ApiContractError("Response has no 'items' list")

    names = []
    for index, item in enumerate(items):
        if item.get("accommodationKey") is None:
            raise ApiContractError(f"items[{index}] has no accommodationKey")
        accommodation = item.get("accommodation") or {}
        if not (name := accommodation.get("name")):
            raise ApiContractError(f"items[{index}] has no accommodation name")
        names.append(name)
    return names


def parse_resort_names(payload: dict) -> list[str]:
    """Resort names from a resorts response, flattened across regions."""
    items = payload.get("items")
    if not isinstance(items, list):
        raise ApiContractError("Response has no 'items' list")

    names = []
    for index, item in enumerate(items):
        regions = item.get("regions")
        if not isinstance(regions, list):
            raise ApiContractError(f"items[{index}] has no regions list")
        for region_index, region in enumerate(regions):
            resorts = region.get("resorts")
            if not isinstance(resorts, list) or not resorts:
                raise ApiContractError(f"items[{index}].regions[{region_index}] has no resorts")
            for resort_index, resort in enumerate(resorts):
                if not (name := resort.get("name")):
                    raise ApiContractError(
                        f"items[{index}].regions[{region_index}].resorts[{resort_index}] has no name"
                    )
                names.append(name)
    return names


class _ApiClient:
    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers={"api-key": api_key, "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @_transient
    def _get_json(self, url: str, params: Any = None) -> dict:
        response = self._client.get(url, params=params)
        logger.debug("GET %s -> %s", response.request.url, response.status_code)
        if response.status_code != 200:
            raise ApiContractError(f"GET {response.request.url} returned {response.status_code}")
        return response.json()


class AvailabilityClient(_ApiClient):
    """Client for `/api/Availability/ING/{brandCodes}/...` on the PCMS host."""

    def _url(self, product: Product, resource: str, query: str) -> str:
        query = query.lstrip("?")
        return f"/api/Availability/ING/{brand_segment(product)}/{resource}?{query}"

    def accommodations(self, product: Product, query: str = "") -> dict:
        return self._get_json(self._url(product, "accommodations", query))

    def resorts(self, product: Product, query: str = "") -> dict:
        return self._get_json(self._url(product, "resorts", query))

    def accommodation_names(self, product: Product, query: str = "") -> list[str]:
        names = parse_accommodation_names(self.accommodations(product, query))
        logger.info("API returned %d %s accommodations", len(names), product.display_name)
        return names

    def resort_names(self, product: Product, query: str = "") -> list[str]:
        names = parse_resort_names(self.resorts(product, query))
        logger.info("API returned %d %s resorts", len(names), product.display_name)
        return names


class DeliveryClient(_ApiClient):
    """Client for the PCMS content delivery API."""

    def content_by_code(self, product: Product, level: str, code: str) -> dict:
        params = [
            ("filter", f"product:{product.value}"),
            ("filter", f"{level}Code:{code}"),
            ("skip", "0"),
            ("take", "10"),
            ("fields", "properties[$all]"),
        ]
        return self._get_json("/umbraco/delivery/api/v2/content", params=params)

    def check_code(self, product: Product, level: str, code: str) -> dict:
        """Assert exactly one content item carries the code; returns it."""
        if level not in LEVELS:
            raise ValueError(f"level must be one of {LEVELS}, got {level!r}")

        body = self.content_by_code(product, level, code)
        items = body.get("items")
        if not isinstance(items, list):
            raise ApiContractError("Response has no 'items' list")
        if len(items) != 1:
            raise ApiContractError(f"Expected 1 item for {level}Code {code}, got {len(items)}")

        content = items[0]
        expected_type = f"{level}{CONTENT_TYPE_SUFFIX[product]}"
        if content.get("contentType") != expected_type:
            raise ApiContractError(f"contentType is {content.get('contentType')!r}, expected {expected_type!r}")

        for key in ("name", "createDate", "updateDate", "route", "id"):
            if content.get(key) is None:
                raise ApiContractError(f"Content item has no {key}")

        properties = content.get("properties") or {}
        actual = properties.get(f"{level}Code")
        if actual != code:
            raise ApiContractError(f"properties.{level}Code is {actual!r}, expected {code!r}")
        return content
