"""Loaders for the CSV, JSON and XML test data."""

import csv
import json
import logging
from importlib import resources
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from .models import CountryCode, ExploreSearch, Product, SourcePathRow

logger = logging.getLogger(__name__)

MIGRATION_FILES = {
    Product.LAPLAND: "Migration_Lapland.csv",
    Product.SANTA: "Migration_SantasBreaks.csv",
    Product.SKI: "Migration_Ski.csv",
    Product.WALKING: "Migration_Walking.csv",
}

COUNTRY_LIST_FILES = {
    Product.LAPLAND: "DD_List_CountriesLapland.csv",
    Product.SANTA: "DD_List_CountriesSanta.csv",
    Product.SKI: "DD_List_CountriesSki.csv",
    Product.WALKING: "DD_List_CountriesWalking.csv",
}


def _read_rows(path: Path) -> list[dict[str, str]]:
    with open(path, newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        rows = []
        for row in reader:
            cleaned = {key.strip(): (value or "").strip() for key, value in row.items() if isinstance(key, str)}
            # CMS exports end with rows of empty separators
            if any(cleaned.values()):
                rows.append(cleaned)
        return rows


def load_source_paths(path: Path) -> list[SourcePathRow]:
    """Read a migration CSV (`SourcePath`, `Alias`, `Country`, `Region`, `Resort`, optional `RegionCode`, `ResortCode`)."""
    rows = _read_rows(path)
    result = []
    for row in rows:
        source_path = row.get("SourcePath") or row.get("sourcePath")
        if not source_path:
            logger.warning("Skipping row without SourcePath in %s: %s", path.name, row)
            continue
        result.append(SourcePathRow(
            source_path=source_path,
            alias=row.get("Alias", ""),
            country=row.get("Country", ""),
            region=row.get("Region", ""),
            resort=row.get("Resort", ""),
            region_code=row.get("RegionCode", ""),
            resort_code=row.get("ResortCode", ""),
        ))
    logger.debug("Loaded %d source paths from %s", len(result), path)
    return result


def load_migration_rows(data_dir: Path, product: Product) -> list[SourcePathRow]:
    return load_source_paths(data_dir / MIGRATION_FILES[product])


def rows_for_level(rows: list[SourcePathRow], level: str) -> list[SourcePathRow]:
    """Rows whose alias names the given hierarchy level."""
    return [row for row in rows if level in row.alias]


def unique_codes(rows: list[SourcePathRow], level: str) -> list[str]:
    """Distinct, non-empty `RegionCode` or `ResortCode` values in file order."""
    if level not in ("region", "resort"):
        raise ValueError(f"level must be region or resort, got {level!r}")
    codes: list[str] = []
    for row in rows:
        code = getattr(row, f"{level}_code")
        if code and code not in codes:
            codes.append(code)
    return codes


def load_country_codes(path: Path) -> list[CountryCode]:
    """Read a `Name`, `Code` dropdown export."""
    return [CountryCode(name=row["Name"], code=row["Code"]) for row in _read_rows(path)]


def find_country_code(codes: list[CountryCode], country: str) -> str | None:
    """Code of the list entry whose slug equals a migration row's country."""
    for entry in codes:
        if entry.slug == country:
            logger.debug("Country %s -> %s", country, entry.code)
            return entry.code
    return None


def load_explore_searches(path: Path) -> list[ExploreSearch]:
    return [
        ExploreSearch(
            query_type=row.get("query_type", ""),
            destination=row.get("destination") or None,
            trip_type=row.get("trip_type") or None,
            monthyear=row.get("monthyear") or None,
        )
        for row in _read_rows(path)
    ]


def load_media(path: Path | None = None) -> dict[str, str]:
    """Named media items used by the banner and carousel editors."""
    if path is None:
        text = resources.files("inghams_e2e.assets").joinpath("media.json").read_text(encoding="utf-8")
    else:
        text = path.read_text(encoding="utf-8")
    return json.loads(text)


def _element_to_dict(element: Tag) -> dict | str:
    children = [child for child in element.children if isinstance(child, Tag)]
    if not children:
        return element.get_text(strip=True)

    result: dict = dict(element.attrs)
    for child in children:
        value = _element_to_dict(child)
        if child.name in result:
            existing = result[child.name]
            if not isinstance(existing, list):
                result[child.name] = [existing]
            result[child.name].append(value)
        else:
            result[child.name] = value
    return result


def read_content_config(path: Path) -> dict:
    """Parse a CMS `content.config` XML export into nested dicts."""
    soup = BeautifulSoup(path.read_text(encoding="utf-8"), "xml")
    root = next((child for child in soup.children if isinstance(child, Tag)), None)
    if root is None:
        return {}
    return {root.name: _element_to_dict(root)}


def load_content_config(data_dir: Path, source_path: str) -> dict | None:
    """The `content.config` exported beside a source path, or None when it was not exported."""
    path = data_dir / source_path / "content.config"
    if not path.exists():
        logger.debug("No content.config for %s", source_path)
        return None
    return read_content_config(path)


def content_config_name(config: dict) -> str | None:
    """Node name recorded in a parsed `content.config`."""
    for node in config.values():
        if isinstance(node, dict) and isinstance(name := node.get("name"), str):
            return name
    return None
