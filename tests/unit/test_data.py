"""Tests for the CSV, JSON and XML loaders."""

import pytest

from inghams_e2e.data import (
    find_country_code,
    load_country_codes,
    load_explore_searches,
    load_media,
    load_migration_rows,
    load_source_paths,
    content_config_name,
    load_content_config,
    read_content_config,
    rows_for_level,
    unique_codes,
)
from inghams_e2e.models import Product

MIGRATION_CSV = (
    "\ufeffSourcePath,Alias,Country,Region,Resort\n"
    "home/ski-resorts/austria,countrySki,austria,,\n"
    "home/ski-resorts/austria/tyrol,regionSki,austria,tyrol,\n"
    "home/ski-resorts/austria/tyrol/solden,resortSki,austria,tyrol,solden\n"
    ",,,,\n"
    ",countrySki,france,,\n"
)


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


class TestMigrationRows:
    def test_load_skips_blank_and_pathless_rows(self, tmp_path):
        rows = load_source_paths(write(tmp_path, "Migration_Ski.csv", MIGRATION_CSV))
        assert [row.source_path for row in rows] == [
            "home/ski-resorts/austria",
            "home/ski-resorts/austria/tyrol",
            "home/ski-resorts/austria/tyrol/solden",
        ]
        assert rows[2].resort == "solden"

    def test_rows_for_level(self, tmp_path):
        rows = load_source_paths(write(tmp_path, "Migration_Ski.csv", MIGRATION_CSV))
        assert [row.region for row in rows_for_level(rows, "region")] == ["tyrol"]
        assert [row.level for row in rows] == ["country", "region", "resort"]

    def test_load_by_product(self, tmp_path):
        write(tmp_path, "Migration_SantasBreaks.csv", "SourcePath,Alias\nhome/laplandholidays/sweden,countryLapland\n")
        rows = load_migration_rows(tmp_path, Product.SANTA)
        assert rows[0].alias == "countryLapland"


class TestCountryCodes:
    def test_slug_match(self, tmp_path):
        codes = load_country_codes(write(tmp_path, "DD.csv", "Name,Code\nAustria,AT\nBosnia/Herzegovina,BA\n"))
        assert find_country_code(codes, "austria") == "AT"
        assert find_country_code(codes, "bosnia-herzegovina") == "BA"

    def test_no_match(self, tmp_path):
        codes = load_country_codes(write(tmp_path, "DD.csv", "Name,Code\nAustria,AT\n"))
        assert find_country_code(codes, "andorra") is None


def test_explore_searches_keep_empty_fields_as_none(tmp_path):
    path = write(
        tmp_path,
        "searchdata.csv",
        "query_type,destination,trip_type,monthyear\nfull,Peru,Walking,May 2026\nkeyword,,Cycling,\n",
    )
    searches = load_explore_searches(path)
    assert searches[0].destination == "Peru"
    assert searches[1].destination is None
    assert searches[1].monthyear is None
    assert searches[1].trip_type == "Cycling"


def test_packaged_media_names():
    media = load_media()
    assert set(media) >= {"IMAGE1", "IMAGE2", "IMAGE3"}


def test_media_from_file(tmp_path):
    path = write(tmp_path, "media.json", '{"IMAGE1": "one.jpg"}')
    assert load_media(path) == {"IMAGE1": "one.jpg"}


def test_content_config(tmp_path):
    path = write(
        tmp_path,
        "content.config",
        '<?xml version="1.0" encoding="utf-8"?>\n'
        '<content id="12"><name>Austria</name><codes><code>AT</code><code>ATX</code></codes></content>',
    )
    assert read_content_config(path) == {
        "content": {"id": "12", "name": "Austria", "codes": {"code": ["AT", "ATX"]}},
    }


CODED_CSV = (
    "SourcePath,Alias,Country,Region,Resort,RegionCode,ResortCode\n"
    "home/austria,countryWalking,austria,,,,\n"
    "home/austria/tyrol,regionWalking,austria,tyrol,,TYR,\n"
    "home/austria/tyrol/mayrhofen,resortWalking,austria,tyrol,mayrhofen,TYR,MAY\n"
    "home/austria/salzburg/zell,resortWalking,austria,salzburg,zell,SBG,ZEL\n"
)


class TestHierarchyCodes:
    def test_codes_are_carried_on_rows(self, tmp_path):
        rows = load_source_paths(write(tmp_path, "Migration_Walking.csv", CODED_CSV))
        assert (rows[2].region_code, rows[2].resort_code) == ("TYR", "MAY")
        assert (rows[0].region_code, rows[0].resort_code) == ("", "")

    def test_files_without_code_columns(self, tmp_path):
        rows = load_source_paths(write(tmp_path, "Migration_Ski.csv", MIGRATION_CSV))
        assert all(row.region_code == "" and row.resort_code == "" for row in rows)

    def test_unique_codes_keep_file_order(self, tmp_path):
        rows = load_source_paths(write(tmp_path, "Migration_Walking.csv", CODED_CSV))
        assert unique_codes(rows, "region") == ["TYR", "SBG"]
        assert unique_codes(rows, "resort") == ["MAY", "ZEL"]

    def test_unique_codes_rejects_country(self):
        with pytest.raises(ValueError, match="region or resort"):
            unique_codes([], "country")


class TestExportedContentConfig:
    def test_loaded_beside_source_path(self, tmp_path):
        node = tmp_path / "home" / "austria" / "tyrol"
        node.mkdir(parents=True)
        write(node, "content.config", '<content alias="regionWalking"><name>Tyrol</name></content>')

        config = load_content_config(tmp_path, "home/austria/tyrol")
        assert content_config_name(config) == "Tyrol"

    def test_missing_export(self, tmp_path):
        assert load_content_config(tmp_path, "home/austria/tyrol") is None

    def test_config_without_name(self):
        assert content_config_name({"content": {"id": "12", "codes": {"code": "AT"}}}) is None
