"""Tests for the failure capture plugin and the artifact reader."""

from datetime import datetime
from types import SimpleNamespace
from unittest.mock import MagicMock

from playwright.sync_api import Page

from inghams_e2e.capture import FailureCapture, parse_snapshot
from inghams_e2e.capture.artifacts import snapshot_header
from inghams_e2e.plugins.capture import _capture_snapshot

SNAPSHOT = """
<html>
<head><title>Ski Holidays | Inghams</title></head>
<body>
    <h1>Ski holidays in Austria</h1>
    <h2>Filter by</h2>
    <h2> </h2>
</body>
</html>
"""


def test_parse_snapshot():
    details = parse_snapshot(snapshot_header("https://inghams.example.test/search-results") + SNAPSHOT)
    assert details["url"] == "https://inghams.example.test/search-results"
    assert details["title"] == "Ski Holidays | Inghams"
    assert details["headings"] == ["Ski holidays in Austria", "Filter by"]


def test_parse_snapshot_without_header():
    details = parse_snapshot("<html><body><p>Error</p></body></html>")
    assert details == {"url": None, "title": None, "headings": []}


class TestFailureCapture:
    def test_missing_directory(self, tmp_path):
        assert FailureCapture(tmp_path / "nope").get_failures() == []

    def test_groups_files_by_test_and_time(self, tmp_path):
        (tmp_path / "test_filters_20250101_101500.html").write_text(SNAPSHOT)
        (tmp_path / "test_filters_20250101_101500.png").write_bytes(b"\x89PNG")
        (tmp_path / "test_header_ski_20250102_090000.png").write_bytes(b"\x89PNG")
        (tmp_path / "notes.txt").write_text("ignored")
        (tmp_path / "debug-search.html").write_text("ignored, no timestamp")

        failures = FailureCapture(tmp_path).get_failures()

        assert [f.test_name for f in failures] == ["test_header_ski", "test_filters"]
        header, filters = failures
        assert header.html_path is None
        assert header.screenshot_path.name == "test_header_ski_20250102_090000.png"
        assert filters.captured_at == datetime(2025, 1, 1, 10, 15)
        assert filters.title == "Ski Holidays | Inghams"
        assert filters.html_path is not None and filters.screenshot_path is not None


class TestCapturePlugin:
    def _item(self, tmp_path, page):
        return SimpleNamespace(
            name="test_search[ski]",
            funcargs={"page": page, "config": SimpleNamespace(failures_dir=tmp_path)},
            user_properties=[],
        )

    def test_saves_snapshot_of_page_fixture(self, tmp_path):
        page = MagicMock(spec=Page)
        page.url = "https://inghams.example.test/search-results"
        page.content.return_value = SNAPSHOT
        item = self._item(tmp_path, page)

        _capture_snapshot(item)

        page.screenshot.assert_called_once()
        [artifact] = FailureCapture(tmp_path).get_failures()
        assert artifact.test_name == "test_search_ski"
        assert artifact.url == "https://inghams.example.test/search-results"
        assert ("snapshot_path", str(artifact.html_path)) in item.user_properties

    def test_ignores_non_browser_fixtures(self, tmp_path):
        item = self._item(tmp_path, MagicMock())
        _capture_snapshot(item)
        assert list(tmp_path.iterdir()) == []
