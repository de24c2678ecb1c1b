"""Tests for the signed-in back-office page fixtures."""

from unittest.mock import MagicMock

import pytest

from inghams_e2e.plugins.fixtures import _open_signed_in


@pytest.fixture
def config(tmp_path):
    state = tmp_path / "ecmsUserStorageState.json"
    state.write_text("{}")
    config = MagicMock()
    config.storage_state_path.return_value = state
    return config


@pytest.fixture
def browser():
    return MagicMock()


class TestOpenSignedIn:
    def test_context_closed_after_test(self, browser, config):
        pages = _open_signed_in(browser, {}, config, "ecms", "https://ecms.example.test/umbraco")
        page = next(pages)
        page.goto.assert_called_once_with("https://ecms.example.test/umbraco")
        with pytest.raises(StopIteration):
            next(pages)
        browser.new_context.return_value.close.assert_called_once()

    def test_context_closed_when_navigation_fails(self, browser, config):
        context = browser.new_context.return_value
        context.new_page.return_value.goto.side_effect = TimeoutError("navigation timed out")
        pages = _open_signed_in(browser, {}, config, "ecms", "https://ecms.example.test/umbraco")
        with pytest.raises(TimeoutError):
            next(pages)
        context.close.assert_called_once()

    def test_storage_state_passed_to_context(self, browser, config):
        pages = _open_signed_in(browser, {"locale": "en-GB"}, config, "pcms", "https://pcms.example.test")
        next(pages)
        browser.new_context.assert_called_once_with(
            locale="en-GB", storage_state=str(config.storage_state_path.return_value)
        )
        pages.close()
        browser.new_context.return_value.close.assert_called_once()
