"""Removes the pages the component tests leave behind in the ECMS.

Run on its own after a regression run: ``pytest -m page_cleanup``.
"""

import pytest

from inghams_e2e.setup import cleanup_automation_pages

pytestmark = [pytest.mark.e2e, pytest.mark.page_cleanup]


def test_delete_automation_pages(ecms_page, config):
    removed = cleanup_automation_pages(ecms_page, config)
    assert removed >= 0
