"""Browser context defaults for the live-site tests."""

import pytest


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args, environment_urls):
    """Relative navigation (`page.goto("/")`) targets the selected environment's public site."""
    return {
        **browser_context_args,
        "base_url": browser_context_args.get("base_url") or environment_urls.inghams,
        "viewport": browser_context_args.get("viewport") or {"width": 1440, "height": 900},
    }
