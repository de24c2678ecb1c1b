"""Shared pytest configuration."""

pytest_plugins = ["inghams_e2e.plugins.fixtures", "inghams_e2e.plugins.capture"]
