"""Pytest plugins: fixtures for the page objects and failure capture."""
