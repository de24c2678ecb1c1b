"""Inghams E2E - browser tests for the Inghams CMS back-offices and public site."""

__version__ = "0.1.0"
