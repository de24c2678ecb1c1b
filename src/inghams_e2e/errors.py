"""Exceptions raised by page objects, clients and configuration."""

from pathlib import Path


class InghamsE2EError(Exception):
    """Base class for every error raised by the suite."""


class ConfigError(InghamsE2EError):
    """Configuration is missing or inconsistent."""


class MissingCredentialsError(ConfigError):
    """A back-office login or API key was not provided."""


class ElementNotFoundError(InghamsE2EError):
    """Every locator strategy for an element failed."""

    def __init__(self, target: str, strategies: list[str], screenshot: Path | None = None):
        self.target = target
        self.strategies = strategies
        self.screenshot = screenshot
        message = f"Could not interact with {target} after trying: {', '.join(strategies)}"
        if screenshot:
            message += f" (screenshot: {screenshot})"
        super().__init__(message)


class NoResultsError(InghamsE2EError):
    """Search results never rendered and no "no results" message was shown."""


class FilterError(InghamsE2EError):
    """A search filter could not be applied."""


class GuestCountError(InghamsE2EError):
    """The guests selector did not reach the requested count."""

    def __init__(self, target: int, actual: int, attempts: int):
        self.target = target
        self.actual = actual
        self.attempts = attempts
        super().__init__(f"Failed to set adults to {target} after {attempts} attempts (stuck at {actual})")


class ApiContractError(InghamsE2EError):
    """A REST response did not match the expected shape."""
