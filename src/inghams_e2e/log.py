"""Rich console and log handler setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()

_configured = False


def setup_logging(level: int | str = logging.INFO) -> None:
    """Route `inghams_e2e` loggers through a RichHandler. Safe to call repeatedly."""
    global _configured

    logger = logging.getLogger("inghams_e2e")
    logger.setLevel(level)
    if _configured:
        return

    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    _configured = True
