"""Console logging setup for the CLI.

Library modules only call ``logging.getLogger(__name__)``; this module is
where a process decides how those records are shown.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "recreation_catalog"


def configure_logging(level: str | int = logging.INFO, debug: bool = False) -> RichHandler:
    """Send log records to stderr through Rich.

    Args:
        level: Minimum level for our own loggers (name or number).
        debug: Force DEBUG and show source locations.

    Returns:
        The handler attached to the root logger.
    """
    if debug:
        level = logging.DEBUG
    elif isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=debug,
        show_time=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    # Third-party libraries (urllib3, prefect) stay at WARNING unless debugging
    logging.getLogger(PROJECT_PREFIX).setLevel(level)
    if debug:
        root.setLevel(logging.DEBUG)
    return handler
