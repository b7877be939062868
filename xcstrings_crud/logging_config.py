"""Logging setup shared by the CLI and the tool server."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import config


def setup_logging(level: Optional[str] = None) -> None:
    """Route package logs to stderr through rich, keeping stdout for JSON output."""
    logging.basicConfig(
        level=(level or config.log_level).upper(),
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
