"""Logging setup for the qlparse package."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from qlparse.config import get_config

LOGGER = logging.getLogger("qlparse")


def setup_logging(level: str | None = None) -> logging.Logger:
    """Attach a RichHandler to the package logger at the configured level."""
    if level is None:
        level = get_config()["logging"]["level"]
    LOGGER.setLevel(getattr(logging, str(level).upper()))
    if not any(isinstance(h, RichHandler) for h in LOGGER.handlers):
        LOGGER.addHandler(RichHandler(console=Console(stderr=True)))
    return LOGGER
