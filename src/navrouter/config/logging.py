"""
Logging setup for stdlib logging and loguru.
"""

from __future__ import annotations

import logging
import sys

from loguru import logger

from .models import LoggingConfig


def configure_logging(config: LoggingConfig) -> None:
    logging.basicConfig(level=config.level, format=config.format, force=True)
    logger.remove()
    logger.add(sys.stderr, level=config.level)
