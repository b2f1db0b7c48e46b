"""Centralised logger configuration.

Usage::

    from themr_lite.logging_utils import get_logger
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
import os

DEFAULT_LEVEL = os.getenv("THEMR_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = DEFAULT_LEVEL) -> None:
    """Configure the root logger once for scripts and notebooks."""

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["LOG_FORMAT", "get_logger", "setup_logging"]
