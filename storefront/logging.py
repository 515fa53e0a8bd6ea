"""Structured logging helpers."""

from __future__ import annotations

import logging
import sys
from typing import Literal

import structlog


def configure_logging(
    level: int | str = logging.INFO,
    *,
    stream: Literal["stdout", "stderr"] = "stdout",
) -> None:
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.set_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        # The stream is looked up per call; tests swap sys.stdout and sys.stderr.
        logger_factory=lambda *args: structlog.PrintLogger(getattr(sys, stream)),
        cache_logger_on_first_use=False,
    )


logger = structlog.get_logger()

__all__ = ["configure_logging", "logger"]
