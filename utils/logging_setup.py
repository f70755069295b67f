from __future__ import annotations

import logging
import sys
from typing import Any

from config.settings import get_settings


_INITIALIZED: bool = False

# Query counts render as matched/total, e.g. "query=odd 2/4"
LOG_FORMAT = (
    "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s "
    "(exercise=%(exercise)s query=%(query)s %(matched)s/%(total)s)"
)
LOG_DATEFMT = "%H:%M:%S"


class SafeExtraFormatter(logging.Formatter):
    """Formatter that tolerates missing extra fields by injecting defaults."""

    DEFAULTS: dict[str, Any] = {
        "exercise": "-",
        "query": "-",
        "matched": "-",
        "total": "-",
    }

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        for key, value in self.DEFAULTS.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return super().format(record)


def init_logging(level: str | None = None) -> None:
    global _INITIALIZED
    if _INITIALIZED:
        return

    settings = get_settings()
    log_level_str = (level or settings.log_level).upper()
    log_level = getattr(logging, log_level_str, logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not root_logger.handlers:
        # stdout carries the exercise transcript
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(log_level)
        formatter = SafeExtraFormatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    _INITIALIZED = True
