from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _level(name: str | None, fallback: int = logging.INFO) -> int:
    if not name:
        return fallback
    return getattr(logging, name.upper(), fallback)


def configure_logging(level: str = "INFO") -> None:
    # force: repeated in-process invocations must pick up the new level
    logging.basicConfig(level=_level(level), format=LOG_FORMAT, force=True)


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(_level(level, logger.level))
    return logger
