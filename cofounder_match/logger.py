"""Loguru logger shared across the service layer and scripts."""

import sys
from typing import Optional

from loguru import logger

from .config import Settings


def setup_logger(settings: Optional[Settings] = None) -> None:
    settings = settings or Settings.from_env()
    logger.remove()  # drop the default stderr handler
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
            "<level>{message}</level>"
        ),
    )


__all__ = ["logger", "setup_logger"]
