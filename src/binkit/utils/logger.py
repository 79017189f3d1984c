"""Logging setup for binkit."""

import logging
from pathlib import Path
from typing import Optional, Union

from binkit.config import get_settings

LOGGER_NAME = "binkit"


def setup_logger(
    level: Optional[str] = None,
    log_path: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Attach handlers to the package logger.

    Handlers are only added the first time; later calls just update the level.

    Args:
        level: Log level name (defaults to Settings.log_level)
        log_path: Optional file to mirror log output into

    Returns:
        logging.Logger: The configured "binkit" logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or get_settings().log_level).upper())
    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(ch)
        if log_path:
            log_path = Path(log_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_path, encoding="utf-8")
            fh.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
            logger.addHandler(fh)
    return logger
