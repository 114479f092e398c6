"""Application logging utilities."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

_LOGGER_NAME = "lnc_config"
_LOG_FILE_NAME = "lnc-config.log"


def configure_logging(log_directory: Optional[Path] = None) -> logging.Logger:
    """Configure the package logger, optionally mirroring it to a rotating file.

    The first call wins; later calls return the already configured logger.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_directory is not None:
        log_directory.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_directory / _LOG_FILE_NAME,
            maxBytes=1_048_576,
            backupCount=5,
            encoding="utf-8",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.info("Logger initialised; logs available at %s", handler.baseFilename)

    return logger
