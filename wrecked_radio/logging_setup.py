from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Optional

from .config import LOG_LEVELS, load_radio_config

LOGGER_NAME = "wrecked_radio"
LOG_FORMAT = "ts=%(asctime)s level=%(levelname)s msg=%(message)s"
_HANDLER: Optional[logging.Handler] = None


def configure_logging(config: Optional[Dict] = None) -> Dict[str, str]:
    """Attach a key-value file handler to the package logger (once)."""
    global _HANDLER
    if config is None:
        config = load_radio_config()
    log_dir = Path(config.get("log_dir") or "data/roaming/logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / "wrecked_radio.log"
    level = str(config.get("log_level") or "INFO").upper()
    if level not in LOG_LEVELS:
        level = "INFO"

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    current = getattr(_HANDLER, "baseFilename", None)
    if _HANDLER is not None and current != os.path.abspath(log_path):
        logger.removeHandler(_HANDLER)
        _HANDLER.close()
        _HANDLER = None
    if _HANDLER is None:
        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        _HANDLER = handler

    return {
        "log_path": str(log_path),
        "format": "kv",
        "handlers": "file",
        "logger_name": LOGGER_NAME,
        "level": level,
    }


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
