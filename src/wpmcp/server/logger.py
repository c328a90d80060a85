"""
File-only logging for the MCP server

stdout carries JSON-RPC frames, so no handler here may write to it. Every
logger lives under the "wpmcp" namespace and writes to two files:
  LOG_FILE   everything at or above Config.LOG_LEVEL
  ERROR_LOG  errors only, with tracebacks from handler failures
"""

import logging
from pathlib import Path

from wpmcp.config import Config

NAMESPACE = "wpmcp"
LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler(path: Path, level: int) -> logging.FileHandler:
    # delay=True: nothing is created on disk until the first record
    handler = logging.FileHandler(path, encoding="utf-8", delay=True)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def get_logger(name: str) -> logging.Logger:
    """Return the wpmcp.<name> logger, attaching the file handlers once."""
    logger = logging.getLogger(f"{NAMESPACE}.{name}")
    if logger.handlers:
        return logger

    Config.ensure_dirs()
    logger.setLevel(getattr(logging, Config.LOG_LEVEL, logging.INFO))
    logger.addHandler(_file_handler(Config.LOG_FILE, logging.DEBUG))
    logger.addHandler(_file_handler(Config.ERROR_LOG, logging.ERROR))
    logger.propagate = False
    return logger
