"""
Logging configuration for the application.

Only the ``movies_crud_api`` logger hierarchy is configured here.
Uvicorn sets up its own ``uvicorn.*`` loggers when the server starts,
so leaving the root logger alone keeps the two from printing every
line twice.  Records still propagate to the root logger, which is
where test tooling such as pytest's ``caplog`` listens.
"""

import logging
from pathlib import Path
from typing import Optional

APP_LOGGER_NAME = "movies_crud_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str) -> int:
    """Map a level name to its number, falling back to ``INFO``."""
    numeric_level = logging.getLevelName(level.upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure and return the application logger.

    A console handler, and a file handler when ``logfile`` is given,
    are attached the first time this is called.  Later calls only
    adjust the level, so building several applications in one process
    (as the tests do) does not stack handlers.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Path of a file to append log messages to.
    """
    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(resolve_level(level))
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
