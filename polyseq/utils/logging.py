"""Centralized logging helpers."""

import logging
from typing import Optional

_LOGGER_NAME = "polyseq"


def _root_unconfigured(record: logging.LogRecord) -> bool:
    return not logging.getLogger().handlers


def get_logger(component: Optional[str] = None) -> logging.Logger:
    """
    Return the ``polyseq`` logger, or a child logger for ``component``.

    Only the ``polyseq`` logger carries a handler. Child loggers keep the
    NOTSET level, so their threshold follows the application's setup.
    """
    package_logger = logging.getLogger(_LOGGER_NAME)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        # Root handlers take over once the application configures logging
        handler.addFilter(_root_unconfigured)
        package_logger.addHandler(handler)
    return package_logger.getChild(component) if component else package_logger
