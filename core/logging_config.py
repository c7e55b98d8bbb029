# core/logging_config.py

"""
Shared "backoffice" logger.

Logins, guard decisions and Supabase failures all write through this one
logger so a single LOG_LEVEL controls the whole API.
"""

import logging

from core.config import settings

LOGGER_NAME = "backoffice"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s.%(module)s: %(message)s"


def setup_logger(level: str = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    # uvicorn --reload imports this module again
    if not any(getattr(h, "_backoffice", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._backoffice = True
        logger.addHandler(handler)

    return logger


logger = setup_logger()
