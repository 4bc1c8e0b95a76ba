"""
Core logging module.

This module configures the application logging with Loguru.
"""

import logging
import os
import sys
from typing import Optional

from loguru import logger

from urlshortener.core.config import Settings, settings as default_settings

REQUEST_LEVEL = "REQUEST"


class InterceptHandler(logging.Handler):
    """
    Intercept standard logging and redirect to loguru.

    This handler intercepts all standard library logging calls
    and redirects them to loguru's more powerful logging system.
    """

    def emit(self, record: logging.LogRecord) -> None:
        # Try to get corresponding Loguru level or use level number
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the logged message originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def register_request_level() -> None:
    """Register the custom REQUEST level once per process."""
    try:
        logger.level(REQUEST_LEVEL)
    except ValueError:
        logger.level(REQUEST_LEVEL, no=25, color="<green>")


def setup_logging(app_settings: Optional[Settings] = None):
    """
    Configure application logging using Loguru.

    This sets up Loguru with proper formatting, log levels, and handlers,
    and also intercepts standard library logging.
    """
    app_settings = app_settings or default_settings
    level = app_settings.LOG_LEVEL.upper()

    # Remove default handlers
    logger.remove()

    # Add stderr handler for development/debugging
    if app_settings.DEBUG:
        logger.add(
            sys.stderr,
            level=level,
            format=app_settings.LOG_FORMAT,
            backtrace=True,
            diagnose=True,
        )

    if app_settings.LOG_TO_FILE:
        os.makedirs(app_settings.LOG_DIR, exist_ok=True)
        log_file_path = os.path.join(app_settings.LOG_DIR, app_settings.LOG_FILENAME)

        if app_settings.LOG_JSON:
            logger.add(
                log_file_path,
                level=level,
                serialize=True,
                rotation=app_settings.LOG_ROTATION,
                retention=app_settings.LOG_RETENTION,
                compression="gz",
            )
        else:
            logger.add(
                log_file_path,
                level=level,
                format=app_settings.LOG_FORMAT,
                rotation=app_settings.LOG_ROTATION,
                retention=app_settings.LOG_RETENTION,
                compression="gz",
            )

    register_request_level()

    # Intercept standard library logging
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    for name in list(logging.root.manager.loggerDict.keys()):
        logging.getLogger(name).handlers = []
        logging.getLogger(name).propagate = True

    for log_name in ["uvicorn", "uvicorn.access", "uvicorn.error", "fastapi"]:
        logging_logger = logging.getLogger(log_name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.propagate = False

    return logger
