"""
Wire Master - Logging

Console logging for the app, the generator and the export script.
"""

import logging.config
import sys

from .config import settings


def configure_logging(level: str | None = None) -> None:
    level = level or settings.LOG_LEVEL

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,

        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
            },
        },

        "handlers": {
            "console": {
                "level": level,
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": sys.stdout,
            },
        },

        "loggers": {
            "": {
                "handlers": ["console"],
                "level": level,
                "propagate": True
            },
            "uvicorn.access": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False
            },
        }
    }

    logging.config.dictConfig(logging_config)
