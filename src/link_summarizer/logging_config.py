"""Structured JSON logging configuration.

Emits one JSON object per record on stdout with GCP-compatible field names, so
Cloud Run (and most log shippers) pick up ``severity`` and ``message`` directly.
Structured ``extra={...}`` fields are merged into the same object.

Usage:
    from link_summarizer.logging_config import configure_logging
    configure_logging(settings.log_level)
"""

import copy
import logging
import logging.config

SERVICE_NAME = "link-summarizer"

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": SERVICE_NAME,
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: str = "INFO") -> None:
    """Apply structured JSON logging at ``level`` on the root logger.

    Call once at application startup (the FastAPI lifespan does).
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    config["root"]["level"] = level.upper()
    logging.config.dictConfig(config)
