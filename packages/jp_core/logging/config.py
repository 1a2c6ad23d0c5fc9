import logging
import logging.config
import os
from typing import Optional


LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] [%(filename)s:%(lineno)d] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def build_logging_config(level: str = "INFO", log_dir: Optional[str] = None) -> dict:
    """
    Build a dictConfig mapping.
    File handlers (all + error-only, rotated at midnight) are added only when log_dir is given.
    """
    handlers = {
        "console": {
            "level": level.upper(),
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    }

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers["file_app"] = {
            "level": "DEBUG",
            "class": "logging.handlers.TimedRotatingFileHandler",
            "filename": os.path.join(log_dir, "jobapp.log"),
            "when": "midnight",
            "interval": 1,
            "backupCount": 30,
            "encoding": "utf-8",
            "formatter": "standard",
        }
        handlers["file_error"] = {
            "level": "ERROR",
            "class": "logging.handlers.TimedRotatingFileHandler",
            "filename": os.path.join(log_dir, "jobapp.error.log"),
            "when": "midnight",
            "interval": 1,
            "backupCount": 30,
            "encoding": "utf-8",
            "formatter": "standard",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": LOG_FORMAT,
                "datefmt": LOG_DATEFMT,
            },
        },
        "handlers": handlers,
        "root": {
            "handlers": list(handlers.keys()),
            "level": "DEBUG",
        },
    }

def setup_logging(level: str = "INFO", log_dir: Optional[str] = None):
    """Apply logging configuration."""
    logging.config.dictConfig(build_logging_config(level=level, log_dir=log_dir))

def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with standard configuration."""
    # Ensure configuration is applied at least once
    if not logging.getLogger().handlers:
        setup_logging()

    return logging.getLogger(name)
