from .config import build_logging_config, setup_logging, get_logger

__all__ = [
    "build_logging_config",
    "setup_logging",
    "get_logger",
]
