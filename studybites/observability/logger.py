"""
Logger configuration.

Provides a configured root logger with ISO timestamps for CLI and worker runs.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """
    Configure Python logging with ISO timestamp and structured format.

    Args:
        level: Root log level name (DEBUG, INFO, WARNING, ERROR)
    """
    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(level.upper())
    root_logger.addHandler(handler)

    # LLM client libraries log every request at INFO
    for noisy in ("httpx", "httpcore", "urllib3", "google", "langchain_google_genai"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get configured logger.

    Args:
        name: Logger name (usually __name__)

    Returns:
        logging.Logger: Configured logger instance
    """
    return logging.getLogger(name)
