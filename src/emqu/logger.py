"""Logging configuration."""

import logging
import sys


def configure_logging(level: str = "WARNING") -> None:
    """Configure root logging on stderr, keeping stdout for command output."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.setLevel(level.upper())
    root_logger.addHandler(handler)

    # Reduce noise from verbose third-party libraries
    for name in ("httpx", "urllib3", "sentence_transformers", "filelock"):
        logging.getLogger(name).setLevel(logging.WARNING)
