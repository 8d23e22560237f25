"""Logging setup for the server process."""

from __future__ import annotations
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the package logger.

    Call sites put their context (provider, model, status, error) in the
    message itself, so the format only adds time, level and logger name.
    Handlers are attached once; later calls only adjust the level so that
    repeated app creation (tests, reloads) does not duplicate output.

    Args:
        level: Log level name (e.g., "INFO", "DEBUG")
    """
    package_logger = logging.getLogger("prompt_optimizer_server")
    package_logger.setLevel(level.upper())

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
