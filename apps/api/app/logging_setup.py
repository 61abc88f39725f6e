from __future__ import annotations

from rest_errors.config import load_logging_config_from_env
from rest_errors.logging_utils import configure_logger

APP_LOGGER_NAMES = ("apps.api", "rest_errors")


def configure_app_logging() -> None:
    """
    Attach JSON handlers to the application loggers at the configured level.
    """
    level = load_logging_config_from_env().level
    for name in APP_LOGGER_NAMES:
        configure_logger(name, level=level)
