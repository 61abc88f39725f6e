from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


class ConfigError(RuntimeError):
    """Raised when required configuration is missing or invalid."""


LOG_LEVEL_ENV = "REST_ERRORS_LOG_LEVEL"
CATALOG_CSV_ENV = "REST_ERRORS_CATALOG_CSV"
CATALOG_MD_ENV = "REST_ERRORS_CATALOG_MD"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Attributes:
        level: stdlib logging level used by configure_logger.
    """
    level: int = logging.INFO


@dataclass(frozen=True)
class CatalogConfig:
    """
    Output locations for the generated error code catalog.

    Attributes:
        output_csv_path: CSV export of the catalog.
        output_md_path: Markdown rendering of the catalog.
    """
    output_csv_path: Path = Path("data/error_codes.csv")
    output_md_path: Path = Path("docs/error_codes.md")


@dataclass(frozen=True)
class AppConfig:
    logging: LoggingConfig
    catalog: CatalogConfig


def parse_log_level(value: str) -> int:
    """
    Map a level name such as "debug" or "ERROR" to its logging constant.

    Raises:
        ConfigError: If the name is not a standard logging level.
    """
    level = _LEVELS.get(value.strip().upper())
    if level is None:
        raise ConfigError(
            f"Invalid log level {value!r}; expected one of {sorted(_LEVELS)}."
        )
    return level


def load_logging_config_from_env(env_var_name: str = LOG_LEVEL_ENV) -> LoggingConfig:
    load_dotenv()
    raw = os.getenv(env_var_name)
    if not raw:
        return LoggingConfig()
    return LoggingConfig(level=parse_log_level(raw))


def load_catalog_config_from_env() -> CatalogConfig:
    load_dotenv()
    defaults = CatalogConfig()
    csv_path = os.getenv(CATALOG_CSV_ENV)
    md_path = os.getenv(CATALOG_MD_ENV)
    return CatalogConfig(
        output_csv_path=Path(csv_path) if csv_path else defaults.output_csv_path,
        output_md_path=Path(md_path) if md_path else defaults.output_md_path,
    )


def load_app_config() -> AppConfig:
    """
    Construct and return the full application configuration.

    Raises:
        ConfigError: If an environment value is present but invalid.
    """
    return AppConfig(
        logging=load_logging_config_from_env(),
        catalog=load_catalog_config_from_env(),
    )
