from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from .logging_utils import configure_logger
from .validators import validate_catalog_schema


def save_catalog_to_csv(
    catalog_df: pd.DataFrame,
    output_path: Path,
    logger: logging.Logger | None = None,
) -> None:
    """
    Validate the error code catalog and save it to a CSV file.
    Ensures output folder exists and logs the operation using JSON logs.
    """
    _logger = logger or configure_logger()

    validate_catalog_schema(catalog_df, logger=_logger)

    _logger.info(
        "Saving error code catalog to CSV",
        extra={
            "event": "save_catalog_csv",
            "rows": len(catalog_df),
            "output_path": str(output_path),
        },
    )

    output_path.parent.mkdir(parents=True, exist_ok=True)
    catalog_df.to_csv(output_path, index=False, encoding="utf-8-sig")

    _logger.info(
        "Error code catalog saved",
        extra={"event": "save_catalog_csv_success", "output_path": str(output_path)},
    )


def save_catalog_markdown(
    markdown: str,
    output_path: Path,
    logger: logging.Logger | None = None,
) -> None:
    _logger = logger or configure_logger()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(markdown, encoding="utf-8")

    _logger.info(
        "Error code catalog markdown saved",
        extra={"event": "save_catalog_md_success", "output_path": str(output_path)},
    )
