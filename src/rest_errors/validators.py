from __future__ import annotations

import logging

import pandas as pd

from .error_codes import ErrorGroup, RestServiceErrorCode


class ValidationError(Exception):
    """Raised when catalog data fails validation."""


REQUIRED_COLUMNS = {"code", "group", "http_status", "log_level", "description"}


def validate_required_columns(df: pd.DataFrame, required: set[str]) -> None:
    """
    Validate that DataFrame contains all required columns.
    """
    missing = required - set(df.columns)
    if missing:
        raise ValidationError(f"Missing required columns: {sorted(missing)}")


def validate_catalog_schema(
    df: pd.DataFrame,
    logger: logging.Logger | None = None,
    step_name: str = "catalog_schema_validation",
) -> None:
    """
    Validate an error code catalog DataFrame.

    Checks:
        - required columns exist
        - every code and group is a known enum value
        - codes are unique
    """
    if logger:
        logger.info(
            "Validating catalog schema",
            extra={"event": f"validate_{step_name}", "rows": len(df)},
        )

    validate_required_columns(df, REQUIRED_COLUMNS)

    known_codes = {code.value for code in RestServiceErrorCode}
    unknown_codes = sorted(set(df["code"]) - known_codes)
    if unknown_codes:
        raise ValidationError(f"Unknown error codes in catalog: {unknown_codes}")

    known_groups = {group.value for group in ErrorGroup}
    unknown_groups = sorted(set(df["group"]) - known_groups)
    if unknown_groups:
        raise ValidationError(f"Unknown error groups in catalog: {unknown_groups}")

    duplicated = sorted(df.loc[df["code"].duplicated(), "code"].unique())
    if duplicated:
        raise ValidationError(f"Duplicate error codes in catalog: {duplicated}")

    if logger:
        logger.info(
            "Catalog schema validated successfully",
            extra={"event": f"validate_{step_name}_success"},
        )
