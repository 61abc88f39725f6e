from __future__ import annotations

import logging
from typing import Dict, List

import pandas as pd

from .classifier import DEFAULT_CLASSIFIER, ErrorCodeClassifier
from .error_codes import ERROR_CODE_DESCRIPTIONS, ErrorGroup, RestServiceErrorCode
from .severity import http_status_for, log_level_for

CATALOG_COLUMNS = ["code", "group", "http_status", "log_level", "description"]

_GROUP_TITLES: Dict[ErrorGroup, str] = {
    ErrorGroup.BAD_REQUEST: "Bad Request (caller fault)",
    ErrorGroup.INTERNAL_SERVER_ERROR: "Internal Server Error (server fault)",
    ErrorGroup.UNKNOWN_ERROR_CODE: "Unknown Error Code (unclassified)",
}


def catalog_entry(
    code: RestServiceErrorCode,
    classifier: ErrorCodeClassifier = DEFAULT_CLASSIFIER,
) -> Dict[str, object]:
    """
    Describe a single code: its group and how boundary layers treat it.
    """
    group = classifier.classify(code)
    return {
        "code": code.value,
        "group": group.value,
        "http_status": http_status_for(group),
        "log_level": logging.getLevelName(log_level_for(group)),
        "description": ERROR_CODE_DESCRIPTIONS.get(code, ""),
    }


def build_error_code_catalog(classifier: ErrorCodeClassifier = DEFAULT_CLASSIFIER) -> pd.DataFrame:
    """
    One row per RestServiceErrorCode, in declaration order.

    Columns: code, group, http_status, log_level, description.
    """
    rows: List[Dict[str, object]] = [catalog_entry(code, classifier) for code in RestServiceErrorCode]
    return pd.DataFrame(rows, columns=CATALOG_COLUMNS)


def render_catalog_markdown(catalog_df: pd.DataFrame) -> str:
    """
    Render the catalog as markdown, one table per error group.
    Groups with no codes are skipped.
    """
    sections = ["# REST Service Error Codes", ""]

    for group in ErrorGroup:
        rows = catalog_df[catalog_df["group"] == group.value]
        if rows.empty:
            continue

        sections.append(f"## {_GROUP_TITLES[group]}")
        sections.append("")
        sections.append("| Code | HTTP status | Log level | Description |")
        sections.append("|---|---:|---|---|")
        for row in rows.itertuples(index=False):
            sections.append(
                f"| `{row.code}` | {row.http_status} | {row.log_level} | {row.description} |"
            )
        sections.append("")

    return "\n".join(sections)
