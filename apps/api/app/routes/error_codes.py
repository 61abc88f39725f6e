"""
HTTP routes exposing the error code catalog.
No classification logic lives here.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, status

from apps.api.app.openapi_examples import standard_error_responses
from apps.api.app.schemas.error_codes import ErrorCodeOut
from apps.api.app.schemas.errors import ErrorResponse
from rest_errors.catalog import catalog_entry
from rest_errors.classifier import DEFAULT_CLASSIFIER, ErrorCodeClassifier
from rest_errors.error_codes import ErrorGroup, RestServiceErrorCode

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/error-codes",
    tags=["error-codes"],
)

_ERROR_RESPONSES = {
    code: {"model": ErrorResponse, **doc}
    for code, doc in standard_error_responses().items()
}


def get_classifier(request: Request) -> ErrorCodeClassifier:
    """
    Classifier stored on application state at startup, or the process-wide one
    when startup hooks have not run (e.g. bare TestClient contexts).
    """
    classifier = getattr(request.app.state, "classifier", None)
    if classifier is not None:
        return classifier
    return DEFAULT_CLASSIFIER


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    summary="List error codes and their groups",
    response_model=list[ErrorCodeOut],
    responses=_ERROR_RESPONSES,
)
def list_error_codes(
    group: Optional[ErrorGroup] = None,
    classifier: ErrorCodeClassifier = Depends(get_classifier),
):
    entries = [catalog_entry(code, classifier) for code in RestServiceErrorCode]
    if group is not None:
        entries = [entry for entry in entries if entry["group"] == group.value]

    logger.debug(
        "error_codes_listed",
        extra={"event": "error_codes.list", "rows": len(entries)},
    )
    return entries


@router.get(
    "/{code}",
    status_code=status.HTTP_200_OK,
    summary="Describe one error code",
    response_model=ErrorCodeOut,
    responses=_ERROR_RESPONSES,
)
def get_error_code(
    code: RestServiceErrorCode,
    classifier: ErrorCodeClassifier = Depends(get_classifier),
):
    return catalog_entry(code, classifier)
