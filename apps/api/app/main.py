from __future__ import annotations

import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from rest_errors.classifier import DEFAULT_CLASSIFIER, ErrorCodeClassifier
from rest_errors.error_codes import RestServiceErrorCode
from rest_errors.severity import http_status_for, is_client_error, log_error_code

from .error_codes import code_for_http_status
from .errors import get_request_id, make_error
from .logging_setup import configure_app_logging
from .routes.error_codes import get_classifier, router as error_codes_router
from .routes.health import router as health_router


configure_app_logging()
logger = logging.getLogger("apps.api")

REQUEST_ID_HEADER = "X-Request-ID"

# Do not emit request completion logs for health endpoints
HEALTHCHECK_PATHS = {"/v1/health"}

GENERIC_SERVER_MESSAGE = "Internal Server Error"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    The classifier is immutable, so it is attached once and shared by all requests.
    """
    app.state.classifier = DEFAULT_CLASSIFIER
    logger.info("Error code catalog API started", extra={"event": "app.startup"})
    yield
    logger.info("Error code catalog API stopped", extra={"event": "app.shutdown"})


app = FastAPI(
    title="REST Service Error Codes API",
    version="0.1.0",
    description="Read-only catalog of REST service error codes and their groups",
    lifespan=lifespan,
)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """
    Attach a request id and emit structured lifecycle logs.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    request.state.request_id = request_id

    start = time.perf_counter()
    response = None

    try:
        response = await call_next(request)
        return response

    finally:
        duration_ms = round((time.perf_counter() - start) * 1000.0, 2)
        status_code = getattr(response, "status_code", None)
        path = request.url.path

        if path not in HEALTHCHECK_PATHS:
            logger.info(
                "Request completed",
                extra={
                    "event": "request.completed",
                    "request_id": request_id,
                    "method": request.method,
                    "path": path,
                    "status_code": status_code,
                    "duration_ms": duration_ms,
                },
            )

        if response is not None:
            response.headers[REQUEST_ID_HEADER] = request_id


def _error_response(
    *,
    status_code: int,
    code: RestServiceErrorCode,
    message: str,
    request_id: str,
    classifier: ErrorCodeClassifier,
    details: Optional[Any] = None,
    headers: Optional[dict] = None,
) -> JSONResponse:
    payload = make_error(
        code=code,
        message=message,
        request_id=request_id,
        details=details,
        classifier=classifier,
    ).model_dump()

    return JSONResponse(
        status_code=status_code,
        content=payload,
        headers={**(headers or {}), REQUEST_ID_HEADER: request_id},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    request_id = get_request_id(request)
    classifier = get_classifier(request)
    code = RestServiceErrorCode.INVALID_ARGS

    log_error_code(
        logger,
        code,
        "Request validation failed",
        classifier=classifier,
        event="request.validation_error",
        request_id=request_id,
        method=request.method,
        path=request.url.path,
    )

    return _error_response(
        status_code=422,
        code=code,
        message="Request validation failed",
        request_id=request_id,
        classifier=classifier,
        details={"errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Caller faults keep the framework's 4xx status, detail and headers.
    Anything else answers with the group's status and a generic message.
    """
    request_id = get_request_id(request)
    classifier = get_classifier(request)
    code = code_for_http_status(exc.status_code)

    group = log_error_code(
        logger,
        code,
        "HTTP exception raised",
        classifier=classifier,
        event="request.http_exception",
        request_id=request_id,
        method=request.method,
        path=request.url.path,
        status_code=exc.status_code,
    )

    if is_client_error(group) and 400 <= exc.status_code < 500:
        status_code = exc.status_code
        message = exc.detail if isinstance(exc.detail, str) else "Bad Request"
        headers = getattr(exc, "headers", None)
    else:
        # Server-side details stay in the logs
        status_code = http_status_for(group)
        message = GENERIC_SERVER_MESSAGE
        headers = None

    return _error_response(
        status_code=status_code,
        code=code,
        message=message,
        request_id=request_id,
        classifier=classifier,
        headers=headers,
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    request_id = get_request_id(request)
    classifier = get_classifier(request)
    code = RestServiceErrorCode.INTERNAL_SERVER_ERROR

    group = log_error_code(
        logger,
        code,
        "Unhandled exception",
        exc_info=exc,
        classifier=classifier,
        event="error.unhandled_exception",
        request_id=request_id,
        method=request.method,
        path=request.url.path,
        exception_type=type(exc).__name__,
    )

    return _error_response(
        status_code=http_status_for(group),
        code=code,
        message=GENERIC_SERVER_MESSAGE,
        request_id=request_id,
        classifier=classifier,
    )


app.include_router(health_router, prefix="/v1")
app.include_router(error_codes_router, prefix="/v1")
