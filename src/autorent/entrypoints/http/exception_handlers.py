"""FastAPI exception handlers for domain errors.

Translates domain errors to HTTP responses with the structured error format
described by ErrorResponse.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from autorent.domain.errors import DomainError

logger = logging.getLogger(__name__)

STATUS_CODE_MAP: dict[str, int] = {
    "VALIDATION_ERROR": 422,  # HTTP_422_UNPROCESSABLE_CONTENT
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ADMIN_API_ERROR": status.HTTP_502_BAD_GATEWAY,
}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Handle all domain errors with automatic HTTP status code mapping.

    Maps domain errors to HTTP status codes:
    - VALIDATION_ERROR → 422 Unprocessable Entity
    - NOT_FOUND → 404 Not Found
    - ADMIN_API_ERROR → 502 Bad Gateway
    - Other → 400 Bad Request
    """
    error_dict = exc.to_dict()
    status_code = STATUS_CODE_MAP.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    if status_code >= 500:
        logger.error(
            "Domain error occurred",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                "context": exc.context,
                "path": request.url.path,
                "method": request.method,
            },
        )
    else:
        logger.info(
            "Client error",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                "path": request.url.path,
                "method": request.method,
            },
        )

    response_content: dict[str, Any] = {
        "detail": error_dict.get("message", str(exc)),
        "code": error_dict.get("code", exc.error_code),
    }

    # Field-level errors (ValidationError)
    if "errors" in error_dict:
        response_content["errors"] = error_dict["errors"]

    return JSONResponse(status_code=status_code, content=response_content)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI/Pydantic validation errors (type and format errors at the HTTP layer).

    Examples:
        - page=0
        - sort=cheapest (not a SortKey)
        - start_date=tomorrow (not ISO 8601)
    """
    errors = []

    for error in exc.errors():
        # Drop the 'body'/'query'/'header' prefix from the location
        field_path = ".".join(
            str(loc) for loc in error["loc"] if loc not in ("body", "query", "header")
        )

        errors.append(
            {
                "field": field_path,
                "message": error["msg"],
                "code": error["type"],
            }
        )

    logger.info(
        "Request validation error",
        extra={
            "errors": errors,
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=422,  # HTTP_422_UNPROCESSABLE_CONTENT
        content={
            "detail": "Invalid request parameters",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors, logged with full traceback."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "error_message": str(exc),
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app (once, at startup)."""
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.info("Exception handlers registered successfully")
