"""Exception handlers for converting exceptions to HTTP responses.

Instead of creating individual handlers for each exception, base exception
handlers determine the HTTP status code from the error_code attribute.
Registration rejections are the one exception: their body is a fixed
``{reason, message, location}`` triple that clients assert on.

To add a new exception:
1. Create the exception class (inheriting from ApplicationError or DomainException)
2. Add its error_code to ERROR_CODE_TO_HTTP_STATUS in error_codes.py
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from registration_api.application.exceptions import (
    ApplicationError,
    RegistrationValidationError,
)
from registration_api.domain.exceptions import DomainException
from registration_api.presentation.error_codes import (
    GENERIC_SERVER_ERROR_MESSAGE,
    get_http_status_for_error_code,
)

logger = logging.getLogger(__name__)


def _error_response(message: str, error_code: str) -> JSONResponse:
    http_status = get_http_status_for_error_code(error_code)

    if http_status >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        message = GENERIC_SERVER_ERROR_MESSAGE

    return JSONResponse(
        status_code=http_status,
        content={
            "detail": message,
            "error_code": error_code,
        },
    )


async def registration_validation_error_handler(
    request: Request, exc: RegistrationValidationError
) -> JSONResponse:
    """Render a failed registration rule as ``{reason, message, location}``."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=exc.to_dict(),
    )


async def application_error_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    """
    Handle ALL application layer exceptions.

    The HTTP status code is determined by the error_code attribute
    using the ERROR_CODE_TO_HTTP_STATUS mapping. 5xx bodies are generic.
    """
    if get_http_status_for_error_code(exc.error_code) >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Application error %s: %s", exc.error_code, exc.message, exc_info=exc)

    return _error_response(exc.message, exc.error_code)


async def domain_exception_handler(
    request: Request, exc: DomainException
) -> JSONResponse:
    """Handle ALL domain layer exceptions."""
    if get_http_status_for_error_code(exc.error_code) >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Domain error %s: %s", exc.error_code, exc.message, exc_info=exc)

    return _error_response(exc.message, exc.error_code)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request-decoding errors (e.g. a body that is not a JSON object).

    Submission content rules are not reported here; they go through
    registration_validation_error_handler.
    """
    validation_errors = []
    for error in exc.errors():
        # Build field path (e.g., "body" or "path.user_id")
        field_location = ".".join(str(loc) for loc in error["loc"])

        validation_errors.append(
            {
                "field": field_location,
                "message": error["msg"],
            }
        )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": "Validation failed",
            "error_code": "VALIDATION_ERROR",
            "errors": validation_errors,
        },
    )


async def database_error_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """
    Handle database errors.

    Catches SQLAlchemy exceptions and returns a standardized error response
    without exposing internal database details.
    """
    logger.error(f"Database error: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An internal database error occurred",
            "error_code": "DATABASE_ERROR",
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for any unexpected errors."""
    logger.error(f"Unhandled error: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": GENERIC_SERVER_ERROR_MESSAGE,
            "error_code": "INTERNAL_SERVER_ERROR",
        },
    )
