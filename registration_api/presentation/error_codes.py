"""Error code to HTTP status code mapping.

This module provides a centralized mapping of error codes to HTTP status codes.
When you add a new exception, simply add its error_code to this mapping.
"""

from fastapi import status


# Map error codes to HTTP status codes
ERROR_CODE_TO_HTTP_STATUS = {
    # User-related errors
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,

    # Registration errors
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
    # Duplicate usernames are reported as a plain server error, not 409
    "STORE_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,

    # Domain errors
    "INVALID_ENTITY_STATE": status.HTTP_400_BAD_REQUEST,
    "DOMAIN_ERROR": status.HTTP_400_BAD_REQUEST,
    "DUPLICATE_KEY": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "ENCODING_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "MALFORMED_HASH": status.HTTP_500_INTERNAL_SERVER_ERROR,

    # Application errors
    "APPLICATION_ERROR": status.HTTP_400_BAD_REQUEST,

    # Infrastructure errors
    "DATABASE_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "INTERNAL_SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Messages for these statuses are replaced so internal detail never leaks
GENERIC_SERVER_ERROR_MESSAGE = "An internal server error occurred"


def get_http_status_for_error_code(error_code: str) -> int:
    """
    Get HTTP status code for a given error code.

    Args:
        error_code: The error code from the exception

    Returns:
        HTTP status code (defaults to 400 if not found)
    """
    return ERROR_CODE_TO_HTTP_STATUS.get(
        error_code,
        status.HTTP_400_BAD_REQUEST,  # Default for unknown errors
    )
