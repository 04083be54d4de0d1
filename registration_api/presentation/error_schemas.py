"""Pydantic models for error responses used in OpenAPI schema generation."""

from pydantic import BaseModel, Field


class RegistrationRejectionResponse(BaseModel):
    """Body of a 422 returned when a submission fails a registration rule."""

    reason: str = Field(
        ...,
        description="Fixed classification tag",
        examples=["ValidationError"],
    )
    message: str = Field(
        ...,
        description="Human-readable description of the failed rule",
        examples=["Missing field", "Incorrect field type: expected string"],
    )
    location: str = Field(
        ...,
        description="Stable key of the rule that failed",
        examples=["hasFields", "stringField", "trimmedField", "tooSmallField"],
    )


class ValidationErrorDetail(BaseModel):
    """Model for individual field validation error."""

    field: str = Field(
        ...,
        description="The field path where the validation error occurred (e.g., 'body', 'path.user_id')",
        examples=["body", "path.user_id"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message describing what went wrong",
        examples=["Input should be a valid dictionary", "Field required"],
    )


class ValidationErrorResponse(BaseModel):
    """Model for a 422 produced by request decoding (malformed body or path).

    This is the format returned by the validation_error_handler
    in registration_api/presentation/exception_handlers.py.
    """

    detail: str = Field(
        ...,
        description="High-level description of the error",
        examples=["Validation failed"],
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error code for client-side error handling",
        examples=["VALIDATION_ERROR"],
    )
    errors: list[ValidationErrorDetail] = Field(
        ...,
        description="List of all validation errors found in the request",
        min_length=1,
    )


class ErrorResponse(BaseModel):
    """Generic error body: ``{detail, error_code}``."""

    detail: str
    error_code: str
