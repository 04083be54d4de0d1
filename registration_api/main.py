"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from sqlalchemy.exc import SQLAlchemyError

from registration_api.presentation.api.v1 import users
from registration_api.presentation.dependencies import shutdown_hash_executor
from registration_api.presentation.exception_handlers import (
    application_error_handler,
    domain_exception_handler,
    registration_validation_error_handler,
    validation_error_handler,
    database_error_handler,
    generic_exception_handler,
)
from registration_api.presentation.error_schemas import ValidationErrorResponse
from registration_api.application.exceptions import (
    ApplicationError,
    RegistrationValidationError,
)
from registration_api.domain.exceptions import DomainException
from registration_api.infrastructure.config.settings import get_settings


# Get settings for app configuration
_settings = get_settings()

logging.basicConfig(
    level=_settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Starting %s %s (%s)", _settings.app_name, _settings.app_version, _settings.environment)
    yield
    shutdown_hash_executor()


app = FastAPI(
    title=_settings.app_name,
    description="User registration API: ordered credential validation and Argon2 password hashing",
    version=_settings.app_version,
    debug=_settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Handlers are matched on the exception's MRO, so the registration-specific
# handler wins over the generic ApplicationError one.
app.add_exception_handler(RegistrationValidationError, registration_validation_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(ApplicationError, application_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(DomainException, domain_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(SQLAlchemyError, database_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(users.router, prefix="/api/v1")


@app.get("/")
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "message": _settings.app_name,
        "status": "running",
        "version": _settings.app_version,
        "environment": _settings.environment,
    }


def custom_openapi():
    """
    Customize OpenAPI schema to use our custom request-validation error format.

    Replaces FastAPI's default HTTPValidationError with ValidationErrorResponse
    wherever it is referenced. Explicitly documented 422 bodies (such as the
    registration rejection) are left untouched.
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    schemas = openapi_schema.setdefault("components", {}).setdefault("schemas", {})
    schemas.pop("HTTPValidationError", None)
    schemas.pop("ValidationError", None)
    schemas["ValidationErrorResponse"] = ValidationErrorResponse.model_json_schema()

    default_ref = "#/components/schemas/HTTPValidationError"
    for path_data in openapi_schema.get("paths", {}).values():
        for operation in path_data.values():
            if not isinstance(operation, dict):
                continue
            response_422 = operation.get("responses", {}).get("422")
            if response_422 is None:
                continue
            schema = response_422.get("content", {}).get("application/json", {}).get("schema", {})
            if schema.get("$ref") == default_ref:
                schema["$ref"] = "#/components/schemas/ValidationErrorResponse"

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi
