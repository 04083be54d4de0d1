"""User API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Request, Response, status

from registration_api.application.dtos.user_dto import UserDTO
from registration_api.application.services.user_service import UserService
from registration_api.presentation.dependencies import get_user_service
from registration_api.presentation.error_schemas import (
    ErrorResponse,
    RegistrationRejectionResponse,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=UserDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Validate a credential submission, hash its password and store the user.",
    responses={
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": RegistrationRejectionResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def register_user(
    submission: Annotated[dict[str, Any], Body()],
    request: Request,
    response: Response,
    service: UserService = Depends(get_user_service),
) -> UserDTO:
    """
    Register a new user.

    The body is taken as a raw JSON object on purpose: field presence and
    types are checked by the registration rule chain, which reports them
    with its own ``{reason, message, location}`` body.
    """
    user = await service.register_user(submission)
    response.headers["Location"] = str(
        request.app.url_path_for("get_user", user_id=user.id)
    )
    return user


@router.get(
    "/{user_id}",
    response_model=UserDTO,
    name="get_user",
    summary="Get user by ID",
    description="Retrieve a registered user by their ID.",
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> UserDTO:
    """Get user by ID."""
    return await service.get_user_by_id(user_id)
