"""User registration router."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.catalog.api.http.deps import get_user_registration_service
from src.catalog.core.exceptions import InternalError
from src.catalog.core.services import UserRegistrationService
from src.catalog.entities.core.user import UserRegistration
from src.catalog.runtime.context import get_config

router = APIRouter()

GENERIC_FAILURE = "An unexpected error occurred."


@router.post("/register")
def register(
    registration: UserRegistration,
    registration_service: UserRegistrationService = Depends(
        get_user_registration_service
    ),
):
    """Register a user and return its identity."""
    try:
        user = registration_service.register(registration)
    except InternalError as exc:
        message = exc.message if get_config().security.expose_error_details else GENERIC_FAILURE
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to register user", "message": message},
        )

    return {"message": "User registered successfully", "userId": user.id}
