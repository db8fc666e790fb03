"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_auth_service, get_current_identity
from src.schemas.auth import AuthResponse, ErrorResponse, UserLogin, UserRegister, UserResponse
from src.services.auth import AuthService, Identity

router = APIRouter(prefix="/api/auth", tags=["auth"])

# Handlers are sync so FastAPI runs them, and bcrypt, on its thread pool.


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def register(
    user_data: UserRegister,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    result = auth.register(user_data.email, user_data.password, user_data.name)
    return AuthResponse(token=result.token, user=UserResponse.model_validate(result.user))


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def login(
    credentials: UserLogin,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    result = auth.login(credentials.email, credentials.password)
    return AuthResponse(token=result.token, user=UserResponse.model_validate(result.user))


@router.get(
    "/profile",
    response_model=UserResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_profile(
    identity: Annotated[Identity, Depends(get_current_identity)],
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Get the authenticated user's profile."""
    return auth.get_profile(identity)
