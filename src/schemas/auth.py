"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict

# Request fields are optional here; presence and format are checked by
# src.services.validation so every rejection maps to a 400 with a reason.


class UserRegister(BaseModel):
    """User registration request."""

    email: str | None = None
    password: str | None = None
    name: str | None = None


class UserLogin(BaseModel):
    """User login request."""

    email: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    token: str
    user: UserResponse


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    detail: str
    reason: str | None = None
