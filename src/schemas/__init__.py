"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import AuthResponse, ErrorResponse, UserLogin, UserRegister, UserResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "ErrorResponse",
]
