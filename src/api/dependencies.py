"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.services.auth import AuthService, Identity
from src.services.errors import AuthenticationError
from src.services.passwords import PasswordHasher, get_password_hasher
from src.services.tokens import TokenService, get_token_service
from src.services.user_store import UserStore

# auto_error=False: a missing header or a non-Bearer scheme yields None
security = HTTPBearer(auto_error=False)


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> Identity:
    """Resolve the caller's identity from the Bearer token.

    Only the token is checked; the user record is not loaded here.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication required")

    user_id = tokens.verify(credentials.credentials)
    if user_id is None:
        raise AuthenticationError("Invalid or expired token")

    return Identity(user_id=user_id)


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(UserStore(db), hasher, tokens)
