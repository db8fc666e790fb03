"""Authentication service: registration, login and profile lookup."""

import logging
from dataclasses import dataclass

from src.models.user import User
from src.services.errors import AuthenticationError, NotFoundError, ValidationError
from src.services.passwords import PasswordHasher
from src.services.tokens import TokenService
from src.services.user_store import UserStore
from src.services.validation import validate_login, validate_registration

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass(frozen=True)
class Identity:
    """Authenticated caller resolved from a bearer token."""

    user_id: int


@dataclass
class AuthResult:
    """A freshly issued token and the user it was issued for."""

    token: str
    user: User


class AuthService:
    """Orchestrates the credential store, password hasher and token service."""

    def __init__(self, store: UserStore, hasher: PasswordHasher, tokens: TokenService):
        self.store = store
        self.hasher = hasher
        self.tokens = tokens

    def register(self, email: str | None, password: str | None, name: str | None) -> AuthResult:
        """
        Create a user and issue a token.

        Raises ValidationError for bad input and ConflictError when the email
        is already registered.
        """
        reason = validate_registration(email, password, name)
        if reason is not None:
            raise ValidationError(reason)

        user = self.store.create(email, self.hasher.hash(password), name)
        logger.info(f"Registered user {user.id}")

        return AuthResult(token=self.tokens.issue(user.id), user=user)

    def login(self, email: str | None, password: str | None) -> AuthResult:
        """
        Check credentials and issue a token.

        An unknown email and a wrong password raise the same
        AuthenticationError, and both pay for one bcrypt verification.
        """
        reason = validate_login(email, password)
        if reason is not None:
            raise ValidationError(reason)

        user = self.store.get_by_email(email)
        if user is None:
            self.hasher.verify_dummy(password)
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not self.hasher.verify(password, user.password_hash):
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info(f"User {user.id} logged in")
        return AuthResult(token=self.tokens.issue(user.id), user=user)

    def get_profile(self, identity: Identity) -> User:
        """Get the user behind an authenticated identity."""
        user = self.store.get_by_id(identity.user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user
