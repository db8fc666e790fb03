"""JWT access token issuance and verification."""

from datetime import UTC, datetime, timedelta
from functools import lru_cache

from jose import JWTError, jwt

from src.config import get_settings


class TokenService:
    """Issues and verifies signed, time-limited bearer tokens."""

    def __init__(self, secret: str, ttl_minutes: int = 60, algorithm: str = "HS256"):
        if not secret:
            raise ValueError("A token signing secret is required")
        self._secret = secret
        self.ttl = timedelta(minutes=ttl_minutes)
        self.algorithm = algorithm

    def issue(self, user_id: int, now: datetime | None = None) -> str:
        """Create a JWT access token for a user."""
        issued_at = now or datetime.now(UTC)
        to_encode = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + self.ttl,
        }
        return jwt.encode(to_encode, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> int | None:
        """Return the user id a token was issued for.

        Returns None for a bad signature, a malformed payload or an expired token.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except JWTError:
            return None

        # jose still accepts the exp second itself
        if payload["exp"] <= datetime.now(UTC).timestamp():
            return None

        try:
            return int(payload["sub"])
        except (KeyError, TypeError, ValueError):
            return None


@lru_cache
def get_token_service() -> TokenService:
    """Get the process-wide token service."""
    settings = get_settings()
    return TokenService(
        secret=settings.jwt_secret,
        ttl_minutes=settings.jwt_expiration_minutes,
        algorithm=settings.jwt_algorithm,
    )
