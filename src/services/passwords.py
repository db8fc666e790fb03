"""Password hashing with bcrypt."""

import secrets
from functools import lru_cache

from passlib.context import CryptContext

from src.config import get_settings

BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """Salted bcrypt hashing with a configurable work factor.

    The salt and cost are embedded in every hash, so ``verify`` needs only
    the stored string.
    """

    def __init__(self, rounds: int = 10):
        if rounds < 10:
            raise ValueError("bcrypt rounds must be at least 10")
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
            bcrypt__truncate_error=True,
        )
        # Hash of a throwaway secret at the same cost, for lookup misses
        self._dummy_hash = self._context.hash(secrets.token_urlsafe(32))

    def hash(self, password: str) -> str:
        """Hash a password.

        Raises ValueError for passwords longer than 72 bytes rather than
        silently truncating them.
        """
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against its hash."""
        # bcrypt would compare only the first 72 bytes
        if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
            return False
        try:
            return self._context.verify(password, password_hash)
        except (ValueError, TypeError):
            # Unrecognized or corrupt hash
            return False

    def verify_dummy(self, password: str) -> bool:
        """Spend the same work as ``verify`` when there is no stored hash."""
        self.verify(password, self._dummy_hash)
        return False


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Get the process-wide password hasher."""
    return PasswordHasher(rounds=get_settings().bcrypt_rounds)
