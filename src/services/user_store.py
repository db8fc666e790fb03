"""Credential store backed by the users table."""

import logging
from typing import NoReturn

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from src.models.user import User
from src.services.errors import ConflictError, DependencyError

logger = logging.getLogger(__name__)


class UserStore:
    """Reads and inserts user records through the request's session.

    Email uniqueness is decided by the database constraint, never by a
    lookup before the insert.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, email: str, password_hash: str, name: str) -> User:
        """Insert a user. Raises ConflictError if the email is taken."""
        user = User(email=email, password_hash=password_hash, name=name)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("Email already registered") from None
        except SQLAlchemyError as e:
            self._fail("insert user", e)
        return user

    def get_by_email(self, email: str) -> User | None:
        """Get a user by exact email."""
        try:
            return self.db.query(User).filter(User.email == email).first()
        except SQLAlchemyError as e:
            self._fail("look up user by email", e)

    def get_by_id(self, user_id: int) -> User | None:
        """Get a user by id."""
        try:
            return self.db.get(User, user_id)
        except SQLAlchemyError as e:
            self._fail("look up user by id", e)

    def _fail(self, action: str, exc: SQLAlchemyError) -> NoReturn:
        self.db.rollback()
        logger.exception(f"Credential store failed to {action}")
        raise DependencyError(f"Credential store failed to {action}") from exc
