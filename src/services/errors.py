"""Error types raised by the authentication services.

Each error carries the HTTP status the API layer responds with. Services
raise these instead of ``HTTPException`` so they stay usable outside a
request.
"""

from fastapi import status

from src.services.validation import RejectionReason


class AuthServiceError(Exception):
    """Base class for expected authentication outcomes."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AuthServiceError):
    """Request payload failed input validation."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, reason: RejectionReason):
        super().__init__(reason.message)
        self.reason = reason


class ConflictError(AuthServiceError):
    """A unique constraint rejected the insert."""

    status_code = status.HTTP_409_CONFLICT


class AuthenticationError(AuthServiceError):
    """Bad credentials, or a missing, invalid or expired token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AuthServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class DependencyError(AuthServiceError):
    """The credential store failed or timed out.

    The message is for server logs only; clients get a generic body.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
