"""Input validation for registration and login payloads.

The name filter below is a textual guard against SQL control syntax. It is
defense in depth only: all persistence goes through SQLAlchemy's
parameterized queries, which is what actually keeps request values out of
the SQL text.
"""

import re
from enum import Enum

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_PASSWORD_LENGTH = 6
# bcrypt only reads the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72
MAX_FIELD_LENGTH = 255

# Quotes, statement separators, escapes and comment markers
DISALLOWED_NAME_FRAGMENTS = ("'", '"', "`", ";", "\\", "--", "/*", "*/", "#")

# SQL statement shapes, not bare keywords: "Grant Smith" and "Union Jack" are names
DISALLOWED_NAME_STATEMENTS = re.compile(
    r"\b(?:"
    r"select\s.*\bfrom"
    r"|insert\s+into"
    r"|update\s.*\bset"
    r"|delete\s+from"
    r"|(?:drop|alter|create|truncate)\s+(?:table|database|schema|index|view)"
    r"|union\s+(?:all\s+)?select"
    r")\b",
    re.IGNORECASE,
)


class RejectionReason(str, Enum):
    """Why a payload was rejected."""

    MISSING_FIELDS = "missing_fields"
    FIELD_TOO_LONG = "field_too_long"
    INVALID_EMAIL = "invalid_email"
    WEAK_PASSWORD = "weak_password"
    DISALLOWED_CHARACTERS = "disallowed_characters"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    RejectionReason.MISSING_FIELDS: "Email, password, and name are required",
    RejectionReason.FIELD_TOO_LONG: "One or more fields exceed the maximum length",
    RejectionReason.INVALID_EMAIL: "Invalid email format",
    RejectionReason.WEAK_PASSWORD: (
        f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
    ),
    RejectionReason.DISALLOWED_CHARACTERS: "Name contains disallowed characters",
}


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def name_is_safe(name: str) -> bool:
    """Check a display name against the SQL control syntax filter."""
    if any(fragment in name for fragment in DISALLOWED_NAME_FRAGMENTS):
        return False
    return DISALLOWED_NAME_STATEMENTS.search(name) is None


def validate_registration(
    email: str | None, password: str | None, name: str | None
) -> RejectionReason | None:
    """Validate a registration payload. Returns None when it is acceptable."""
    if _is_blank(email) or not password or _is_blank(name):
        return RejectionReason.MISSING_FIELDS

    if (
        len(email) > MAX_FIELD_LENGTH
        or len(name) > MAX_FIELD_LENGTH
        or len(password.encode("utf-8")) > MAX_PASSWORD_BYTES
    ):
        return RejectionReason.FIELD_TOO_LONG

    if not EMAIL_PATTERN.match(email):
        return RejectionReason.INVALID_EMAIL

    if len(password) < MIN_PASSWORD_LENGTH:
        return RejectionReason.WEAK_PASSWORD

    if not name_is_safe(name):
        return RejectionReason.DISALLOWED_CHARACTERS

    return None


def validate_login(email: str | None, password: str | None) -> RejectionReason | None:
    """Validate a login payload. Only presence is checked."""
    if _is_blank(email) or not password:
        return RejectionReason.MISSING_FIELDS
    return None
