"""User Checks — presence rules for decoded user records.

Invariants:
    - name and email must both be non-empty strings
    - The created-user id is a fixed placeholder; no identity is generated
"""

from typing import Protocol

from hello_api.core.errors import MissingUserFieldsError

PLACEHOLDER_USER_ID = "auto-generated-id-123"

REQUIRED_USER_FIELDS = ("name", "email")


class UserLike(Protocol):
    name: str
    email: str


def missing_user_fields(user: UserLike) -> list[str]:
    """Names of required fields that are empty, in declaration order."""
    return [f for f in REQUIRED_USER_FIELDS if not getattr(user, f)]


def require_user_fields(user: UserLike) -> None:
    """Raise MissingUserFieldsError unless name and email are both set."""
    missing = missing_user_fields(user)
    if missing:
        raise MissingUserFieldsError(missing)
