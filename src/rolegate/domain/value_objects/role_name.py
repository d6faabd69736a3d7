"""Well-known role names."""

from enum import StrEnum


class RoleName(StrEnum):
    """Roles seeded in the catalog and referenced by gates."""

    ADMIN = "admin"
    USER = "user"
    PREMIUM = "premium"
