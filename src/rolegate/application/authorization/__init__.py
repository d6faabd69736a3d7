"""Authorization decision engine."""

from rolegate.application.authorization.decisions import (
    authorize,
    has_all_permissions,
    has_all_roles,
    has_any_permission,
    has_any_role,
    has_permission,
    has_role,
)
from rolegate.application.authorization.gate import decide

__all__ = [
    "authorize",
    "decide",
    "has_all_permissions",
    "has_all_roles",
    "has_any_permission",
    "has_any_role",
    "has_permission",
    "has_role",
]
