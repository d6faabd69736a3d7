"""Domain entities."""

from rolegate.domain.entities.permission import Permission
from rolegate.domain.entities.role import Role
from rolegate.domain.entities.role_binding import RoleBinding

__all__ = [
    "Permission",
    "Role",
    "RoleBinding",
]
