"""Repository ports."""

from rolegate.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from rolegate.application.ports.repositories.role_binding_repository import (
    RoleBindingRepository,
)
from rolegate.application.ports.repositories.role_repository import RoleRepository

__all__ = [
    "PermissionRepository",
    "RoleBindingRepository",
    "RoleRepository",
]
