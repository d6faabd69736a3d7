"""Application ports - interfaces for external adapters."""

from rolegate.application.ports.permission_checker import PermissionChecker
from rolegate.application.ports.snapshot_storage import (
    IdentitySnapshot,
    SnapshotStorage,
)
from rolegate.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "IdentitySnapshot",
    "PermissionChecker",
    "SnapshotStorage",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
