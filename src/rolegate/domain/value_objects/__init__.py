"""Domain value objects."""

from rolegate.domain.value_objects.access_criteria import (
    NO_RESTRICTION,
    UNSPECIFIED,
    AccessCriteria,
    AllOf,
    AnyOf,
    ListCriterion,
    MatchMode,
)
from rolegate.domain.value_objects.gate_state import (
    GateState,
    SessionState,
    SessionStatus,
)
from rolegate.domain.value_objects.permission_key import PermissionKey
from rolegate.domain.value_objects.resolved_identity import ResolvedIdentity
from rolegate.domain.value_objects.role_name import RoleName

__all__ = [
    "NO_RESTRICTION",
    "UNSPECIFIED",
    "AccessCriteria",
    "AllOf",
    "AnyOf",
    "GateState",
    "ListCriterion",
    "MatchMode",
    "PermissionKey",
    "ResolvedIdentity",
    "RoleName",
    "SessionState",
    "SessionStatus",
]
