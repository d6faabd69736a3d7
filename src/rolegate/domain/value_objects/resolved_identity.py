"""Resolved identity - flattened roles and permissions of a user."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

ROLES_CLAIM = "roles"
PERMISSIONS_CLAIM = "permissions"


def _as_names(value: Any) -> frozenset[str]:
    if not isinstance(value, (list, tuple, set, frozenset)):
        return frozenset()
    return frozenset(v for v in value if isinstance(v, str) and v)


@dataclass(frozen=True)
class ResolvedIdentity:
    """Set of role names and permission keys held at a point in time.

    Workspace distinctions are collapsed: a role held in any workspace is held.
    """

    roles: frozenset[str] = field(default_factory=frozenset)
    permissions: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def of(
        cls, roles: Iterable[str] = (), permissions: Iterable[str] = ()
    ) -> "ResolvedIdentity":
        return cls(roles=frozenset(roles), permissions=frozenset(permissions))

    @classmethod
    def empty(cls) -> "ResolvedIdentity":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.roles and not self.permissions

    def to_claims(self) -> dict[str, list[str]]:
        """Claims payload for a session token."""
        return {
            ROLES_CLAIM: sorted(self.roles),
            PERMISSIONS_CLAIM: sorted(self.permissions),
        }

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any] | None) -> "ResolvedIdentity | None":
        """Read identity back from token claims.

        Returns None when the claims were never enriched. Malformed values are
        read as empty sets.
        """
        if not claims:
            return None
        if ROLES_CLAIM not in claims and PERMISSIONS_CLAIM not in claims:
            return None
        return cls(
            roles=_as_names(claims.get(ROLES_CLAIM)),
            permissions=_as_names(claims.get(PERMISSIONS_CLAIM)),
        )
