"""Authorization decision engine - pure predicates over a resolved identity.

Every predicate returns False for a missing identity, so an unauthenticated or
not-yet-loaded user never passes a check. For the list variants, ``has_any_*``
of an empty list is False and ``has_all_*`` of an empty list is True.
"""

from collections.abc import Iterable

from rolegate.domain.value_objects import (
    UNSPECIFIED,
    AccessCriteria,
    ListCriterion,
    MatchMode,
    ResolvedIdentity,
)


def has_role(identity: ResolvedIdentity | None, name: str) -> bool:
    if identity is None:
        return False
    return name in identity.roles


def has_permission(identity: ResolvedIdentity | None, key: str) -> bool:
    if identity is None:
        return False
    return key in identity.permissions


def has_any_role(identity: ResolvedIdentity | None, names: Iterable[str]) -> bool:
    if identity is None:
        return False
    return any(name in identity.roles for name in names)


def has_all_roles(identity: ResolvedIdentity | None, names: Iterable[str]) -> bool:
    if identity is None:
        return False
    return all(name in identity.roles for name in names)


def has_any_permission(identity: ResolvedIdentity | None, keys: Iterable[str]) -> bool:
    if identity is None:
        return False
    return any(key in identity.permissions for key in keys)


def has_all_permissions(identity: ResolvedIdentity | None, keys: Iterable[str]) -> bool:
    if identity is None:
        return False
    return all(key in identity.permissions for key in keys)


def _check_list(held: frozenset[str], criterion: ListCriterion) -> bool:
    if criterion is UNSPECIFIED:
        return True
    if criterion.mode is MatchMode.ALL:
        return all(name in held for name in criterion.names)
    return any(name in held for name in criterion.names)


def authorize(identity: ResolvedIdentity | None, criteria: AccessCriteria) -> bool:
    """Composite check: AND of every specified criterion.

    Unspecified criteria are skipped, so ``AccessCriteria()`` passes for any
    loaded identity. A missing identity never passes.
    """
    if identity is None:
        return False
    if criteria.role is not None and not has_role(identity, criteria.role):
        return False
    if criteria.permission is not None and not has_permission(
        identity, criteria.permission
    ):
        return False
    if not _check_list(identity.roles, criteria.roles):
        return False
    return _check_list(identity.permissions, criteria.permissions)
