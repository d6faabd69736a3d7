"""Access criteria for the composite authorization check.

A list criterion is either omitted (``UNSPECIFIED``) or given as ``AnyOf`` /
``AllOf``. An empty ``AnyOf`` never matches and an empty ``AllOf`` always
matches, so passing ``AnyOf()`` is not the same as omitting the criterion.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Final


class _Unspecified(Enum):
    UNSPECIFIED = "unspecified"

    def __repr__(self) -> str:
        return "UNSPECIFIED"


UNSPECIFIED: Final = _Unspecified.UNSPECIFIED


class MatchMode(StrEnum):
    """Quantifier applied to a list criterion."""

    ANY = "any"
    ALL = "all"


class _Quantified:
    mode: MatchMode
    __slots__ = ("names",)

    def __init__(self, *names: str) -> None:
        self.names = tuple(names)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.names == self.names

    def __hash__(self) -> int:
        return hash((self.mode, self.names))

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self.names!r}"


class AnyOf(_Quantified):
    """Satisfied when at least one name is held."""

    mode = MatchMode.ANY
    __slots__ = ()


class AllOf(_Quantified):
    """Satisfied when every name is held."""

    mode = MatchMode.ALL
    __slots__ = ()


ListCriterion = AnyOf | AllOf | _Unspecified


def _list_criterion(names: Iterable[str] | None, require_all: bool) -> ListCriterion:
    if names is None:
        return UNSPECIFIED
    return AllOf(*names) if require_all else AnyOf(*names)


@dataclass(frozen=True)
class AccessCriteria:
    """AND of every specified criterion. No criteria means authenticated-only."""

    role: str | None = None
    permission: str | None = None
    roles: ListCriterion = UNSPECIFIED
    permissions: ListCriterion = UNSPECIFIED

    @classmethod
    def from_props(
        cls,
        role: str | None = None,
        permission: str | None = None,
        roles: Iterable[str] | None = None,
        permissions: Iterable[str] | None = None,
        require_all: bool = False,
    ) -> "AccessCriteria":
        """Build criteria from gate properties. ``None`` lists are omitted."""
        return cls(
            role=role or None,
            permission=permission or None,
            roles=_list_criterion(roles, require_all),
            permissions=_list_criterion(permissions, require_all),
        )

    @property
    def is_unrestricted(self) -> bool:
        return (
            self.role is None
            and self.permission is None
            and self.roles is UNSPECIFIED
            and self.permissions is UNSPECIFIED
        )


NO_RESTRICTION: Final = AccessCriteria()
