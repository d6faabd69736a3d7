"""Conditional-render gate."""

from typing import Generic, TypeVar

from rolegate.application.authorization import decide
from rolegate.domain.value_objects import (
    NO_RESTRICTION,
    AccessCriteria,
    GateState,
    RoleName,
    SessionState,
)

T = TypeVar("T")


class RenderGate(Generic[T]):
    """Renders children only when the session passes the criteria.

    While the identity is pending nothing is rendered and the caller keeps
    control of the loading UI. Unauthenticated and denied sessions get the
    fallback, which defaults to nothing.
    """

    def __init__(
        self,
        criteria: AccessCriteria = NO_RESTRICTION,
        fallback: T | None = None,
    ) -> None:
        self.criteria = criteria
        self.fallback = fallback

    @classmethod
    def from_props(
        cls,
        *,
        role: str | None = None,
        permission: str | None = None,
        roles: list[str] | None = None,
        permissions: list[str] | None = None,
        require_all: bool = False,
        fallback: T | None = None,
    ) -> "RenderGate[T]":
        """Build from component-style props.

        Omit a list (None) to leave it unrestricted. An empty list is kept as a
        criterion: ``roles=[]`` denies unless ``require_all`` is set.
        """
        criteria = AccessCriteria.from_props(
            role=role,
            permission=permission,
            roles=roles,
            permissions=permissions,
            require_all=require_all,
        )
        return cls(criteria, fallback=fallback)

    def state(self, session: SessionState) -> GateState:
        return decide(session, self.criteria)

    def render(self, session: SessionState, children: T) -> T | None:
        state = self.state(session)
        if state is GateState.GRANTED:
            return children
        if state is GateState.PENDING:
            return None
        return self.fallback


def admin_only(fallback=None) -> RenderGate:
    return RenderGate(AccessCriteria(role=RoleName.ADMIN), fallback=fallback)


def premium_only(fallback=None) -> RenderGate:
    return RenderGate(AccessCriteria(role=RoleName.PREMIUM), fallback=fallback)


def requires_permission(key: str, fallback=None) -> RenderGate:
    return RenderGate(AccessCriteria(permission=key), fallback=fallback)
