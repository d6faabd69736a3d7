"""Route guard - redirects instead of rendering when access fails."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from rolegate.application.authorization import decide
from rolegate.domain.value_objects import (
    NO_RESTRICTION,
    AccessCriteria,
    GateState,
    SessionState,
)

T = TypeVar("T")

DEFAULT_SIGN_IN_PATH = "/auth/login-idpw"
DEFAULT_FORBIDDEN_PATH = "/403"
DEFAULT_LOADING = "Loading..."


@dataclass(frozen=True)
class GuardOutcome(Generic[T]):
    """What the page should do: show content, or redirect."""

    state: GateState
    content: T | None = None
    redirect_to: str | None = None

    @property
    def is_redirect(self) -> bool:
        return self.redirect_to is not None


class RouteGuard(Generic[T]):
    """Guards a page behind the composite check.

    The decision is made before children are handed out: children appear in
    the outcome only for GRANTED, so protected content is never produced for a
    pending, unauthenticated or denied session.
    """

    def __init__(
        self,
        criteria: AccessCriteria = NO_RESTRICTION,
        redirect_to: str = DEFAULT_FORBIDDEN_PATH,
        sign_in_path: str = DEFAULT_SIGN_IN_PATH,
        loading: T | str = DEFAULT_LOADING,
    ) -> None:
        self.criteria = criteria
        self.redirect_to = redirect_to
        self.sign_in_path = sign_in_path
        self.loading = loading

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
        redirect_to: str = DEFAULT_FORBIDDEN_PATH,
        sign_in_path: str = DEFAULT_SIGN_IN_PATH,
    ) -> "RouteGuard[T]":
        """Build from page-style props; ``fallback`` is the loading content.

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
        return cls(
            criteria,
            redirect_to=redirect_to,
            sign_in_path=sign_in_path,
            loading=DEFAULT_LOADING if fallback is None else fallback,
        )

    def evaluate(self, session: SessionState, children: T) -> GuardOutcome[T]:
        state = decide(session, self.criteria)
        if state is GateState.PENDING:
            return GuardOutcome(state, content=self.loading)
        if state is GateState.UNAUTHENTICATED:
            return GuardOutcome(state, redirect_to=self.sign_in_path)
        if state is GateState.DENIED:
            return GuardOutcome(state, redirect_to=self.redirect_to)
        return GuardOutcome(state, content=children)
