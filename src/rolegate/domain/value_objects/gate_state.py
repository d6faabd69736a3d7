"""Gate and session states."""

from dataclasses import dataclass
from enum import StrEnum

from rolegate.domain.value_objects.resolved_identity import ResolvedIdentity


class GateState(StrEnum):
    """Outcome of a gate evaluation."""

    PENDING = "pending"
    UNAUTHENTICATED = "unauthenticated"
    DENIED = "denied"
    GRANTED = "granted"


class SessionStatus(StrEnum):
    """Status reported by the session collaborator."""

    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


@dataclass(frozen=True)
class SessionState:
    """What a gate sees: session status plus the resolved identity, if any."""

    status: SessionStatus
    user_id: str | None = None
    identity: ResolvedIdentity | None = None

    @classmethod
    def loading(cls) -> "SessionState":
        return cls(status=SessionStatus.LOADING)

    @classmethod
    def anonymous(cls) -> "SessionState":
        return cls(status=SessionStatus.UNAUTHENTICATED)

    @classmethod
    def authenticated(
        cls, user_id: str, identity: ResolvedIdentity | None
    ) -> "SessionState":
        return cls(
            status=SessionStatus.AUTHENTICATED, user_id=user_id, identity=identity
        )
