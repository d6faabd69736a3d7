"""Single decision point shared by every access gate."""

from rolegate.application.authorization.decisions import authorize
from rolegate.domain.value_objects import (
    AccessCriteria,
    GateState,
    SessionState,
    SessionStatus,
)


def decide(session: SessionState, criteria: AccessCriteria) -> GateState:
    """Map session state and criteria to a gate state.

    An authenticated session whose identity has not been resolved yet is still
    PENDING: the gate must not report DENIED before the real result arrives.
    """
    if session.status is SessionStatus.LOADING:
        return GateState.PENDING
    if session.status is SessionStatus.UNAUTHENTICATED or not session.user_id:
        return GateState.UNAUTHENTICATED
    if session.identity is None:
        return GateState.PENDING
    if authorize(session.identity, criteria):
        return GateState.GRANTED
    return GateState.DENIED
