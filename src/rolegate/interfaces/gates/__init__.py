"""Presentation-agnostic access gates."""

from rolegate.interfaces.gates.render_gate import (
    RenderGate,
    admin_only,
    premium_only,
    requires_permission,
)
from rolegate.interfaces.gates.route_guard import GuardOutcome, RouteGuard

__all__ = [
    "GuardOutcome",
    "RenderGate",
    "RouteGuard",
    "admin_only",
    "premium_only",
    "requires_permission",
]
