"""Snapshot storage port - persists the cached identity between reloads."""

from dataclasses import dataclass
from typing import Protocol

from rolegate.domain.value_objects import ResolvedIdentity


@dataclass(frozen=True)
class IdentitySnapshot:
    """Persisted form of the cached identity."""

    user_id: str
    identity: ResolvedIdentity


class SnapshotStorage(Protocol):
    """Port for identity snapshot persistence."""

    def load(self) -> IdentitySnapshot | None: ...

    def save(self, snapshot: IdentitySnapshot) -> None: ...

    def clear(self) -> None: ...
