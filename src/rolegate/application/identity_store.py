"""Identity state cache - process-local snapshot of the resolved identity."""

import logging
from collections.abc import Iterable

from rolegate.application.authorization import decisions
from rolegate.application.ports import IdentitySnapshot, SnapshotStorage
from rolegate.application.use_cases.identity.resolve_identity import (
    ResolveIdentityUseCase,
)
from rolegate.domain.value_objects import ResolvedIdentity, SessionState

logger = logging.getLogger(__name__)


class IdentityStore:
    """Holds the latest resolved identity and a loading flag.

    One store per client process or session. The snapshot is persisted through
    the optional storage so a returning user is not shown as signed out while
    the identity is re-resolved; the loading flag is never persisted and always
    starts True.

    Commits carry a ticket from :meth:`begin_resolution`. A commit whose ticket
    is older than the last committed one is discarded, so a slow resolution
    for an old session cannot overwrite a newer snapshot.
    """

    def __init__(self, storage: SnapshotStorage | None = None) -> None:
        self._storage = storage
        snapshot = storage.load() if storage else None
        self._identity = snapshot.identity if snapshot else None
        self._user_id = snapshot.user_id if snapshot else None
        self._loading = True
        self._issued = 0
        self._committed = 0

    @property
    def identity(self) -> ResolvedIdentity | None:
        return self._identity

    @property
    def user_id(self) -> str | None:
        return self._user_id

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def sequence(self) -> int:
        """Ticket of the last committed snapshot."""
        return self._committed

    @property
    def latest_ticket(self) -> int:
        """Ticket of the most recently started resolution."""
        return self._issued

    def begin_resolution(self) -> int:
        """Issue the next ticket for a resolution about to start."""
        self._issued += 1
        return self._issued

    def set_identity(
        self,
        identity: ResolvedIdentity | None,
        sequence: int | None = None,
        user_id: str | None = None,
    ) -> bool:
        """Replace the snapshot. Returns False if the ticket is stale."""
        if sequence is None:
            sequence = self.begin_resolution()
        if sequence < self._committed:
            logger.debug(
                "Discarding stale identity snapshot %d (committed %d)",
                sequence,
                self._committed,
            )
            return False
        self._committed = sequence
        self._identity = identity
        self._user_id = user_id
        if self._storage:
            if identity is not None and user_id:
                self._storage.save(IdentitySnapshot(user_id=user_id, identity=identity))
            else:
                self._storage.clear()
        return True

    def set_loading(self, loading: bool) -> None:
        self._loading = loading

    def clear(self) -> None:
        """Forget the identity on sign-out. Outstanding tickets become stale."""
        self._committed = self.begin_resolution()
        self._identity = None
        self._user_id = None
        self._loading = False
        if self._storage:
            self._storage.clear()

    def session_state(self) -> SessionState:
        """Session state for the access gates."""
        if self._loading:
            return SessionState.loading()
        if self._identity is None or not self._user_id:
            return SessionState.anonymous()
        return SessionState.authenticated(self._user_id, self._identity)

    def has_role(self, name: str) -> bool:
        return decisions.has_role(self._identity, name)

    def has_permission(self, key: str) -> bool:
        return decisions.has_permission(self._identity, key)

    def has_any_role(self, names: Iterable[str]) -> bool:
        return decisions.has_any_role(self._identity, names)

    def has_all_roles(self, names: Iterable[str]) -> bool:
        return decisions.has_all_roles(self._identity, names)

    def has_any_permission(self, keys: Iterable[str]) -> bool:
        return decisions.has_any_permission(self._identity, keys)

    def has_all_permissions(self, keys: Iterable[str]) -> bool:
        return decisions.has_all_permissions(self._identity, keys)


class IdentitySync:
    """Keeps an IdentityStore in step with session changes."""

    def __init__(
        self, store: IdentityStore, resolve_identity: ResolveIdentityUseCase
    ) -> None:
        self._store = store
        self._resolve = resolve_identity

    @property
    def store(self) -> IdentityStore:
        return self._store

    def on_session_loading(self) -> None:
        self._store.set_loading(True)

    async def on_session_change(self, user_id: str | None) -> bool:
        """Re-resolve for the new session, or clear on sign-out.

        Returns whether the result was committed to the store.
        """
        if user_id is None:
            self._store.clear()
            return True

        ticket = self._store.begin_resolution()
        self._store.set_loading(True)
        identity = await self._resolve.execute(user_id)
        if ticket != self._store.latest_ticket:
            logger.debug("Session for %s superseded before resolution finished", user_id)
            return False
        committed = self._store.set_identity(identity, ticket, user_id=user_id)
        if committed:
            self._store.set_loading(False)
        return committed
