"""JSON file snapshot storage for the identity cache."""

import json
import logging
from pathlib import Path

from rolegate.application.ports import IdentitySnapshot
from rolegate.domain.value_objects import ResolvedIdentity

logger = logging.getLogger(__name__)


class JsonFileSnapshotStorage:
    """Persists the cached identity snapshot as a small JSON document.

    Only the user id and identity are written; the loading flag never is.
    An unreadable or malformed file is treated as no snapshot.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def load(self) -> IdentitySnapshot | None:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable identity snapshot %s: %s", self._path, e)
            return None
        if not isinstance(data, dict):
            return None
        user_id = data.get("user_id")
        identity = ResolvedIdentity.from_claims(data)
        if not isinstance(user_id, str) or not user_id or identity is None:
            return None
        return IdentitySnapshot(user_id=user_id, identity=identity)

    def save(self, snapshot: IdentitySnapshot) -> None:
        payload = {"user_id": snapshot.user_id, **snapshot.identity.to_claims()}
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(payload), encoding="utf-8")

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)
