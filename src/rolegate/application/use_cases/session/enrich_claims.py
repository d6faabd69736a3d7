"""Enrich session claims use case - runs when a session token is minted."""

from collections.abc import Mapping
from typing import Any

from rolegate.application.use_cases.identity.resolve_identity import (
    ResolveIdentityUseCase,
)


class EnrichClaimsUseCase:
    """Add resolved role names and permission keys to token claims."""

    def __init__(self, resolve_identity: ResolveIdentityUseCase) -> None:
        self._resolve = resolve_identity

    async def execute(self, claims: Mapping[str, Any], user_id: str) -> dict[str, Any]:
        """Return a copy of claims with sub, roles and permissions set."""
        identity = await self._resolve.execute(user_id)
        enriched = dict(claims)
        enriched["sub"] = user_id
        enriched.update(identity.to_claims())
        return enriched
