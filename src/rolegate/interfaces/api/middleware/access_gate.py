"""Edge access gate - runs before any resource responder."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import urlencode

import falcon.asgi

from rolegate.application.authorization import decide
from rolegate.application.use_cases.identity.resolve_identity import (
    ResolveIdentityUseCase,
)
from rolegate.domain.value_objects import (
    AccessCriteria,
    GateState,
    ResolvedIdentity,
    RoleName,
    SessionState,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccessRule:
    """Protected path prefix, optionally requiring a role or permission."""

    path_prefix: str
    required_role: str | None = None
    required_permission: str | None = None

    def matches(self, path: str) -> bool:
        prefix = self.path_prefix.rstrip("/")
        return path == prefix or path.startswith(prefix + "/")

    @property
    def criteria(self) -> AccessCriteria:
        return AccessCriteria(
            role=self.required_role, permission=self.required_permission
        )


def default_access_rules(
    protected_prefixes: Iterable[str], admin_prefix: str | None = None
) -> list[AccessRule]:
    """Admin prefix requires the admin role; other prefixes require sign-in."""
    rules: list[AccessRule] = []
    if admin_prefix:
        rules.append(AccessRule(admin_prefix, required_role=RoleName.ADMIN))
    for prefix in protected_prefixes:
        if prefix and prefix != admin_prefix:
            rules.append(AccessRule(prefix))
    return rules


class AccessGateMiddleware:
    """Redirects requests under protected prefixes before routing completes.

    Rules are checked in order and the first matching prefix applies.
    Unauthenticated requests go to the sign-in path, authenticated requests
    that fail the rule go to the forbidden path, everything else passes
    through unmodified. The caller's identity is exposed as
    ``req.context.identity`` for every authenticated request.
    """

    def __init__(
        self,
        rules: list[AccessRule],
        resolve_identity: ResolveIdentityUseCase,
        sign_in_path: str = "/auth/login-idpw",
        forbidden_path: str = "/403",
    ) -> None:
        self._rules = rules
        self._resolve = resolve_identity
        self._sign_in_path = sign_in_path
        self._forbidden_path = forbidden_path

    def _match(self, path: str) -> AccessRule | None:
        for rule in self._rules:
            if rule.matches(path):
                return rule
        return None

    async def _identity_for(self, user) -> ResolvedIdentity:
        identity = ResolvedIdentity.from_claims(user.claims)
        if identity is None:
            identity = await self._resolve.execute(user.user_id)
        return identity

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Attach identity and enforce the first matching rule."""
        user = getattr(req.context, "user", None)
        req.context.identity = None
        if user:
            req.context.identity = await self._identity_for(user)

        rule = self._match(req.path)
        if rule is None:
            return

        if user:
            session = SessionState.authenticated(user.user_id, req.context.identity)
        else:
            session = SessionState.anonymous()

        state = decide(session, rule.criteria)
        if state is GateState.GRANTED:
            return
        if state is GateState.UNAUTHENTICATED:
            query = urlencode({"callbackUrl": req.relative_uri})
            self._redirect(resp, f"{self._sign_in_path}?{query}")
            return
        logger.info(
            "Access to %s denied for user %s (rule %s)",
            req.path,
            user.user_id if user else None,
            rule.path_prefix,
        )
        self._redirect(resp, self._forbidden_path)

    @staticmethod
    def _redirect(resp: falcon.asgi.Response, location: str) -> None:
        resp.status = falcon.HTTP_302
        resp.set_header("Location", location)
        resp.complete = True
