"""
storefront_admin.services.admin_gate

Authentication + administrator authorization for admin requests.

Responsibilities:
- Turn an `Authorization` header into a verified `Principal`.
- Confirm the principal holds the administrator role in the role store.
"""

from __future__ import annotations

import asyncio
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError

from storefront_admin.auth.models import Principal
from storefront_admin.auth.verifier import IdentityVerifier
from storefront_admin.errors import ForbiddenError, MissingCredentialError, UnauthorizedError
from storefront_admin.observability.logging import get_logger

log = get_logger(__name__)

_BEARER_PREFIX = "bearer "


class RoleLookup(Protocol):
    async def get_role(self, user_id: str) -> str | None: ...


def bearer_token(authorization: str | None) -> str:
    if not authorization:
        raise MissingCredentialError()
    token = authorization.strip()
    if token.lower().startswith(_BEARER_PREFIX):
        token = token[len(_BEARER_PREFIX) :].strip()
    elif token.lower() == _BEARER_PREFIX.strip():
        token = ""
    if not token:
        raise UnauthorizedError()
    return token


class AdminGate:
    def __init__(
        self,
        *,
        verifier: IdentityVerifier,
        roles: RoleLookup,
        admin_role: str,
        lookup_timeout: float,
    ) -> None:
        self._verifier = verifier
        self._roles = roles
        self._admin_role = admin_role
        self._lookup_timeout = lookup_timeout

    async def authenticate(self, authorization: str | None) -> Principal:
        return await self._verifier.verify(bearer_token(authorization))

    async def authorize(self, principal: Principal) -> Principal:
        # Lookup errors and "not admin" are indistinguishable to the caller.
        try:
            async with asyncio.timeout(self._lookup_timeout):
                role = await self._roles.get_role(principal.subject)
        except (SQLAlchemyError, TimeoutError) as e:
            log.warning("role_lookup_failed", user_id=principal.subject, error=type(e).__name__)
            raise ForbiddenError() from e

        if role != self._admin_role:
            raise ForbiddenError()
        return principal

    async def require_admin(self, authorization: str | None) -> Principal:
        return await self.authorize(await self.authenticate(authorization))


# --- Module Notes -----------------------------------------------------------
# Used by the delete-user handler directly and by `auth.deps.require_admin` for the
# FastAPI admin routes, so both paths apply the same checks in the same order.
