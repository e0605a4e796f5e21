"""
storefront_admin.auth.verifier

Identity verifiers: exchange a bearer token for the caller's identity.

Responsibilities:
- Define the `IdentityVerifier` boundary used by the admin gate.
- Remote verification against the identity provider (default).
- Local signature verification for deployments that share the JWT secret.
"""

from __future__ import annotations

from typing import Protocol

from storefront_admin.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate
from storefront_admin.auth.models import Principal
from storefront_admin.errors import DownstreamError, UnauthorizedError
from storefront_admin.identity_clients.gotrue import GoTrueClient
from storefront_admin.observability.logging import get_logger
from storefront_admin.settings import Settings

log = get_logger(__name__)


class IdentityVerifier(Protocol):
    async def verify(self, token: str) -> Principal: ...


class RemoteIdentityVerifier:
    """
    Asks the identity provider who owns the token. Holds no session state: nothing is
    cached, persisted or refreshed between calls.
    """

    def __init__(self, *, client: GoTrueClient) -> None:
        self._client = client

    async def verify(self, token: str) -> Principal:
        try:
            user = await self._client.get_user(token)
        except DownstreamError as e:
            log.info("token_rejected", verifier="remote", upstream_status=e.upstream_status)
            raise UnauthorizedError() from e

        subject = str(user.get("id") or "")
        if not subject:
            raise UnauthorizedError()
        return Principal(subject=subject, email=user.get("email"))


class JwtIdentityVerifier:
    def __init__(self, *, cfg: JwtConfig) -> None:
        self._cfg = cfg

    async def verify(self, token: str) -> Principal:
        try:
            payload = decode_and_validate(cfg=self._cfg, token=token)
        except JwtValidationError as e:
            log.info("token_rejected", verifier="local", reason=str(e))
            raise UnauthorizedError() from e

        subject = str(payload.get("sub") or "")
        if not subject:
            raise UnauthorizedError()
        email = payload.get("email")
        return Principal(subject=subject, email=str(email) if email else None)


def jwt_config(settings: Settings) -> JwtConfig:
    return JwtConfig(
        alg=settings.jwt_alg,
        audience=settings.jwt_audience,
        secret=settings.jwt_secret,
        issuer=settings.jwt_issuer,
    )


def build_verifier(*, settings: Settings, client: GoTrueClient) -> IdentityVerifier:
    if settings.token_verification == "local":
        return JwtIdentityVerifier(cfg=jwt_config(settings))
    return RemoteIdentityVerifier(client=client)


# --- Module Notes -----------------------------------------------------------
# Remote verification also catches revoked sessions and deleted users; local
# verification trusts the token until it expires.
