"""
storefront_admin.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, DB sessions and identity clients.
- Assemble per-request services from the shared resources on app.state.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront_admin.auth.verifier import IdentityVerifier
from storefront_admin.db.repositories.roles import RoleRepo
from storefront_admin.identity_clients.gotrue import AccountAdmin
from storefront_admin.services.account_deletion import AccountDeletionService
from storefront_admin.services.admin_gate import AdminGate
from storefront_admin.settings import Settings


def settings_dep(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[no-any-return]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # The sessionmaker is created in the lifespan of `storefront_admin.api.app.create_app`.
    return request.app.state.sessionmaker  # type: ignore[no-any-return]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped DB session. Commit is explicit in the routers that write.
    async with session_factory() as session:
        yield session


def role_repo(session: AsyncSession = Depends(db_session)) -> RoleRepo:
    return RoleRepo(session)


def identity_verifier(request: Request) -> IdentityVerifier:
    return request.app.state.identity_verifier  # type: ignore[no-any-return]


def account_admin(request: Request) -> AccountAdmin:
    return request.app.state.account_admin  # type: ignore[no-any-return]


def admin_gate(
    verifier: IdentityVerifier = Depends(identity_verifier),
    roles: RoleRepo = Depends(role_repo),
    settings: Settings = Depends(settings_dep),
) -> AdminGate:
    return AdminGate(
        verifier=verifier,
        roles=roles,
        admin_role=settings.admin_role,
        lookup_timeout=settings.upstream_timeout_seconds,
    )


def account_deletion_service(
    gate: AdminGate = Depends(admin_gate),
    accounts: AccountAdmin = Depends(account_admin),
) -> AccountDeletionService:
    return AccountDeletionService(gate=gate, accounts=accounts)


# --- Module Notes -----------------------------------------------------------
# Tests replace `identity_verifier` and `account_admin` through
# `app.dependency_overrides`; everything else is built from them.
