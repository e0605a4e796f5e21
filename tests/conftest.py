"""
tests.conftest

Shared fixtures: an in-process app with fake identity-provider boundaries and a
temporary SQLite role store.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import httpx
import pytest
from fastapi import FastAPI

from storefront_admin.api.app import create_app
from storefront_admin.api.deps import account_admin, identity_verifier
from storefront_admin.auth.models import AppRole, Principal
from storefront_admin.db.repositories.roles import RoleRepo
from storefront_admin.errors import UnauthorizedError
from storefront_admin.settings import Settings

ADMIN_ID = "0b8e7f5a-1c2d-4e3f-9a0b-111111111111"
USER_ID = "0b8e7f5a-1c2d-4e3f-9a0b-222222222222"
NO_ROLE_ID = "0b8e7f5a-1c2d-4e3f-9a0b-333333333333"
TARGET_ID = "0b8e7f5a-1c2d-4e3f-9a0b-444444444444"

ADMIN_TOKEN = "admin-token"
USER_TOKEN = "user-token"
NO_ROLE_TOKEN = "no-role-token"


class FakeVerifier:
    def __init__(self, principals: dict[str, Principal]) -> None:
        self._principals = principals
        self.calls: list[str] = []

    async def verify(self, token: str) -> Principal:
        self.calls.append(token)
        principal = self._principals.get(token)
        if principal is None:
            raise UnauthorizedError()
        return principal


class FakeAccounts:
    def __init__(self) -> None:
        self.deleted: list[str] = []
        self.error: Exception | None = None

    async def delete_account(self, user_id: str) -> None:
        self.deleted.append(user_id)
        if self.error is not None:
            raise self.error


@dataclass
class Harness:
    app: FastAPI
    client: httpx.AsyncClient
    verifier: FakeVerifier
    accounts: FakeAccounts = field(default_factory=FakeAccounts)

    async def delete_user(self, body: Any = None, *, token: str | None = ADMIN_TOKEN) -> httpx.Response:
        headers = {"Authorization": f"Bearer {token}"} if token is not None else {}
        return await self.client.post("/functions/v1/delete-user", json=body, headers=headers)


def make_settings(tmp_path: Path, **overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "env": "test",
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'roles.db'}",
        "service_role_key": "service-role-key",
    }
    values.update(overrides)
    return Settings(**values)


async def seed_roles(app: FastAPI, roles: dict[str, AppRole]) -> None:
    async with app.state.sessionmaker() as session:
        repo = RoleRepo(session)
        for user_id, role in roles.items():
            await repo.set_role(user_id=user_id, role=role)
        await session.commit()


@pytest.fixture
def harness_factory(tmp_path: Path) -> Callable[..., AbstractAsyncContextManager[Harness]]:
    @asynccontextmanager
    async def factory(*, fake_verifier: bool = True, **overrides: Any) -> AsyncIterator[Harness]:
        app = create_app(settings=make_settings(tmp_path, **overrides))
        verifier = FakeVerifier(
            {
                ADMIN_TOKEN: Principal(subject=ADMIN_ID, email="admin@example.com"),
                USER_TOKEN: Principal(subject=USER_ID, email="shopper@example.com"),
                NO_ROLE_TOKEN: Principal(subject=NO_ROLE_ID),
            }
        )
        accounts = FakeAccounts()
        if fake_verifier:
            app.dependency_overrides[identity_verifier] = lambda: verifier
        app.dependency_overrides[account_admin] = lambda: accounts

        # httpx ASGITransport does not run the lifespan; do it explicitly.
        async with app.router.lifespan_context(app):
            await seed_roles(app, {ADMIN_ID: AppRole.admin, USER_ID: AppRole.user})
            transport = httpx.ASGITransport(app=app)
            async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
                yield Harness(app=app, client=client, verifier=verifier, accounts=accounts)

    return factory
