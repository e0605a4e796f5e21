"""
tests.test_roles_api

Role management routes behind the reusable admin guard.
"""

from __future__ import annotations

import pytest

from tests.conftest import ADMIN_ID, ADMIN_TOKEN, NO_ROLE_ID, USER_ID, USER_TOKEN


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
async def test_admin_lists_role_assignments(harness_factory) -> None:
    async with harness_factory() as h:
        r = await h.client.get("/v1/admin/roles", headers=bearer(ADMIN_TOKEN))

        assert r.status_code == 200
        roles = {item["user_id"]: item["role"] for item in r.json()}
        assert roles == {ADMIN_ID: "admin", USER_ID: "user"}


@pytest.mark.asyncio
async def test_role_routes_require_a_token(harness_factory) -> None:
    async with harness_factory() as h:
        r = await h.client.get("/v1/admin/roles")
        assert r.status_code == 401

        r = await h.client.get("/v1/admin/roles", headers=bearer("bogus"))
        assert r.status_code == 401
        assert r.json()["detail"] == "Unauthorized"


@pytest.mark.asyncio
async def test_role_routes_require_admin(harness_factory) -> None:
    async with harness_factory() as h:
        r = await h.client.get("/v1/admin/roles", headers=bearer(USER_TOKEN))
        assert r.status_code == 403

        r = await h.client.put(
            f"/v1/admin/roles/{USER_ID}", json={"role": "admin"}, headers=bearer(USER_TOKEN)
        )
        assert r.status_code == 403


@pytest.mark.asyncio
async def test_admin_promotes_user(harness_factory) -> None:
    async with harness_factory() as h:
        r = await h.client.put(
            f"/v1/admin/roles/{USER_ID}", json={"role": "admin"}, headers=bearer(ADMIN_TOKEN)
        )
        assert r.status_code == 200
        assert r.json()["role"] == "admin"

        # The promoted user now passes the admin guard.
        r = await h.client.get("/v1/admin/roles", headers=bearer(USER_TOKEN))
        assert r.status_code == 200


@pytest.mark.asyncio
async def test_setting_role_for_user_without_record_creates_one(harness_factory) -> None:
    async with harness_factory() as h:
        r = await h.client.put(
            f"/v1/admin/roles/{NO_ROLE_ID}", json={"role": "user"}, headers=bearer(ADMIN_TOKEN)
        )
        assert r.status_code == 200

        r = await h.client.get("/v1/admin/roles", headers=bearer(ADMIN_TOKEN))
        assert {item["user_id"] for item in r.json()} == {ADMIN_ID, USER_ID, NO_ROLE_ID}


@pytest.mark.asyncio
async def test_unknown_role_is_rejected(harness_factory) -> None:
    async with harness_factory() as h:
        r = await h.client.put(
            f"/v1/admin/roles/{USER_ID}", json={"role": "owner"}, headers=bearer(ADMIN_TOKEN)
        )
        assert r.status_code == 422
