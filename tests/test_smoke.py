"""
tests.test_smoke

Smoke tests: the service boots, serves its probes and wires the real verifier.

Responsibilities:
- Ensure the FastAPI app starts and the role-store readiness probe works in test mode.
- Exercise delete-user end to end with locally signed tokens.
"""

from __future__ import annotations

import pytest

from storefront_admin.observability.logging import REDACTED, redact_secrets
from tests.conftest import ADMIN_ID, TARGET_ID, USER_ID


@pytest.mark.asyncio
async def test_health_endpoints(harness_factory) -> None:
    async with harness_factory() as h:
        r = await h.client.get("/healthz")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"

        r = await h.client.get("/readyz")
        assert r.status_code == 200
        assert r.json()["status"] == "ready"


@pytest.mark.asyncio
async def test_request_id_is_propagated(harness_factory) -> None:
    async with harness_factory() as h:
        r = await h.client.get("/healthz", headers={"x-request-id": "req-42"})
        assert r.headers["x-request-id"] == "req-42"


@pytest.mark.asyncio
async def test_dev_token_requires_local_verification(harness_factory) -> None:
    async with harness_factory(token_verification="remote") as h:
        r = await h.client.post("/v1/dev/token", json={"subject": ADMIN_ID})
        assert r.status_code == 404


@pytest.mark.asyncio
async def test_delete_user_with_locally_verified_tokens(harness_factory) -> None:
    async with harness_factory(
        fake_verifier=False, token_verification="local", jwt_secret="test-secret"
    ) as h:
        r = await h.client.post("/v1/dev/token", json={"subject": ADMIN_ID})
        assert r.status_code == 200
        admin_token = r.json()["access_token"]

        r = await h.client.post("/v1/dev/token", json={"subject": USER_ID})
        user_token = r.json()["access_token"]

        r = await h.delete_user({"userId": TARGET_ID}, token=user_token)
        assert r.json() == {"error": "Forbidden: Admin access required"}

        r = await h.delete_user({"userId": ADMIN_ID}, token=admin_token)
        assert r.json() == {"error": "Cannot delete your own account"}

        r = await h.delete_user({"userId": TARGET_ID}, token=admin_token)
        assert r.status_code == 200
        assert r.json() == {"success": True}
        assert h.accounts.deleted == [TARGET_ID]


def test_log_redaction_masks_credentials() -> None:
    event = redact_secrets(None, "info", {"event": "x", "authorization": "Bearer t", "user_id": "u"})

    assert event == {"event": "x", "authorization": REDACTED, "user_id": "u"}
