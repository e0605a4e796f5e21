"""
storefront_admin.auth.deps

FastAPI dependency functions for authentication and authorization.

Responsibilities:
- Reusable admin guard for the admin routes (`require_admin`).
- Map gate failures onto conventional 401/403 responses.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from storefront_admin.api.deps import admin_gate
from storefront_admin.auth.models import Principal
from storefront_admin.errors import ForbiddenError, MissingCredentialError, UnauthorizedError
from storefront_admin.services.admin_gate import AdminGate

_bearer = HTTPBearer(auto_error=False)


async def get_principal(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    gate: AdminGate = Depends(admin_gate),
) -> Principal:
    if creds is None or not creds.credentials:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Missing bearer token")
    try:
        return await gate.authenticate(f"Bearer {creds.credentials}")
    except (MissingCredentialError, UnauthorizedError) as e:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail=e.message) from e


async def require_admin(
    principal: Principal = Depends(get_principal),
    gate: AdminGate = Depends(admin_gate),
) -> Principal:
    try:
        return await gate.authorize(principal)
    except ForbiddenError as e:
        raise HTTPException(status_code=HTTP_403_FORBIDDEN, detail=e.message) from e


# --- Module Notes -----------------------------------------------------------
# The delete-user endpoint keeps its own error contract and calls `AdminGate`
# directly; all other admin routes depend on `require_admin`.
