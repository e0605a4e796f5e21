"""
storefront_admin.api.routers.roles

Role management for the admin dashboard.

Responsibilities:
- List every user's role assignment.
- Change a user's role between `admin` and `user`.
"""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from storefront_admin.api.deps import db_session
from storefront_admin.auth.deps import require_admin
from storefront_admin.auth.models import AppRole, Principal
from storefront_admin.db.models import UserRole
from storefront_admin.db.repositories.roles import RoleRepo
from storefront_admin.observability.logging import get_logger

log = get_logger(__name__)

router = APIRouter(
    prefix="/v1/admin/roles",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


class RoleAssignmentResponse(BaseModel):
    user_id: str
    role: AppRole
    created_at: datetime


class RoleUpdateRequest(BaseModel):
    role: AppRole


def _to_response(a: UserRole) -> RoleAssignmentResponse:
    return RoleAssignmentResponse(user_id=a.user_id, role=a.role, created_at=a.created_at)


@router.get("", response_model=list[RoleAssignmentResponse])
async def list_roles(
    session: AsyncSession = Depends(db_session),
) -> list[RoleAssignmentResponse]:
    assignments = await RoleRepo(session).list_assignments()
    return [_to_response(a) for a in assignments]


@router.put("/{user_id}", response_model=RoleAssignmentResponse)
async def set_role(
    user_id: str,
    body: RoleUpdateRequest,
    principal: Principal = Depends(require_admin),
    session: AsyncSession = Depends(db_session),
) -> RoleAssignmentResponse:
    assignment = await RoleRepo(session).set_role(user_id=user_id, role=body.role)
    await session.commit()
    log.info("role_updated", actor=principal.subject, user_id=user_id, role=body.role.value)
    return _to_response(assignment)
