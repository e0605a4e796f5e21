"""
storefront_admin.db.repositories.roles

Repository for `UserRole` entities (the role store).

Responsibilities:
- Resolve the single role record of a user for authorization checks.
- List and replace role assignments for the admin dashboard.
"""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront_admin.auth.models import AppRole
from storefront_admin.db.models import UserRole


class RoleRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_role(self, user_id: str) -> str | None:
        # scalar_one_or_none raises MultipleResultsFound when the record is ambiguous.
        stmt = select(UserRole.role).where(UserRole.user_id == user_id)
        role = (await self._session.execute(stmt)).scalar_one_or_none()
        return role.value if role is not None else None

    async def list_assignments(self) -> list[UserRole]:
        stmt = select(UserRole).order_by(UserRole.created_at, UserRole.user_id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def set_role(self, *, user_id: str, role: AppRole) -> UserRole:
        existing = list(
            (await self._session.execute(select(UserRole).where(UserRole.user_id == user_id)))
            .scalars()
            .all()
        )
        if len(existing) == 1:
            existing[0].role = role
            await self._session.flush()
            return existing[0]

        # Zero or several rows: collapse to a single assignment.
        await self._session.execute(delete(UserRole).where(UserRole.user_id == user_id))
        assignment = UserRole(user_id=user_id, role=role)
        self._session.add(assignment)
        await self._session.flush()
        return assignment


# --- Module Notes -----------------------------------------------------------
# Commit is left to the caller (router) so a request maps to one transaction.
