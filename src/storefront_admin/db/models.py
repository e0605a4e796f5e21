"""
storefront_admin.db.models

Persistence schema for role assignments.

Responsibilities:
- Define the `user_roles` table mapping an identity-provider user id to a role.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlalchemy import Enum, String, UniqueConstraint, Uuid as SAUuid
from sqlalchemy.orm import Mapped, mapped_column

from storefront_admin.auth.models import AppRole
from storefront_admin.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(tz=UTC).replace(tzinfo=None)


class UserRole(Base):
    __tablename__ = "user_roles"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    # Account ids are owned by the identity provider; no FK from this database.
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    role: Mapped[AppRole] = mapped_column(
        Enum(AppRole, name="app_role", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)

    __table_args__ = (UniqueConstraint("user_id", "role", name="user_roles_user_id_role_key"),)


# --- Module Notes -----------------------------------------------------------
# The unique constraint allows several roles per user at the schema level; the
# admin check still reads exactly one row and treats ambiguity as a lookup error.
