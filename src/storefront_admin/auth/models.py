"""
storefront_admin.auth.models

Auth domain models.

Responsibilities:
- Define the verified caller identity type (`Principal`).
- Define the role vocabulary stored in the role table.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class AppRole(enum.StrEnum):
    # Values are stored in the `user_roles` table; treat as stable contract.
    admin = "admin"
    user = "user"


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Verified caller identity.
    """

    subject: str
    email: str | None = None


# --- Module Notes -----------------------------------------------------------
# Principal deliberately carries no roles: roles are read from the role store on
# every request, never trusted from the token.
