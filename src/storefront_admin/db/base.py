"""
storefront_admin.db.base

SQLAlchemy declarative base for the role store.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
