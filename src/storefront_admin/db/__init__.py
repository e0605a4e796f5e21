"""
storefront_admin.db

Persistence package (SQLAlchemy async) backing the role store.

Responsibilities:
- Provide ORM models, engine/session setup, and repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# In production `database_url` points at the hosted Postgres database
# (postgresql+asyncpg://...); dev and tests use SQLite through aiosqlite.
