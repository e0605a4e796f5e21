"""
storefront_admin.auth

Authentication/authorization package.

Responsibilities:
- Caller identity model and token helpers.
- Identity verifiers that turn a bearer token into a `Principal`.
- FastAPI auth dependencies (Principal + admin guard).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Role lookups live in the db package; this package only answers "who is calling".
