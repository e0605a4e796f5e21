"""
storefront_admin.api.routers

HTTP routers.

Responsibilities:
- Group the route modules mounted by `storefront_admin.api.app`.
"""

# Package marker.
