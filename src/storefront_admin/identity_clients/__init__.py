"""
storefront_admin.identity_clients

Identity-provider client package.

Responsibilities:
- Provide client interfaces for calling the hosted identity provider (token lookup,
  administrative account removal).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services depend on the `AccountAdmin` boundary, not on HTTP details.
