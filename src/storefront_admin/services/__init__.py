"""
storefront_admin.services

Service layer.

Responsibilities:
- Authorization pipeline shared by every admin route (`admin_gate`).
- The privileged account-deletion operation (`account_deletion`).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services raise `storefront_admin.errors` exceptions; routers decide the HTTP shape.
