"""
storefront_admin.errors

Client-visible failure taxonomy for administrative requests.

Responsibilities:
- Name each way an admin request can be refused.
- Carry the short message returned to the caller and the status used in strict mode.
"""

from __future__ import annotations


class AdminRequestError(Exception):
    """
    Base class for failures that are reported to the caller as `{"error": message}`.
    """

    default_message = "Bad request"
    status_code = 400

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingCredentialError(AdminRequestError):
    default_message = "Missing authorization header"
    status_code = 401


class UnauthorizedError(AdminRequestError):
    default_message = "Unauthorized"
    status_code = 401


class ForbiddenError(AdminRequestError):
    default_message = "Forbidden: Admin access required"
    status_code = 403


class BadRequestError(AdminRequestError):
    default_message = "Bad request"
    status_code = 400


class MissingTargetError(BadRequestError):
    default_message = "Missing userId in request body"


class SelfDeletionError(BadRequestError):
    default_message = "Cannot delete your own account"


class DownstreamError(AdminRequestError):
    default_message = "Identity provider request failed"
    status_code = 502

    def __init__(self, message: str | None = None, *, upstream_status: int | None = None) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status
        if upstream_status == 404:
            self.status_code = 404


# --- Module Notes -----------------------------------------------------------
# status_code is only surfaced when `strict_status_codes` is enabled; the default
# contract reports every failure as 400.
