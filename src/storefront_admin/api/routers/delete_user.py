"""
storefront_admin.api.routers.delete_user

Privileged account-deletion endpoint.

Responsibilities:
- Expose `POST /functions/v1/delete-user` for the storefront admin dashboard.
- Act as the single boundary where every failure becomes `{"error": message}`.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from storefront_admin.api.deps import account_deletion_service, settings_dep
from storefront_admin.errors import AdminRequestError
from storefront_admin.observability.logging import get_logger
from storefront_admin.services.account_deletion import AccountDeletionService
from storefront_admin.settings import Settings

log = get_logger(__name__)

router = APIRouter(prefix="/functions/v1", tags=["admin"])

UNKNOWN_ERROR = "An unknown error occurred"


def _error(message: str, status_code: int, settings: Settings) -> JSONResponse:
    return JSONResponse(
        {"error": message},
        status_code=status_code if settings.strict_status_codes else 400,
    )


@router.post("/delete-user")
async def delete_user(
    request: Request,
    service: AccountDeletionService = Depends(account_deletion_service),
    settings: Settings = Depends(settings_dep),
) -> JSONResponse:
    try:
        await service.delete(
            authorization=request.headers.get("authorization"),
            read_body=request.json,
        )
    except AdminRequestError as e:
        log.info("account_deletion_rejected", reason=type(e).__name__)
        return _error(e.message, e.status_code, settings)
    except Exception:
        # Unexpected failures are logged in full but reported without detail.
        log.exception("account_deletion_failed")
        return _error(UNKNOWN_ERROR, 500, settings)

    return JSONResponse({"success": True}, status_code=200)


# --- Module Notes -----------------------------------------------------------
# Body parsing is delegated to the service (`read_body`) so a malformed body can
# never be reported before the caller has been authenticated and authorized.
