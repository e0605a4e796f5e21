"""
storefront_admin.services.account_deletion

Privileged account deletion.

Responsibilities:
- Run the admin gate, then validate the deletion target.
- Refuse self-deletion against the verified identity.
- Dispatch exactly one administrative delete once every check has passed.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from storefront_admin.errors import BadRequestError, MissingTargetError, SelfDeletionError
from storefront_admin.identity_clients.gotrue import AccountAdmin
from storefront_admin.observability.logging import get_logger
from storefront_admin.services.admin_gate import AdminGate

log = get_logger(__name__)


def target_user_id(body: Any) -> str:
    if not isinstance(body, dict):
        raise MissingTargetError()
    user_id = body.get("userId")
    if user_id is None or user_id == "":
        raise MissingTargetError()
    if not isinstance(user_id, str):
        raise BadRequestError("userId must be a string")
    return user_id


class AccountDeletionService:
    """
    Each step is a hard gate: a failure raises before anything later runs, and the
    delete call is only issued after all of them succeed.
    """

    def __init__(self, *, gate: AdminGate, accounts: AccountAdmin) -> None:
        self._gate = gate
        self._accounts = accounts

    async def delete(
        self,
        *,
        authorization: str | None,
        read_body: Callable[[], Awaitable[Any]],
    ) -> str:
        principal = await self._gate.authenticate(authorization)
        await self._gate.authorize(principal)

        # The body is only parsed once the caller is known to be an admin.
        try:
            body = await read_body()
        except ValueError as e:
            raise BadRequestError("Invalid JSON body") from e
        target = target_user_id(body)

        if target == principal.subject:
            raise SelfDeletionError()

        await self._accounts.delete_account(target)
        log.info("account_deleted", actor=principal.subject, target_user_id=target)
        return target


# --- Module Notes -----------------------------------------------------------
# A repeated request for an already-deleted account fails at the provider
# ("User not found"); that is reported as-is rather than treated as success.
