"""
storefront_admin.auth.jwt

JWT issuing and validation helpers.

Responsibilities:
- Issue short-lived user tokens for local/dev scenarios and tests.
- Decode and validate identity-provider tokens with strict claim requirements
  (exp/iat/sub/aud, iss when configured).

Note:
- Hosted identity providers sign user tokens with HS256 and a project secret by default.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt import InvalidTokenError


@dataclass(frozen=True, slots=True)
class JwtConfig:
    # Algorithm/audience (and issuer when set) are enforced during decoding.
    alg: str
    audience: str
    secret: str
    issuer: str | None = None


class JwtValidationError(Exception):
    pass


def issue_token(
    *,
    cfg: JwtConfig,
    subject: str,
    email: str | None = None,
    ttl: timedelta = timedelta(hours=1),
) -> str:
    now = datetime.now(tz=UTC)
    payload: dict[str, Any] = {
        "aud": cfg.audience,
        "sub": subject,
        "role": "authenticated",
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
    }
    if email is not None:
        payload["email"] = email
    if cfg.issuer is not None:
        payload["iss"] = cfg.issuer
    return jwt.encode(payload, cfg.secret, algorithm=cfg.alg)


def decode_and_validate(*, cfg: JwtConfig, token: str) -> dict[str, Any]:
    required = ["exp", "iat", "aud", "sub"]
    if cfg.issuer is not None:
        required.append("iss")
    try:
        return jwt.decode(
            token,
            cfg.secret,
            algorithms=[cfg.alg],
            audience=cfg.audience,
            issuer=cfg.issuer,
            options={"require": required},
        )
    except InvalidTokenError as e:
        raise JwtValidationError(str(e)) from e


# --- Module Notes -----------------------------------------------------------
# Token issuing is used by:
# - `api/routers/dev_auth.py` (dev convenience)
# - tests that run with `token_verification="local"`
