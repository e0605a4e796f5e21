"""
storefront_admin.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (service role key, JWT secret).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    - Strict env-driven configuration
    - Defaults safe for local dev
    - Single settings object injected across layers
    """

    model_config = SettingsConfigDict(env_prefix="STOREFRONT_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "storefront-admin"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Hosted identity provider (GoTrue). The service role key is the privileged
    # credential for admin operations; it only ever leaves the process in outbound headers.
    supabase_url: str = "http://localhost:54321"
    service_role_key: str = Field(default="", repr=False)

    # "remote" asks the identity provider; "local" checks the signature with jwt_secret.
    token_verification: Literal["remote", "local"] = "remote"
    jwt_alg: str = "HS256"
    jwt_audience: str = "authenticated"
    jwt_issuer: str | None = None
    jwt_secret: str = Field(default="dev-secret-change-me", repr=False)

    # Role store
    database_url: str = "sqlite+aiosqlite:///./storefront.db"
    admin_role: str = "admin"

    # Applies to every outbound call (token check, role lookup, account delete).
    upstream_timeout_seconds: float = Field(default=10.0, gt=0)

    cors_allow_origin: str = "*"
    cors_allow_headers: str = "authorization, x-client-info, apikey, content-type"

    # False keeps the storefront client contract: every failure is a 400.
    strict_status_codes: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Every component reads its configuration from here; nothing else touches os.environ
# except the Alembic environment.
