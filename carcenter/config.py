"""Car Center API configuration loaded from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Top-level settings for the API process.

    All env vars are prefixed with ``CARCENTER_``.
    Example: ``CARCENTER_JWT_SECRET=mysecret``
    """

    model_config = SettingsConfigDict(env_prefix="CARCENTER_")

    # --- Database -----------------------------------------------------------
    database_url: str = Field(
        description="Async SQLAlchemy URL of the user store",
    )
    create_tables: bool = Field(
        default=False,
        description="Create missing tables at startup (development / SQLite)",
    )

    # --- JWT ----------------------------------------------------------------
    jwt_secret: str = Field(
        description="Secret key used to sign JWT tokens",
    )
    jwt_algorithm: str = Field(
        default="HS256",
        description="JWT signing algorithm",
    )
    jwt_access_token_expire_seconds: int = Field(
        default=86400,
        gt=0,
        description="Access token lifetime in seconds",
    )
    jwt_refresh_token_expire_seconds: int = Field(
        default=604800,
        gt=0,
        description="Refresh token lifetime in seconds",
    )

    # --- Bootstrap administrator -------------------------------------------
    admin_username: str | None = Field(
        default=None,
        description="Username of an ADMIN account created at startup if missing",
    )
    admin_email: str | None = Field(default=None, description="E-mail of the bootstrap admin")
    admin_password: str | None = Field(default=None, description="Password of the bootstrap admin")

    # --- Server -------------------------------------------------------------
    api_prefix: str = Field(
        default="/api",
        description="Path prefix for every API route",
    )
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8080, description="Bind port")
    log_level: str = Field(default="INFO", description="Log level")
    log_json: bool = Field(
        default=True,
        description="Use JSON log output (True for prod, False for dev)",
    )

    @property
    def admin_bootstrap_enabled(self) -> bool:
        return bool(self.admin_username and self.admin_email and self.admin_password)
