"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ADMIN_POLICIES = ("allow_all", "read_only")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        description="SQLAlchemy async connection string (postgresql+asyncpg:// or sqlite+aiosqlite://)",
    )

    # Debug / environment
    debug: bool = Field(
        default=False,
        description="Expose raw exception text in 500 responses",
    )
    environment: str = Field(
        default="production",
        description="Deployment environment name (e.g. production, dev, staging)",
    )

    # API
    api_prefix: str = Field(
        default="/api",
        description="Prefix for all public and admin routes",
    )

    # Media
    asset_base_url: str = Field(
        default="http://localhost:8000",
        description="Public base URL that relative image/icon storage paths are expanded against",
    )

    @field_validator("asset_base_url")
    @classmethod
    def validate_asset_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            msg = "asset_base_url must start with http:// or https://"
            raise ValueError(msg)
        return v.rstrip("/")

    # Cache
    cache_url: str | None = Field(
        default=None,
        description="Redis URL for the shared cache (in-process cache when unset)",
    )
    cache_key_prefix: str = Field(
        default="showcase:",
        description="Namespace prepended to every Redis cache key",
    )
    cache_list_ttl: int = Field(
        default=3600,
        description="TTL in seconds for cached list and single-record payloads",
        gt=0,
    )
    cache_stats_ttl: int = Field(
        default=1800,
        description="TTL in seconds for cached statistics payloads",
        gt=0,
    )

    # Admin authorization
    admin_policy: str = Field(
        default="allow_all",
        description="Authorization policy for admin endpoints: allow_all or read_only",
    )

    @field_validator("admin_policy")
    @classmethod
    def validate_admin_policy(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in _ADMIN_POLICIES:
            msg = f"Invalid admin_policy: must be one of {', '.join(_ADMIN_POLICIES)}"
            raise ValueError(msg)
        return v

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )

    # CORS
    cors_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins (must be explicitly configured)",
    )
    cors_origin_regex: str = Field(
        default="",
        description="Regex pattern for allowed CORS origins",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        if not self.cors_origins.strip():
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()  # type: ignore[call-arg]
