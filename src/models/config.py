"""Configuration models for slug resolution."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from src.constants import (
    DEFAULT_COMPONENTS_TABLE,
    DEFAULT_DEBOUNCE_SECONDS,
    DEFAULT_FALLBACK_BASE,
    DEFAULT_MAX_RESOLUTION_ATTEMPTS,
    DEFAULT_NAMESPACE_COLUMN,
    DEFAULT_ORACLE_TIMEOUT_SECONDS,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_RETRY_MAX_WAIT,
    DEFAULT_RETRY_MIN_WAIT,
    DEFAULT_SLUG_COLUMN,
)
from src.utils.slug import is_valid_slug


class OracleConfig(BaseModel):
    """Configuration for the Supabase-backed uniqueness oracle.

    The API key is read from the environment, never from this file.
    """

    base_url: str = Field(default="http://localhost:54321", description="Supabase project URL")
    table: str = Field(default=DEFAULT_COMPONENTS_TABLE, description="Table holding slugs")
    slug_column: str = Field(default=DEFAULT_SLUG_COLUMN)
    namespace_column: str = Field(
        default=DEFAULT_NAMESPACE_COLUMN, description="Column scoping slugs to an owner"
    )
    api_key_env: str = Field(
        default="SUPABASE_ANON_KEY", description="Environment variable holding the API key"
    )
    url_env: str = Field(
        default="SUPABASE_URL", description="Environment variable overriding base_url"
    )


class ResolverConfig(BaseModel):
    """Automatic slug generation (suffix probing) configuration."""

    max_attempts: int = Field(
        default=DEFAULT_MAX_RESOLUTION_ATTEMPTS, ge=1, description="Oracle queries before giving up"
    )
    oracle_timeout_seconds: float = Field(default=DEFAULT_ORACLE_TIMEOUT_SECONDS, gt=0.0)
    fallback_base: str | None = Field(
        default=DEFAULT_FALLBACK_BASE,
        description="Base slug used when a name yields no slug (None disables the fallback)",
    )
    transliterate_fallback: bool = Field(
        default=True, description="Try an ASCII transliteration before the fallback base"
    )

    @field_validator("fallback_base")
    @classmethod
    def validate_fallback_base(cls, v: str | None) -> str | None:
        """Ensure the fallback base is itself a valid slug."""
        if v is not None and not is_valid_slug(v):
            raise ValueError(f"fallback_base must be a valid slug, got {v!r}")
        return v


class CheckerConfig(BaseModel):
    """Interactive availability checking configuration."""

    enabled: bool = Field(default=True)
    debounce_seconds: float = Field(default=DEFAULT_DEBOUNCE_SECONDS, ge=0.0)
    oracle_timeout_seconds: float = Field(default=DEFAULT_ORACLE_TIMEOUT_SECONDS, gt=0.0)


class RetryConfig(BaseModel):
    """Caller-side retry policy for transient oracle failures."""

    attempts: int = Field(default=DEFAULT_RETRY_ATTEMPTS, ge=1)
    min_wait_seconds: float = Field(default=DEFAULT_RETRY_MIN_WAIT, ge=0.0)
    max_wait_seconds: float = Field(default=DEFAULT_RETRY_MAX_WAIT, ge=0.0)


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    serialize: bool = Field(default=False, description="Serialize file logs to JSON")
    colorize: bool = Field(default=True, description="Colorize console output")
    file_path: str | None = Field(default=None, description="Optional log file")
    rotation: str = Field(default="10 MB", description="Log rotation size/time")
    retention: str = Field(default="7 days", description="Log retention period")
    compression: str = Field(default="zip", description="Compression format for rotated logs")


class AppMetadata(BaseModel):
    """Application metadata."""

    name: str = Field(default="component-slug")
    version: str = Field(default="1.0.0")


class AppConfig(BaseModel):
    """Complete application configuration."""

    app: AppMetadata = Field(default_factory=AppMetadata)
    oracle: OracleConfig = Field(default_factory=OracleConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    checker: CheckerConfig = Field(default_factory=CheckerConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
