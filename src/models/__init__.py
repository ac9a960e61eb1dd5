"""Pydantic data models for slug resolution."""

from src.models.config import (
    AppConfig,
    AppMetadata,
    CheckerConfig,
    LoggingConfig,
    OracleConfig,
    ResolverConfig,
    RetryConfig,
)
from src.models.slug import (
    CandidateIdentifier,
    ResolutionAttempt,
    ResolutionResult,
    SlugCheckState,
    SlugFormState,
)

__all__ = [
    # Slugs
    "CandidateIdentifier",
    "ResolutionAttempt",
    "ResolutionResult",
    "SlugCheckState",
    "SlugFormState",
    # Config
    "AppMetadata",
    "AppConfig",
    "OracleConfig",
    "ResolverConfig",
    "CheckerConfig",
    "RetryConfig",
    "LoggingConfig",
]
