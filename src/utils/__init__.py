"""Utility functions and helpers."""

from src.utils.config_loader import load_app_config, load_yaml_config
from src.utils.logging import get_logger, setup_logging
from src.utils.retry import call_with_retry
from src.utils.slug import (
    is_valid_slug,
    normalize_slug,
    suffixed_slug,
    transliterate_slug,
    validate_slug,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "load_yaml_config",
    "load_app_config",
    "call_with_retry",
    "normalize_slug",
    "is_valid_slug",
    "validate_slug",
    "transliterate_slug",
    "suffixed_slug",
]
