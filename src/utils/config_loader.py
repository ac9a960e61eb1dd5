"""Configuration loading utilities."""

from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from src.utils.logging import get_logger

if TYPE_CHECKING:
    from src.models.config import AppConfig

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


def load_yaml_config(file_path: Path | str, model_class: type[T]) -> T:
    """
    Load and validate YAML configuration file.

    Args:
        file_path: Path to YAML configuration file
        model_class: Pydantic model class to validate against

    Returns:
        Validated configuration instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
        yaml.YAMLError: If YAML is malformed

    Examples:
        >>> from src.models.config import AppConfig
        >>> config = load_yaml_config("config/slugs.yaml", AppConfig)
    """
    path = Path(file_path)

    if not path.exists():
        logger.error("Configuration file not found", path=str(path))
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with path.open("r") as f:
            raw_config = yaml.safe_load(f)

        # An empty file means "all defaults"
        config = model_class.model_validate(raw_config or {})
        logger.info("Configuration loaded", path=str(path), model=model_class.__name__)
        return config

    except yaml.YAMLError as e:
        logger.error("Invalid YAML syntax", path=str(path), error=str(e))
        raise

    except ValidationError as e:
        logger.error("Configuration validation failed", path=str(path), error=str(e))
        raise


def load_app_config(file_path: Path | str | None = "config/slugs.yaml") -> "AppConfig":
    """
    Load application configuration, falling back to defaults.

    Args:
        file_path: Path to slugs.yaml file (None for defaults only)

    Returns:
        AppConfig instance
    """
    from src.models.config import AppConfig

    if file_path is None or not Path(file_path).exists():
        logger.warning(f"Config file {file_path} not found, using defaults")
        return AppConfig()

    return load_yaml_config(file_path, AppConfig)
