"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from easekit.core.config.models import AppConfig
from easekit.core.curves.library import build_catalogue, register_custom_curves
from easekit.core.curves.registry import CurveRegistry
from easekit.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("easekit.json")
        'json'
        >>> detect_format("easekit.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    if suffix in (".yaml", ".yml"):
        return "yaml"
    raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary; empty for an empty YAML file.

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            content = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if content is None:
            content = {}

    if not isinstance(content, dict):
        raise ValueError(f"Config root in {path} must be a mapping, got {type(content).__name__}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Args:
        path: Path to app config file (.json, .yaml, or .yml). Defaults to
            ``AppConfig.default_path()``; a missing file at that location
            yields the defaults.

    Returns:
        Validated AppConfig instance with defaults for missing values

    Raises:
        FileNotFoundError: If an explicitly given file does not exist
        ValueError: If the file cannot be parsed
        ValidationError: If config is invalid
    """
    if path is None:
        path = AppConfig.default_path()
        if not path.exists():
            logger.debug("No config file at %s, using defaults", path)
            return AppConfig()

    raw_config = load_config(path)
    return AppConfig.model_validate(raw_config)


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        structured=config.logging.structured,
    )


def build_registry(config: AppConfig) -> CurveRegistry:
    """Build the configured catalogue and register the custom curves on top.

    Raises:
        ValueError: If a custom curve's parameters do not fit its generator
    """
    registry = build_catalogue(config.catalogue)
    custom = register_custom_curves(registry, config.custom_curves)
    logger.debug(
        "Built %s registry with %d curves (%d custom)",
        config.catalogue.value,
        len(registry),
        len(custom),
    )
    return registry
