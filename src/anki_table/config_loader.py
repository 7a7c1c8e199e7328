"""Config loader utilities."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .config_settings import Config
from .error_codes import ErrorCode
from .exceptions import ConfigurationError
from .utils.logging import get_logger

CONFIG_ENV_VAR = "ANKI_TABLE_CONFIG"
DEFAULT_CONFIG_NAME = "anki-table.yaml"

_config: Config | None = None


def _resolve_config_path(config_path: Path | None) -> Path | None:
    logger = get_logger(__name__)

    if config_path:
        path = config_path.expanduser()
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise ConfigurationError(
                msg,
                suggestion="Check the --config path",
                error_code=ErrorCode.CFG_INVALID.value,
            )
        logger.debug("config_loading", config_path=str(path), source="cli_argument")
        return path

    candidate_paths: list[Path] = []
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        candidate_paths.append(Path(env_path).expanduser())
    candidate_paths.append(Path.cwd() / DEFAULT_CONFIG_NAME)

    for candidate in candidate_paths:
        if candidate.exists():
            logger.debug("config_file_found", config_path=str(candidate))
            return candidate

    logger.debug(
        "config_file_not_found", searched_paths=[str(p) for p in candidate_paths]
    )
    return None


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from an optional YAML file plus the environment.

    Search order for the YAML file: ``config_path``, ``$ANKI_TABLE_CONFIG``,
    ``./anki-table.yaml``. Without a file, defaults and environment
    variables apply.
    """
    logger = get_logger(__name__)
    resolved_config_path = _resolve_config_path(config_path)

    yaml_data: dict[str, Any] = {}
    if resolved_config_path:
        try:
            with open(resolved_config_path, encoding="utf-8") as f:
                yaml_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(
                "config_yaml_load_error",
                config_path=str(resolved_config_path),
                error=str(e),
                error_type=type(e).__name__,
            )
            msg = f"Failed to parse config file: {resolved_config_path}"
            raise ConfigurationError(
                msg,
                suggestion=(
                    "Check YAML syntax (indentation, colons, quotes). "
                    f"Original error: {e}"
                ),
                error_code=ErrorCode.CFG_PARSE_FAILED.value,
            ) from e

        if not isinstance(yaml_data, dict):
            msg = f"Config file must contain a mapping: {resolved_config_path}"
            raise ConfigurationError(msg, error_code=ErrorCode.CFG_PARSE_FAILED.value)

    try:
        config = Config(**yaml_data)
    except PydanticValidationError as e:
        logger.error(
            "config_validation_error",
            error=str(e),
            config_path=str(resolved_config_path) if resolved_config_path else None,
        )
        msg = "Invalid configuration"
        raise ConfigurationError(
            msg,
            suggestion=str(e),
            error_code=ErrorCode.CFG_INVALID.value,
        ) from e

    config.validate_config()
    logger.debug(
        "config_loaded",
        config_path=str(resolved_config_path) if resolved_config_path else None,
    )
    return config


def get_config() -> Config:
    """Get singleton config instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Config) -> None:
    """Set singleton config instance (for testing)."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset global config instance (for testing only)."""
    global _config
    _config = None


__all__ = ["Config", "get_config", "load_config", "reset_config", "set_config"]
