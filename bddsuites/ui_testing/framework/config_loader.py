"""
================================================================================
Configuration Loader
================================================================================

Flat key/value configuration for the UI suite, stored as a YAML mapping.

Features:
    - Loaded once per run and threaded through the framework explicitly
    - Values are always returned trimmed
    - Missing and blank keys are equally fatal (no silent defaults)
    - Typed lookups (int, bool, project-relative path)
    - Reload produces a new Config object instead of mutating the old one

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from loguru import logger

from .exceptions import ConfigurationError, InvalidArgumentError


PROJECT_ROOT = Path(__file__).resolve().parents[3]

# Default configuration file, overridable with BDD_CONFIG_PATH
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "config.yaml"
CONFIG_PATH_ENV = "BDD_CONFIG_PATH"

REQUIRED_KEYS = (
    "browserType",
    "timeout",
    "environment",
    "qaUrl",
    "uatUrl",
    "prodUrl",
    "screenshotPath",
    "jsonFilePath",
    "jvmFilePath",
    "projectName",
    "reportAuthor",
)


class Config:
    """
    Immutable view over the suite configuration file.

    Usage:
        >>> config = Config.load()
        >>> config.get("browserType")
        'CHROME'
        >>> config.get_int("timeout")
        10

        # After editing the file between scenarios
        >>> config = config.reload()
    """

    def __init__(
        self,
        values: Mapping[str, Any],
        source: Optional[Path] = None,
        root: Optional[Path] = None,
    ) -> None:
        self._values: Dict[str, str] = {
            str(k): "" if v is None else str(v) for k, v in values.items()
        }
        self.source = source
        self.root = Path(root) if root else PROJECT_ROOT

    @classmethod
    def load(
        cls,
        path: Optional[Path] = None,
        root: Optional[Path] = None,
    ) -> "Config":
        """
        Read the configuration file.

        Args:
            path: YAML file to read. Falls back to $BDD_CONFIG_PATH, then
                  DEFAULT_CONFIG_PATH.
            root: Directory relative paths are resolved against.

        Raises:
            ConfigurationError: File missing, unreadable or not a mapping.
        """
        if path is None:
            path = Path(os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)
        path = Path(path)

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            logger.error(f"Unable to load configuration from: {path}")
            raise ConfigurationError(
                f"Unable to load configuration from: {path}"
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file {path}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a flat mapping: {path}"
            )

        logger.info(f"Configuration loaded successfully from: {path}")
        return cls(data, source=path, root=root)

    def reload(self) -> "Config":
        """Re-read the source file and return a fresh Config."""
        if self.source is None:
            raise ConfigurationError("Configuration was not loaded from a file")
        logger.info(f"Reloading configuration from: {self.source}")
        return Config.load(self.source, root=self.root)

    def get(self, key: str) -> str:
        """
        Return the trimmed value for key.

        Raises:
            InvalidArgumentError: key itself is blank.
            ConfigurationError: key is missing or its value is blank.
        """
        if key is None or not key.strip():
            raise InvalidArgumentError("Configuration key must not be None/blank")

        value = self._values.get(key, "").strip()
        if not value:
            logger.error(f"Configuration key '{key}' is missing/empty ({self.source})")
            raise ConfigurationError(
                f"Key not found or empty in configuration: {key}",
                details={"source": str(self.source)},
            )
        return value

    def get_int(self, key: str) -> int:
        value = self.get(key)
        try:
            return int(value)
        except ValueError as e:
            raise ConfigurationError(
                f"Configuration key '{key}' is not an integer: {value!r}"
            ) from e

    def get_bool(self, key: str) -> bool:
        return self.get(key).lower() in ("true", "1", "yes", "on")

    def get_path(self, key: str) -> Path:
        """Return key as a path, resolved against the project root if relative."""
        path = Path(self.get(key))
        return path if path.is_absolute() else self.root / path

    def missing_keys(self) -> list[str]:
        """Required keys that are absent or blank."""
        return [k for k in REQUIRED_KEYS if not self._values.get(k, "").strip()]

    def validate(self) -> "Config":
        """Fail fast when any required key is absent."""
        missing = self.missing_keys()
        if missing:
            raise ConfigurationError(
                f"Missing required configuration keys: {', '.join(missing)}",
                details={"source": str(self.source)},
            )
        return self

    def __contains__(self, key: str) -> bool:
        return bool(self._values.get(key, "").strip())

    def __repr__(self) -> str:
        return f"Config(source={self.source!s}, keys={len(self._values)})"


__all__ = [
    "Config",
    "ConfigurationError",
    "DEFAULT_CONFIG_PATH",
    "REQUIRED_KEYS",
]
