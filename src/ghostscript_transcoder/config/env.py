"""Environment variable reader with dependency injection support.

This module provides the EnvReader class for reading and parsing environment
variables with type conversion and validation. It supports dependency injection
for testing by accepting an optional env mapping.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


class EnvReader:
    """Environment variable reader with type conversion and validation.

    Supports dependency injection by accepting an optional env mapping,
    making it easy to test code that depends on environment variables
    without modifying os.environ.

    Example:
        reader = EnvReader(env={"GST_TIMEOUT": "60"})
        reader.get_float("GST_TIMEOUT", 300)  # Returns 60.0
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        """Initialize the environment reader.

        Args:
            env: Optional mapping to use instead of os.environ.
        """
        self._env: Mapping[str, str] = env if env is not None else os.environ

    def get_str(self, var: str, default: str | None = None) -> str | None:
        """Get a string from environment variable, or default if unset."""
        value = self._env.get(var)
        if value is None:
            return default
        return value

    def get_float(self, var: str, default: float | None = None) -> float | None:
        """Get a float from environment variable.

        Returns:
            Parsed float value, or default if not set or invalid.
            Logs a warning if the value is set but cannot be parsed.
        """
        value = self._env.get(var)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            logger.warning("Invalid float value for %s: %s", var, value)
            return default

    def get_path(
        self, var: str, must_exist: bool = True, default: Path | None = None
    ) -> Path | None:
        """Get a path from environment variable.

        Args:
            var: Environment variable name.
            must_exist: If True, a path that does not exist is logged and
                replaced by default.
            default: Default value if not set or path doesn't exist.
        """
        value = self._env.get(var)
        if value is None:
            return default

        path = Path(value).expanduser()
        if must_exist and not path.exists():
            logger.warning(
                "Environment variable %s points to non-existent path: %s",
                var,
                value,
            )
            return default
        return path

    def get_str_list(
        self, var: str, separator: str = ",", default: list[str] | None = None
    ) -> list[str]:
        """Get a list of strings from a separator-delimited variable.

        Empty items are dropped; surrounding whitespace is stripped.
        """
        value = self._env.get(var)
        if value is None:
            return default if default is not None else []
        return [part.strip() for part in value.split(separator) if part.strip()]
