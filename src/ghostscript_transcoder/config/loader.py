"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to get_config)
2. Environment variables (GST_*)
3. Config file (~/.ghostscript-transcoder/config.toml)
4. Default values

Environment variables:
- GST_CONFIG_PATH: Path to config file (overrides default location)
- GST_BINARIES: Comma-separated Ghostscript candidates, tried in order
- GST_TIMEOUT: Seconds before a conversion is killed (0 = no limit)
- GST_WORKING_DIR: Working directory for the Ghostscript process
- GST_LOG_LEVEL: Log level (debug, info, warning, error)
- GST_LOG_FILE: Log file path
- GST_LOG_FORMAT: Log format (text, json)
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from ghostscript_transcoder.config.env import EnvReader
from ghostscript_transcoder.config.models import (
    DEFAULT_BINARIES,
    EngineConfig,
    LoggingConfig,
    TranscoderConfig,
)

logger = logging.getLogger(__name__)

# Default config location
DEFAULT_CONFIG_DIR = Path.home() / ".ghostscript-transcoder"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"

_config_cache: dict[Path | None, TranscoderConfig] = {}


def get_default_config_path(env: EnvReader | None = None) -> Path:
    """Get the default config file path.

    Can be overridden by GST_CONFIG_PATH environment variable.
    """
    reader = env or EnvReader()
    env_path = reader.get_str("GST_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_FILE


def load_config_file(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        path: Path to config file. If None, uses default location.

    Returns:
        Parsed configuration dict. Empty dict if the file doesn't exist or
        cannot be parsed.
    """
    if path is None:
        path = get_default_config_path()

    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}

    try:
        with path.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to load config file %s: %s", path, e)
        return {}

    logger.debug("Loaded config from %s", path)
    return config


def _file_binaries(engine_file: dict[str, Any]) -> tuple[str, ...] | None:
    value = engine_file.get("binaries")
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value)


def build_config(
    file_config: dict[str, Any],
    env: EnvReader,
    *,
    binaries: tuple[str, ...] | None = None,
    timeout: float | None = None,
) -> TranscoderConfig:
    """Merge file values, environment and overrides into a TranscoderConfig.

    Raises:
        ValueError: If the merged values fail validation.
    """
    engine_file = file_config.get("engine", {})
    working_dir_str = engine_file.get("working_directory")
    engine = EngineConfig(
        binaries=(
            binaries
            or tuple(env.get_str_list("GST_BINARIES"))
            or _file_binaries(engine_file)
            or DEFAULT_BINARIES
        ),
        timeout_seconds=(
            timeout
            if timeout is not None
            else env.get_float(
                "GST_TIMEOUT", engine_file.get("timeout_seconds", 300)
            )
        ),
        working_directory=env.get_path(
            "GST_WORKING_DIR",
            default=Path(working_dir_str).expanduser() if working_dir_str else None,
        ),
    )

    logging_file = file_config.get("logging", {})
    log_file_str = env.get_str("GST_LOG_FILE", logging_file.get("file"))
    logging_config = LoggingConfig(
        level=env.get_str("GST_LOG_LEVEL", logging_file.get("level", "info")),
        file=Path(log_file_str).expanduser() if log_file_str else None,
        format=env.get_str("GST_LOG_FORMAT", logging_file.get("format", "text")),
        include_stderr=bool(logging_file.get("include_stderr", False)),
        max_bytes=int(logging_file.get("max_bytes", 10_485_760)),
        backup_count=int(logging_file.get("backup_count", 5)),
    )

    return TranscoderConfig(engine=engine, logging=logging_config)


def get_config(
    config_path: Path | None = None,
    # CLI overrides (highest precedence)
    binaries: tuple[str, ...] | None = None,
    timeout: float | None = None,
    env: EnvReader | None = None,
) -> TranscoderConfig:
    """Get transcoder configuration with full precedence handling.

    Results without overrides are cached per config path; call
    clear_config_cache() after changing the environment or the file.

    Args:
        config_path: Path to config file (overrides GST_CONFIG_PATH).
        binaries: CLI override for Ghostscript candidates.
        timeout: CLI override for the conversion timeout.
        env: Environment reader; defaults to os.environ.

    Returns:
        TranscoderConfig with merged configuration.

    Raises:
        ValueError: If the merged values fail validation.
    """
    cacheable = binaries is None and timeout is None and env is None
    if cacheable and config_path in _config_cache:
        return _config_cache[config_path]

    reader = env or EnvReader()
    file_config = load_config_file(config_path or get_default_config_path(reader))
    config = build_config(file_config, reader, binaries=binaries, timeout=timeout)

    if cacheable:
        _config_cache[config_path] = config
    return config


def clear_config_cache() -> None:
    """Forget cached configurations."""
    _config_cache.clear()
