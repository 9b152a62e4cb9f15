"""Configuration management for the Ghostscript transcoder.

Configuration is loaded with the following precedence:
1. CLI flags (highest priority)
2. Environment variables (GST_*)
3. Config file (~/.ghostscript-transcoder/config.toml)
4. Default values (lowest priority)
"""

from ghostscript_transcoder.config.env import EnvReader
from ghostscript_transcoder.config.loader import (
    build_config,
    clear_config_cache,
    get_config,
    get_default_config_path,
    load_config_file,
)
from ghostscript_transcoder.config.models import (
    DEFAULT_BINARIES,
    EngineConfig,
    LoggingConfig,
    TranscoderConfig,
)

__all__ = [
    # Models
    "DEFAULT_BINARIES",
    "EngineConfig",
    "LoggingConfig",
    "TranscoderConfig",
    # Loader
    "EnvReader",
    "build_config",
    "clear_config_cache",
    "get_config",
    "get_default_config_path",
    "load_config_file",
]
