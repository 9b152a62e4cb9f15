"""Configuration data models.

This module defines dataclasses for transcoder configuration options.
"""

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_BINARIES: tuple[str, ...] = ("gs",)


@dataclass(frozen=True)
class EngineConfig:
    """Configuration for the Ghostscript engine.

    Immutable so a single instance can be shared by concurrent callers.
    """

    binaries: tuple[str, ...] = DEFAULT_BINARIES
    """Candidate executable names or paths, tried in order."""

    timeout_seconds: float = 300
    """Seconds before a running conversion is killed (0 = no limit)."""

    working_directory: Path | None = None
    """Working directory for the engine process (None = inherit)."""

    def __post_init__(self) -> None:
        """Validate configuration."""
        binaries = tuple(str(b) for b in self.binaries if str(b).strip())
        if not binaries:
            raise ValueError("binaries must contain at least one candidate")
        object.__setattr__(self, "binaries", binaries)
        if self.timeout_seconds < 0:
            raise ValueError(
                f"timeout_seconds must be non-negative, got {self.timeout_seconds}"
            )

    @property
    def timeout(self) -> float | None:
        """Timeout suitable for a process runner, None when unbounded."""
        return self.timeout_seconds if self.timeout_seconds > 0 else None


@dataclass
class LoggingConfig:
    """Configuration for logging output."""

    # Log level: debug, info, warning, error
    level: str = "info"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )


@dataclass
class TranscoderConfig:
    """Top-level configuration."""

    engine: EngineConfig = field(default_factory=EngineConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
