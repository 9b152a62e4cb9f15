"""Logging setup with text and JSON output and file rotation."""

from ghostscript_transcoder.logging.config import configure_logging
from ghostscript_transcoder.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "configure_logging",
]
