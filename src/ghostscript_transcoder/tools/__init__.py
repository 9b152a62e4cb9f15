"""External tool detection.

Locates the Ghostscript executable from a list of candidates and reports
its version.
"""

from ghostscript_transcoder.tools.detection import (
    GHOSTSCRIPT_TOOL_NAME,
    detect_ghostscript,
    find_executable,
    parse_version_string,
)
from ghostscript_transcoder.tools.models import ToolInfo, ToolStatus

__all__ = [
    "GHOSTSCRIPT_TOOL_NAME",
    "ToolInfo",
    "ToolStatus",
    "detect_ghostscript",
    "find_executable",
    "parse_version_string",
]
