"""Ghostscript executable discovery and version parsing.

Candidates are tried in configured order and the first one that resolves
wins. A candidate that looks like a path must exist on disk; a bare name
is looked up in PATH.
"""

import logging
import os
import re
import shutil
import subprocess  # nosec B404 - subprocess is required for Ghostscript detection
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path

from ghostscript_transcoder.tools.models import ToolInfo, ToolStatus

logger = logging.getLogger(__name__)

# Timeout for version detection commands (seconds)
DETECTION_TIMEOUT = 10

GHOSTSCRIPT_TOOL_NAME = "ghostscript"


def parse_version_string(version_str: str) -> tuple[int, ...] | None:
    """Parse a version string into a comparable tuple.

    Handles:
    - "10.02.1" -> (10, 2, 1)
    - "9.56" -> (9, 56)
    - "v9.27-ubuntu" -> (9, 27)

    Args:
        version_str: Version string to parse.

    Returns:
        Tuple of version components, or None if parsing fails.
    """
    if not version_str:
        return None

    version_str = version_str.strip().lstrip("v")

    # Extract numeric version parts (stop at first non-numeric segment)
    match = re.match(r"(\d+(?:\.\d+)*)", version_str)
    if not match:
        return None

    return tuple(int(p) for p in match.group(1).split("."))


def _looks_like_path(candidate: str) -> bool:
    seps = {os.sep}
    if os.altsep:
        seps.add(os.altsep)
    return any(sep in candidate for sep in seps)


def find_executable(candidates: Iterable[str | Path]) -> Path | None:
    """Resolve the first usable executable among candidates.

    Args:
        candidates: Executable names or paths, in priority order.

    Returns:
        Path to the executable, or None if no candidate resolves.
    """
    for candidate in candidates:
        name = os.fspath(candidate)
        if not name:
            continue
        if _looks_like_path(name):
            path = Path(name).expanduser()
            if path.is_file():
                return path
            logger.debug("Configured Ghostscript path does not exist: %s", path)
            continue
        which_result = shutil.which(name)
        if which_result:
            return Path(which_result)
        logger.debug("Ghostscript candidate not found in PATH: %s", name)
    return None


def _run_command(
    args: list[str], timeout: int = DETECTION_TIMEOUT
) -> tuple[str, str, int]:
    """Run a command and capture output.

    Returns:
        Tuple of (stdout, stderr, returncode). returncode is -1 if the
        command could not be run.
    """
    try:
        result = subprocess.run(  # nosec B603 - args are a resolved executable
            args,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
        )
        return result.stdout, result.stderr, result.returncode
    except subprocess.TimeoutExpired:
        logger.warning("Command timed out: %s", " ".join(args))
        return "", "timeout", -1
    except OSError as e:
        logger.warning("Command failed: %s - %s", " ".join(args), e)
        return "", str(e), -1


def detect_ghostscript(candidates: Iterable[str | Path] = ("gs",)) -> ToolInfo:
    """Detect Ghostscript and get its version.

    Args:
        candidates: Executable names or paths, in priority order.

    Returns:
        ToolInfo describing the detected executable.
    """
    candidates = list(candidates)
    info = ToolInfo(name=GHOSTSCRIPT_TOOL_NAME)
    info.detected_at = datetime.now(timezone.utc)

    path = find_executable(candidates)
    if not path:
        info.status = ToolStatus.MISSING
        tried = ", ".join(os.fspath(c) for c in candidates)
        info.status_message = f"Ghostscript not found (tried: {tried})"
        return info

    info.path = path

    # "gs --version" prints just the version, e.g. "10.02.1"
    stdout, stderr, rc = _run_command([str(path), "--version"])
    if rc != 0:
        info.status = ToolStatus.ERROR
        info.status_message = f"Failed to get Ghostscript version: {stderr.strip()}"
        return info

    version = stdout.strip().splitlines()[0] if stdout.strip() else ""
    if version:
        info.version = version
        info.version_tuple = parse_version_string(version)
        if info.version_tuple is None:
            logger.warning(
                "Could not parse Ghostscript version '%s' into comparable tuple",
                version,
            )

    info.status = ToolStatus.AVAILABLE
    info.status_message = None
    return info
