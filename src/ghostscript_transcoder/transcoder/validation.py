"""Filesystem checks run before and after a Ghostscript invocation."""

import os
from collections.abc import Iterable
from pathlib import Path

from ghostscript_transcoder.errors import InputNotFoundError, OutputMissingError
from ghostscript_transcoder.models import Operation


def _resolve(path: str | os.PathLike, cwd: str | os.PathLike | None) -> Path:
    """Resolve a path the way Ghostscript sees it when run in cwd."""
    if cwd is None:
        return Path(path)
    return Path(cwd, path)


def validate_inputs(
    paths: Iterable[str | os.PathLike],
    operation: Operation = Operation.CONCATENATE,
    cwd: str | os.PathLike | None = None,
) -> None:
    """Check that every input exists, in order.

    Args:
        paths: Input files to check.
        operation: Operation being validated, for the error message.
        cwd: Directory Ghostscript runs in. Relative paths are resolved
            against it; absolute paths are unaffected.

    Raises:
        InputNotFoundError: For the first path that does not exist.
    """
    for path in paths:
        if not _resolve(path, cwd).exists():
            raise InputNotFoundError(path, operation)


def validate_output(
    operation: Operation,
    destination: str | os.PathLike,
    cwd: str | os.PathLike | None = None,
) -> None:
    """Check that Ghostscript produced the destination file.

    Ghostscript can exit 0 without writing anything (e.g. on unsupported
    options), so a clean exit alone does not mean success. A relative
    destination is checked against cwd, where Ghostscript wrote it.

    Raises:
        OutputMissingError: If the destination does not exist.
    """
    if not _resolve(destination, cwd).exists():
        raise OutputMissingError(operation, destination)
