"""Exceptions raised by transcode operations.

Every error derives from TranscoderError and carries a ``kind`` tag, so
callers can dispatch on ``err.kind`` instead of walking the class tree.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from enum import Enum

from ghostscript_transcoder.models import Operation


class ErrorKind(Enum):
    """Failure classification for a transcode request."""

    INPUT_NOT_FOUND = "input_not_found"
    EXECUTION_FAILURE = "execution_failure"
    OUTPUT_MISSING = "output_missing"
    ENGINE_NOT_FOUND = "engine_not_found"


class TranscoderError(Exception):
    """Base exception for transcoder errors."""

    kind: ErrorKind

    def __init__(self, message: str, operation: Operation | None = None) -> None:
        """Initialize transcoder error.

        Args:
            message: Human-readable error description.
            operation: The operation that failed, if any.
        """
        self.message = message
        self.operation = operation
        super().__init__(message)


class InputNotFoundError(TranscoderError):
    """Raised when a declared input file does not exist.

    Only concatenation pre-checks its inputs, so this is raised before
    any process is spawned.
    """

    kind = ErrorKind.INPUT_NOT_FOUND

    def __init__(
        self,
        path: str | os.PathLike,
        operation: Operation = Operation.CONCATENATE,
    ) -> None:
        self.path = path
        message = (
            f'Unable to locate input file: "{os.fspath(path)}". '
            f"Ghostscript was unable to transcode to {operation.description}."
        )
        super().__init__(message, operation)


class ExecutionFailureError(TranscoderError):
    """Raised when Ghostscript could not be run or exited with failure.

    ``exit_code`` is the engine's exit status, or None when the process
    never produced one (spawn failure, timeout, cancellation). ``cause``
    is the underlying process error and is also chained as __cause__.
    """

    kind = ErrorKind.EXECUTION_FAILURE

    def __init__(
        self,
        operation: Operation,
        exit_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.exit_code = exit_code
        self.cause = cause
        message = f"Ghostscript was unable to transcode to {operation.description}"
        super().__init__(message, operation)


class OutputMissingError(TranscoderError):
    """Raised when Ghostscript exited cleanly but produced no output file."""

    kind = ErrorKind.OUTPUT_MISSING

    def __init__(
        self,
        operation: Operation,
        destination: str | os.PathLike | None = None,
    ) -> None:
        self.destination = destination
        message = f"Ghostscript was unable to transcode to {operation.description}"
        super().__init__(message, operation)


class EngineNotFoundError(TranscoderError):
    """Raised when none of the configured Ghostscript binaries can be found."""

    kind = ErrorKind.ENGINE_NOT_FOUND

    def __init__(self, candidates: Sequence[str]) -> None:
        self.candidates = tuple(candidates)
        tried = ", ".join(self.candidates) or "<none>"
        message = f"Ghostscript executable not found (tried: {tried})"
        super().__init__(message)
