"""Ghostscript transcoder.

A request goes through four stages, in order and never retried:
input validation (concatenation only), command construction, execution
and output validation. A request succeeds only if Ghostscript exits 0
AND the destination exists afterwards.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess  # nosec B404 - CalledProcessError is the cause of failed runs
import threading
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from ghostscript_transcoder.config.models import (
    DEFAULT_BINARIES,
    EngineConfig,
    TranscoderConfig,
)
from ghostscript_transcoder.errors import (
    EngineNotFoundError,
    ExecutionFailureError,
    InputNotFoundError,
    OutputMissingError,
)
from ghostscript_transcoder.executor.interface import ProcessRunner
from ghostscript_transcoder.executor.subprocess_runner import SubprocessRunner
from ghostscript_transcoder.models import (
    ConcatenateRequest,
    ExecutionOutcome,
    PathLike,
    ToImageRequest,
    ToPdfRequest,
    TranscodeRequest,
)
from ghostscript_transcoder.tools.detection import find_executable
from ghostscript_transcoder.transcoder.builder import build_command
from ghostscript_transcoder.transcoder.validation import (
    validate_inputs,
    validate_output,
)

module_logger = logging.getLogger(__name__)

ConfigurationLike = EngineConfig | TranscoderConfig | Mapping[str, Any] | None


def _engine_config(configuration: ConfigurationLike) -> EngineConfig:
    """Normalize the accepted configuration shapes to an EngineConfig.

    Mappings may use "gs.binaries" or "binaries" for the candidate list,
    plus "timeout" and "working_directory". A timeout of None or 0 means
    no limit.
    """
    if configuration is None:
        return EngineConfig()
    if isinstance(configuration, EngineConfig):
        return configuration
    if isinstance(configuration, TranscoderConfig):
        return configuration.engine

    binaries = configuration.get(
        "gs.binaries", configuration.get("binaries", DEFAULT_BINARIES)
    )
    if isinstance(binaries, str):
        binaries = (binaries,)
    timeout = configuration.get("timeout", 300)
    if timeout is None:
        timeout = 0
    working_dir = configuration.get("working_directory")
    return EngineConfig(
        binaries=tuple(binaries),
        timeout_seconds=timeout,
        working_directory=Path(working_dir) if working_dir else None,
    )


class Transcoder:
    """Transcode PDFs with Ghostscript.

    Holds no per-request state, so one instance may serve concurrent
    callers as long as they write to distinct destinations.
    """

    name = "ghostscript-transcoder"

    def __init__(
        self,
        executable: str | Path,
        runner: ProcessRunner | None = None,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
        timeout: float | None = None,
        cwd: Path | None = None,
    ) -> None:
        """Initialize the transcoder.

        Args:
            executable: Resolved Ghostscript executable.
            runner: Process runner. None uses SubprocessRunner.
            logger: Diagnostic logger. None uses this module's logger.
            timeout: Seconds before a conversion is killed. None waits
                indefinitely.
            cwd: Working directory for the Ghostscript process.
        """
        self.executable = executable
        self._runner: ProcessRunner = runner or SubprocessRunner()
        self._logger = logger or module_logger
        self._timeout = timeout
        self._cwd = cwd

    @classmethod
    def create(
        cls,
        configuration: ConfigurationLike = None,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
        runner: ProcessRunner | None = None,
    ) -> Transcoder:
        """Create a Transcoder using the first Ghostscript candidate found.

        Raises:
            EngineNotFoundError: If no configured candidate resolves.
            ValueError: If the configuration is invalid.
        """
        engine = _engine_config(configuration)
        log = logger or module_logger
        executable = find_executable(engine.binaries)
        if executable is None:
            error = EngineNotFoundError(engine.binaries)
            log.error(error.message)
            raise error

        log.debug("Using Ghostscript at %s", executable)
        return cls(
            executable,
            runner=runner,
            logger=logger,
            timeout=engine.timeout,
            cwd=engine.working_directory,
        )

    def transcode(
        self,
        request: TranscodeRequest,
        cancel_event: threading.Event | None = None,
    ) -> ExecutionOutcome:
        """Run a transcode request through all stages.

        Every failure is logged at ERROR before it is raised. Log records
        carry ``operation``, ``destination`` and, once Ghostscript has
        run, ``exit_code`` as extra fields.

        Args:
            request: The request to perform.
            cancel_event: When set during execution, Ghostscript is killed.

        Returns:
            The outcome of the successful Ghostscript run.

        Raises:
            InputNotFoundError: A concatenation input does not exist.
            ExecutionFailureError: Ghostscript could not run, timed out, was
                cancelled or exited non-zero.
            OutputMissingError: Ghostscript exited 0 without writing the
                destination.
        """
        operation = request.operation
        context = {
            "operation": operation.description,
            "destination": os.fspath(request.destination),
        }

        if isinstance(request, ConcatenateRequest):
            try:
                validate_inputs(request.input_paths, operation, cwd=self._cwd)
            except InputNotFoundError as e:
                self._logger.error("%s", e.message, extra=context)
                raise

        args = build_command(request)
        self._logger.debug(
            "Running Ghostscript: %s",
            shlex.join([os.fspath(self.executable), *args]),
            extra=context,
        )

        try:
            outcome = self._runner.run(
                self.executable,
                args,
                timeout=self._timeout,
                cancel_event=cancel_event,
                cwd=self._cwd,
            )
        except (OSError, subprocess.SubprocessError) as e:
            self._logger.error(
                "Ghostscript could not transcode to %s: %s",
                operation.description,
                e,
                extra={**context, "exit_code": None},
            )
            raise ExecutionFailureError(operation, cause=e) from e

        context["exit_code"] = outcome.returncode
        if not outcome.succeeded:
            cause = subprocess.CalledProcessError(
                outcome.returncode,
                list(outcome.args),
                output=outcome.stdout,
                stderr=outcome.stderr,
            )
            self._logger.error(
                "Ghostscript exited with code %d transcoding to %s: %s",
                outcome.returncode,
                operation.description,
                outcome.stderr.strip() or outcome.stdout.strip(),
                extra=context,
            )
            raise ExecutionFailureError(operation, outcome.returncode, cause) from cause

        try:
            validate_output(operation, request.destination, cwd=self._cwd)
        except OutputMissingError:
            self._logger.error(
                "Ghostscript exited cleanly but did not write %s",
                os.fspath(request.destination),
                extra=context,
            )
            raise

        self._logger.info(
            "Transcoded to %s: %s (%.2fs)",
            operation.description,
            os.fspath(request.destination),
            outcome.duration_seconds,
            extra=context,
        )
        return outcome

    def to_image(
        self,
        input_path: PathLike,
        destination: PathLike,
        *,
        cancel_event: threading.Event | None = None,
    ) -> Transcoder:
        """Transcode a PDF to a JPEG image.

        Raises:
            TranscoderError: In case of failure.
        """
        self.transcode(ToImageRequest(input_path, destination), cancel_event)
        return self

    def to_pdf(
        self,
        input_path: PathLike,
        destination: PathLike,
        page_start: int,
        page_quantity: int,
        *,
        cancel_event: threading.Event | None = None,
    ) -> Transcoder:
        """Transcode a page range of a PDF to another PDF.

        Args:
            input_path: The path to the input file.
            destination: The path to the output file.
            page_start: The number of the first page, 1-indexed.
            page_quantity: The number of pages to include.
            cancel_event: When set during execution, Ghostscript is killed.

        Raises:
            TranscoderError: In case of failure.
        """
        request = ToPdfRequest(input_path, destination, page_start, page_quantity)
        self.transcode(request, cancel_event)
        return self

    def concatenate_pdfs(
        self,
        input_paths: Iterable[PathLike],
        destination: PathLike,
        *,
        cancel_event: threading.Event | None = None,
    ) -> Transcoder:
        """Transcode multiple PDFs into a single PDF, in the order given.

        Raises:
            InputNotFoundError: If any input does not exist; nothing is run.
            TranscoderError: In case of any other failure.
        """
        request = ConcatenateRequest(tuple(input_paths), destination)
        self.transcode(request, cancel_event)
        return self
