"""Default ProcessRunner backed by subprocess.Popen.

The process is waited on in short slices so a cancel request or the
overall deadline can interrupt it. Output is collected with
communicate(), which keeps draining both pipes between slices. stdin is
closed so an engine that falls through to an interactive prompt sees EOF
and exits.
"""

import logging
import subprocess  # nosec B404 - subprocess is required for Ghostscript execution
import threading
import time
from collections.abc import Sequence
from pathlib import Path

from ghostscript_transcoder.executor.interface import ProcessCancelledError
from ghostscript_transcoder.models import ExecutionOutcome

logger = logging.getLogger(__name__)


class SubprocessRunner:
    """Run an executable with optional timeout and cancellation."""

    # Seconds between cancel/deadline checks
    POLL_INTERVAL: float = 0.5

    def __init__(self, poll_interval: float | None = None) -> None:
        self._poll_interval = (
            poll_interval if poll_interval is not None else self.POLL_INTERVAL
        )

    def run(
        self,
        executable: str | Path,
        args: Sequence[str],
        *,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
        cwd: Path | None = None,
    ) -> ExecutionOutcome:
        """Run the executable and block until it exits.

        See ProcessRunner.run for the contract.
        """
        cmd = [str(executable), *args]
        start_time = time.monotonic()

        # Raises OSError (FileNotFoundError, PermissionError) on spawn failure
        process = subprocess.Popen(  # nosec B603 - args built from typed requests
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            cwd=cwd,
        )

        try:
            stdout, stderr = self._wait(process, cmd, start_time, timeout, cancel_event)
        except subprocess.TimeoutExpired as e:
            e.output, e.stderr = self._kill(process)
            raise
        except BaseException:
            # Ghostscript must not outlive an interrupted or failed wait
            self._kill(process)
            raise

        return ExecutionOutcome(
            args=tuple(cmd),
            returncode=process.returncode,
            stdout=stdout,
            stderr=stderr,
            duration_seconds=time.monotonic() - start_time,
        )

    def _wait(
        self,
        process: subprocess.Popen,
        cmd: list[str],
        start_time: float,
        timeout: float | None,
        cancel_event: threading.Event | None,
    ) -> tuple[str, str]:
        """Wait in poll slices until the process exits.

        Raises:
            ProcessCancelledError: If cancel_event is set.
            subprocess.TimeoutExpired: If the deadline passes.
        """
        while True:
            if cancel_event is not None and cancel_event.is_set():
                logger.warning("Cancelling %s", cmd[0])
                raise ProcessCancelledError(cmd)

            wait = self._poll_interval
            if timeout is not None:
                remaining = timeout - (time.monotonic() - start_time)
                if remaining <= 0:
                    logger.warning("%s timed out after %s seconds", cmd[0], timeout)
                    raise subprocess.TimeoutExpired(cmd, timeout)
                wait = min(wait, remaining)

            try:
                stdout, stderr = process.communicate(timeout=wait)
            except subprocess.TimeoutExpired:
                continue
            return stdout or "", stderr or ""

    @staticmethod
    def _kill(process: subprocess.Popen) -> tuple[str, str]:
        """Kill the process and collect whatever output it left."""
        process.kill()
        out, err = process.communicate()
        return out or "", err or ""
