"""Process runner protocol.

The transcoder never spawns processes itself; it hands a fully built
command to a ProcessRunner. Tests substitute a stub runner.
"""

import subprocess  # nosec B404 - only for the SubprocessError base class
import threading
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from ghostscript_transcoder.models import ExecutionOutcome


class ProcessCancelledError(subprocess.SubprocessError):
    """Raised when a running process is killed because of a cancel request."""

    def __init__(self, cmd: Sequence[str]) -> None:
        self.cmd = list(cmd)
        super().__init__(f"Command {self.cmd!r} was cancelled")


class ProcessRunner(Protocol):
    """Protocol for running an external executable synchronously."""

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

        Args:
            executable: Path or name of the executable.
            args: Arguments passed after the executable.
            timeout: Seconds to wait before killing the process. None
                waits indefinitely.
            cancel_event: When set, the process is killed.
            cwd: Working directory for the process.

        Returns:
            ExecutionOutcome whatever the exit status.

        Raises:
            OSError: If the process cannot be spawned.
            subprocess.TimeoutExpired: If the timeout elapsed.
            ProcessCancelledError: If cancel_event was set.
        """
        ...
