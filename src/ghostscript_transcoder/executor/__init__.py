"""Process execution layer.

- interface: ProcessRunner protocol and ProcessCancelledError
- subprocess_runner: default runner with timeout and cancellation
"""

from ghostscript_transcoder.executor.interface import (
    ProcessCancelledError,
    ProcessRunner,
)
from ghostscript_transcoder.executor.subprocess_runner import SubprocessRunner

__all__ = [
    "ProcessCancelledError",
    "ProcessRunner",
    "SubprocessRunner",
]
