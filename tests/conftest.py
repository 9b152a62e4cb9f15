"""Shared test fixtures for the Ghostscript transcoder."""

import shutil
import tempfile
import threading
from pathlib import Path

import pytest

from ghostscript_transcoder.config import clear_config_cache
from ghostscript_transcoder.models import ExecutionOutcome


class StubRunner:
    """ProcessRunner double that records calls instead of spawning processes.

    Args:
        returncode: Exit status to report.
        stdout: Captured stdout to report.
        stderr: Captured stderr to report.
        creates: File to create on each call, emulating Ghostscript output.
        raises: Exception to raise instead of returning an outcome.
    """

    def __init__(
        self,
        returncode: int = 0,
        stdout: str = "",
        stderr: str = "",
        creates: Path | None = None,
        raises: BaseException | None = None,
    ) -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.creates = creates
        self.raises = raises
        self.calls: list[dict] = []

    def run(
        self,
        executable,
        args,
        *,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
        cwd: Path | None = None,
    ) -> ExecutionOutcome:
        self.calls.append(
            {
                "executable": executable,
                "args": list(args),
                "timeout": timeout,
                "cancel_event": cancel_event,
                "cwd": cwd,
            }
        )
        if self.raises is not None:
            raise self.raises
        if self.creates is not None:
            Path(self.creates).write_bytes(b"%PDF-1.4\n")
        return ExecutionOutcome(
            args=(str(executable), *args),
            returncode=self.returncode,
            stdout=self.stdout,
            stderr=self.stderr,
        )


@pytest.fixture
def stub_runner() -> type[StubRunner]:
    """Return the StubRunner class so tests can configure instances."""
    return StubRunner


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test isolation."""
    dir_path = tempfile.mkdtemp()
    yield Path(dir_path)
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture
def sample_pdfs(temp_dir: Path) -> list[Path]:
    """Create three placeholder PDF inputs."""
    paths = []
    for name in ("a.pdf", "b.pdf", "c.pdf"):
        path = temp_dir / name
        path.write_bytes(b"%PDF-1.4\n")
        paths.append(path)
    return paths


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep tests away from the user's config file and GST_* variables."""
    for var in (
        "GST_BINARIES",
        "GST_TIMEOUT",
        "GST_WORKING_DIR",
        "GST_LOG_LEVEL",
        "GST_LOG_FILE",
        "GST_LOG_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("GST_CONFIG_PATH", str(tmp_path / "missing-config.toml"))
    clear_config_cache()
    yield
    clear_config_cache()
