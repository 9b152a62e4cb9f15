"""Data models for transcode requests and process outcomes.

A transcode request is one of three frozen dataclasses. Each carries the
paths it operates on and reports which Operation it belongs to, so the
command builder and the validators can dispatch on it.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

PathLike = Union[str, os.PathLike]


class Operation(Enum):
    """Kind of transcode performed by a request."""

    TO_IMAGE = "Image"
    TO_PDF = "PDF"
    CONCATENATE = "concatenated PDF"

    @property
    def description(self) -> str:
        """Human-readable label used in error messages."""
        return self.value


@dataclass(frozen=True)
class ToImageRequest:
    """Render a PDF into a JPEG image."""

    input_path: PathLike
    destination: PathLike

    operation = Operation.TO_IMAGE

    @property
    def input_paths(self) -> tuple[PathLike, ...]:
        return (self.input_path,)


@dataclass(frozen=True)
class ToPdfRequest:
    """Extract a page range of a PDF into a new PDF.

    Attributes:
        input_path: Source document.
        destination: Output document.
        page_start: First page to keep, 1-indexed.
        page_quantity: Number of pages to keep, starting at page_start.
    """

    input_path: PathLike
    destination: PathLike
    page_start: int
    page_quantity: int

    operation = Operation.TO_PDF

    @property
    def input_paths(self) -> tuple[PathLike, ...]:
        return (self.input_path,)

    @property
    def last_page(self) -> int:
        """Inclusive last page of the range."""
        return self.page_start + self.page_quantity - 1


@dataclass(frozen=True)
class ConcatenateRequest:
    """Merge several PDFs, in order, into a single PDF."""

    input_paths: tuple[PathLike, ...]
    destination: PathLike

    operation = Operation.CONCATENATE

    def __post_init__(self) -> None:
        # Accept any iterable from callers but keep the frozen copy a tuple
        object.__setattr__(self, "input_paths", tuple(self.input_paths))


TranscodeRequest = Union[ToImageRequest, ToPdfRequest, ConcatenateRequest]


@dataclass(frozen=True)
class ExecutionOutcome:
    """Exit status and captured output of one engine run."""

    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""
    duration_seconds: float = field(default=0.0, compare=False)

    @property
    def succeeded(self) -> bool:
        """True if the engine reported a zero exit status."""
        return self.returncode == 0
