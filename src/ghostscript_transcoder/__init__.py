"""Ghostscript Transcoder - PDF to image, PDF page extraction and PDF merging."""

from ghostscript_transcoder.errors import (
    EngineNotFoundError,
    ErrorKind,
    ExecutionFailureError,
    InputNotFoundError,
    OutputMissingError,
    TranscoderError,
)
from ghostscript_transcoder.models import (
    ConcatenateRequest,
    ExecutionOutcome,
    Operation,
    ToImageRequest,
    ToPdfRequest,
    TranscodeRequest,
)
from ghostscript_transcoder.transcoder import Transcoder

__all__ = [
    # Transcoder
    "Transcoder",
    # Requests
    "ConcatenateRequest",
    "ExecutionOutcome",
    "Operation",
    "ToImageRequest",
    "ToPdfRequest",
    "TranscodeRequest",
    # Errors
    "EngineNotFoundError",
    "ErrorKind",
    "ExecutionFailureError",
    "InputNotFoundError",
    "OutputMissingError",
    "TranscoderError",
]
