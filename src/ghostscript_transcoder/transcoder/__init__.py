"""Transcoder pipeline: validation, command construction and orchestration."""

from ghostscript_transcoder.transcoder.builder import (
    build_command,
    build_concatenate_command,
    build_to_image_command,
    build_to_pdf_command,
)
from ghostscript_transcoder.transcoder.core import Transcoder
from ghostscript_transcoder.transcoder.validation import (
    validate_inputs,
    validate_output,
)

__all__ = [
    "Transcoder",
    "build_command",
    "build_concatenate_command",
    "build_to_image_command",
    "build_to_pdf_command",
    "validate_inputs",
    "validate_output",
]
