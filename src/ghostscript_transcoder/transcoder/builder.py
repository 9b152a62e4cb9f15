"""Ghostscript argument construction.

Ghostscript is sensitive to argument order, so each operation maps to a
fixed argument layout. The executable itself is not part of the command;
the process runner prepends it.
"""

import os

from ghostscript_transcoder.models import (
    ConcatenateRequest,
    ToImageRequest,
    ToPdfRequest,
    TranscodeRequest,
)


def _output_file(destination: str | os.PathLike) -> str:
    return "-sOutputFile=" + os.fspath(destination)


def build_to_image_command(request: ToImageRequest) -> list[str]:
    """Build arguments rendering a PDF to JPEG."""
    return [
        "-sDEVICE=jpeg",
        "-dNOPAUSE",
        "-dBATCH",
        "-dSAFER",
        _output_file(request.destination),
        os.fspath(request.input_path),
    ]


def build_to_pdf_command(request: ToPdfRequest) -> list[str]:
    """Build arguments extracting a page range into a new PDF.

    Page numbers are passed through as given; Ghostscript rejects
    out-of-range values itself.
    """
    return [
        "-sDEVICE=pdfwrite",
        "-dNOPAUSE",
        "-dBATCH",
        "-dSAFER",
        "-dFirstPage=%d" % request.page_start,
        "-dLastPage=%d" % request.last_page,
        _output_file(request.destination),
        os.fspath(request.input_path),
    ]


def build_concatenate_command(request: ConcatenateRequest) -> list[str]:
    """Build arguments merging PDFs in the order given."""
    cmd = [
        # -dBatch is not -dBATCH; the session ends when gs reads EOF on stdin
        "-dBatch",
        "-dNOPAUSE",
        "-q",
        "-sDEVICE=pdfwrite",
        _output_file(request.destination),
    ]
    cmd.extend(os.fspath(path) for path in request.input_paths)
    return cmd


def build_command(request: TranscodeRequest) -> list[str]:
    """Build the Ghostscript argument list for a request.

    Args:
        request: The transcode request.

    Returns:
        Ordered list of string arguments, without the executable.

    Raises:
        TypeError: If the request is not a known request type.
    """
    if isinstance(request, ToImageRequest):
        return build_to_image_command(request)
    if isinstance(request, ToPdfRequest):
        return build_to_pdf_command(request)
    if isinstance(request, ConcatenateRequest):
        return build_concatenate_command(request)
    raise TypeError(f"Unsupported transcode request: {type(request).__name__}")
