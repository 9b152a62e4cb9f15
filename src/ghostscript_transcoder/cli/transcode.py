"""CLI commands for PDF transcoding."""

import logging
import sys
from collections.abc import Callable
from pathlib import Path

import click

from ghostscript_transcoder.cli.exit_codes import ERROR_KIND_EXIT_CODES, ExitCode
from ghostscript_transcoder.config import get_config
from ghostscript_transcoder.errors import TranscoderError
from ghostscript_transcoder.transcoder import Transcoder

logger = logging.getLogger(__name__)


def _errors_logged_to_stderr() -> bool:
    """Return True if the root logger already prints ERROR records on stderr.

    The transcoder logs every failure before raising it, so the command
    only echoes the error itself when that log line would not be seen.
    """
    root = logging.getLogger()
    if not root.isEnabledFor(logging.ERROR):
        return False
    return any(
        type(handler) is logging.StreamHandler
        and handler.stream in (sys.stderr, sys.__stderr__)
        and handler.level <= logging.ERROR
        for handler in root.handlers
    )


def _run_transcode(
    ctx: click.Context,
    binaries: tuple[str, ...],
    timeout: float | None,
    action: Callable[[Transcoder], object],
    destination: Path,
) -> None:
    """Build a Transcoder from config, run action and map failures to exit codes."""
    try:
        config = get_config(
            config_path=ctx.obj.get("config_path"),
            binaries=binaries or None,
            timeout=timeout,
        )
    except ValueError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(ExitCode.CONFIG_ERROR)

    try:
        transcoder = Transcoder.create(config)
        action(transcoder)
    except TranscoderError as e:
        if not _errors_logged_to_stderr():
            click.echo(f"Error: {e.message}", err=True)
        sys.exit(ERROR_KIND_EXIT_CODES.get(e.kind, ExitCode.GENERAL_ERROR))

    click.echo(f"Wrote {destination}")


def _engine_options(func):
    """Options shared by every transcode command."""
    func = click.option(
        "--timeout",
        type=click.FloatRange(min=0),
        default=None,
        help="Seconds before Ghostscript is killed (0 = no limit).",
    )(func)
    func = click.option(
        "--gs",
        "binaries",
        multiple=True,
        help="Ghostscript executable to try; repeat to give fallbacks.",
    )(func)
    return func


@click.command("to-image")
@click.argument("input_path", type=click.Path(path_type=Path, dir_okay=False))
@click.argument("destination", type=click.Path(path_type=Path, dir_okay=False))
@_engine_options
@click.pass_context
def to_image_command(
    ctx: click.Context,
    input_path: Path,
    destination: Path,
    binaries: tuple[str, ...],
    timeout: float | None,
) -> None:
    """Render INPUT_PATH (a PDF) to a JPEG image at DESTINATION."""
    _run_transcode(
        ctx,
        binaries,
        timeout,
        lambda t: t.to_image(input_path, destination),
        destination,
    )


@click.command("to-pdf")
@click.argument("input_path", type=click.Path(path_type=Path, dir_okay=False))
@click.argument("destination", type=click.Path(path_type=Path, dir_okay=False))
@click.option(
    "--first-page",
    type=int,
    default=1,
    show_default=True,
    help="First page to extract (1-indexed).",
)
@click.option(
    "--pages",
    "page_quantity",
    type=int,
    default=1,
    show_default=True,
    help="Number of pages to extract.",
)
@_engine_options
@click.pass_context
def to_pdf_command(
    ctx: click.Context,
    input_path: Path,
    destination: Path,
    first_page: int,
    page_quantity: int,
    binaries: tuple[str, ...],
    timeout: float | None,
) -> None:
    """Extract a page range of INPUT_PATH into the PDF DESTINATION.

    Page numbers are passed to Ghostscript unchanged.
    """
    _run_transcode(
        ctx,
        binaries,
        timeout,
        lambda t: t.to_pdf(input_path, destination, first_page, page_quantity),
        destination,
    )


@click.command("concat")
@click.argument(
    "input_paths",
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path, dir_okay=False),
)
@click.option(
    "--output",
    "-o",
    "destination",
    required=True,
    type=click.Path(path_type=Path, dir_okay=False),
    help="Merged PDF to write.",
)
@_engine_options
@click.pass_context
def concat_command(
    ctx: click.Context,
    input_paths: tuple[Path, ...],
    destination: Path,
    binaries: tuple[str, ...],
    timeout: float | None,
) -> None:
    """Merge INPUT_PATHS, in order, into a single PDF."""
    _run_transcode(
        ctx,
        binaries,
        timeout,
        lambda t: t.concatenate_pdfs(input_paths, destination),
        destination,
    )
