"""CLI module for the Ghostscript transcoder."""

import dataclasses
import logging
from pathlib import Path

import click

_logging_configured: bool = False

logger = logging.getLogger(__name__)


def _configure_logging(
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Configure logging from CLI options.

    Args:
        config_path: Config file to read base logging settings from.
        log_level: Override log level (debug, info, warning, error).
        log_file: Override log file path.
        log_json: Use JSON log format.
    """
    global _logging_configured
    if _logging_configured:
        return

    from ghostscript_transcoder.config.loader import get_config
    from ghostscript_transcoder.logging import configure_logging

    overrides: dict[str, object] = {}
    if log_level is not None:
        overrides["level"] = log_level
    if log_file is not None:
        overrides["file"] = log_file
    if log_json:
        overrides["format"] = "json"

    # replace() reruns LoggingConfig validation on the overridden values
    base = get_config(config_path=config_path).logging
    configure_logging(dataclasses.replace(base, **overrides))
    _logging_configured = True


@click.group()
@click.version_option(package_name="ghostscript-transcoder")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to config file (default: ~/.ghostscript-transcoder/config.toml).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Ghostscript Transcoder - Convert PDFs to images, extract and merge PDFs."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    try:
        _configure_logging(config_path, log_level, log_file, log_json)
    except ValueError as e:
        from ghostscript_transcoder.cli.exit_codes import ExitCode

        click.echo(f"Error: Invalid configuration: {e}", err=True)
        ctx.exit(ExitCode.CONFIG_ERROR)


# Defer import to avoid circular dependency
def _register_commands():
    from ghostscript_transcoder.cli.doctor import doctor_command
    from ghostscript_transcoder.cli.transcode import (
        concat_command,
        to_image_command,
        to_pdf_command,
    )

    main.add_command(to_image_command)
    main.add_command(to_pdf_command)
    main.add_command(concat_command)
    main.add_command(doctor_command)


_register_commands()
