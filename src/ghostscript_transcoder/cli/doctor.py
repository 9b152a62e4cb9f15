"""Doctor command for checking the Ghostscript installation."""

import json
import sys

import click

from ghostscript_transcoder.cli.exit_codes import ExitCode
from ghostscript_transcoder.config import get_config
from ghostscript_transcoder.tools import ToolStatus, detect_ghostscript


def _format_status(available: bool) -> str:
    """Format status for display."""
    return "✓" if available else "✗"


@click.command("doctor")
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output results as JSON",
)
@click.pass_context
def doctor_command(ctx: click.Context, json_output: bool) -> None:
    """Check that a Ghostscript executable can be found and run.

    Exit codes:
      0 - Ghostscript available
      30 - No configured candidate could be found or run
    """
    try:
        config = get_config(config_path=ctx.obj.get("config_path"))
    except ValueError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(ExitCode.CONFIG_ERROR)

    info = detect_ghostscript(config.engine.binaries)

    if json_output:
        data = info.summary()
        data["candidates"] = list(config.engine.binaries)
        click.echo(json.dumps(data, indent=2))
    else:
        click.echo("Ghostscript Health Check")
        click.echo("=" * 40)
        click.echo(f"  Candidates: {', '.join(config.engine.binaries)}")
        version = info.version or "not found"
        click.echo(f"  {_format_status(info.is_available())} ghostscript: {version}")
        if info.path:
            click.echo(f"    ├─ Path: {info.path}")
        timeout = config.engine.timeout
        click.echo(f"    └─ Timeout: {f'{timeout:g}s' if timeout else 'none'}")
        if info.status_message:
            click.echo(f"  {info.status_message}")
        if info.status == ToolStatus.MISSING:
            click.echo("  Install Ghostscript: https://ghostscript.com/releases/")

    if not info.is_available():
        sys.exit(ExitCode.TOOL_NOT_AVAILABLE)
