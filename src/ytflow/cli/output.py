"""CLI output helpers shared by all commands.

Provides consistent error reporting and the ``--format`` option in both
human-readable and JSON flavours.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime
from typing import NoReturn

import click

from ytflow.cli.exit_codes import ExitCode
from ytflow.core.datetime_utils import parse_publish_date

format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format.",
)


def error_exit(
    message: str,
    code: ExitCode | int,
    json_output: bool = False,
) -> NoReturn:
    """Exit with formatted error message.

    Args:
        message: Error message to display.
        code: Exit code to use (ExitCode enum or int).
        json_output: Whether to format output as JSON.

    Note:
        This function never returns; it always calls sys.exit().
    """
    if isinstance(code, ExitCode):
        code_name = code.name
        exit_value = int(code)
    else:
        code_name = "UNKNOWN_ERROR"
        exit_value = code

    if json_output:
        click.echo(
            json.dumps(
                {
                    "status": "failed",
                    "error": {
                        "code": code_name,
                        "message": message,
                    },
                }
            ),
            err=True,
        )
    else:
        click.echo(f"Error: {message}", err=True)

    sys.exit(exit_value)


def json_echo(data: object) -> None:
    """Print data as indented JSON."""
    click.echo(json.dumps(data, indent=2))


def _parse_now(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> datetime | None:
    if value is None:
        return None
    parsed = parse_publish_date(value)
    if parsed is None:
        raise click.BadParameter(f"expected YYYY-MM-DDTHH:MM, got {value!r}")
    return parsed


now_option = click.option(
    "--now",
    "now",
    default=None,
    callback=_parse_now,
    metavar="YYYY-MM-DDTHH:MM",
    help="Reference time for due-date checks (default: current time).",
)
