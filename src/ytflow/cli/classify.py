"""Single-video phase classification command."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import click

from ytflow.cli.loading import load_single_video
from ytflow.cli.output import format_option, json_echo, now_option
from ytflow.workflow import explain


@click.command("classify")
@click.argument(
    "video_yaml",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--trace",
    is_flag=True,
    default=False,
    help="Show every rule examined before the phase was decided.",
)
@format_option
@now_option
def classify_command(
    video_yaml: Path,
    trace: bool,
    output_format: str,
    now: datetime | None,
) -> None:
    """Print the lifecycle phase of VIDEO_YAML.

    Examples:

    \b
        ytflow classify manuscript/devops/my-video.yaml
        ytflow classify my-video.yaml --trace --now 2030-01-01T00:00
    """
    json_output = output_format == "json"
    record = load_single_video(video_yaml, json_output)
    result = explain(record, now)

    if json_output:
        data: dict = {
            "video": record.name or video_yaml.stem,
            "phase": result.tag.value,
            "display_name": result.tag.display_name,
        }
        if trace:
            data["trace"] = [
                {
                    "rule": evaluation.rule_name,
                    "phase": evaluation.tag.value,
                    "matched": evaluation.matched,
                }
                for evaluation in result.trace
            ]
        json_echo(data)
        return

    click.echo(result.tag.display_name)
    if trace:
        for evaluation in result.trace:
            outcome = "matched" if evaluation.matched else "no match"
            click.echo(f"  {evaluation.rule_name}: {outcome}")
        if not any(evaluation.matched for evaluation in result.trace):
            click.echo(f"  fallback: {result.tag.display_name}")
