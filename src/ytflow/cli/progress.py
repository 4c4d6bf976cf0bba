"""Per-aspect progress command."""

from __future__ import annotations

from pathlib import Path

import click

from ytflow.cli.formatting import format_progress_label, get_progress_color
from ytflow.cli.loading import load_single_video
from ytflow.cli.output import format_option, json_echo
from ytflow.domain.enums import AspectKey
from ytflow.workflow import evaluate_fields, progress_for


@click.command("progress")
@click.argument(
    "video_yaml",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--aspect",
    "aspects",
    multiple=True,
    type=click.Choice([aspect.value for aspect in AspectKey], case_sensitive=False),
    help="Only show this aspect (repeatable).",
)
@click.option(
    "--details",
    is_flag=True,
    default=False,
    help="List every task and whether it is done.",
)
@format_option
def progress_command(
    video_yaml: Path,
    aspects: tuple[str, ...],
    details: bool,
    output_format: str,
) -> None:
    """Show completed/total tasks per production aspect of VIDEO_YAML.

    Examples:

    \b
        ytflow progress manuscript/devops/my-video.yaml
        ytflow progress my-video.yaml --aspect definition --details
    """
    json_output = output_format == "json"
    record = load_single_video(video_yaml, json_output)

    selected = [AspectKey(a.lower()) for a in aspects] or list(AspectKey)

    if json_output:
        data: dict = {"video": record.name or video_yaml.stem, "aspects": {}}
        for aspect in selected:
            score = progress_for(aspect, record)
            entry: dict = {
                "title": aspect.display_title,
                "completed": score.completed,
                "total": score.total,
                "complete": score.is_complete,
            }
            if details:
                entry["fields"] = [
                    {
                        "field": result.label,
                        "criteria": result.criteria.value,
                        "complete": result.complete,
                        "bonus": result.bonus,
                    }
                    for result in evaluate_fields(aspect, record)
                ]
            data["aspects"][aspect.value] = entry
        json_echo(data)
        return

    for aspect in selected:
        score = progress_for(aspect, record)
        label = format_progress_label(aspect.display_title, score)
        click.echo(click.style(label, fg=get_progress_color(score)))
        if details:
            for result in evaluate_fields(aspect, record):
                mark = "x" if result.complete else " "
                click.echo(f"  [{mark}] {result.label}")
