"""Phase histogram and per-phase video listing commands."""

from __future__ import annotations

import logging
from datetime import datetime

import click

from ytflow.cli.formatting import (
    format_video_title,
    get_phase_color,
    get_video_title_color,
)
from ytflow.cli.loading import get_cli_config, load_indexed_videos
from ytflow.cli.output import format_option, json_echo, now_option
from ytflow.domain.enums import MENU_ORDER, PhaseTag
from ytflow.workflow import count_by_phase, filter_by_phase

logger = logging.getLogger(__name__)


@click.command("phases")
@format_option
@now_option
@click.pass_context
def phases_command(
    ctx: click.Context, output_format: str, now: datetime | None
) -> None:
    """Show how many videos are in each lifecycle phase.

    Phases without videos are hidden in text output.

    Examples:

    \b
        ytflow phases
        ytflow phases --format json
    """
    json_output = output_format == "json"
    config = get_cli_config(ctx)
    records = load_indexed_videos(config, json_output)
    counts = count_by_phase(records, now)

    if json_output:
        json_echo(
            {
                "total": len(records),
                "phases": {tag.value: count for tag, count in counts.items()},
            }
        )
        return

    if not records:
        click.echo("No videos found.")
        return

    threshold = config.display.phase_green_threshold
    for tag in MENU_ORDER:
        count = counts[tag]
        if count == 0:
            continue
        label = f"{tag.display_name} ({count})"
        click.echo(click.style(label, fg=get_phase_color(tag, count, threshold)))


@click.command("videos")
@click.argument(
    "phase",
    type=click.Choice([tag.value for tag in PhaseTag], case_sensitive=False),
)
@format_option
@now_option
@click.pass_context
def videos_command(
    ctx: click.Context, phase: str, output_format: str, now: datetime | None
) -> None:
    """List the videos in one lifecycle PHASE, ordered by publish date.

    Examples:

    \b
        ytflow videos started
        ytflow videos publish_pending --format json
    """
    json_output = output_format == "json"
    config = get_cli_config(ctx)
    tag = PhaseTag(phase.lower())
    if now is None:
        now = datetime.now()

    records = load_indexed_videos(config, json_output)
    selected = filter_by_phase(records, tag, now)

    if json_output:
        json_echo(
            {
                "phase": tag.value,
                "videos": [
                    {
                        "name": record.name,
                        "category": record.category,
                        "date": record.date,
                        "path": record.path,
                        "title": format_video_title(record),
                    }
                    for record in selected
                ],
            }
        )
        return

    if not selected:
        click.echo(f"No videos in phase {tag.display_name}.")
        return

    months = config.display.far_future_months
    for record in selected:
        color = get_video_title_color(record, tag, now, far_future_months=months)
        click.echo(click.style(format_video_title(record), fg=color))
