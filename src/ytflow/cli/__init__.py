"""CLI module for ytflow."""

import logging
from pathlib import Path

import click

from ytflow.cli.exit_codes import ExitCode
from ytflow.cli.output import error_exit

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="ytflow")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.ytflow/config.toml).",
)
@click.option(
    "--index",
    "index_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Video index YAML file (default: index.yaml).",
)
@click.option(
    "--manuscript-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the video YAML files (default: manuscript).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: warning).",
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
    index_path: Path | None,
    manuscript_dir: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """ytflow - Track where every video sits in its production pipeline."""
    from ytflow.config import ConfigError, configure_logging_from_cli, get_config

    ctx.ensure_object(dict)

    # Preserve a config injected by tests
    if "config" in ctx.obj:
        return

    try:
        config = get_config(
            config_path=config_path,
            index_path=index_path,
            manuscript_dir=manuscript_dir,
            strict=True,
        )
    except ConfigError as e:
        error_exit(e.message, ExitCode.CONFIG_ERROR)

    config.logging = configure_logging_from_cli(
        config.logging,
        level=log_level,
        file=log_file,
        json_output=log_json,
    )
    logger.info(
        "ytflow starting: index=%s, manuscript_dir=%s, log_level=%s",
        config.storage.index_path,
        config.storage.manuscript_dir,
        config.logging.level,
    )
    ctx.obj["config"] = config


# Defer import to avoid circular dependency
def _register_commands():
    from ytflow.cli.classify import classify_command
    from ytflow.cli.phases import phases_command, videos_command
    from ytflow.cli.progress import progress_command

    main.add_command(phases_command)
    main.add_command(videos_command)
    main.add_command(progress_command)
    main.add_command(classify_command)


_register_commands()
