"""CLI entry point for the treehouse visitor desk."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from treehouse import __version__
from treehouse.config import DeskConfig, load_config
from treehouse.desk import READ_FAILURE_MESSAGE, InputStreamError, VisitorSession
from treehouse.registry import VisitorRegistry
from treehouse.utils.logging import configure_logging, get_logger, get_session_id
from treehouse.utils.result import ExitCode


def apply_overrides(
    config: DeskConfig,
    log_level: Optional[str],
    log_format: Optional[str],
    dump_format: Optional[str],
) -> DeskConfig:
    """Command-line values win over the config file."""
    if log_level:
        config.logging.level = log_level.lower()
    if log_format:
        config.logging.format = log_format.lower()
    if dump_format:
        config.dump_format = dump_format.lower()
    return config


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    default=None,
    help="YAML file with desk settings and seed visitors",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warn", "error"], case_sensitive=False),
    default=None,
    help="Logging level [default: warn]",
)
@click.option(
    "--log-format",
    type=click.Choice(["json", "text"], case_sensitive=False),
    default=None,
    help="Log format [default: json]",
)
@click.option(
    "--dump-format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default=None,
    help="Format of the final visitor list [default: text]",
)
@click.version_option(version=__version__)
def cli(
    config_path: Optional[Path],
    log_level: Optional[str],
    log_format: Optional[str],
    dump_format: Optional[str],
) -> None:
    """
    Treehouse visitor desk.

    Asks for names one per line and greets, refuses or admits each visitor.
    Unknown visitors are put on probation. An empty line ends the session
    and prints the final list of visitors.
    """
    # Log to the current stderr with the flags we already know about.
    configure_logging(level=log_level or "warn", format_type=log_format or "json")
    logger = get_logger("cli")

    result = load_config(config_path)
    if result.is_err():
        error = result.unwrap_err()
        logger.error("config_invalid", field=error.field, error=error.message)
        click.echo(str(error), err=True)
        sys.exit(ExitCode.CONFIG_INVALID)

    config = apply_overrides(result.unwrap(), log_level, log_format, dump_format)
    configure_logging(level=config.logging.level, format_type=config.logging.format)

    registry = VisitorRegistry(config.build_seed().unwrap())
    session = VisitorSession(
        registry=registry,
        stream=click.get_text_stream("stdin"),
        echo=click.echo,
        drinking_age=config.drinking_age,
        dump_format=config.dump_format,
    )

    logger.info(
        "session_started",
        session_id=get_session_id(),
        visitors=len(registry),
        config=str(config_path) if config_path else "defaults",
    )

    try:
        session.run()
    except InputStreamError as e:
        logger.error("session_aborted", error=str(e.cause))
        click.echo(READ_FAILURE_MESSAGE, err=True)
        sys.exit(ExitCode.INPUT_FAILED)


def main() -> None:
    """Main entry point."""
    try:
        cli()
    except Exception as e:
        logger = get_logger("cli")
        logger.error("cli_error", error=str(e))
        sys.exit(ExitCode.GENERAL_ERROR)


if __name__ == "__main__":
    main()
