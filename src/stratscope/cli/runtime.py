"""Shared command plumbing: config loading, logging setup and report output."""

from pathlib import Path
from typing import NoReturn, Optional, Sequence

import click
import yaml
from rich.console import Console

from stratscope.engine import summarize
from stratscope.libraries.performance.models import RowEvaluation
from stratscope.services.reporting import create_metrics_table, create_summary_table, format_classification_lines
from stratscope.system import LoggerFactory
from stratscope.system.config import reload_system_config

console = Console()

LOG_LEVEL_CHOICE = click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False)


def load_runtime_config(config_file: Optional[Path], log_level: Optional[str]) -> None:
    """
    (Re)load the system config singleton and configure logging from it.

    Commands read the loaded config with get_system_config(). An invalid
    config file is reported with fail().

    Args:
        config_file: Explicit YAML path (None = $STRATSCOPE_CONFIG or config/system.yaml)
        log_level: CLI override for the console log level
    """
    try:
        config = reload_system_config(config_file)
        if log_level:
            config.logging.level = log_level.upper()
        LoggerFactory.configure(config.logging.to_logger_config())
    except (ValueError, TypeError, yaml.YAMLError) as e:
        fail(f"Invalid configuration: {e}")


def fail(message: str) -> NoReturn:
    """Report an error on stderr and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(1)


def print_report(evaluations: Sequence[RowEvaluation], show_summary: bool, verbose: bool) -> None:
    """Print classification lines, then the optional Rich tables."""
    for line in format_classification_lines(evaluations):
        click.echo(line)

    if verbose:
        console.print()
        console.print(create_metrics_table(evaluations))

    if show_summary:
        console.print()
        console.print(create_summary_table(summarize(evaluations)))
