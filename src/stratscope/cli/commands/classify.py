"""Classify the rows of an existing dataset file."""

from pathlib import Path
from typing import Optional

import click

from stratscope.cli.runtime import LOG_LEVEL_CHOICE, fail, load_runtime_config, print_report
from stratscope.engine import evaluate_rows
from stratscope.services.data import TradeFileError, read_trade_file


@click.command("classify")
@click.argument("input_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--summary",
    "-s",
    is_flag=True,
    help="Print a classification summary table after the row lines",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Print a per-row metrics table",
)
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to system configuration file (YAML)",
)
@click.option(
    "--log-level",
    "-l",
    type=LOG_LEVEL_CHOICE,
    help="Set logging level",
)
def classify_command(
    input_file: Path,
    summary: bool,
    verbose: bool,
    config_file: Optional[Path],
    log_level: Optional[str],
):
    """
    Classify every row of a dataset written by 'stratscope run'.

    \b
    Examples:
        stratscope classify trades.txt
        stratscope classify trades.txt --summary
    """
    load_runtime_config(config_file, log_level)

    try:
        trade_rows = read_trade_file(input_file)
    except TradeFileError as e:
        fail(str(e))

    evaluations = evaluate_rows(trade_rows)
    print_report(evaluations, show_summary=summary, verbose=verbose)
