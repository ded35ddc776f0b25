"""Generate a random dataset, write it and classify every row."""

from pathlib import Path
from typing import Optional

import click

from stratscope.cli.runtime import LOG_LEVEL_CHOICE, fail, load_runtime_config, print_report
from stratscope.engine import evaluate_rows
from stratscope.services.data import RandomTradeSource, TradeFileError, write_trade_file
from stratscope.system import get_system_config


@click.command("run")
@click.argument("output_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--rows",
    "-n",
    type=click.IntRange(min=0),
    help="Number of rows to generate (overrides generator.row_count)",
)
@click.option(
    "--seed",
    type=int,
    help="Random seed for a reproducible dataset",
)
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
    help="Set logging level (DEBUG shows per-row metrics in the log)",
)
def run_command(
    output_file: Path,
    rows: Optional[int],
    seed: Optional[int],
    summary: bool,
    verbose: bool,
    config_file: Optional[Path],
    log_level: Optional[str],
):
    """
    Generate random strategy rows, save them and classify each one.

    Rows are written to OUTPUT_FILE as 'profit,duration;' segments, one
    line per row. One 'Row N: Classification = C' line is then printed per
    row, where C is 1 (profitable), -1 (risky) or 0 (neutral).

    \b
    Examples:
        # Reference run: 100 rows
        stratscope run trades.txt

        # Reproducible small dataset with a summary table
        stratscope run trades.txt --rows 10 --seed 7 --summary
    """
    load_runtime_config(config_file, log_level)
    config = get_system_config()

    try:
        source = RandomTradeSource(config.generator, seed=seed)
    except ValueError as e:
        fail(f"Invalid generator configuration: {e}")

    trade_rows = source.generate_rows(rows)

    try:
        write_trade_file(output_file, trade_rows, precision=config.output.float_precision)
    except TradeFileError as e:
        fail(str(e))

    evaluations = evaluate_rows(trade_rows)
    print_report(evaluations, show_summary=summary, verbose=verbose)
