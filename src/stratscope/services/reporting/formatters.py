"""Report formatters for classification results.

Plain classification lines (the stable, machine-readable output) plus
Rich tables for the optional summary and per-row metrics views.
"""

import math
from typing import Iterable

from rich.table import Table

from stratscope.libraries.performance.models import Classification, ClassificationSummary, RowEvaluation

_LABEL_STYLES = {
    Classification.PROFITABLE: "green",
    Classification.RISKY: "red",
    Classification.NEUTRAL: "white",
}


def format_classification_line(evaluation: RowEvaluation) -> str:
    """
    Render the report line for one row.

    Example:
        'Row 1: Classification = 1'
    """
    return f"Row {evaluation.row_number}: Classification = {int(evaluation.classification)}"


def format_classification_lines(evaluations: Iterable[RowEvaluation]) -> list[str]:
    """Render report lines for all rows, in the order given."""
    return [format_classification_line(evaluation) for evaluation in evaluations]


def _format_number(value: float, precision: int = 2) -> str:
    """Format numeric value, rendering infinities as the ∞ sign."""
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    return f"{value:,.{precision}f}"


def _styled_label(classification: Classification) -> str:
    style = _LABEL_STYLES[classification]
    return f"[{style}]{classification.name.title()}[/{style}]"


def create_summary_table(summary: ClassificationSummary) -> Table:
    """
    Create a Rich table with row counts and shares per classification.

    Args:
        summary: Label counts

    Returns:
        Configured Rich Table
    """
    table = Table(title="Classification Summary")
    table.add_column("Classification", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right")
    table.add_column("Rows", style="magenta", justify="right")
    table.add_column("Share", style="yellow", justify="right")

    for label in (Classification.PROFITABLE, Classification.NEUTRAL, Classification.RISKY):
        table.add_row(
            _styled_label(label),
            str(int(label)),
            f"{summary.count(label):,}",
            f"{summary.share(label) * 100:.1f}%",
        )

    table.add_row("[bold]Total[/bold]", "", f"{summary.total:,}", "100.0%" if summary.total else "-")
    return table


def create_metrics_table(evaluations: Iterable[RowEvaluation]) -> Table:
    """
    Create a Rich table with per-row metrics.

    Args:
        evaluations: Pipeline results

    Returns:
        Configured Rich Table
    """
    table = Table(title="Row Metrics")
    table.add_column("Row", style="cyan", justify="right", no_wrap=True)
    table.add_column("Trades", justify="right")
    table.add_column("Total Profit", justify="right")
    table.add_column("Max Drawdown", justify="right")
    table.add_column("Avg Duration", justify="right", style="dim")
    table.add_column("Max Duration", justify="right", style="dim")
    table.add_column("Recovery Factor", justify="right")
    table.add_column("Classification", no_wrap=True)

    for evaluation in evaluations:
        metrics = evaluation.metrics
        profit_color = "green" if evaluation.total_profit > 0 else "red" if evaluation.total_profit < 0 else "white"
        table.add_row(
            str(evaluation.row_number),
            f"{evaluation.trade_count:,}",
            f"[{profit_color}]{_format_number(evaluation.total_profit)}[/{profit_color}]",
            _format_number(metrics.max_drawdown) if metrics.has_drawdown else "-",
            _format_number(metrics.average_duration),
            _format_number(metrics.max_duration),
            _format_number(metrics.recovery_factor, precision=3),
            _styled_label(evaluation.classification),
        )

    return table
