"""Classification pipeline.

Runs the metrics engine and classifier over rows, strictly in input order:

    row -> compute_metrics -> calculate_total_profit -> classify -> RowEvaluation

Rows are independent; results keep their input position via row_number.
"""

from typing import Iterable

from stratscope.libraries.performance.classifier import classify_metrics
from stratscope.libraries.performance.metrics import calculate_total_profit, compute_metrics
from stratscope.libraries.performance.models import (
    Classification,
    ClassificationSummary,
    RowEvaluation,
    TradeRow,
)
from stratscope.system import LoggerFactory

logger = LoggerFactory.get_logger()


def evaluate_row(row: TradeRow, row_number: int) -> RowEvaluation:
    """
    Compute metrics and classification for a single row.

    Args:
        row: Trades in execution order
        row_number: 1-based position of the row in its batch

    Returns:
        RowEvaluation
    """
    metrics = compute_metrics(row)
    total_profit = calculate_total_profit(row)
    classification = classify_metrics(total_profit, metrics)

    logger.debug(
        "pipeline.row_evaluated",
        row=row_number,
        trades=len(row),
        total_profit=round(total_profit, 4),
        max_drawdown=round(metrics.max_drawdown, 4),
        recovery_factor=metrics.recovery_factor,
        classification=classification.name,
    )

    return RowEvaluation(
        row_number=row_number,
        trade_count=len(row),
        total_profit=total_profit,
        metrics=metrics,
        classification=classification,
    )


def evaluate_rows(rows: Iterable[TradeRow]) -> list[RowEvaluation]:
    """Evaluate every row in order. Row numbers start at 1."""
    evaluations = [evaluate_row(row, row_number) for row_number, row in enumerate(rows, start=1)]

    summary = summarize(evaluations)
    logger.info(
        "pipeline.completed",
        rows=summary.total,
        profitable=summary.profitable,
        risky=summary.risky,
        neutral=summary.neutral,
    )
    return evaluations


def summarize(evaluations: Iterable[RowEvaluation]) -> ClassificationSummary:
    """Count evaluations per classification label."""
    counts = {label: 0 for label in Classification}
    for evaluation in evaluations:
        counts[evaluation.classification] += 1

    return ClassificationSummary(
        profitable=counts[Classification.PROFITABLE],
        risky=counts[Classification.RISKY],
        neutral=counts[Classification.NEUTRAL],
    )
