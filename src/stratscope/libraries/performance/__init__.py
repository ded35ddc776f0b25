"""Performance metrics library for strategy classification.

1. **Models** (`models.py`): Pydantic data structures
   - Trade / TradeRow: one strategy's execution history
   - MetricsResult: per-row drawdown and duration statistics
   - Classification: PROFITABLE / RISKY / NEUTRAL
   - RowEvaluation, ClassificationSummary: pipeline outputs

2. **Metrics** (`metrics.py`): Pure calculation functions
   - compute_metrics: single-pass drawdown/duration/recovery statistics
   - calculate_total_profit: profit reduction used before classifying

3. **Classifier** (`classifier.py`): Fixed rule set
   - classify, classify_metrics

Usage:
    >>> from stratscope.libraries.performance import Trade, classify_metrics, compute_metrics
    >>> row = [Trade(profit=10, duration=5)]
    >>> classify_metrics(10.0, compute_metrics(row))
    <Classification.PROFITABLE: 1>
"""

from stratscope.libraries.performance.classifier import classify, classify_metrics
from stratscope.libraries.performance.metrics import calculate_total_profit, compute_metrics
from stratscope.libraries.performance.models import (
    Classification,
    ClassificationSummary,
    MetricsResult,
    RowEvaluation,
    Trade,
    TradeRow,
)

__all__ = [
    # Models
    "Trade",
    "TradeRow",
    "MetricsResult",
    "Classification",
    "RowEvaluation",
    "ClassificationSummary",
    # Metrics (pure functions)
    "compute_metrics",
    "calculate_total_profit",
    # Classifier
    "classify",
    "classify_metrics",
]
