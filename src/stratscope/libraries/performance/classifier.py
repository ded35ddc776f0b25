"""Rule-based strategy classifier.

Rules, first match wins:

1. total_profit > 0 and recovery_factor > 1            -> PROFITABLE
2. total_profit <= 0 and max_drawdown > -total_profit  -> RISKY
3. otherwise                                           -> NEUTRAL

A profitable row whose recovery factor is at most 1 is NEUTRAL, not RISKY:
rule 2 only applies to non-positive profit. Thresholds are fixed.
"""

from stratscope.libraries.performance.models import Classification, MetricsResult


def classify(
    total_profit: float,
    max_drawdown: float,
    average_duration: float,
    recovery_factor: float,
) -> Classification:
    """
    Classify a strategy from its total profit and row metrics.

    Args:
        total_profit: Sum of trade profits
        max_drawdown: Largest drop from the running peak (>= 0)
        average_duration: Mean trade duration (not used by the rules)
        recovery_factor: total_profit / max_drawdown, +inf without drawdown

    Returns:
        Classification label

    Example:
        >>> classify(10.0, 0.0, 5.0, float("inf"))
        <Classification.PROFITABLE: 1>
        >>> classify(-40.0, 50.0, 25.0, -0.8)
        <Classification.RISKY: -1>
    """
    if total_profit > 0 and recovery_factor > 1:
        return Classification.PROFITABLE
    elif total_profit <= 0 and max_drawdown > -total_profit:
        return Classification.RISKY
    else:
        return Classification.NEUTRAL


def classify_metrics(total_profit: float, metrics: MetricsResult) -> Classification:
    """Classify using a MetricsResult instead of positional statistics."""
    return classify(
        total_profit=total_profit,
        max_drawdown=metrics.max_drawdown,
        average_duration=metrics.average_duration,
        recovery_factor=metrics.recovery_factor,
    )
