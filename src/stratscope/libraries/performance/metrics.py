"""Performance metrics calculation functions.

Pure functions computing per-row statistics from a sequence of trades.

Philosophy:
- Pure functions: same inputs always produce same outputs
- No side effects: don't modify inputs or global state
- Total: every row, including the empty one, maps to a defined result

Drawdown is measured on cumulative profit with the running peak starting
at 0 (not at the first trade). A row that never rises above zero therefore
draws down from zero.

Usage:
    >>> from stratscope.libraries.performance.metrics import compute_metrics
    >>> from stratscope.libraries.performance.models import Trade
    >>>
    >>> row = [Trade(profit=5, duration=10), Trade(profit=-3, duration=15)]
    >>> result = compute_metrics(row)
    >>> result.max_drawdown
    3.0
    >>> result.average_duration
    12.5
"""

import math

from stratscope.libraries.performance.models import MetricsResult, TradeRow


def compute_metrics(row: TradeRow) -> MetricsResult:
    """
    Compute max drawdown, average/max duration and recovery factor in one pass.

    Args:
        row: Trades in execution order (may be empty)

    Returns:
        MetricsResult. recovery_factor is final cumulative profit divided by
        max drawdown, or +inf when max drawdown is zero (whatever the sign
        of the profit).

    Example:
        >>> row = [Trade(profit=-50, duration=20), Trade(profit=10, duration=30)]
        >>> compute_metrics(row)
        MetricsResult(max_drawdown=50.0, average_duration=25.0, max_duration=30.0, recovery_factor=-0.8)
    """
    cumulative_profit = 0.0
    peak = 0.0
    max_drawdown = 0.0
    total_duration = 0.0
    max_duration = 0.0

    for trade in row:
        cumulative_profit += trade.profit
        total_duration += trade.duration
        if trade.duration > max_duration:
            max_duration = trade.duration
        if cumulative_profit > peak:
            peak = cumulative_profit
        drawdown = peak - cumulative_profit
        if drawdown > max_drawdown:
            max_drawdown = drawdown

    average_duration = total_duration / len(row) if row else 0.0

    if max_drawdown > 0:
        recovery_factor = cumulative_profit / max_drawdown
    else:
        recovery_factor = math.inf

    return MetricsResult(
        max_drawdown=max_drawdown,
        average_duration=average_duration,
        max_duration=max_duration,
        recovery_factor=recovery_factor,
    )


def calculate_total_profit(row: TradeRow) -> float:
    """
    Sum of all trade profits in the row.

    Example:
        >>> calculate_total_profit([Trade(profit=5, duration=1), Trade(profit=-3, duration=1)])
        2.0
    """
    total = 0.0
    for trade in row:
        total += trade.profit
    return total
