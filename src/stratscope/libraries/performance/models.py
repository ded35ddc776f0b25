"""Performance metrics data models.

Pydantic models for trades, per-row metrics and classification results.
All models are frozen: a row's statistics are facts derived from it.
"""

from enum import IntEnum
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field


class Trade(BaseModel):
    """
    A single closed trade in a strategy's execution history.

    Attributes:
        profit: Profit/loss of the trade (any sign)
        duration: Time the trade was held (non-negative)
    """

    model_config = ConfigDict(frozen=True)

    profit: float
    duration: float


# One strategy's execution history, in execution order. May be empty.
TradeRow = Sequence[Trade]


class Classification(IntEnum):
    """Strategy category. Integer values are the ones printed in reports."""

    PROFITABLE = 1
    RISKY = -1
    NEUTRAL = 0


class MetricsResult(BaseModel):
    """
    Summary statistics of one trade row.

    recovery_factor is +inf when the row never drew down.
    """

    model_config = ConfigDict(frozen=True)

    max_drawdown: float = Field(ge=0)
    average_duration: float  # Negative only if the row carries negative durations
    max_duration: float = Field(ge=0)
    recovery_factor: float

    @property
    def has_drawdown(self) -> bool:
        """Row dropped below its running peak at least once."""
        return self.max_drawdown > 0


class RowEvaluation(BaseModel):
    """Metrics and classification of a single row, as produced by the pipeline."""

    model_config = ConfigDict(frozen=True)

    row_number: int = Field(ge=1)  # 1-based, input order
    trade_count: int = Field(ge=0)
    total_profit: float
    metrics: MetricsResult
    classification: Classification


class ClassificationSummary(BaseModel):
    """Label counts over a batch of rows."""

    model_config = ConfigDict(frozen=True)

    profitable: int = 0
    risky: int = 0
    neutral: int = 0

    @property
    def total(self) -> int:
        """Number of rows classified."""
        return self.profitable + self.risky + self.neutral

    def count(self, classification: Classification) -> int:
        """Number of rows with the given label."""
        if classification is Classification.PROFITABLE:
            return self.profitable
        elif classification is Classification.RISKY:
            return self.risky
        return self.neutral

    def share(self, classification: Classification) -> float:
        """Fraction of rows with the given label (0.0 for an empty batch)."""
        if self.total == 0:
            return 0.0
        return self.count(classification) / self.total
