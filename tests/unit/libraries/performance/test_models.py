"""Tests for performance data models."""

import math

import pytest
from pydantic import ValidationError

from stratscope.libraries.performance.models import (
    Classification,
    ClassificationSummary,
    MetricsResult,
    RowEvaluation,
    Trade,
)


class TestTrade:
    """Test Trade model."""

    def test_coerces_numbers_to_float(self):
        """Test integer inputs are stored as floats."""
        trade = Trade(profit=10, duration=5)

        assert trade.profit == 10.0
        assert isinstance(trade.profit, float)

    def test_is_immutable(self):
        """Test trades cannot be modified after creation."""
        trade = Trade(profit=1.0, duration=2.0)

        with pytest.raises(ValidationError):
            trade.profit = 5.0  # type: ignore[misc]

    def test_equality_by_value(self):
        """Test trades compare by field values."""
        assert Trade(profit=1.0, duration=2.0) == Trade(profit=1.0, duration=2.0)


class TestMetricsResult:
    """Test MetricsResult model."""

    def test_accepts_infinite_recovery_factor(self):
        """Test +inf is a valid recovery factor."""
        result = MetricsResult(max_drawdown=0.0, average_duration=0.0, max_duration=0.0, recovery_factor=math.inf)

        assert math.isinf(result.recovery_factor)
        assert not result.has_drawdown

    def test_rejects_negative_drawdown(self):
        """Test max_drawdown must be >= 0."""
        with pytest.raises(ValidationError):
            MetricsResult(max_drawdown=-1.0, average_duration=0.0, max_duration=0.0, recovery_factor=1.0)

    def test_has_drawdown(self):
        """Test has_drawdown reflects a positive max drawdown."""
        result = MetricsResult(max_drawdown=3.0, average_duration=1.0, max_duration=1.0, recovery_factor=0.5)

        assert result.has_drawdown


class TestClassification:
    """Test Classification enum."""

    def test_integer_values(self):
        """Test report values: 1 profitable, -1 risky, 0 neutral."""
        assert int(Classification.PROFITABLE) == 1
        assert int(Classification.RISKY) == -1
        assert int(Classification.NEUTRAL) == 0

    def test_lookup_by_value(self):
        """Test labels can be recovered from their integer value."""
        assert Classification(-1) is Classification.RISKY


class TestRowEvaluation:
    """Test RowEvaluation model."""

    def test_row_number_is_one_based(self):
        """Test row_number 0 is rejected."""
        metrics = MetricsResult(max_drawdown=0.0, average_duration=0.0, max_duration=0.0, recovery_factor=math.inf)

        with pytest.raises(ValidationError):
            RowEvaluation(
                row_number=0,
                trade_count=0,
                total_profit=0.0,
                metrics=metrics,
                classification=Classification.NEUTRAL,
            )


class TestClassificationSummary:
    """Test ClassificationSummary model."""

    def test_total_and_counts(self):
        """Test total and per-label counts."""
        summary = ClassificationSummary(profitable=3, risky=1, neutral=4)

        assert summary.total == 8
        assert summary.count(Classification.PROFITABLE) == 3
        assert summary.count(Classification.RISKY) == 1
        assert summary.count(Classification.NEUTRAL) == 4

    def test_share(self):
        """Test share is count / total."""
        summary = ClassificationSummary(profitable=1, risky=1, neutral=2)

        assert summary.share(Classification.NEUTRAL) == 0.5

    def test_share_of_empty_batch(self):
        """Test share is zero when nothing was classified."""
        assert ClassificationSummary().share(Classification.RISKY) == 0.0
