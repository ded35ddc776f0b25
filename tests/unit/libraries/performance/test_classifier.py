"""Tests for the strategy classifier."""

import math

import pytest

from stratscope.libraries.performance.classifier import classify, classify_metrics
from stratscope.libraries.performance.metrics import calculate_total_profit, compute_metrics
from stratscope.libraries.performance.models import Classification, MetricsResult


class TestClassifyRules:
    """Test each rule and the order they are applied in."""

    def test_profitable_with_high_recovery(self):
        """Test positive profit and recovery factor > 1 is PROFITABLE."""
        assert classify(100.0, 20.0, 10.0, 5.0) is Classification.PROFITABLE

    def test_profitable_without_drawdown(self):
        """Test infinite recovery factor counts as > 1."""
        assert classify(10.0, 0.0, 5.0, math.inf) is Classification.PROFITABLE

    def test_risky_when_drawdown_exceeds_loss(self):
        """Test non-positive profit with drawdown deeper than the loss is RISKY."""
        assert classify(-40.0, 50.0, 25.0, -0.8) is Classification.RISKY

    def test_risky_at_zero_profit_with_drawdown(self):
        """Test zero profit with any drawdown is RISKY."""
        assert classify(0.0, 12.0, 1.0, 0.0) is Classification.RISKY

    def test_neutral_when_profitable_but_low_recovery(self):
        """Test positive profit with recovery <= 1 falls through to NEUTRAL (not RISKY)."""
        assert classify(2.0, 3.0, 12.5, 2.0 / 3.0) is Classification.NEUTRAL

    def test_neutral_at_recovery_exactly_one(self):
        """Test recovery factor must be strictly greater than 1."""
        assert classify(5.0, 5.0, 1.0, 1.0) is Classification.NEUTRAL

    def test_neutral_when_drawdown_equals_loss(self):
        """Test drawdown must strictly exceed the loss for RISKY."""
        assert classify(-10.0, 10.0, 1.0, -1.0) is Classification.NEUTRAL

    def test_neutral_when_loss_exceeds_drawdown(self):
        """Test a loss larger than the drawdown is NEUTRAL."""
        assert classify(-30.0, 10.0, 1.0, -3.0) is Classification.NEUTRAL

    def test_empty_row_values_are_neutral(self):
        """Test classify(0, 0, 0, +inf): rule 1 needs profit > 0, rule 2 needs 0 > 0."""
        assert classify(0.0, 0.0, 0.0, math.inf) is Classification.NEUTRAL


class TestClassifyPurity:
    """Test classify depends only on the rule inputs."""

    @pytest.mark.parametrize("average_duration", [0.0, 1.0, 599.5, 1e9])
    def test_average_duration_is_ignored(self, average_duration):
        """Test the label does not change with average_duration."""
        assert classify(2.0, 3.0, average_duration, 2.0 / 3.0) is Classification.NEUTRAL
        assert classify(-40.0, 50.0, average_duration, -0.8) is Classification.RISKY
        assert classify(10.0, 0.0, average_duration, math.inf) is Classification.PROFITABLE

    def test_repeated_calls_agree(self):
        """Test same inputs always give the same label."""
        labels = {classify(1.5, 0.5, 3.0, 3.0) for _ in range(10)}
        assert labels == {Classification.PROFITABLE}


class TestClassifyRows:
    """End-to-end classification of the worked example rows."""

    def test_single_winner_row_is_profitable(self, single_winner_row):
        """Test one profitable trade with no drawdown."""
        # Arrange
        metrics = compute_metrics(single_winner_row)

        # Act
        result = classify_metrics(calculate_total_profit(single_winner_row), metrics)

        # Assert
        assert result is Classification.PROFITABLE

    def test_losing_row_is_risky(self, losing_row):
        """Test losing row with drawdown 50 > loss 40."""
        metrics = compute_metrics(losing_row)
        assert classify_metrics(calculate_total_profit(losing_row), metrics) is Classification.RISKY

    def test_low_recovery_row_is_neutral(self, low_recovery_row):
        """Test profitable row with recovery factor 2/3."""
        metrics = compute_metrics(low_recovery_row)
        assert classify_metrics(calculate_total_profit(low_recovery_row), metrics) is Classification.NEUTRAL

    def test_empty_row_is_neutral(self):
        """Test empty row classification."""
        assert classify_metrics(calculate_total_profit([]), compute_metrics([])) is Classification.NEUTRAL

    def test_classify_metrics_matches_classify(self):
        """Test the MetricsResult adapter passes fields through unchanged."""
        # Arrange
        metrics = MetricsResult(max_drawdown=50.0, average_duration=25.0, max_duration=30.0, recovery_factor=-0.8)

        # Act & Assert
        assert classify_metrics(-40.0, metrics) is classify(-40.0, 50.0, 25.0, -0.8)
