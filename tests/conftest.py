"""Root conftest for all tests - logging setup and shared trade rows."""

import pytest

from stratscope.libraries.performance.models import Trade
from stratscope.system import LoggerFactory, LoggingConfig


def configure_test_logging() -> None:
    """Console-only logging so tests never create logs/ in the working directory."""
    LoggerFactory.reset()
    LoggerFactory.configure(LoggingConfig(level="WARNING", enable_file=False))


# Configure before any test module imports stratscope (module-level loggers auto-configure otherwise)
configure_test_logging()


@pytest.fixture
def single_winner_row() -> list[Trade]:
    """One profitable trade: no drawdown."""
    return [Trade(profit=10, duration=5)]


@pytest.fixture
def losing_row() -> list[Trade]:
    """Cumulative profit -50 then -40: drawdown measured from a zero peak."""
    return [Trade(profit=-50, duration=20), Trade(profit=10, duration=30)]


@pytest.fixture
def low_recovery_row() -> list[Trade]:
    """Cumulative profit 5 then 2: profitable, recovery factor 2/3."""
    return [Trade(profit=5, duration=10), Trade(profit=-3, duration=15)]
