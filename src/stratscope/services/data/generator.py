"""Random trade data source.

Synthesizes independent trade rows for classification runs:

- Row length: uniform integer in [min_row_length, max_row_length] (inclusive)
- Profit: uniform real in [min_profit, max_profit]
- Duration: uniform real in [min_duration, max_duration]

Default bounds (GeneratorConfig): 100 rows of 1-1000 trades, profit in
[-1000, 1000], duration in [1, 1200].

Uses a private random.Random (Mersenne Twister) so a seed reproduces the
same dataset without touching the global random state.

Example:
    >>> source = RandomTradeSource(GeneratorConfig(row_count=3), seed=42)
    >>> rows = source.generate_rows()
    >>> len(rows)
    3
"""

import random

from stratscope.libraries.performance.models import Trade
from stratscope.system import LoggerFactory
from stratscope.system.config import GeneratorConfig

logger = LoggerFactory.get_logger()


class RandomTradeSource:
    """Generates random trade rows within configured bounds."""

    def __init__(self, config: GeneratorConfig | None = None, seed: int | None = None) -> None:
        """
        Initialize the data source.

        Args:
            config: Generation bounds (defaults to GeneratorConfig())
            seed: Optional seed for reproducible output

        Raises:
            ValueError: If any bound pair is inverted or counts are negative
        """
        self._config = config or GeneratorConfig()
        self._validate(self._config)
        self._seed = seed
        self._rng = random.Random(seed)

    @staticmethod
    def _validate(config: GeneratorConfig) -> None:
        if config.row_count < 0:
            raise ValueError(f"row_count must be >= 0, got {config.row_count}")
        if config.min_row_length < 0:
            raise ValueError(f"min_row_length must be >= 0, got {config.min_row_length}")
        if config.min_row_length > config.max_row_length:
            raise ValueError(
                f"min_row_length ({config.min_row_length}) exceeds max_row_length ({config.max_row_length})"
            )
        if config.min_profit > config.max_profit:
            raise ValueError(f"min_profit ({config.min_profit}) exceeds max_profit ({config.max_profit})")
        if config.min_duration > config.max_duration:
            raise ValueError(f"min_duration ({config.min_duration}) exceeds max_duration ({config.max_duration})")

    @property
    def config(self) -> GeneratorConfig:
        """Generation bounds in use."""
        return self._config

    @property
    def seed(self) -> int | None:
        """Seed the source was created with (None if unseeded)."""
        return self._seed

    def generate_row(self) -> list[Trade]:
        """Generate one row of random trades."""
        cfg = self._config
        length = self._rng.randint(cfg.min_row_length, cfg.max_row_length)
        return [
            Trade(
                profit=self._rng.uniform(cfg.min_profit, cfg.max_profit),
                duration=self._rng.uniform(cfg.min_duration, cfg.max_duration),
            )
            for _ in range(length)
        ]

    def generate_rows(self, count: int | None = None) -> list[list[Trade]]:
        """
        Generate independent rows.

        Args:
            count: Number of rows (defaults to config.row_count)

        Returns:
            List of trade rows
        """
        if count is None:
            count = self._config.row_count
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")

        rows = [self.generate_row() for _ in range(count)]

        logger.info(
            "generator.rows_generated",
            rows=count,
            trades=sum(len(row) for row in rows),
            seed=self._seed,
        )
        return rows
