"""
StratScope - Trading Strategy Classification

Public API for computing per-strategy drawdown/duration metrics and
classifying strategies as profitable, risky or neutral.
"""

from importlib.metadata import version

try:
    __version__ = version("stratscope")
except Exception:
    __version__ = "0.0.0.dev"  # Fallback for development


__all__ = [
    "__version__",
]
