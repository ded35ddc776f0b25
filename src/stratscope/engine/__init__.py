"""Classification engine: runs the performance library over trade rows."""

from stratscope.engine.pipeline import evaluate_row, evaluate_rows, summarize

__all__ = [
    "evaluate_row",
    "evaluate_rows",
    "summarize",
]
