"""Reporting for classification results."""

from stratscope.services.reporting.formatters import (
    create_metrics_table,
    create_summary_table,
    format_classification_line,
    format_classification_lines,
)

__all__ = [
    "create_metrics_table",
    "create_summary_table",
    "format_classification_line",
    "format_classification_lines",
]
