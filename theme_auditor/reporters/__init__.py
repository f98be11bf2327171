"""Reporters for API consistency findings."""

from .markdown import format_result, generate_detailed_report, group_results_by_category

__all__ = [
    "format_result",
    "generate_detailed_report",
    "group_results_by_category",
]
