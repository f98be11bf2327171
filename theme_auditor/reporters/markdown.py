"""Markdown report for API consistency findings.

Formats already-computed findings, grouped by category in the order each
category first appears. No analysis happens here.
"""

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from ..models import Level

if TYPE_CHECKING:
    from ..models import ValidationResult

LEVEL_GLYPHS = {
    Level.ERROR: "❌",
    Level.WARNING: "⚠️",
    Level.INFO: "ℹ️",
}


def group_results_by_category(
    results: Sequence["ValidationResult"],
) -> dict[str, list["ValidationResult"]]:
    """Group findings by category, preserving first-occurrence order."""
    grouped: dict[str, list["ValidationResult"]] = {}
    for result in results:
        grouped.setdefault(result.category, []).append(result)
    return grouped


def format_result(result: "ValidationResult") -> list[str]:
    """Format one finding as report lines."""
    lines = [
        f"{LEVEL_GLYPHS[result.level]} **{result.level.value.upper()}**: {result.message}"
    ]
    if result.suggestion:
        lines.append(f"   💡 Suggestion: {result.suggestion}")
    if isinstance(result.details, (list, tuple)) and result.details:
        lines.append(f"   🔎 Details: {'; '.join(str(d) for d in result.details)}")
    lines.append(f"   🎯 Affected themes: {', '.join(result.affected_themes)}")
    return lines


def generate_detailed_report(
    results: Sequence["ValidationResult"],
    theme_count: int | None = None,
    rule_count: int | None = None,
    generated_at: datetime | None = None,
) -> str:
    """Render findings as a Markdown report.

    Args:
        results: Findings to render.
        theme_count: Number of registered themes, shown in the overview.
        rule_count: Number of active rules, shown in the overview.
        generated_at: Report timestamp. Defaults to now (UTC).

    Returns:
        Markdown text.
    """
    timestamp = (generated_at or datetime.now(UTC)).isoformat()

    lines = ["# Cross-Theme API Consistency Report", "", "## Overview"]
    lines.append(f"- Generated: {timestamp}")
    if theme_count is not None:
        lines.append(f"- Themes: {theme_count}")
    if rule_count is not None:
        lines.append(f"- Rules: {rule_count}")
    lines.append(f"- Findings: {len(results)}")
    lines.append("")

    for category, category_results in group_results_by_category(results).items():
        lines.append(f"## {category}")
        lines.append("")
        for result in category_results:
            lines.extend(format_result(result))
            lines.append("")

    return "\n".join(lines)
