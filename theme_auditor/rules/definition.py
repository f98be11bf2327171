"""Theme definition rule.

Checks the top-level keys of each theme definition and compares the shape
of the ``colors`` subtree against every other theme.
"""

from collections.abc import Mapping, Sequence

from ..diff import analyze_color_structure, compare_structures, is_type_mismatch
from ..models import Level, ThemeInfo, ValidationResult
from .base import BaseRule

REQUIRED_THEME_PROPS = ("name", "colors", "typography", "spacing", "animation")


class ThemeDefinitionConsistencyRule(BaseRule):
    """Checks required definition keys and color structure parity."""

    @property
    def name(self) -> str:
        return "theme-definition-consistency"

    @property
    def description(self) -> str:
        return "Theme definitions share required keys and color structure"

    def validate(
        self, theme: ThemeInfo, all_themes: Sequence[ThemeInfo]
    ) -> list[ValidationResult]:
        results: list[ValidationResult] = []
        definition = theme.definition or {}

        for prop in REQUIRED_THEME_PROPS:
            if prop not in definition:
                results.append(
                    self._create_result(
                        self.config.error_levels.api_mismatch,
                        "missing-theme-prop",
                        f"Definition of theme {theme.name} is missing required property: {prop}",
                        [theme.id],
                        suggestion=f"Add a top-level '{prop}' entry to the theme definition",
                    )
                )

        colors = definition.get("colors")
        if not isinstance(colors, Mapping):
            return results

        structure = analyze_color_structure(colors)
        for other in all_themes:
            other_colors = (other.definition or {}).get("colors")
            if other.id == theme.id or not isinstance(other_colors, Mapping):
                continue

            differences = compare_structures(
                structure, analyze_color_structure(other_colors)
            )
            if not differences:
                continue

            level = (
                self.config.error_levels.type_mismatch
                if any(is_type_mismatch(d) for d in differences)
                else Level.WARNING
            )
            results.append(
                self._create_result(
                    level,
                    "color-structure-inconsistency",
                    f"Color structure of theme {theme.name} differs from {other.name}",
                    [theme.id, other.id],
                    details=differences,
                )
            )

        return results
