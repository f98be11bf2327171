"""Callable surface rules.

Compares hook signatures across themes and checks that each theme exposes
the shared style utilities.
"""

from collections.abc import Sequence

from ..diff import compare_hook_signatures, normalize_name
from ..models import Level, ThemeInfo, ValidationResult
from .base import BaseRule

EXPECTED_HOOKS = ("useTheme", "useButton", "useSystemPreferences")
EXPECTED_STYLE_UTILS = ("computeButtonStyles", "getThemeStyles", "generateCSSVariables")


class HookSignatureConsistencyRule(BaseRule):
    """Checks that shared hooks have the same signature in every theme."""

    expected_hooks: tuple[str, ...] = EXPECTED_HOOKS

    @property
    def name(self) -> str:
        return "hook-signature-consistency"

    @property
    def description(self) -> str:
        return "Shared hooks have identical signatures across themes"

    def validate(
        self, theme: ThemeInfo, all_themes: Sequence[ThemeInfo]
    ) -> list[ValidationResult]:
        results: list[ValidationResult] = []

        for hook_name in self.expected_hooks:
            hook = theme.find_hook(hook_name)
            if hook is None:
                results.append(
                    self._create_result(
                        Level.INFO,
                        "missing-hook",
                        f"Theme {theme.name} may be missing shared hook: {hook_name}",
                        [theme.id],
                    )
                )
                continue

            for other in all_themes:
                if other.id == theme.id:
                    continue
                other_hook = other.find_hook(hook_name)
                if other_hook is None:
                    continue

                differences = compare_hook_signatures(
                    hook, other_hook, strict=self.config.strict_mode
                )
                if differences:
                    results.append(
                        self._create_result(
                            self.config.error_levels.method_signature,
                            "hook-signature-mismatch",
                            f"Hook {hook_name} signature differs between themes {theme.name} and {other.name}",
                            [theme.id, other.id],
                            details=differences,
                            suggestion=f"Align the parameters of {hook.name} with {other.name}",
                        )
                    )

        return results


class StyleApiConsistencyRule(BaseRule):
    """Checks that a theme exposes the shared style utilities."""

    expected_utils: tuple[str, ...] = EXPECTED_STYLE_UTILS

    @property
    def name(self) -> str:
        return "style-api-consistency"

    @property
    def description(self) -> str:
        return "Theme exposes the shared style utility functions"

    def validate(
        self, theme: ThemeInfo, all_themes: Sequence[ThemeInfo]
    ) -> list[ValidationResult]:
        util_names = [normalize_name(util.name) for util in theme.utils]
        results: list[ValidationResult] = []

        for util_name in self.expected_utils:
            fragment = normalize_name(util_name)
            if not any(fragment in name for name in util_names):
                results.append(
                    self._create_result(
                        Level.WARNING,
                        "missing-style-util",
                        f"Theme {theme.name} is missing style utility: {util_name}",
                        [theme.id],
                    )
                )

        return results
