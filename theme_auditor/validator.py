"""Rule engine for cross-theme API consistency checking.

This module provides the ApiConsistencyValidator, which holds the theme and
rule registries, runs every rule against every registered theme, and
aggregates the findings into a ValidationReport.
"""

import dataclasses
import time
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .audit_logging import LogCategory, get_category_logger
from .config import ApiConsistencyConfig
from .errors import ValidatorFrozenError
from .models import Level, Summary, ThemeInfo, ValidationReport, ValidationResult
from .reporters.markdown import generate_detailed_report
from .rules import BUILTIN_RULES, ValidationRule, as_rule

logger = get_category_logger(LogCategory.ENGINE)

VALIDATION_ERROR_CATEGORY = "validation-error"

# Remediation advice for error-level categories, in output order
RECOMMENDATIONS: dict[str, str] = {
    "missing-prop": (
        "Unify the button component props across all themes so every required prop is declared"
    ),
    "hook-signature-mismatch": (
        "Define a shared hook interface so every theme implements the same signatures"
    ),
    "missing-theme-prop": (
        "Adopt a standard theme definition template that includes every required property"
    ),
    "color-structure-inconsistency": (
        "Align the color token structure so every theme exposes the same color paths"
    ),
    VALIDATION_ERROR_CATEGORY: (
        "Fix the validation rules that failed to run; their checks were skipped"
    ),
}


class ApiConsistencyValidator:
    """Runs validation rules over registered themes.

    Built-in rules run first in fixed order, followed by custom rules in
    registration order. For each rule, themes are visited in registration
    order, so output is reproducible. Registries persist across runs;
    after :meth:`freeze` they can no longer be modified.
    """

    def __init__(self, config: ApiConsistencyConfig | None = None):
        """Initialize the validator.

        Args:
            config: Run configuration. Defaults to ApiConsistencyConfig().
        """
        self.config = config or ApiConsistencyConfig()
        self._themes: dict[str, ThemeInfo] = {}
        self._rules: list[ValidationRule] = [
            rule_class(self.config) for rule_class in BUILTIN_RULES
        ]
        self._frozen = False

        for custom_rule in self.config.custom_rules:
            self.add_validation_rule(custom_rule)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_theme(self, theme_info: ThemeInfo) -> None:
        """Register a theme, replacing any theme with the same id.

        Args:
            theme_info: Theme to register.

        Raises:
            ValidatorFrozenError: If the validator is frozen.
        """
        if self._frozen:
            raise ValidatorFrozenError("register theme")
        self._themes[theme_info.id] = theme_info

    def register_themes(self, themes: Iterable[ThemeInfo]) -> None:
        """Register several themes in order."""
        for theme in themes:
            self.register_theme(theme)

    def add_validation_rule(self, rule: Any) -> None:
        """Append a rule. Duplicate names are allowed and all run.

        Args:
            rule: A ValidationRule or a function ``(theme, all_themes) -> results``.

        Raises:
            ValidatorFrozenError: If the validator is frozen.
        """
        if self._frozen:
            raise ValidatorFrozenError("add validation rule")
        self._rules.append(as_rule(rule, self.config))

    def freeze(self) -> "ApiConsistencyValidator":
        """Prevent further registration and return self."""
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        """Whether registration is closed."""
        return self._frozen

    @property
    def themes(self) -> list[ThemeInfo]:
        """Registered themes in registration order."""
        return list(self._themes.values())

    @property
    def rules(self) -> list[ValidationRule]:
        """Active rules in execution order."""
        return list(self._rules)

    def get_theme(self, theme_id: str) -> ThemeInfo | None:
        """Get a registered theme by id."""
        return self._themes.get(theme_id)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate_consistency(self) -> ValidationReport:
        """Run every active rule against every registered theme.

        Rule failures are converted into ``validation-error`` findings, so
        this method does not raise.

        Returns:
            ValidationReport with results, summary and recommendations.
        """
        logger.info("Starting cross-theme API consistency validation")
        start_time = time.time()

        themes = self.themes
        all_results: list[ValidationResult] = []

        for rule in self._rules:
            if self.config.is_check_ignored(rule.name):
                logger.debug(f"Skipping ignored rule: {rule.name}")
                continue

            logger.info(f"Running validation rule: {rule.name}")
            for theme in themes:
                all_results.extend(self._execute_rule(rule, theme, themes))

        summary = self.generate_summary(all_results)
        recommendations = self.generate_recommendations(all_results)

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            "API consistency validation complete",
            extra={"duration_ms": round(duration_ms, 2), "result_count": len(all_results)},
        )
        logger.info(
            f"Validation summary: {summary.total_checks} findings, "
            f"{summary.errors} errors, {summary.warnings} warnings, "
            f"{summary.infos} infos, pass rate {summary.pass_rate}%"
        )

        return ValidationReport(
            results=all_results,
            summary=summary,
            recommendations=recommendations,
        )

    def _execute_rule(
        self,
        rule: ValidationRule,
        theme: ThemeInfo,
        themes: Sequence[ThemeInfo],
    ) -> list[ValidationResult]:
        """Execute one rule for one theme with fault isolation.

        Args:
            rule: Rule to execute.
            theme: Theme under evaluation.
            themes: All registered themes.

        Returns:
            The rule's findings, or a single validation-error finding.
        """
        try:
            raw_results = rule.validate(theme, themes) or []
            return [
                self._finalize_result(self._coerce_result(raw), rule, theme)
                for raw in raw_results
            ]
        except Exception as e:
            logger.warning(
                f"Validation rule {rule.name} failed for theme {theme.id}: {e}",
                extra={"rule": rule.name, "theme_id": theme.id},
            )
            return [
                ValidationResult(
                    level=Level.ERROR,
                    category=VALIDATION_ERROR_CATEGORY,
                    message=f"Validation rule {rule.name} failed for theme {theme.name}: {e}",
                    affected_themes=(theme.id,),
                    details={"rule": rule.name, "theme": theme.id, "error": type(e).__name__},
                    rule=rule.name,
                )
            ]

    @staticmethod
    def _coerce_result(raw: Any) -> ValidationResult:
        if isinstance(raw, ValidationResult):
            return raw
        if isinstance(raw, Mapping):
            return ValidationResult.from_dict(dict(raw))
        raise TypeError(f"rule returned {type(raw).__name__}, expected ValidationResult")

    def _finalize_result(
        self, result: ValidationResult, rule: ValidationRule, theme: ThemeInfo
    ) -> ValidationResult:
        """Stamp the rule name, apply severity overrides, check theme ids."""
        affected = tuple(t for t in result.affected_themes if t in self._themes)
        if len(affected) != len(result.affected_themes):
            unknown = [t for t in result.affected_themes if t not in self._themes]
            logger.warning(f"Rule {rule.name} referenced unregistered themes: {unknown}")
        if not affected:
            affected = (theme.id,)

        return dataclasses.replace(
            result,
            level=self.config.level_for_category(result.category, result.level),
            affected_themes=affected,
            rule=result.rule or rule.name,
        )

    @staticmethod
    def generate_summary(results: list[ValidationResult]) -> Summary:
        """Compute summary statistics for a list of findings."""
        return Summary.from_results(results)

    @staticmethod
    def generate_recommendations(results: list[ValidationResult]) -> list[str]:
        """Map error categories to remediation advice.

        Args:
            results: Findings from a run.

        Returns:
            Fixed advice strings for known error categories, plus a
            reminder when warnings are present.
        """
        error_categories = {r.category for r in results if r.level == Level.ERROR}
        recommendations = [
            advice
            for category, advice in RECOMMENDATIONS.items()
            if category in error_categories
        ]

        warning_count = sum(1 for r in results if r.level == Level.WARNING)
        if warning_count > 0:
            recommendations.append(
                f"Resolve {warning_count} warning(s) to improve API consistency and developer experience"
            )
        return recommendations

    def generate_detailed_report(self, results: list[ValidationResult]) -> str:
        """Render findings as a Markdown report with registry counts."""
        return generate_detailed_report(
            results,
            theme_count=len(self._themes),
            rule_count=len(self._rules),
        )


def create_validator(
    config: ApiConsistencyConfig | None = None,
    themes: Iterable[ThemeInfo] = (),
    freeze: bool = False,
) -> ApiConsistencyValidator:
    """Create a validator and register themes.

    Args:
        config: Run configuration.
        themes: Themes to register in order.
        freeze: Whether to freeze the validator after registration.

    Returns:
        Configured ApiConsistencyValidator instance.
    """
    validator = ApiConsistencyValidator(config)
    validator.register_themes(themes)
    if freeze:
        validator.freeze()
    return validator
