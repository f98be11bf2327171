"""End-to-end API consistency audit.

Wires loading, extraction, registration, validation and reporting into
one call suitable for CI or pre-publish hooks: it returns normally when
the themes are consistent and raises when error-level findings exist.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from .audit_logging import LogCategory, get_category_logger
from .config import DEFAULT_API_CONSISTENCY_CONFIG, ApiConsistencyConfig
from .errors import AuditError, ConsistencyValidationError
from .loader import load_themes
from .models import ThemeInfo, ValidationReport
from .validator import create_validator

logger = get_category_logger(LogCategory.RUNNER)


def resolve_config(
    config: ApiConsistencyConfig | Mapping[str, Any] | None,
) -> ApiConsistencyConfig:
    """Merge a partial configuration over the strict defaults."""
    if config is None:
        return DEFAULT_API_CONSISTENCY_CONFIG.model_copy(deep=True)
    if isinstance(config, ApiConsistencyConfig):
        # Only explicitly set fields override the strict defaults
        return DEFAULT_API_CONSISTENCY_CONFIG.model_copy(
            update={name: getattr(config, name) for name in config.model_fields_set},
            deep=True,
        )
    aliases = {
        name: field.alias or name
        for name, field in ApiConsistencyConfig.model_fields.items()
    }
    overrides = {aliases.get(key, key): value for key, value in config.items()}
    base = DEFAULT_API_CONSISTENCY_CONFIG.to_dict()
    return ApiConsistencyConfig.from_dict({**base, **overrides})


def validate_api_consistency(
    config: ApiConsistencyConfig | Mapping[str, Any] | None = None,
    themes: Iterable[ThemeInfo] | None = None,
) -> ValidationReport:
    """Run a full audit over the configured themes.

    Args:
        config: Configuration, or a partial mapping merged over the defaults.
        themes: Already-extracted themes. When omitted, ``config.themes``
            are imported and extracted.

    Returns:
        The ValidationReport of a passing run.

    Raises:
        ThemeLoadError: If a configured theme cannot be loaded.
        ConsistencyValidationError: If the run found error-level findings.
    """
    logger.info("Starting cross-theme API consistency audit")
    resolved = resolve_config(config)

    try:
        theme_infos = (
            list(themes)
            if themes is not None
            else load_themes(resolved.themes, resolved.max_workers)
        )

        validator = create_validator(resolved, theme_infos, freeze=True)
        report = validator.validate_consistency()

        logger.info(f"Validation summary: {report.summary.to_dict()}")
        for recommendation in report.recommendations:
            logger.info(f"Recommendation: {recommendation}")

        if report.results:
            logger.info(
                "Detailed report:\n" + validator.generate_detailed_report(report.results)
            )

        if report.summary.errors > 0:
            raise ConsistencyValidationError(report.summary.errors, report)

    except AuditError as e:
        logger.error(f"API consistency audit failed: {e}")
        raise

    logger.info("API consistency audit passed")
    return report
