"""API consistency configuration.

Loads and validates ``api-consistency.config.json`` configuration files.
Keys may be written in camelCase (as in the JSON file) or snake_case.
"""

import importlib
import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, validator

from .audit_logging import get_logger
from .errors import ConfigurationError
from .models import Level

logger = get_logger()

# Default configuration file name
CONFIG_FILENAME = "api-consistency.config.json"

# Environment variable pointing at an explicit config file
CONFIG_ENV_VAR = "THEME_AUDIT_CONFIG"


def _coerce_level(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower()
    return value


def resolve_object_ref(ref: str) -> Any:
    """Resolve a ``package.module:attribute`` reference.

    Args:
        ref: Dotted module path, optionally followed by ``:attribute``.

    Returns:
        The referenced module or attribute.

    Raises:
        ValueError: If the module cannot be imported or lacks the attribute.
    """
    module_name, _, attr = ref.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"cannot import {module_name}: {e}") from e
    if not attr:
        return module
    try:
        return getattr(module, attr)
    except AttributeError as e:
        raise ValueError(f"{module_name} has no attribute {attr}") from e


class ErrorLevels(BaseModel):
    """Severity assigned to each class of finding.

    The four named levels are used by the built-in rules. ``categories``
    overrides the level of any finding category listed in it; categories
    not listed keep the level their rule assigned.
    """

    api_mismatch: Level = Field(default=Level.ERROR, alias="apiMismatch")
    type_mismatch: Level = Field(default=Level.ERROR, alias="typeMismatch")
    method_signature: Level = Field(default=Level.WARNING, alias="methodSignature")
    props_missing: Level = Field(default=Level.WARNING, alias="propsMissing")
    categories: dict[str, Level] = Field(default_factory=dict)

    class Config:
        populate_by_name = True

    @validator(
        "api_mismatch", "type_mismatch", "method_signature", "props_missing", pre=True
    )
    def normalize_level(cls, v):
        return _coerce_level(v)

    @validator("categories", pre=True)
    def normalize_category_levels(cls, v):
        if isinstance(v, dict):
            return {k: _coerce_level(level) for k, level in v.items()}
        return v


class ThemeSource(BaseModel):
    """Where to load one theme from."""

    id: str
    name: str = ""
    module: str

    @property
    def display_name(self) -> str:
        """Theme name, falling back to the id."""
        return self.name or self.id


def default_theme_sources() -> list[ThemeSource]:
    """The reference themes shipped with the package."""
    return [
        ThemeSource(id="tech", name="Tech Theme", module="theme_auditor.themes.tech"),
        ThemeSource(
            id="minimal", name="Minimal Theme", module="theme_auditor.themes.minimal"
        ),
    ]


class ApiConsistencyConfig(BaseModel):
    """Run-wide configuration for the API consistency validator."""

    strict_mode: bool = Field(default=False, alias="strictMode")
    ignore_checks: list[str] = Field(default_factory=list, alias="ignoreChecks")
    custom_rules: list[Any] = Field(default_factory=list, alias="customRules")
    error_levels: ErrorLevels = Field(default_factory=ErrorLevels, alias="errorLevels")
    themes: list[ThemeSource] = Field(default_factory=default_theme_sources)
    max_workers: int = Field(default=4, ge=1, le=64, alias="maxWorkers")

    class Config:
        populate_by_name = True
        arbitrary_types_allowed = True

    @validator("custom_rules", pre=True)
    def resolve_custom_rules(cls, v):
        rules = []
        for rule in v or []:
            if isinstance(rule, str):
                rule = resolve_object_ref(rule)
            if not (callable(getattr(rule, "validate", None)) or callable(rule)):
                raise ValueError(
                    f"custom rule {rule!r} must be callable or define validate()"
                )
            rules.append(rule)
        return rules

    @validator("themes")
    def unique_theme_ids(cls, v):
        seen: set[str] = set()
        for source in v:
            if source.id in seen:
                raise ValueError(f"duplicate theme id: {source.id}")
            seen.add(source.id)
        return v

    def is_check_ignored(self, rule_name: str) -> bool:
        """Check whether a rule is listed in ``ignore_checks``."""
        return rule_name in self.ignore_checks

    def level_for_category(self, category: str, default: Level) -> Level:
        """Resolve the level for a finding category.

        Args:
            category: Finding category tag.
            default: Level assigned by the rule.

        Returns:
            The configured override, or ``default`` when none is listed.
        """
        return self.error_levels.categories.get(category, default)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a camelCase dictionary (custom rules are omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude={"custom_rules"})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ApiConsistencyConfig":
        """Create from dictionary."""
        return cls(**data)


# Strict defaults used by the integration entry point
DEFAULT_API_CONSISTENCY_CONFIG = ApiConsistencyConfig(strict_mode=True)


class ConfigLoader:
    """Loader for API consistency configuration."""

    def __init__(self, project_path: Path | None = None):
        """Initialize the config loader.

        Args:
            project_path: Path to the project root. Defaults to current directory.
        """
        self.project_path = Path(project_path) if project_path else Path.cwd()

    def load(self, config_path: Path | None = None) -> ApiConsistencyConfig:
        """Load configuration.

        Precedence (highest to lowest):
        1. Explicit config_path
        2. Environment variable THEME_AUDIT_CONFIG
        3. api-consistency.config.json in project root
        4. Default configuration

        Args:
            config_path: Optional explicit path to config file.

        Returns:
            Loaded ApiConsistencyConfig instance.

        Raises:
            ConfigurationError: If an explicit path does not exist or a file
                is invalid.
        """
        if config_path is not None:
            config_path = Path(config_path)
            if not config_path.exists():
                raise ConfigurationError(
                    f"Config file not found: {config_path}", str(config_path)
                )
            return self._load_from_file(config_path)

        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            env_config_path = Path(env_path)
            if env_config_path.exists():
                return self._load_from_file(env_config_path)
            logger.warning(f"{CONFIG_ENV_VAR} points at missing file {env_path}")

        project_config = self.project_path / CONFIG_FILENAME
        if project_config.exists():
            return self._load_from_file(project_config)

        logger.debug("No API consistency config found, using defaults")
        return DEFAULT_API_CONSISTENCY_CONFIG.model_copy(deep=True)

    def _load_from_file(self, config_path: Path) -> ApiConsistencyConfig:
        """Load configuration from a file.

        Args:
            config_path: Path to the config file.

        Returns:
            Loaded ApiConsistencyConfig instance.

        Raises:
            ConfigurationError: If the file is not valid JSON or fails validation.
        """
        logger.debug(f"Loading API consistency config from {config_path}")
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in {config_path}: {e}", str(config_path)
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config root must be an object: {config_path}", str(config_path)
            )

        # Files start from the strict defaults
        merged = {"strictMode": DEFAULT_API_CONSISTENCY_CONFIG.strict_mode, **data}
        try:
            return ApiConsistencyConfig.from_dict(merged)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {config_path}: {e}", str(config_path)
            ) from e

    def save(
        self, config: ApiConsistencyConfig, config_path: Path | None = None
    ) -> Path:
        """Save configuration to a file.

        Args:
            config: Configuration to save.
            config_path: Optional path. Defaults to project root.

        Returns:
            Path where config was saved.
        """
        if config_path is None:
            config_path = self.project_path / CONFIG_FILENAME

        content = json.dumps(config.to_dict(), indent=2)
        config_path.write_text(content, encoding="utf-8")
        logger.info(f"Saved API consistency config to {config_path}")
        return config_path


def load_config(
    config_path: Path | None = None, project_path: Path | None = None
) -> ApiConsistencyConfig:
    """Convenience function to load API consistency configuration.

    Args:
        config_path: Optional explicit config file.
        project_path: Optional project root path.

    Returns:
        Loaded ApiConsistencyConfig instance.
    """
    return ConfigLoader(project_path).load(config_path)
