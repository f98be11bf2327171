"""Theme API Auditor - cross-theme API consistency validation.

Describes several implementations ("themes") of the same component
contract and reports where their public surfaces diverge.
"""

__version__ = "1.0.0"

from .config import (
    DEFAULT_API_CONSISTENCY_CONFIG,
    ApiConsistencyConfig,
    ErrorLevels,
    ThemeSource,
    load_config,
)
from .diff import analyze_color_structure, compare_hook_signatures, compare_structures
from .errors import (
    AuditError,
    ConfigurationError,
    ConsistencyValidationError,
    ThemeLoadError,
    ValidatorFrozenError,
)
from .extractor import ThemeInfoExtractor, extract_theme_info
from .loader import load_themes
from .models import (
    ComponentInfo,
    EventSignature,
    HookInfo,
    Level,
    MethodSignature,
    Parameter,
    Summary,
    ThemeInfo,
    TypeInfo,
    UtilInfo,
    ValidationReport,
    ValidationResult,
)
from .reporters import generate_detailed_report
from .rules import BaseRule, FunctionRule, ValidationRule, rule
from .runner import validate_api_consistency
from .validator import ApiConsistencyValidator, create_validator

__all__ = [
    "__version__",
    # Configuration
    "ApiConsistencyConfig",
    "DEFAULT_API_CONSISTENCY_CONFIG",
    "ErrorLevels",
    "ThemeSource",
    "load_config",
    # Models
    "ComponentInfo",
    "EventSignature",
    "HookInfo",
    "Level",
    "MethodSignature",
    "Parameter",
    "Summary",
    "ThemeInfo",
    "TypeInfo",
    "UtilInfo",
    "ValidationReport",
    "ValidationResult",
    # Structural diff
    "analyze_color_structure",
    "compare_hook_signatures",
    "compare_structures",
    # Extraction
    "ThemeInfoExtractor",
    "extract_theme_info",
    "load_themes",
    # Rules and engine
    "ApiConsistencyValidator",
    "BaseRule",
    "FunctionRule",
    "ValidationRule",
    "create_validator",
    "rule",
    # Reporting and entry point
    "generate_detailed_report",
    "validate_api_consistency",
    # Errors
    "AuditError",
    "ConfigurationError",
    "ConsistencyValidationError",
    "ThemeLoadError",
    "ValidatorFrozenError",
]
