"""Structured error types for the theme auditor.

Structural findings are not exceptions; they are returned as
``ValidationResult`` values. The exceptions here cover the conditions that
stop an audit run: bad configuration, themes that cannot be loaded, a
frozen validator being modified, and the aggregate failure raised by the
integration entry point.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Categories of audit errors."""

    CONFIGURATION = "configuration"  # Invalid config file or options
    THEME_LOADING = "theme_loading"  # Theme module import/introspection
    VALIDATION = "validation"  # Consistency errors found
    USAGE = "usage"  # API misuse


@dataclass
class AuditError(Exception):
    """Base class for audit errors with recovery suggestions.

    Attributes:
        category: Error category for grouping.
        message: Human-readable error message.
        suggestion: Optional actionable recovery suggestion.
        details: Optional additional details dict.
        exit_code: Exit code to use when this error causes termination.
    """

    category: ErrorCategory
    message: str
    suggestion: str | None = None
    details: dict[str, Any] | None = field(default_factory=dict)
    exit_code: int = 1

    def __post_init__(self) -> None:
        """Initialize the exception with the message."""
        super().__init__(self.message)

    def format(self, use_color: bool = True) -> str:
        """Format the error for display.

        Args:
            use_color: Whether to include ANSI color codes.

        Returns:
            Formatted error string with suggestion if available.
        """
        red = "\033[91m" if use_color else ""
        cyan = "\033[96m" if use_color else ""
        dim = "\033[2m" if use_color else ""
        reset = "\033[0m" if use_color else ""

        lines = [f"{red}Error:{reset} {self.message}"]

        if self.suggestion:
            lines.append(f"{cyan}Suggestion:{reset} {self.suggestion}")

        if self.details:
            for key, value in self.details.items():
                lines.append(f"{dim}  {key}: {value}{reset}")

        return "\n".join(lines)

    def __str__(self) -> str:
        """Return the plain error message."""
        return self.message


class ConfigurationError(AuditError):
    """Error in the configuration file or options."""

    def __init__(
        self,
        message: str,
        config_file: str | None = None,
        suggestion: str | None = None,
    ):
        super().__init__(
            category=ErrorCategory.CONFIGURATION,
            message=message,
            suggestion=suggestion
            or "Check your configuration file syntax and required fields",
            details={"config_file": config_file} if config_file else None,
            exit_code=2,
        )


class ThemeLoadError(AuditError):
    """A theme module could not be imported or introspected."""

    def __init__(self, theme_id: str, module: str, original_error: str | None = None):
        message = f"Cannot load theme '{theme_id}' from module {module}"
        if original_error:
            message = f"{message}: {original_error}"

        super().__init__(
            category=ErrorCategory.THEME_LOADING,
            message=message,
            suggestion="Check that the module path is importable from the current environment",
            details={"theme": theme_id, "module": module},
            exit_code=2,
        )
        self.theme_id = theme_id
        self.module = module


class ConsistencyValidationError(AuditError):
    """Raised when an audit run finds error-level inconsistencies."""

    def __init__(self, error_count: int, report: Any = None):
        super().__init__(
            category=ErrorCategory.VALIDATION,
            message=f"API consistency validation failed: found {error_count} error(s)",
            suggestion="Review the detailed report and align the theme surfaces",
            details={"errors": error_count},
            exit_code=1,
        )
        self.error_count = error_count
        self.report = report


class ValidatorFrozenError(AuditError):
    """Raised when a frozen validator is modified."""

    def __init__(self, operation: str):
        super().__init__(
            category=ErrorCategory.USAGE,
            message=f"Cannot {operation}: validator is frozen",
            suggestion="Register themes and rules before calling freeze()",
            exit_code=1,
        )
