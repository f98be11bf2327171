"""Base rule interface for cross-theme API consistency checking.

A rule inspects one theme, optionally relative to every registered theme,
and returns findings. Built-in and custom rules share this one interface;
any object with ``name``, ``description`` and ``validate`` qualifies, and
plain functions can be wrapped with :class:`FunctionRule`.
"""

import inspect
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from ..models import Level, ThemeInfo, ValidationResult

if TYPE_CHECKING:
    from ..config import ApiConsistencyConfig

RuleFunction = Callable[[ThemeInfo, Sequence[ThemeInfo]], list[ValidationResult]]


@runtime_checkable
class ValidationRule(Protocol):
    """Capability every rule provides."""

    name: str
    description: str

    def validate(
        self, theme: ThemeInfo, all_themes: Sequence[ThemeInfo]
    ) -> list[ValidationResult]: ...


class BaseRule(ABC):
    """Abstract base class for the built-in rules.

    Rules are stateless: they may read but never modify ``ThemeInfo``.
    Subclasses define their name and implement :meth:`validate`.
    """

    def __init__(self, config: "ApiConsistencyConfig | None" = None):
        """Initialize the rule.

        Args:
            config: Run configuration used for severity lookup and strict mode.
        """
        if config is None:
            from ..config import ApiConsistencyConfig

            config = ApiConsistencyConfig()
        self.config = config

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique rule name, e.g. 'button-props-consistency'."""

    @property
    def description(self) -> str:
        """Human-readable description of what this rule checks."""
        return f"Rule {self.name}"

    @abstractmethod
    def validate(
        self, theme: ThemeInfo, all_themes: Sequence[ThemeInfo]
    ) -> list[ValidationResult]:
        """Validate one theme.

        Args:
            theme: Theme under evaluation.
            all_themes: Every registered theme, ``theme`` included.

        Returns:
            Findings for this theme; empty when consistent.
        """

    def _create_result(
        self,
        level: Level,
        category: str,
        message: str,
        affected_themes: Sequence[str],
        details: Any = None,
        suggestion: str | None = None,
    ) -> ValidationResult:
        """Create a finding attributed to this rule."""
        return ValidationResult(
            level=level,
            category=category,
            message=message,
            affected_themes=tuple(affected_themes),
            details=details,
            suggestion=suggestion,
            rule=self.name,
        )

    def __repr__(self) -> str:
        """String representation of the rule."""
        return f"<{self.__class__.__name__} {self.name}>"


class FunctionRule:
    """Adapts a plain function into a validation rule."""

    def __init__(self, name: str, func: RuleFunction, description: str = ""):
        self.name = name
        self.description = description or (func.__doc__ or "").strip() or f"Rule {name}"
        self._func = func

    def validate(
        self, theme: ThemeInfo, all_themes: Sequence[ThemeInfo]
    ) -> list[ValidationResult]:
        return list(self._func(theme, all_themes))

    def __repr__(self) -> str:
        return f"<FunctionRule {self.name}>"


def rule(name: str, description: str = "") -> Callable[[RuleFunction], FunctionRule]:
    """Decorator turning a function into a :class:`FunctionRule`.

    Example:
        >>> @rule("has-version", "Theme declares a version")
        ... def has_version(theme, all_themes):
        ...     return []
    """

    def decorator(func: RuleFunction) -> FunctionRule:
        return FunctionRule(name, func, description)

    return decorator


def as_rule(obj: Any, config: "ApiConsistencyConfig | None" = None) -> ValidationRule:
    """Coerce a rule object, rule class or plain callable into a :class:`ValidationRule`.

    Rule classes are instantiated; :class:`BaseRule` subclasses receive
    ``config``.

    Raises:
        TypeError: If ``obj`` is none of these.
    """
    if inspect.isclass(obj):
        obj = obj(config) if issubclass(obj, BaseRule) else obj()
    if callable(getattr(obj, "validate", None)):
        if not getattr(obj, "name", None):
            raise TypeError(f"Rule {obj!r} has no name")
        if not hasattr(obj, "description"):
            return FunctionRule(obj.name, obj.validate)
        return obj
    if callable(obj):
        return FunctionRule(getattr(obj, "__name__", repr(obj)), obj)
    raise TypeError(f"{obj!r} is not a validation rule")
