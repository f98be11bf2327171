"""Data models for cross-theme API consistency checking.

This module defines the normalized description of a theme's public surface
(components, hooks, utilities, types and theme definition) and the findings
produced when those surfaces are compared.
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .diff import normalize_name


class Level(Enum):
    """Severity levels for validation findings."""

    ERROR = "error"  # Fails the audit
    WARNING = "warning"  # Reported, does not fail
    INFO = "info"  # Informational only


@dataclass
class Parameter:
    """One parameter of a hook, method, utility or event handler."""

    name: str
    type: Any = "any"
    optional: bool = False
    default: Any = None
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            "name": self.name,
            "type": _jsonable(self.type),
            "optional": self.optional,
        }
        if self.default is not None:
            result["default"] = _jsonable(self.default)
        if self.description:
            result["description"] = self.description
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Parameter":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            type=data.get("type", "any"),
            optional=data.get("optional", False),
            default=data.get("default", data.get("defaultValue")),
            description=data.get("description"),
        )


@dataclass
class MethodSignature:
    """Declared contract of a callable."""

    name: str
    parameters: list[Parameter] = field(default_factory=list)
    return_type: Any = "any"
    is_async: bool = False
    is_optional: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "parameters": [p.to_dict() for p in self.parameters],
            "return_type": _jsonable(self.return_type),
            "is_async": self.is_async,
            "is_optional": self.is_optional,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MethodSignature":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            parameters=[Parameter.from_dict(p) for p in data.get("parameters", [])],
            return_type=data.get("return_type", data.get("returnType", "any")),
            is_async=data.get("is_async", data.get("isAsync", False)),
            is_optional=data.get("is_optional", data.get("isOptional", False)),
        )


@dataclass
class EventSignature:
    """An event a component emits."""

    name: str
    parameters: list[Parameter] = field(default_factory=list)
    bubbles: bool = True
    cancelable: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "parameters": [p.to_dict() for p in self.parameters],
            "bubbles": self.bubbles,
            "cancelable": self.cancelable,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EventSignature":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            parameters=[Parameter.from_dict(p) for p in data.get("parameters", [])],
            bubbles=data.get("bubbles", True),
            cancelable=data.get("cancelable", True),
        )


@dataclass
class ComponentInfo:
    """Declared surface of one UI component."""

    name: str
    props: dict[str, Any] = field(default_factory=dict)  # prop name -> declared type
    methods: list[MethodSignature] = field(default_factory=list)
    events: list[EventSignature] = field(default_factory=list)
    slots: list[str] = field(default_factory=list)
    default_props: dict[str, Any] = field(default_factory=dict)

    def has_prop(self, prop_name: str) -> bool:
        """Check whether the component declares a prop."""
        return prop_name in self.props

    def get_event(self, event_name: str) -> EventSignature | None:
        """Find an event by exact name."""
        for event in self.events:
            if event.name == event_name:
                return event
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "props": {k: _jsonable(v) for k, v in self.props.items()},
            "methods": [m.to_dict() for m in self.methods],
            "events": [e.to_dict() for e in self.events],
            "slots": list(self.slots),
            "default_props": {k: _jsonable(v) for k, v in self.default_props.items()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ComponentInfo":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            props=dict(data.get("props", {})),
            methods=[MethodSignature.from_dict(m) for m in data.get("methods", [])],
            events=[EventSignature.from_dict(e) for e in data.get("events", [])],
            slots=list(data.get("slots", [])),
            default_props=dict(
                data.get("default_props", data.get("defaultProps", {}))
            ),
        )


@dataclass
class HookInfo:
    """Declared surface of one hook."""

    name: str
    parameters: list[Parameter] = field(default_factory=list)
    return_type: Any = "any"
    dependencies: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "parameters": [p.to_dict() for p in self.parameters],
            "return_type": _jsonable(self.return_type),
            "dependencies": list(self.dependencies),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HookInfo":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            parameters=[Parameter.from_dict(p) for p in data.get("parameters", [])],
            return_type=data.get("return_type", data.get("returnType", "any")),
            dependencies=list(data.get("dependencies", [])),
        )


@dataclass
class UtilInfo:
    """A utility function exposed by a theme."""

    name: str
    signature: MethodSignature
    category: str = "utility"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "signature": self.signature.to_dict(),
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UtilInfo":
        """Create from dictionary."""
        signature = data.get("signature") or {"name": data["name"]}
        return cls(
            name=data["name"],
            signature=MethodSignature.from_dict(signature),
            category=data.get("category", "utility"),
        )


@dataclass
class TypeInfo:
    """A type declaration exported by a theme."""

    name: str
    definition: Any = None
    category: str = "type"  # interface | type | enum | class
    extends: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            "name": self.name,
            "definition": _jsonable(self.definition),
            "category": self.category,
        }
        if self.extends is not None:
            result["extends"] = list(self.extends)
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TypeInfo":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            definition=data.get("definition"),
            category=data.get("category", "type"),
            extends=data.get("extends"),
        )


@dataclass(frozen=True)
class ThemeInfo:
    """Normalized description of one theme under audit.

    Built once by the extractor (or from a self-declared manifest) and
    never modified after registration.
    """

    id: str
    name: str
    version: str = "1.0.0"
    definition: dict[str, Any] = field(default_factory=dict)
    components: tuple[ComponentInfo, ...] = ()
    hooks: tuple[HookInfo, ...] = ()
    utils: tuple[UtilInfo, ...] = ()
    types: tuple[TypeInfo, ...] = ()

    def __post_init__(self) -> None:
        """Coerce collection fields to tuples."""
        for name in ("components", "hooks", "utils", "types"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    def find_component(self, fragment: str) -> ComponentInfo | None:
        """Find the first component whose name contains a fragment."""
        for component in self.components:
            if fragment in component.name:
                return component
        return None

    @property
    def button_component(self) -> ComponentInfo | None:
        """The first button-like component, if any."""
        return self.find_component("Button")

    def find_hook(self, hook_name: str) -> HookInfo | None:
        """Find a hook by name, ignoring case and word separators."""
        target = normalize_name(hook_name)
        for hook in self.hooks:
            if normalize_name(hook.name) == target:
                return hook
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "version": self.version,
            "definition": _jsonable(self.definition),
            "components": [c.to_dict() for c in self.components],
            "hooks": [h.to_dict() for h in self.hooks],
            "utils": [u.to_dict() for u in self.utils],
            "types": [t.to_dict() for t in self.types],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ThemeInfo":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            version=data.get("version", "1.0.0"),
            definition=copy.deepcopy(dict(data.get("definition") or {})),
            components=tuple(
                ComponentInfo.from_dict(c) for c in data.get("components", [])
            ),
            hooks=tuple(HookInfo.from_dict(h) for h in data.get("hooks", [])),
            utils=tuple(UtilInfo.from_dict(u) for u in data.get("utils", [])),
            types=tuple(TypeInfo.from_dict(t) for t in data.get("types", [])),
        )


@dataclass(frozen=True)
class ValidationResult:
    """One finding produced by a validation rule."""

    level: Level
    category: str
    message: str
    affected_themes: tuple[str, ...] = ()
    details: Any = None
    suggestion: str | None = None
    rule: str | None = None

    def __post_init__(self) -> None:
        """Coerce level strings and theme lists."""
        if not isinstance(self.level, Level):
            object.__setattr__(self, "level", Level(str(self.level).lower()))
        if not isinstance(self.affected_themes, tuple):
            object.__setattr__(self, "affected_themes", tuple(self.affected_themes))
        if isinstance(self.details, list):
            object.__setattr__(self, "details", tuple(self.details))

    @property
    def is_error(self) -> bool:
        """Whether this finding is error level."""
        return self.level == Level.ERROR

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "level": self.level.value,
            "category": self.category,
            "message": self.message,
            "affected_themes": list(self.affected_themes),
        }
        if self.details is not None:
            result["details"] = _jsonable(self.details)
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.rule:
            result["rule"] = self.rule
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ValidationResult":
        """Create from dictionary."""
        return cls(
            level=Level(data["level"]),
            category=data["category"],
            message=data["message"],
            affected_themes=tuple(
                data.get("affected_themes", data.get("affectedThemes", []))
            ),
            details=data.get("details"),
            suggestion=data.get("suggestion"),
            rule=data.get("rule"),
        )


@dataclass
class Summary:
    """Aggregate statistics for one validation run."""

    total_checks: int = 0
    errors: int = 0
    warnings: int = 0
    infos: int = 0
    pass_rate: float = 100.0

    @classmethod
    def from_results(cls, results: list[ValidationResult]) -> "Summary":
        """Compute summary statistics from findings.

        The pass rate is the share of non-error findings, rounded to two
        decimals, and 100 when there are no findings at all.
        """
        total = len(results)
        errors = sum(1 for r in results if r.level == Level.ERROR)
        warnings = sum(1 for r in results if r.level == Level.WARNING)
        infos = sum(1 for r in results if r.level == Level.INFO)
        pass_rate = 100.0 if total == 0 else round((total - errors) / total * 100, 2)
        return cls(
            total_checks=total,
            errors=errors,
            warnings=warnings,
            infos=infos,
            pass_rate=pass_rate,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "total_checks": self.total_checks,
            "errors": self.errors,
            "warnings": self.warnings,
            "infos": self.infos,
            "pass_rate": self.pass_rate,
        }


@dataclass
class ValidationReport:
    """Complete output of ``validate_consistency``."""

    results: list[ValidationResult] = field(default_factory=list)
    summary: Summary = field(default_factory=Summary)
    recommendations: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """Whether the run produced no error-level findings."""
        return self.summary.errors == 0

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0=pass, 1=fail."""
        return 0 if self.passed else 1

    def get_results_by_level(self, level: Level) -> list[ValidationResult]:
        """Get findings filtered by level."""
        return [r for r in self.results if r.level == level]

    def get_results_by_category(self) -> dict[str, list[ValidationResult]]:
        """Group findings by category in first-occurrence order."""
        grouped: dict[str, list[ValidationResult]] = {}
        for result in self.results:
            grouped.setdefault(result.category, []).append(result)
        return grouped

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "results": [r.to_dict() for r in self.results],
            "summary": self.summary.to_dict(),
            "recommendations": list(self.recommendations),
        }


def _jsonable(value: Any) -> Any:
    """Best-effort conversion of declared types and values for JSON output."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_jsonable(v) for v in value]
    if isinstance(value, type):
        return value.__name__
    return repr(value)
