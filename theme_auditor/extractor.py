"""Theme info extraction.

Adapts a loaded theme module into the normalized :class:`ThemeInfo`
description the validator works on. A module can declare its surface
explicitly through a ``THEME_MANIFEST``; otherwise the surface is
discovered by introspection using naming conventions:

- components: exported classes/functions whose name contains ``Button``
- hooks: exported callables whose name starts with ``use``
- utilities: members of exported ``*Utils`` containers and module functions
- types: enums, typed dicts, protocols, other classes and typing aliases

Discovery never fails for absent members; it records empty collections and
leaves policy (what is missing) to the rules. Parameter lists come from
``inspect.signature``; when a callable cannot be introspected the arity is
used and parameter names are ``param0``, ``param1``... placeholders, so
name and optionality comparisons on such callables are approximate.
"""

import copy
import dataclasses
import inspect
import re
import typing
from collections.abc import Callable, Mapping
from enum import Enum
from types import ModuleType
from typing import Any

from .audit_logging import LogCategory, get_category_logger
from .diff import normalize_name
from .models import (
    ComponentInfo,
    EventSignature,
    HookInfo,
    MethodSignature,
    Parameter,
    ThemeInfo,
    TypeInfo,
    UtilInfo,
)

logger = get_category_logger(LogCategory.EXTRACTOR)

MANIFEST_ATTR = "THEME_MANIFEST"
DEFINITION_ATTRS = ("THEME_DEFINITION", "theme_definition", "default")
COMPONENT_MARKER = "Button"
HOOK_PREFIX = "use"
UTILS_SUFFIX = "Utils"
DEFAULT_VERSION = "1.0.0"

_EVENT_PROP = re.compile(r"^on(?:_[a-z]|[A-Z])")
_TYPE_BASE_MODULES = frozenset({"builtins", "typing", "typing_extensions", "enum", "abc"})


class ThemeInfoExtractor:
    """Builds :class:`ThemeInfo` objects from theme modules."""

    def extract(self, theme_id: str, theme_name: str, theme_module: Any) -> ThemeInfo:
        """Extract the public surface of a theme module.

        Args:
            theme_id: Unique key for the theme.
            theme_name: Display name.
            theme_module: Loaded module (or any object exposing members).

        Returns:
            A fresh ThemeInfo; the module is not modified.
        """
        logger.info(f"Extracting theme info: {theme_name}")

        manifest = getattr(theme_module, MANIFEST_ATTR, None)
        if manifest is not None:
            logger.debug(f"Using self-declared manifest for {theme_id}")
            return self._from_manifest(theme_id, theme_name, manifest)

        members = self._exported_members(theme_module)
        info = ThemeInfo(
            id=theme_id,
            name=theme_name,
            version=self._extract_version(theme_module),
            definition=self._extract_definition(theme_module),
            components=tuple(self.extract_components(members)),
            hooks=tuple(self.extract_hooks(members)),
            utils=tuple(self.extract_utils(members)),
            types=tuple(self.extract_types(members)),
        )
        logger.debug(
            f"Theme {theme_id}: {len(info.components)} components, "
            f"{len(info.hooks)} hooks, {len(info.utils)} utils, {len(info.types)} types"
        )
        return info

    # ------------------------------------------------------------------
    # Module level
    # ------------------------------------------------------------------

    def _from_manifest(self, theme_id: str, theme_name: str, manifest: Any) -> ThemeInfo:
        if isinstance(manifest, ThemeInfo):
            return dataclasses.replace(manifest, id=theme_id, name=theme_name)
        if isinstance(manifest, Mapping):
            return ThemeInfo.from_dict({**manifest, "id": theme_id, "name": theme_name})
        raise TypeError(
            f"{MANIFEST_ATTR} of theme {theme_id} must be a ThemeInfo or a mapping"
        )

    def _exported_members(self, theme_module: Any) -> list[tuple[str, Any]]:
        """List (name, object) pairs the module exports.

        ``__all__`` is authoritative when present. Otherwise public names are
        used, skipping classes and functions imported from other modules.
        """
        explicit = getattr(theme_module, "__all__", None)
        if explicit is not None:
            names = list(explicit)
            local_only = False
        else:
            names = [n for n in dir(theme_module) if not n.startswith("_")]
            local_only = True

        module_name = getattr(theme_module, "__name__", None)
        members = []
        for name in names:
            obj = getattr(theme_module, name, None)
            if obj is None or isinstance(obj, ModuleType):
                continue
            if local_only and not _is_local(obj, module_name):
                continue
            members.append((name, obj))
        return members

    def _extract_version(self, theme_module: Any) -> str:
        for attr in ("__version__", "version", "VERSION"):
            value = getattr(theme_module, attr, None)
            if isinstance(value, str) and value:
                return value
        return DEFAULT_VERSION

    def _extract_definition(self, theme_module: Any) -> dict[str, Any]:
        for attr in DEFINITION_ATTRS:
            value = getattr(theme_module, attr, None)
            if value is not None:
                return _as_mapping(value)
        return {}

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def extract_components(self, members: list[tuple[str, Any]]) -> list[ComponentInfo]:
        """Describe every exported button-like component."""
        components = []
        for name, obj in members:
            if not _is_component(name, obj):
                continue
            components.append(
                ComponentInfo(
                    name=getattr(obj, "display_name", None)
                    or getattr(obj, "displayName", None)
                    or getattr(obj, "__name__", name),
                    props=self._extract_props(obj),
                    methods=self._extract_methods(obj),
                    events=self._extract_events(obj),
                    slots=[str(s) for s in getattr(obj, "slots", None) or []],
                    default_props=dict(
                        _first_attr(obj, ("default_props", "defaultProps")) or {}
                    ),
                )
            )
        return components

    def _extract_props(self, component: Any) -> dict[str, Any]:
        declared = _first_attr(component, ("prop_types", "propTypes"))
        if isinstance(declared, Mapping):
            return dict(declared)

        signature = _read_signature(component)
        if signature is None:
            return {}
        return {
            param.name: _prop_type(param.annotation)
            for param in signature.parameters.values()
            if param.name not in ("self", "cls")
            and param.kind not in (param.VAR_POSITIONAL, param.VAR_KEYWORD)
        }

    def _extract_methods(self, component: Any) -> list[MethodSignature]:
        if not inspect.isclass(component):
            return []
        return [
            build_method_signature(name, func)
            for name, func in inspect.getmembers(component, inspect.isfunction)
            if not name.startswith("_")
        ]

    def _extract_events(self, component: Any) -> list[EventSignature]:
        declared = getattr(component, "events", None)

        if isinstance(declared, Mapping):
            events = []
            for name, options in declared.items():
                options = options if isinstance(options, Mapping) else {}
                events.append(EventSignature.from_dict({"name": name, **options}))
            return [_with_default_event_param(e) for e in events]

        if isinstance(declared, (list, tuple, set, frozenset)):
            events = []
            for item in declared:
                if isinstance(item, EventSignature):
                    events.append(item)
                elif isinstance(item, Mapping):
                    events.append(EventSignature.from_dict(item))
                else:
                    events.append(EventSignature(name=str(item)))
            return [_with_default_event_param(e) for e in events]

        return [
            _with_default_event_param(EventSignature(name=prop))
            for prop in self._extract_props(component)
            if _EVENT_PROP.match(prop)
        ]

    # ------------------------------------------------------------------
    # Hooks and utilities
    # ------------------------------------------------------------------

    def extract_hooks(self, members: list[tuple[str, Any]]) -> list[HookInfo]:
        """Describe every exported ``use*`` callable."""
        hooks = []
        for name, obj in members:
            if not name.startswith(HOOK_PREFIX) or not callable(obj) or inspect.isclass(obj):
                continue
            signature = build_method_signature(name, obj)
            dependencies = getattr(obj, "dependencies", None)
            hooks.append(
                HookInfo(
                    name=name,
                    parameters=signature.parameters,
                    return_type=signature.return_type,
                    dependencies=[str(d) for d in dependencies]
                    if isinstance(dependencies, (list, tuple))
                    else [],
                )
            )
        return hooks

    def extract_utils(self, members: list[tuple[str, Any]]) -> list[UtilInfo]:
        """Describe utility functions from ``*Utils`` containers and the module."""
        utils: list[UtilInfo] = []
        for name, obj in members:
            if name.endswith(UTILS_SUFFIX):
                for util_name, func in _container_callables(obj):
                    utils.append(_util_info(util_name, func))
            elif (
                inspect.isfunction(obj)
                and not name.startswith(HOOK_PREFIX)
                and not _is_component(name, obj)
            ):
                utils.append(_util_info(name, obj))
        return utils

    # ------------------------------------------------------------------
    # Types
    # ------------------------------------------------------------------

    def extract_types(self, members: list[tuple[str, Any]]) -> list[TypeInfo]:
        """Describe exported type declarations."""
        types = []
        for name, obj in members:
            if inspect.isclass(obj):
                if _is_component(name, obj) or name.endswith(UTILS_SUFFIX):
                    continue
                types.append(_class_type_info(name, obj))
            elif typing.get_origin(obj) is not None and name[:1].isupper():
                types.append(TypeInfo(name=name, definition=_annotation_name(obj), category="type"))
        return types


def build_method_signature(name: str, func: Callable[..., Any]) -> MethodSignature:
    """Describe a callable's declared contract.

    Falls back to arity with placeholder names when the signature cannot
    be read.
    """
    signature = _read_signature(func)
    if signature is None:
        code = getattr(func, "__code__", None)
        arity = getattr(code, "co_argcount", 0)
        return MethodSignature(
            name=name,
            parameters=[Parameter(name=f"param{i}") for i in range(arity)],
            is_async=inspect.iscoroutinefunction(func),
        )

    params = list(signature.parameters.values())
    if params and params[0].name in ("self", "cls"):
        params = params[1:]

    return MethodSignature(
        name=name,
        parameters=[_build_parameter(p) for p in params],
        return_type=_annotation_name(signature.return_annotation),
        is_async=inspect.iscoroutinefunction(func),
    )


def extract_theme_info(theme_id: str, theme_name: str, theme_module: Any) -> ThemeInfo:
    """Extract a :class:`ThemeInfo` from a loaded theme module."""
    return ThemeInfoExtractor().extract(theme_id, theme_name, theme_module)


def _build_parameter(param: inspect.Parameter) -> Parameter:
    has_default = param.default is not inspect.Parameter.empty
    variadic = param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD)
    return Parameter(
        name=param.name,
        type=_annotation_name(param.annotation),
        optional=has_default or variadic,
        default=param.default if has_default else None,
    )


def _read_signature(obj: Any) -> inspect.Signature | None:
    try:
        return inspect.signature(obj)
    except (TypeError, ValueError):
        return None


def _annotation_name(annotation: Any) -> str:
    if annotation is inspect.Parameter.empty or annotation is inspect.Signature.empty:
        return "any"
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type) and typing.get_origin(annotation) is None:
        return annotation.__name__
    return str(annotation).replace("typing.", "")


def _prop_type(annotation: Any) -> Any:
    # Literal and Enum annotations stay objects so their values can be read back
    if isinstance(annotation, type) and issubclass(annotation, Enum):
        return annotation
    if typing.get_origin(annotation) is not None:
        return annotation
    return _annotation_name(annotation)


def _is_local(obj: Any, module_name: str | None) -> bool:
    if module_name is None or not (inspect.isclass(obj) or inspect.isfunction(obj)):
        return True
    obj_module = getattr(obj, "__module__", None) or ""
    return obj_module == module_name or obj_module.startswith(module_name + ".")


def _is_component(name: str, obj: Any) -> bool:
    if COMPONENT_MARKER not in name or name.endswith(UTILS_SUFFIX):
        return False
    if inspect.isclass(obj):
        return not _is_type_declaration(obj)
    return inspect.isfunction(obj)


def _is_type_declaration(cls: type) -> bool:
    # Enums, typed dicts and protocols describe shapes, not components
    return (
        issubclass(cls, Enum)
        or typing.is_typeddict(cls)
        or bool(getattr(cls, "_is_protocol", False))
    )


def _first_attr(obj: Any, names: tuple[str, ...]) -> Any:
    for name in names:
        value = getattr(obj, name, None)
        if value is not None:
            return value
    return None


def _as_mapping(value: Any) -> dict[str, Any]:
    if isinstance(value, Mapping):
        return copy.deepcopy(dict(value))
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if callable(getattr(value, "model_dump", None)):
        return value.model_dump()
    return {}


def _container_callables(container: Any) -> list[tuple[str, Any]]:
    if isinstance(container, Mapping):
        items = list(container.items())
    else:
        items = [(n, getattr(container, n, None)) for n in dir(container)]
    return [
        (name, func)
        for name, func in items
        if isinstance(name, str)
        and not name.startswith("_")
        and callable(func)
        and not inspect.isclass(func)
    ]


def _util_info(name: str, func: Any) -> UtilInfo:
    normalized = normalize_name(name)
    category = "style" if "style" in normalized or "css" in normalized else "utility"
    return UtilInfo(name=name, signature=build_method_signature(name, func), category=category)


def _with_default_event_param(event: EventSignature) -> EventSignature:
    if event.parameters:
        return event
    return dataclasses.replace(event, parameters=[Parameter(name="event", type="Event")])


def _class_type_info(name: str, cls: type) -> TypeInfo:
    extends = [
        base.__name__
        for base in getattr(cls, "__bases__", ())
        if getattr(base, "__module__", "builtins") not in _TYPE_BASE_MODULES
    ]

    if issubclass(cls, Enum):
        return TypeInfo(
            name=name,
            definition=[_enum_value(m) for m in cls],
            category="enum",
            extends=extends,
        )

    annotations = {
        key: _annotation_name(value)
        for key, value in getattr(cls, "__annotations__", {}).items()
    }
    if typing.is_typeddict(cls) or getattr(cls, "_is_protocol", False):
        return TypeInfo(name=name, definition=annotations, category="interface", extends=extends)
    return TypeInfo(name=name, definition=annotations, category="class", extends=extends)


def _enum_value(member: Enum) -> Any:
    value = member.value
    return value if isinstance(value, (str, int, float, bool)) else member.name
