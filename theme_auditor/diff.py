"""Structural diff utilities.

Pure helpers that flatten nested theme structures into dotted-path maps,
compare two such maps, and compare ordered parameter lists. They have no
dependency on the validator or the extractor.
"""

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .models import HookInfo

_SEPARATORS = re.compile(r"[_\-\s]+")


def normalize_name(name: str) -> str:
    """Normalize an identifier for case- and separator-insensitive matching.

    ``use_system_preferences``, ``useSystemPreferences`` and
    ``UseSystemPreferences`` all normalize to ``usesystempreferences``.
    """
    return _SEPARATORS.sub("", name).lower()


def runtime_type_name(value: Any) -> str:
    """Name the runtime type of a leaf value.

    Args:
        value: Leaf value from a theme structure.

    Returns:
        One of ``string``, ``number``, ``boolean``, ``null``, ``array``,
        ``function``, or the Python type name for anything else.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if callable(value):
        return "function"
    return type(value).__name__


def analyze_color_structure(obj: Mapping[str, Any]) -> dict[str, str]:
    """Flatten a nested mapping into ``{dotted.path: type name}``.

    Mappings are walked recursively. Every other value, lists included,
    is a leaf; list elements are not expanded. Dots inside a key are
    escaped as ``\\.`` so ``{"a.b": ...}`` and ``{"a": {"b": ...}}`` stay
    distinct paths.

    Args:
        obj: Nested mapping such as a theme's ``colors`` subtree.

    Returns:
        Dict of dotted leaf paths to runtime type names.
    """
    structure: dict[str, str] = {}

    def walk(node: Mapping[str, Any], prefix: str) -> None:
        for key, value in node.items():
            segment = str(key).replace(".", "\\.")
            path = f"{prefix}.{segment}" if prefix else segment
            if isinstance(value, Mapping):
                walk(value, path)
            else:
                structure[path] = runtime_type_name(value)

    walk(obj, "")
    return structure


def compare_structures(
    struct_a: Mapping[str, str], struct_b: Mapping[str, str]
) -> list[str]:
    """Compare two flattened structures.

    Keys only in ``struct_b`` are reported missing (from ``struct_a``), keys
    only in ``struct_a`` are reported extra, and shared keys whose type names
    differ are reported as type mismatches.

    Args:
        struct_a: Flattened structure of the theme under evaluation.
        struct_b: Flattened structure it is compared against.

    Returns:
        Human-readable differences; empty when structurally identical.
    """
    differences: list[str] = []
    all_keys = list(struct_a) + [k for k in struct_b if k not in struct_a]

    for key in all_keys:
        if key not in struct_a:
            differences.append(f"Missing property: {key}")
        elif key not in struct_b:
            differences.append(f"Extra property: {key}")
        elif struct_a[key] != struct_b[key]:
            differences.append(
                f"Type mismatch at {key}: {struct_a[key]} vs {struct_b[key]}"
            )

    return differences


def is_type_mismatch(difference: str) -> bool:
    """Check whether a difference string from ``compare_structures`` is a type mismatch."""
    return difference.startswith("Type mismatch")


def compare_hook_signatures(
    hook_a: "HookInfo", hook_b: "HookInfo", strict: bool = False
) -> list[str]:
    """Compare two hook signatures position by position.

    A count mismatch is reported once; name and optionality are then
    compared over the overlapping prefix.

    Args:
        hook_a: First hook.
        hook_b: Second hook.
        strict: Also compare declared parameter and return types.

    Returns:
        Human-readable differences; empty when the signatures match.
    """
    differences: list[str] = []
    params_a = hook_a.parameters
    params_b = hook_b.parameters

    if len(params_a) != len(params_b):
        differences.append(
            f"Parameter count mismatch: {len(params_a)} vs {len(params_b)}"
        )

    for index, (param_a, param_b) in enumerate(zip(params_a, params_b)):
        if param_a.name != param_b.name:
            differences.append(
                f"Parameter {index} name mismatch: {param_a.name} vs {param_b.name}"
            )
        if param_a.optional != param_b.optional:
            differences.append(f"Parameter {param_a.name} optionality mismatch")
        if strict and str(param_a.type) != str(param_b.type):
            differences.append(
                f"Parameter {param_a.name} type mismatch: {param_a.type} vs {param_b.type}"
            )

    if strict and str(hook_a.return_type) != str(hook_b.return_type):
        differences.append(
            f"Return type mismatch: {hook_a.return_type} vs {hook_b.return_type}"
        )

    return differences
