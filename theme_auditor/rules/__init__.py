"""API consistency rules package.

This package provides the rule interface and the built-in rules for
detecting divergence between theme surfaces.
"""

from .base import BaseRule, FunctionRule, ValidationRule, as_rule, rule
from .components import (
    ButtonPropsConsistencyRule,
    EventHandlingConsistencyRule,
    extract_enum_values,
)
from .definition import ThemeDefinitionConsistencyRule
from .signatures import HookSignatureConsistencyRule, StyleApiConsistencyRule

# Built-in rules in execution order
BUILTIN_RULES = (
    ButtonPropsConsistencyRule,
    HookSignatureConsistencyRule,
    ThemeDefinitionConsistencyRule,
    StyleApiConsistencyRule,
    EventHandlingConsistencyRule,
)

__all__ = [
    # Interface
    "BaseRule",
    "FunctionRule",
    "ValidationRule",
    "as_rule",
    "rule",
    "BUILTIN_RULES",
    # Built-in rules
    "ButtonPropsConsistencyRule",
    "HookSignatureConsistencyRule",
    "ThemeDefinitionConsistencyRule",
    "StyleApiConsistencyRule",
    "EventHandlingConsistencyRule",
    # Helpers
    "extract_enum_values",
]
