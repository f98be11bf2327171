"""Component surface rules.

These rules check the button-like component discovered in each theme:
its required props, the variant values its ``variant`` prop can take,
and the events it declares.
"""

import typing
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from ..diff import normalize_name
from ..models import Level, ThemeInfo, ValidationResult
from .base import BaseRule

REQUIRED_BUTTON_PROPS = ("variant", "size", "fill", "shape", "disabled", "loading")
CANONICAL_VARIANTS = ("primary", "secondary", "danger", "success")
REQUIRED_BUTTON_EVENTS = ("onClick", "onFocus", "onBlur", "onKeyDown")


def extract_enum_values(declared: Any) -> list[str]:
    """Extract the values a declared prop type can take.

    Understands ``"'a' | 'b'"`` strings, ``Literal[...]`` (also inside
    ``Optional``/``Union``), ``Enum`` classes, plain sequences, and mappings
    with a ``values`` entry. Anything else yields no values.
    """
    if isinstance(declared, str):
        return [
            part.strip().strip("'\"")
            for part in declared.split("|")
            if part.strip().strip("'\"")
        ]
    if isinstance(declared, type) and issubclass(declared, Enum):
        return [str(member.value) for member in declared]
    if isinstance(declared, Mapping):
        return extract_enum_values(declared.get("values", ()))
    if isinstance(declared, (list, tuple, set, frozenset)):
        return [str(v.value if isinstance(v, Enum) else v) for v in declared]

    args = typing.get_args(declared)
    if args:
        values: list[str] = []
        for arg in args:
            if arg is type(None):
                continue
            if isinstance(arg, (str, int)):
                values.append(str(arg))
            else:
                values.extend(extract_enum_values(arg))
        return values
    return []


class ButtonPropsConsistencyRule(BaseRule):
    """Checks required button props and canonical variant values."""

    @property
    def name(self) -> str:
        return "button-props-consistency"

    @property
    def description(self) -> str:
        return "Button component declares the shared props and variants"

    def validate(
        self, theme: ThemeInfo, all_themes: Sequence[ThemeInfo]
    ) -> list[ValidationResult]:
        results: list[ValidationResult] = []
        button = theme.button_component

        if button is None:
            results.append(
                self._create_result(
                    Level.WARNING,
                    "missing-component",
                    f"Theme {theme.name} has no button component",
                    [theme.id],
                    suggestion="Export a component whose name contains 'Button'",
                )
            )
            return results

        for prop_name in REQUIRED_BUTTON_PROPS:
            if not button.has_prop(prop_name):
                results.append(
                    self._create_result(
                        self.config.error_levels.props_missing,
                        "missing-prop",
                        f"Button component of theme {theme.name} is missing required prop: {prop_name}",
                        [theme.id],
                        details={"component": button.name, "prop": prop_name},
                        suggestion=f"Add the {prop_name} prop to the button component interface",
                    )
                )

        if button.props.get("variant"):
            declared_variants = extract_enum_values(button.props["variant"])
            for variant in CANONICAL_VARIANTS:
                if variant not in declared_variants:
                    results.append(
                        self._create_result(
                            Level.WARNING,
                            "variant-inconsistency",
                            f"Theme {theme.name} is missing variant: {variant}",
                            [theme.id],
                            details={"declared": declared_variants},
                        )
                    )

        return results


class EventHandlingConsistencyRule(BaseRule):
    """Checks that the button component declares the shared events."""

    @property
    def name(self) -> str:
        return "event-handling-consistency"

    @property
    def description(self) -> str:
        return "Button component declares the shared event handlers"

    def validate(
        self, theme: ThemeInfo, all_themes: Sequence[ThemeInfo]
    ) -> list[ValidationResult]:
        button = theme.button_component
        # A missing component is reported by button-props-consistency
        if button is None:
            return []

        declared = {normalize_name(event.name) for event in button.events}
        return [
            self._create_result(
                Level.WARNING,
                "missing-event",
                f"Button component of theme {theme.name} is missing event: {event_name}",
                [theme.id],
                details={"component": button.name, "event": event_name},
            )
            for event_name in REQUIRED_BUTTON_EVENTS
            if normalize_name(event_name) not in declared
        ]
