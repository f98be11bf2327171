"""Unit tests for theme info extraction."""

import types
from dataclasses import dataclass
from enum import Enum
from typing import Literal, TypedDict

import pytest

from theme_auditor.extractor import (
    ThemeInfoExtractor,
    build_method_signature,
    extract_theme_info,
)
from theme_auditor.models import ThemeInfo
from theme_auditor.themes import tech


def make_module(name: str = "fake_theme", **members) -> types.ModuleType:
    """Build an in-memory theme module whose members belong to it."""
    module = types.ModuleType(name)
    for key, value in members.items():
        if hasattr(value, "__module__") and not isinstance(value, types.ModuleType):
            try:
                value.__module__ = name
            except (AttributeError, TypeError):
                pass
        setattr(module, key, value)
    return module


class TestModuleLevel:
    """Tests for version, definition and empty modules."""

    def test_empty_module_yields_empty_collections(self):
        """Test that absent members never raise."""
        info = extract_theme_info("empty", "Empty", make_module())

        assert info.id == "empty"
        assert info.name == "Empty"
        assert info.version == "1.0.0"
        assert info.definition == {}
        assert info.components == ()
        assert info.hooks == ()
        assert info.utils == ()
        assert info.types == ()

    def test_version_and_definition(self):
        module = make_module(__version__="3.1.0", THEME_DEFINITION={"name": "x"})

        info = extract_theme_info("x", "X", module)

        assert info.version == "3.1.0"
        assert info.definition == {"name": "x"}

    def test_dataclass_definition_is_converted(self):
        @dataclass
        class Definition:
            name: str = "dc"
            colors: dict | None = None

        info = extract_theme_info("dc", "DC", make_module(theme_definition=Definition()))

        assert info.definition == {"name": "dc", "colors": None}

    def test_module_is_not_mutated(self):
        definition = {"name": "x", "colors": {"primary": "#000"}}
        module = make_module(THEME_DEFINITION=definition)

        info = extract_theme_info("x", "X", module)

        assert info.definition is not definition
        assert module.THEME_DEFINITION == {"name": "x", "colors": {"primary": "#000"}}

    def test_nested_definition_is_copied(self):
        """Test that writes through the extracted definition stay local."""
        info = extract_theme_info("tech", "Tech Theme", tech)
        original = tech.THEME_DEFINITION["colors"]["primary"]["main"]

        info.definition["colors"]["primary"]["main"] = "#bad"

        assert tech.THEME_DEFINITION["colors"]["primary"]["main"] == original


class TestManifest:
    """Tests for self-declared theme surfaces."""

    def test_mapping_manifest(self):
        """Test that a manifest replaces introspection and caller ids win."""
        manifest = {
            "id": "ignored",
            "name": "Ignored",
            "version": "9.0.0",
            "hooks": [{"name": "useTheme", "parameters": [{"name": "themeName"}]}],
        }
        module = make_module(THEME_MANIFEST=manifest, use_other=lambda: None)

        info = extract_theme_info("m", "Manifest", module)

        assert info.id == "m"
        assert info.name == "Manifest"
        assert info.version == "9.0.0"
        assert [h.name for h in info.hooks] == ["useTheme"]
        assert info.hooks[0].parameters[0].name == "themeName"

    def test_theme_info_manifest(self):
        manifest = ThemeInfo(id="other", name="Other", definition={"name": "x"})

        info = extract_theme_info("t", "T", make_module(THEME_MANIFEST=manifest))

        assert info.id == "t"
        assert info.definition == {"name": "x"}

    def test_invalid_manifest_raises(self):
        with pytest.raises(TypeError):
            extract_theme_info("t", "T", make_module(THEME_MANIFEST=42))


class TestComponents:
    """Tests for component discovery."""

    def test_class_component_with_declared_props_and_events(self):
        class FancyButton:
            display_name = "Fancy"
            prop_types = {"variant": "'primary'", "size": "str"}
            default_props = {"size": "medium"}
            events = ("onClick", "onFocus")
            slots = ("icon",)

            def focus(self) -> None:
                pass

            def _private(self):
                pass

        info = extract_theme_info("f", "F", make_module(FancyButton=FancyButton))

        button = info.button_component
        assert button.name == "Fancy"
        assert button.props == {"variant": "'primary'", "size": "str"}
        assert button.default_props == {"size": "medium"}
        assert button.slots == ["icon"]
        assert [m.name for m in button.methods] == ["focus"]
        assert [e.name for e in button.events] == ["onClick", "onFocus"]
        assert button.events[0].parameters[0].name == "event"

    def test_function_component_props_from_signature(self):
        """Test that keyword parameters become props and on* props become events."""

        def PlainButton(variant: str = "primary", size="medium", onClick=None, **rest):
            return None

        info = extract_theme_info("p", "P", make_module(PlainButton=PlainButton))

        button = info.button_component
        assert button.props == {"variant": "str", "size": "any", "onClick": "any"}
        assert [e.name for e in button.events] == ["onClick"]

    def test_signature_keeps_literal_and_enum_annotations(self):
        """Test that value-bearing annotations are kept as objects."""

        class Shape(Enum):
            DEFAULT = "default"
            ROUND = "round"

        Variant = Literal["primary", "danger"]

        def PlainButton(variant: Variant = "primary", shape: Shape = Shape.DEFAULT):
            return None

        info = extract_theme_info("p", "P", make_module(PlainButton=PlainButton))

        button = info.button_component
        assert button.props == {"variant": Variant, "shape": Shape}
        assert button.to_dict()["props"]["shape"] == "Shape"

    def test_type_declarations_are_not_components(self):
        """Test that aliases and typed dicts named *Button* stay types."""
        ButtonVariant = Literal["primary", "secondary"]

        class ButtonProps(TypedDict):
            variant: str

        class RealButton:
            prop_types = {"variant": "str"}

        module = make_module(
            __all__=["ButtonVariant", "ButtonProps", "RealButton"],
            ButtonVariant=ButtonVariant,
            ButtonProps=ButtonProps,
            RealButton=RealButton,
        )

        info = extract_theme_info("t", "T", module)

        assert [c.name for c in info.components] == ["RealButton"]
        assert {t.name: t.category for t in info.types} == {
            "ButtonVariant": "type",
            "ButtonProps": "interface",
        }

    def test_utils_container_is_not_component(self):
        class ButtonUtils:
            @staticmethod
            def compute_button_styles(props):
                return {}

        info = extract_theme_info("u", "U", make_module(ButtonUtils=ButtonUtils))

        assert info.components == ()
        assert [u.name for u in info.utils] == ["compute_button_styles"]


class TestHooksAndUtils:
    """Tests for hook and utility discovery."""

    def test_hook_parameters(self):
        def use_theme(theme_name: str | None = None) -> dict:
            return {}

        info = extract_theme_info("h", "H", make_module(use_theme=use_theme))

        hook = info.find_hook("useTheme")
        assert hook.name == "use_theme"
        assert hook.parameters[0].name == "theme_name"
        assert hook.parameters[0].optional is True
        assert hook.return_type == "dict"

    def test_utility_categories(self):
        utils = {
            "get_theme_styles": lambda theme: {},
            "generate_css_variables": lambda theme: {},
            "clamp": lambda value, low, high: value,
        }

        info = extract_theme_info("u", "U", make_module(ThemeUtils=utils))

        categories = {u.name: u.category for u in info.utils}
        assert categories == {
            "get_theme_styles": "style",
            "generate_css_variables": "style",
            "clamp": "utility",
        }

    def test_imported_functions_are_skipped_without_all(self):
        """Test that names imported from other modules are not part of the surface."""
        module = make_module()
        module.dumps = __import__("json").dumps

        info = extract_theme_info("i", "I", module)

        assert info.utils == ()


class TestTypes:
    """Tests for type discovery."""

    def test_enum_type(self):
        class Intensity(Enum):
            LOW = "low"
            HIGH = "high"

        info = extract_theme_info("e", "E", make_module(Intensity=Intensity))

        assert info.types[0].category == "enum"
        assert info.types[0].definition == ["low", "high"]


class TestBuildMethodSignature:
    """Tests for signature extraction and the arity fallback."""

    def test_skips_self(self):
        class Widget:
            def resize(self, width: int, height: int = 10) -> None:
                pass

        signature = build_method_signature("resize", Widget.resize)

        assert [p.name for p in signature.parameters] == ["width", "height"]
        assert signature.parameters[1].optional is True
        assert signature.return_type == "None"

    def test_arity_fallback(self, monkeypatch):
        """Test placeholder parameters when the signature cannot be read."""

        def handler(a, b, c):
            return None

        monkeypatch.setattr("theme_auditor.extractor._read_signature", lambda obj: None)

        signature = build_method_signature("handler", handler)

        assert [p.name for p in signature.parameters] == ["param0", "param1", "param2"]


class TestReferenceThemes:
    """Tests against the bundled theme modules."""

    def test_tech_theme_surface(self, tech_theme):
        button = tech_theme.button_component

        assert tech_theme.version == "1.2.0"
        assert button.name == "TechButton"
        assert {m.name for m in button.methods} == {"focus", "blur"}
        assert len(tech_theme.hooks) == 3
        assert {u.category for u in tech_theme.utils} == {"style"}

    def test_minimal_theme_surface(self, minimal_theme):
        assert minimal_theme.button_component.name == "MinimalButton"
        assert minimal_theme.find_hook("useSystemPreferences") is None
        assert len(minimal_theme.utils) == 3

    def test_extractor_class_matches_function(self, tech_theme):
        assert ThemeInfoExtractor().extract("tech", "Tech Theme", tech) == tech_theme
