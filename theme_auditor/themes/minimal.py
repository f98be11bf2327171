"""Minimal theme: neutral palette, flat surfaces, no ornament."""

from typing import Literal

__version__ = "1.0.0"

__all__ = [
    "THEME_DEFINITION",
    "ButtonVariant",
    "MinimalButton",
    "MinimalButtonUtils",
    "use_theme",
    "use_button",
]

ButtonVariant = Literal["primary", "secondary", "danger", "success"]

THEME_DEFINITION = {
    "name": "minimal",
    "colors": {
        "primary": {"main": "#111111", "hover": "#333333", "active": "#000000"},
        "secondary": {"main": "#f5f5f5", "hover": "#ebebeb", "active": "#e0e0e0"},
        "danger": {"main": "#d32f2f", "hover": "#e04848", "active": "#b71c1c"},
        "success": {"main": "#2e7d32", "hover": "#43a047", "active": "#1b5e20"},
        "background": {"base": "#ffffff", "surface": "#fafafa"},
        "text": {"primary": "#111111", "muted": "#757575"},
    },
    "typography": {
        "fontFamily": "'Inter', sans-serif",
        "fontSize": {"small": 12, "medium": 14, "large": 16},
        "fontWeight": {"regular": 400, "bold": 500},
    },
    "spacing": {"small": 4, "medium": 8, "large": 16},
    "animation": {"duration": 150, "easing": "ease-out"},
}


class MinimalButton:
    """Flat button with a single hairline border."""

    display_name = "MinimalButton"
    prop_types = {
        "variant": "'primary' | 'secondary' | 'danger' | 'success'",
        "size": "'small' | 'medium' | 'large'",
        "fill": "'solid' | 'outline' | 'text'",
        "shape": "'default' | 'round' | 'square'",
        "disabled": "bool",
        "loading": "bool",
        "onClick": "Callable[[Event], None]",
    }
    default_props = {
        "variant": "primary",
        "size": "medium",
        "fill": "outline",
        "shape": "default",
        "disabled": False,
        "loading": False,
    }
    events = ("onClick", "onFocus", "onBlur", "onKeyDown")
    slots = ("children",)

    def __init__(self, **props):
        self.props = {**self.default_props, **props}

    def focus(self) -> None:
        self.props["focused"] = True

    def blur(self) -> None:
        self.props["focused"] = False


MinimalButtonUtils = {
    "compute_button_styles": lambda props, theme: {
        "color": theme["colors"][props.get("variant", "primary")]["main"],
        "padding": theme["spacing"][props.get("size", "medium")],
    },
    "get_theme_styles": lambda theme: {
        "fontFamily": theme["typography"]["fontFamily"],
        "background": theme["colors"]["background"]["base"],
    },
    "generate_css_variables": lambda theme: {
        f"--minimal-{group}-{shade}": value
        for group, shades in theme["colors"].items()
        for shade, value in shades.items()
    },
}


def use_theme(theme_name: str | None = None) -> dict:
    return THEME_DEFINITION


def use_button(props: dict, on_click=None) -> dict:
    state = {**MinimalButton.default_props, **props}
    state["interactive"] = not (state["disabled"] or state["loading"])
    state["on_click"] = on_click if state["interactive"] else None
    return state
