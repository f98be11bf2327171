"""Tech theme: neon accents on dark surfaces."""

from enum import Enum
from typing import Literal, TypedDict

__version__ = "1.2.0"

__all__ = [
    "THEME_DEFINITION",
    "ButtonVariant",
    "ButtonSize",
    "GlowIntensity",
    "TechButtonProps",
    "TechButton",
    "ButtonUtils",
    "use_theme",
    "use_button",
    "use_system_preferences",
]

ButtonVariant = Literal["primary", "secondary", "danger", "success", "ghost"]
ButtonSize = Literal["small", "medium", "large"]


class GlowIntensity(Enum):
    NONE = "none"
    SOFT = "soft"
    STRONG = "strong"


THEME_DEFINITION = {
    "name": "tech",
    "colors": {
        "primary": {"main": "#00d4ff", "hover": "#33ddff", "active": "#00a8cc"},
        "secondary": {"main": "#7b61ff", "hover": "#957fff", "active": "#5f45e0"},
        "danger": {"main": "#ff3b6b", "hover": "#ff6389", "active": "#d92a55"},
        "success": {"main": "#00e5a0", "hover": "#33ebb3", "active": "#00b880"},
        "background": {"base": "#0a0e1a", "surface": "#141a2e"},
        "text": {"primary": "#e6f1ff", "muted": "#8892b0"},
    },
    "typography": {
        "fontFamily": "'JetBrains Mono', monospace",
        "fontSize": {"small": 12, "medium": 14, "large": 16},
        "fontWeight": {"regular": 400, "bold": 600},
    },
    "spacing": {"small": 4, "medium": 8, "large": 16},
    "animation": {"duration": 200, "easing": "cubic-bezier(0.4, 0, 0.2, 1)"},
    "breakpoints": {"mobile": 375, "tablet": 768, "desktop": 1440},
}


class TechButtonProps(TypedDict, total=False):
    variant: ButtonVariant
    size: ButtonSize
    fill: str
    shape: str
    disabled: bool
    loading: bool
    glow: GlowIntensity


class TechButton:
    """Button with glow and scanline effects."""

    display_name = "TechButton"
    prop_types = {
        "variant": "'primary' | 'secondary' | 'danger' | 'success' | 'ghost'",
        "size": "'small' | 'medium' | 'large'",
        "fill": "'solid' | 'outline' | 'text'",
        "shape": "'default' | 'round' | 'square'",
        "disabled": "bool",
        "loading": "bool",
        "glow": "GlowIntensity",
        "onClick": "Callable[[Event], None]",
    }
    default_props = {
        "variant": "primary",
        "size": "medium",
        "fill": "solid",
        "shape": "default",
        "disabled": False,
        "loading": False,
    }
    events = ("onClick", "onFocus", "onBlur", "onKeyDown", "onMouseEnter", "onMouseLeave")
    slots = ("icon", "children")

    def __init__(self, **props):
        self.props = {**self.default_props, **props}

    def focus(self) -> None:
        self.props["focused"] = True

    def blur(self) -> None:
        self.props["focused"] = False


class ButtonUtils:
    @staticmethod
    def compute_button_styles(props: dict, theme: dict) -> dict:
        palette = theme["colors"][props.get("variant", "primary")]
        return {
            "color": palette["main"],
            "padding": theme["spacing"][props.get("size", "medium")],
            "transition": f"all {theme['animation']['duration']}ms",
        }

    @staticmethod
    def get_theme_styles(theme: dict) -> dict:
        return {
            "fontFamily": theme["typography"]["fontFamily"],
            "background": theme["colors"]["background"]["base"],
        }

    @staticmethod
    def generate_css_variables(theme: dict) -> dict:
        variables = {}
        for group, shades in theme["colors"].items():
            for shade, value in shades.items():
                variables[f"--tech-{group}-{shade}"] = value
        return variables


def use_theme(theme_name: str | None = None) -> dict:
    return THEME_DEFINITION


def use_button(props: dict, on_click=None) -> dict:
    state = {**TechButton.default_props, **props}
    state["interactive"] = not (state["disabled"] or state["loading"])
    state["on_click"] = on_click if state["interactive"] else None
    return state


def use_system_preferences() -> dict:
    return {"reduced_motion": False, "color_scheme": "dark"}
