"""
Shared fixtures for the theme auditor test suite.

Provides test fixtures for:
- Complete and partial ThemeInfo objects
- Reference themes extracted from the bundled theme modules
- Configuration files in temporary projects
- Logging cleanup between tests
"""

import json
import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from theme_auditor.audit_logging import LOGGER_NAME
from theme_auditor.config import CONFIG_ENV_VAR, ApiConsistencyConfig
from theme_auditor.extractor import extract_theme_info
from theme_auditor.models import (
    ComponentInfo,
    EventSignature,
    HookInfo,
    MethodSignature,
    Parameter,
    ThemeInfo,
    UtilInfo,
)
from theme_auditor.themes import minimal, tech

COMPLETE_PROPS = {
    "variant": "'primary' | 'secondary' | 'danger' | 'success'",
    "size": "'small' | 'medium' | 'large'",
    "fill": "'solid' | 'outline'",
    "shape": "'default' | 'round'",
    "disabled": "bool",
    "loading": "bool",
}

COMPLETE_EVENTS = ("onClick", "onFocus", "onBlur", "onKeyDown")

COMPLETE_DEFINITION = {
    "name": "sample",
    "colors": {
        "primary": {"main": "#000", "hover": "#111"},
        "secondary": {"main": "#222", "hover": "#333"},
    },
    "typography": {"fontFamily": "sans-serif"},
    "spacing": {"small": 4},
    "animation": {"duration": 100},
}


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_auditor_logging():
    """Drop handlers installed by setup_logging so tests do not leak streams."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True


@pytest.fixture(autouse=True)
def clear_config_env(monkeypatch):
    """Keep a developer's THEME_AUDIT_CONFIG out of the tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


# ---------------------------------------------------------------------------
# Theme builders
# ---------------------------------------------------------------------------


def _hook(name: str, *params: str) -> HookInfo:
    return HookInfo(name=name, parameters=[Parameter(name=p) for p in params])


def _util(name: str) -> UtilInfo:
    return UtilInfo(name=name, signature=MethodSignature(name=name), category="style")


@pytest.fixture
def make_button() -> Callable[..., ComponentInfo]:
    """Factory for a button component with every shared prop and event."""

    def factory(name: str = "SampleButton", drop_props=(), drop_events=(), **props):
        declared = {k: v for k, v in COMPLETE_PROPS.items() if k not in drop_props}
        declared.update(props)
        events = [
            EventSignature(name=e, parameters=[Parameter(name="event", type="Event")])
            for e in COMPLETE_EVENTS
            if e not in drop_events
        ]
        return ComponentInfo(name=name, props=declared, events=events)

    return factory


@pytest.fixture
def make_theme(make_button) -> Callable[..., ThemeInfo]:
    """Factory for a theme that passes every built-in rule on its own."""

    def factory(theme_id: str = "sample", **overrides) -> ThemeInfo:
        fields = {
            "id": theme_id,
            "name": f"{theme_id.title()} Theme",
            "definition": json.loads(json.dumps(COMPLETE_DEFINITION)),
            "components": (make_button(),),
            "hooks": (
                _hook("useTheme", "themeName"),
                _hook("useButton", "props"),
                _hook("useSystemPreferences"),
            ),
            "utils": (
                _util("computeButtonStyles"),
                _util("getThemeStyles"),
                _util("generateCSSVariables"),
            ),
        }
        fields.update(overrides)
        return ThemeInfo(**fields)

    return factory


@pytest.fixture
def config() -> ApiConsistencyConfig:
    """Non-strict configuration with default levels."""
    return ApiConsistencyConfig()


# ---------------------------------------------------------------------------
# Reference themes
# ---------------------------------------------------------------------------


@pytest.fixture
def tech_theme() -> ThemeInfo:
    """ThemeInfo extracted from the bundled tech theme."""
    return extract_theme_info("tech", "Tech Theme", tech)


@pytest.fixture
def minimal_theme() -> ThemeInfo:
    """ThemeInfo extracted from the bundled minimal theme."""
    return extract_theme_info("minimal", "Minimal Theme", minimal)


# ---------------------------------------------------------------------------
# Configuration files
# ---------------------------------------------------------------------------


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[dict], Path]:
    """Write an api-consistency.config.json into a temporary project."""

    def factory(data: dict, name: str = "api-consistency.config.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return factory
