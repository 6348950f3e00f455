"""Colour preference helpers shared by the command line and the renderer."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Literal, Mapping, Optional

__all__ = [
    "ColorSelection",
    "DEFAULT_COLOR",
    "ENVIRONMENT_KEY",
    "VALID_COLORS",
    "console_options",
    "get_system_color",
    "resolve_color",
]

logger = logging.getLogger(__name__)

ColorSource = Literal["default", "system", "user"]

DEFAULT_COLOR = "auto"
VALID_COLORS = {"auto", "always", "never"}
ENVIRONMENT_KEY = "SCAL_COLOR"
_NO_COLOR_KEY = "NO_COLOR"


@dataclass(frozen=True)
class ColorSelection:
    """Resolved colour mode and metadata about its origin."""

    value: str
    source: ColorSource


def _normalize_color(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in VALID_COLORS:
            return normalized
    return None


def _require_color(value: Optional[str]) -> str:
    normalized = _normalize_color(value)
    if not normalized:
        raise ValueError(
            "color must be one of: {}".format(", ".join(sorted(VALID_COLORS)))
        )
    return normalized


def _read_system_value(environ: Mapping[str, str]) -> Optional[str]:
    stored = environ.get(ENVIRONMENT_KEY)
    if stored:
        normalized = _normalize_color(stored)
        if normalized:
            return normalized
        logger.warning("Ignoring invalid %s value %r", ENVIRONMENT_KEY, stored)
    if environ.get(_NO_COLOR_KEY):
        return "never"
    return None


def get_system_color(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the colour mode configured through the environment, if any."""

    return _read_system_value(os.environ if environ is None else environ)


def resolve_color(
    user_value: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ColorSelection:
    """Resolve the active colour mode, a command line value winning over the environment."""

    if user_value is not None:
        return ColorSelection(_require_color(user_value), "user")

    system_value = get_system_color(environ)
    if system_value:
        return ColorSelection(system_value, "system")

    return ColorSelection(DEFAULT_COLOR, "default")


def console_options(selection: ColorSelection) -> Dict[str, object]:
    """Translate a colour mode into :class:`rich.console.Console` keyword arguments."""

    if selection.value == "always":
        return {"force_terminal": True}
    if selection.value == "never":
        return {"color_system": None}
    return {}
