"""Utility helpers shared by the accordion configuration loader."""

from __future__ import annotations

import typing as typ

from df12_components.color import Color, ColorError
from df12_components.elements import AccordionStyle, OpenMode

from .models import AccordionConfigError, HeaderColors


def _normalize_classes(value: str | list[object] | None) -> list[str]:
    """Normalize class definitions into a list of non-empty strings."""
    if isinstance(value, str):
        return [segment for segment in value.split() if segment]
    if isinstance(value, list):
        normalized: list[str] = []
        for segment in value:
            text = str(segment).strip()
            if text:
                normalized.append(text)
        return normalized
    return []


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_color(value: object, *, field: str) -> Color:
    """Parse a color field, reporting the offending key on failure."""
    try:
        return Color.parse(typ.cast("str", value))
    except ColorError as exc:
        msg = f"Invalid color for '{field}': {exc}"
        raise AccordionConfigError(msg) from exc


def _parse_header_colors(value: object, *, field: str) -> HeaderColors | None:
    """Accept a single color or a ``{closed, open}`` mapping."""
    match value:
        case None:
            return None
        case dict() as data:
            if "closed" not in data:
                msg = f"'{field}' mapping requires a 'closed' color."
                raise AccordionConfigError(msg)
            closed = _parse_color(data["closed"], field=f"{field}.closed")
            open_raw = data.get("open")
            if open_raw is None:
                return HeaderColors(closed=closed, open=closed)
            return HeaderColors(
                closed=closed, open=_parse_color(open_raw, field=f"{field}.open")
            )
        case _:
            color = _parse_color(value, field=field)
            return HeaderColors(closed=color, open=color)


def _parse_open_mode(value: object | None) -> OpenMode:
    """Return the configured open mode, defaulting to ``individual``."""
    text = _optional_str(value)
    if text is None:
        return OpenMode.INDIVIDUAL
    try:
        return OpenMode(text.lower())
    except ValueError as exc:
        allowed = ", ".join(mode.value for mode in OpenMode)
        msg = f"Unknown open_mode '{text}'. Expected one of: {allowed}"
        raise AccordionConfigError(msg) from exc


def _parse_style(value: object | None) -> AccordionStyle | None:
    """Return the configured style, or None to keep the automatic style."""
    text = _optional_str(value)
    if text is None:
        return None
    if text.lower() == "automatic":
        return AccordionStyle.automatic()
    try:
        return AccordionStyle(text.lower())
    except ValueError as exc:
        allowed = ", ".join([*(style.value for style in AccordionStyle), "automatic"])
        msg = f"Unknown style '{text}'. Expected one of: {allowed}"
        raise AccordionConfigError(msg) from exc


def _parse_bool(value: object, *, field: str) -> bool:
    """Accept real booleans only; YAML 1.2 already maps ``true``/``false``."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    msg = f"'{field}' must be true or false."
    raise AccordionConfigError(msg)


__all__ = [
    "_normalize_classes",
    "_optional_str",
    "_parse_bool",
    "_parse_color",
    "_parse_header_colors",
    "_parse_open_mode",
    "_parse_style",
]
