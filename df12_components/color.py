"""CSS color values accepted by component modifiers.

A :class:`Color` is a thin, validated wrapper around the CSS text that ends
up inside an inline style declaration. Modifiers accept either a ``Color`` or
a plain string, which is parsed with :meth:`Color.parse`.

Examples
--------
>>> from df12_components.color import Color
>>> str(Color.hex("#0D6EFD"))
'#0d6efd'
>>> str(Color.rgb(13, 110, 253, opacity=0.5))
'rgba(13, 110, 253, 0.5)'
"""

from __future__ import annotations

import dataclasses as dc
import re

HEX_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
NAME_PATTERN = re.compile(r"^[a-zA-Z]+$")
FUNCTION_PATTERN = re.compile(r"^(?:rgba?|hsla?|var|color-mix)\([^;{}]+\)$")


class ColorError(ValueError):
    """Raised when a value cannot be interpreted as a CSS color."""


@dc.dataclass(frozen=True, slots=True)
class Color:
    """A CSS color, stored as the text emitted into style declarations."""

    description: str

    def __str__(self) -> str:
        return self.description

    @classmethod
    def hex(cls, value: str) -> Color:
        """Build a color from ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``."""
        text = value.strip()
        if not HEX_PATTERN.match(text):
            msg = f"Invalid hex color {value!r}."
            raise ColorError(msg)
        return cls(text.lower())

    @classmethod
    def rgb(cls, red: int, green: int, blue: int, *, opacity: float = 1.0) -> Color:
        """Build a color from 0-255 channels and an optional 0-1 opacity."""
        for channel in (red, green, blue):
            if not 0 <= channel <= 255:
                msg = f"Color channel {channel} is outside 0-255."
                raise ColorError(msg)
        if not 0.0 <= opacity <= 1.0:
            msg = f"Opacity {opacity} is outside 0-1."
            raise ColorError(msg)
        if opacity == 1.0:
            return cls(f"rgb({red}, {green}, {blue})")
        return cls(f"rgba({red}, {green}, {blue}, {opacity:g})")

    @classmethod
    def named(cls, name: str) -> Color:
        """Build a color from a CSS keyword such as ``rebeccapurple``."""
        text = name.strip()
        if not NAME_PATTERN.match(text):
            msg = f"Invalid color name {name!r}."
            raise ColorError(msg)
        return cls(text.lower())

    @classmethod
    def parse(cls, value: Color | str) -> Color:
        """Interpret ``value`` as a hex code, keyword, or CSS color function."""
        if isinstance(value, Color):
            return value
        if not isinstance(value, str):
            msg = f"Expected a color string, got {type(value).__name__}."
            raise ColorError(msg)
        text = value.strip()
        if text.startswith("#"):
            return cls.hex(text)
        if FUNCTION_PATTERN.match(text):
            return cls(text)
        return cls.named(text)


__all__ = ["Color", "ColorError"]
