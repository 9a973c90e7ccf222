"""Load accordion configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _normalize_classes,
    _optional_str,
    _parse_bool,
    _parse_color,
    _parse_header_colors,
    _parse_open_mode,
    _parse_style,
)
from .models import (
    AccordionConfig,
    AccordionConfigError,
    AccordionPageConfig,
    ItemConfig,
    PageSettings,
)


def load_accordion_config(path: Path) -> AccordionPageConfig:
    """Load the YAML file describing an accordion and its preview page.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file.

    Returns
    -------
    AccordionPageConfig
        Parsed accordion options, sections, and preview page settings.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    AccordionConfigError
        If the ``accordion`` block is missing or any field is invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_accordion_config(Path("config/faq.yaml"))  # doctest: +SKIP
    >>> [item.title for item in config.accordion.items]  # doctest: +SKIP
    ['Shipping', 'Returns']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    accordion_raw = raw.get("accordion")
    if accordion_raw is None:
        msg = "Configuration requires an 'accordion' block."
        raise AccordionConfigError(msg)

    return AccordionPageConfig(
        accordion=_build_accordion_config(accordion_raw),
        page=_build_page_settings(raw.get("page")),
    )


def _build_accordion_config(payload: object) -> AccordionConfig:
    """Build the accordion options and item list from the provided payload."""
    match payload:
        case dict() as data:
            items_raw = data.get("items") or []
        case _:
            msg = "Accordion configuration must be a mapping."
            raise AccordionConfigError(msg)
    if not isinstance(items_raw, list):
        msg = "Accordion 'items' must be a list."
        raise AccordionConfigError(msg)

    border_raw = data.get("border_color")
    return AccordionConfig(
        items=[_build_item_config(idx, entry) for idx, entry in enumerate(items_raw)],
        open_mode=_parse_open_mode(data.get("open_mode")),
        style=_parse_style(data.get("style")),
        header_background=_parse_header_colors(
            data.get("header_background"), field="header_background"
        ),
        header_foreground=_parse_header_colors(
            data.get("header_foreground"), field="header_foreground"
        ),
        border_color=(
            _parse_color(border_raw, field="border_color")
            if border_raw is not None
            else None
        ),
        classes=_normalize_classes(data.get("classes")),
    )


def _build_item_config(index: int, payload: object) -> ItemConfig:
    """Build a single item entry, requiring a non-empty title."""
    match payload:
        case dict() as data:
            title = _optional_str(data.get("title"))
        case _:
            msg = f"Accordion item {index + 1} must be a mapping."
            raise AccordionConfigError(msg)
    if title is None:
        msg = f"Accordion item {index + 1} requires a 'title'."
        raise AccordionConfigError(msg)
    body = data.get("body") or ""
    return ItemConfig(
        title=title,
        body=str(body),
        starts_open=_parse_bool(data.get("starts_open"), field="starts_open"),
        classes=_normalize_classes(data.get("classes")),
    )


def _build_page_settings(payload: object) -> PageSettings:
    """Merge the optional ``page`` block over the preview defaults."""
    base = PageSettings()
    match payload:
        case None:
            return base
        case dict() as data:
            pass
        case _:
            msg = "Page configuration must be a mapping."
            raise AccordionConfigError(msg)
    return PageSettings(
        title=_optional_str(data.get("title")) or base.title,
        output=Path(data.get("output", base.output)),
        pygments_style=data.get("pygments_style", base.pygments_style),
        stylesheet_url=data.get("stylesheet_url", base.stylesheet_url),
        script_url=data.get("script_url", base.script_url),
    )


__all__ = ["load_accordion_config"]
