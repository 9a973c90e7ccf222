"""Typed dataclasses describing an accordion declared in YAML."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from df12_components._constants import BOOTSTRAP_CSS_URL, BOOTSTRAP_JS_URL
from df12_components.color import Color  # noqa: TC001 - used for runtime type metadata
from df12_components.elements import Accordion, AccordionStyle, Item, OpenMode
from df12_components.rendering import MarkdownBodyRenderer


class AccordionConfigError(ValueError):
    """Raised when the accordion configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class HeaderColors:
    """Colors for closed and open accordion headers."""

    closed: Color
    open: Color


@dc.dataclass(slots=True)
class ItemConfig:
    """One accordion section with a Markdown body."""

    title: str
    body: str = ""
    starts_open: bool = False
    classes: list[str] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class AccordionConfig:
    """Accordion options and sections sourced from YAML config."""

    items: list[ItemConfig]
    open_mode: OpenMode = OpenMode.INDIVIDUAL
    style: AccordionStyle | None = None
    header_background: HeaderColors | None = None
    header_foreground: HeaderColors | None = None
    border_color: Color | None = None
    classes: list[str] = dc.field(default_factory=list)

    def build(self, renderer: MarkdownBodyRenderer | None = None) -> Accordion:
        """Return the configured :class:`Accordion`.

        Parameters
        ----------
        renderer : MarkdownBodyRenderer, optional
            Converts item bodies; a default renderer is used when omitted.
        """
        body_renderer = renderer or MarkdownBodyRenderer()
        accordion = Accordion.from_sequence(
            self.items, lambda item: _build_item(item, body_renderer)
        ).open_mode(self.open_mode)
        if self.style is not None:
            accordion = accordion.accordion_style(self.style)
        if self.header_background is not None:
            accordion = accordion.header_background(
                self.header_background.closed, self.header_background.open
            )
        if self.header_foreground is not None:
            accordion = accordion.header_foreground_style(
                self.header_foreground.closed, self.header_foreground.open
            )
        if self.border_color is not None:
            accordion = accordion.border_color(self.border_color)
        if self.classes:
            accordion = accordion.css_class(*self.classes)
        return accordion


def _build_item(config: ItemConfig, renderer: MarkdownBodyRenderer) -> Item:
    item = Item(config.title, [renderer.render(config.body)])
    if config.starts_open:
        item = item.starts_open()
    if config.classes:
        item = item.css_class(*config.classes)
    return item


@dc.dataclass(slots=True)
class PageSettings:
    """Preview page metadata."""

    title: str = "Accordion preview"
    output: Path = Path("public/accordion.html")
    pygments_style: str = "monokai"
    stylesheet_url: str = BOOTSTRAP_CSS_URL
    script_url: str = BOOTSTRAP_JS_URL


@dc.dataclass(slots=True)
class AccordionPageConfig:
    """A fully resolved accordion declaration plus its preview page settings."""

    accordion: AccordionConfig
    page: PageSettings = dc.field(default_factory=PageSettings)


__all__ = [
    "AccordionConfig",
    "AccordionConfigError",
    "AccordionPageConfig",
    "HeaderColors",
    "ItemConfig",
    "PageSettings",
]
