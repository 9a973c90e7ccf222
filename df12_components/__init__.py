"""Declarative components for df12 static pages.

The package's centrepiece is :class:`~df12_components.elements.Accordion`,
an immutable container of foldable sections that renders to Bootstrap
markup. Configuration loading, a preview page builder, and the
``components`` CLI sit on top of it.

Exports
-------
- ``Accordion``, ``Item``, ``OpenMode``, ``AccordionStyle``: the component API.
- ``Color``: CSS color values accepted by modifiers.
- ``app``, ``main``: Cyclopts CLI entry points.

Examples
--------
>>> from df12_components import Accordion, Item
>>> html = Accordion(lambda: [Item("Question", "Answer")]).render()
>>> html.startswith('<div id="accordion')
True
"""

from __future__ import annotations

from .cli import app, main
from .color import Color
from .elements import Accordion, AccordionStyle, Item, OpenMode

__all__ = ["Accordion", "AccordionStyle", "Color", "Item", "OpenMode", "app", "main"]
