"""Declarative HTML elements rendered into df12 markup trees."""

from .accordion import Accordion
from .contract import AccordionItem, AccordionStyle, Component, OpenMode
from .item import Item
from .modifiers import ElementModifiers
from .section import Section

__all__ = [
    "Accordion",
    "AccordionItem",
    "AccordionStyle",
    "Component",
    "ElementModifiers",
    "Item",
    "OpenMode",
    "Section",
]
