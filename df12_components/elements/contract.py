"""Protocols and options shared between containers and their children."""

from __future__ import annotations

import enum
import typing as typ

if typ.TYPE_CHECKING:
    from df12_components.markup import Element, Markup


class OpenMode(enum.StrEnum):
    """Controls what happens when an accordion section is opened."""

    INDIVIDUAL = "individual"
    """Opening one section closes every sibling in the same group."""

    ALL = "all"
    """Sections open and close independently."""


class AccordionStyle(enum.StrEnum):
    """Visual style of an accordion."""

    BORDERED = "bordered"
    """Outer borders and rounded corners."""

    PLAIN = "plain"
    """Flush layout without outer borders or rounded corners."""

    @classmethod
    def automatic(cls) -> AccordionStyle:
        """Return the style used when nothing is requested."""
        return cls.BORDERED


@typ.runtime_checkable
class Component(typ.Protocol):
    """Anything that can produce a markup node."""

    def markup(self) -> Markup: ...


@typ.runtime_checkable
class AccordionItem(typ.Protocol):
    """A section that can join an accordion group.

    The container calls :meth:`assigned` once per render with the group id
    shared by every sibling, then renders whatever comes back.
    """

    def assigned(self, group_id: str, open_mode: OpenMode) -> AccordionItem: ...

    def markup(self) -> Element: ...


__all__ = ["AccordionItem", "AccordionStyle", "Component", "OpenMode"]
