"""Generic block container used to group child components."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from df12_components.builder import ChildSource, collect_children
from df12_components.markup import CoreAttributes, Element, Text

from .contract import Component
from .modifiers import ElementModifiers


def as_component(value: typ.Any) -> Component | None:
    """Wrap plain strings as escaped text; reject anything else."""
    if isinstance(value, str):
        return Text(value)
    return None


@dc.dataclass(frozen=True, slots=True)
class Section(ElementModifiers):
    """A ``<div>`` wrapping its children in order."""

    content: ChildSource = ()
    attributes: CoreAttributes = CoreAttributes()

    def __post_init__(self) -> None:
        children = collect_children(self.content, kind=Component, coerce=as_component)
        object.__setattr__(self, "content", children)

    def markup(self) -> Element:
        children = tuple(child.markup() for child in self.content)
        return Element("div", children, self.attributes)


__all__ = ["Section", "as_component"]
