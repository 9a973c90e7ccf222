"""A single foldable section of an accordion.

An :class:`Item` knows how to render itself as a Bootstrap
``accordion-item``. It only learns which accordion it belongs to when the
container calls :meth:`Item.assigned`; until then it renders standalone and
never references a parent group.

Example
-------
>>> from df12_components.elements import Item, OpenMode
>>> item = Item("Shipping", "Orders ship within two days.").starts_open()
>>> linked = item.assigned("accordion0123", OpenMode.INDIVIDUAL)
>>> linked.group_id
'accordion0123'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from df12_components._constants import (
    ACCORDION_BODY_CLASS,
    ACCORDION_BUTTON_CLASS,
    ACCORDION_COLLAPSE_CLASS,
    ACCORDION_HEADER_CLASS,
    ACCORDION_ITEM_CLASS,
)
from df12_components.builder import ChildSource, collect_children
from df12_components.identity import make_token
from df12_components.markup import CoreAttributes, Element, Text

from .contract import Component, OpenMode
from .modifiers import ElementModifiers
from .section import as_component


@dc.dataclass(frozen=True, slots=True)
class Item(ElementModifiers):
    """One collapsible section with a header button and a body.

    Attributes
    ----------
    title : str or Component
        Header label; strings are escaped.
    content : tuple[Component, ...]
        Body components, built from an iterable or a builder callable.
    is_open : bool
        Whether the section is expanded on first paint.
    attributes : CoreAttributes
        Extra attributes applied to the outer ``accordion-item`` element.
    group_id : str or None
        Coordination key assigned by the owning accordion.
    open_mode : OpenMode
        Open mode assigned by the owning accordion.
    item_id : str or None
        Id of the collapse region, generated on assignment.
    """

    title: str | Component
    content: ChildSource = ()
    is_open: bool = False
    attributes: CoreAttributes = CoreAttributes()
    group_id: str | None = None
    open_mode: OpenMode = OpenMode.INDIVIDUAL
    item_id: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.title, str):
            object.__setattr__(self, "title", Text(self.title))
        elif not isinstance(self.title, Component):
            kind = type(self.title).__name__
            msg = f"Item title must be a string or component, got {kind}."
            raise TypeError(msg)
        children = collect_children(self.content, kind=Component, coerce=as_component)
        object.__setattr__(self, "content", children)

    def starts_open(self, is_open: bool = True) -> Item:  # noqa: FBT001, FBT002
        """Return a copy that is expanded (or collapsed) on first paint."""
        return dc.replace(self, is_open=is_open)

    def assigned(self, group_id: str, open_mode: OpenMode | str) -> Item:
        """Return a copy linked to the accordion identified by ``group_id``.

        Every call produces a fresh ``item_id`` derived from ``group_id`` so
        siblings never share a collapse target.
        """
        return dc.replace(
            self,
            group_id=group_id,
            open_mode=OpenMode(open_mode),
            item_id=f"{group_id}-item{make_token(8)}",
        )

    def markup(self) -> Element:
        item_id = self.item_id or f"item{make_token()}"
        header = self._header(item_id)
        body = Element(
            "div",
            tuple(child.markup() for child in self.content),
            CoreAttributes().with_classes(ACCORDION_BODY_CLASS),
        )
        collapse = Element("div", (body,), self._collapse_attributes(item_id))
        wrapper = CoreAttributes().with_classes(ACCORDION_ITEM_CLASS)
        return Element("div", (header, collapse), wrapper.merged(self.attributes))

    def _header(self, item_id: str) -> Element:
        button_attrs = (
            CoreAttributes()
            .with_classes(ACCORDION_BUTTON_CLASS)
            .with_custom("type", "button")
            .with_custom("data-bs-toggle", "collapse")
            .with_custom("data-bs-target", f"#{item_id}")
            .with_custom("aria-expanded", "true" if self.is_open else "false")
            .with_custom("aria-controls", item_id)
        )
        if not self.is_open:
            button_attrs = button_attrs.with_classes("collapsed")
        title = typ.cast("Component", self.title)
        button = Element("button", (title.markup(),), button_attrs)
        return Element(
            "h2", (button,), CoreAttributes().with_classes(ACCORDION_HEADER_CLASS)
        )

    def _collapse_attributes(self, item_id: str) -> CoreAttributes:
        attrs = (
            CoreAttributes()
            .with_id(item_id)
            .with_classes(ACCORDION_COLLAPSE_CLASS, "collapse")
        )
        if self.is_open:
            attrs = attrs.with_classes("show")
        if self.group_id and self.open_mode is OpenMode.INDIVIDUAL:
            attrs = attrs.with_custom("data-bs-parent", f"#{self.group_id}")
        return attrs


__all__ = ["Item"]
