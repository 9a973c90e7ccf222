"""Accordion container: a list of section titles that fold out to show content.

:class:`Accordion` is an immutable value. Modifiers such as
:meth:`Accordion.open_mode` or :meth:`Accordion.header_background` return
configured copies, and nothing is decided about the rendered ids until
:meth:`Accordion.markup` runs. Each render generates one group identity,
hands it to every item, and uses it as the container id so Bootstrap can
collapse siblings in ``individual`` mode.

Example
-------
>>> from df12_components.elements import Accordion, Item, OpenMode
>>> faq = Accordion(lambda: [
...     Item("Shipping", "Orders ship within two days."),
...     Item("Returns", "Returns are free for 30 days."),
... ]).open_mode(OpenMode.ALL).border_color("#dee2e6")
>>> node = faq.markup()
>>> node.child_count
2
>>> node.attributes.element_id.startswith("accordion")
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from df12_components._constants import (
    ACCORDION_CLASS,
    ACCORDION_FLUSH_CLASS,
    BORDER_COLOR_PROPERTY,
    GROUP_ID_PREFIX,
    HEADER_BACKGROUND_CLOSED_PROPERTIES,
    HEADER_BACKGROUND_OPEN_PROPERTY,
    HEADER_FOREGROUND_CLOSED_PROPERTIES,
    HEADER_FOREGROUND_OPEN_PROPERTY,
)
from df12_components.builder import ChildSource, collect_children
from df12_components.color import Color
from df12_components.identity import make_group_id
from df12_components.markup import CoreAttributes, Element

from .contract import AccordionItem, AccordionStyle, OpenMode
from .modifiers import ElementModifiers
from .section import Section

T = typ.TypeVar("T")


@dc.dataclass(frozen=True, slots=True)
class Accordion(ElementModifiers):
    """A control that displays foldable sections.

    Attributes
    ----------
    items : tuple[AccordionItem, ...]
        Sections in display order. Accepts a builder callable (evaluated
        once) or any iterable at construction time.
    mode : OpenMode
        Whether opening a section closes its siblings. Defaults to
        ``OpenMode.INDIVIDUAL``.
    attributes : CoreAttributes
        Classes and styles accumulated by modifiers.
    """

    items: ChildSource = ()
    mode: OpenMode = OpenMode.INDIVIDUAL
    attributes: CoreAttributes = CoreAttributes()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "items", collect_children(self.items, kind=AccordionItem)
        )
        object.__setattr__(self, "mode", OpenMode(self.mode))

    @classmethod
    def from_sequence(
        cls,
        sequence: cabc.Iterable[T],
        content: cabc.Callable[[T], AccordionItem],
    ) -> Accordion:
        """Build an accordion by converting each element of ``sequence``.

        Parameters
        ----------
        sequence : Iterable
            Source values, consumed once in order.
        content : callable
            Function turning one value into one accordion item.
        """
        return cls(tuple(content(value) for value in sequence))

    def open_mode(self, mode: OpenMode | str) -> Accordion:
        """Return a copy with a new open mode."""
        return dc.replace(self, mode=OpenMode(mode))

    def accordion_style(self, style: AccordionStyle | str) -> Accordion:
        """Return a copy rendered with the given visual style.

        The flush marker class is owned by this modifier: ``PLAIN`` adds it
        and ``BORDERED`` removes it, so the most recent call wins.
        """
        match AccordionStyle(style):
            case AccordionStyle.PLAIN:
                attributes = self.attributes.with_classes(ACCORDION_FLUSH_CLASS)
            case AccordionStyle.BORDERED:
                attributes = self.attributes.without_classes(ACCORDION_FLUSH_CLASS)
        return dc.replace(self, attributes=attributes)

    def header_background(
        self, closed: Color | str, open: Color | str | None = None  # noqa: A002
    ) -> Accordion:
        """Set header background colors for closed and open sections.

        Parameters
        ----------
        closed : Color or str
            Background of inactive headers, also used on hover and press.
        open : Color or str, optional
            Background of the expanded header; defaults to ``closed``.
        """
        return self._header_colors(
            HEADER_BACKGROUND_CLOSED_PROPERTIES,
            HEADER_BACKGROUND_OPEN_PROPERTY,
            closed,
            open,
        )

    def header_foreground_style(
        self, closed: Color | str, open: Color | str | None = None  # noqa: A002
    ) -> Accordion:
        """Set header text colors for closed and open sections."""
        return self._header_colors(
            HEADER_FOREGROUND_CLOSED_PROPERTIES,
            HEADER_FOREGROUND_OPEN_PROPERTY,
            closed,
            open,
        )

    def border_color(self, color: Color | str) -> Accordion:
        """Return a copy with a new border color."""
        value = str(Color.parse(color))
        attributes = self.attributes.with_style(BORDER_COLOR_PROPERTY, value)
        return dc.replace(self, attributes=attributes)

    def _header_colors(
        self,
        closed_properties: tuple[str, ...],
        open_property: str,
        closed: Color | str,
        open_color: Color | str | None,
    ) -> Accordion:
        closed_value = str(Color.parse(closed))
        open_value = closed_value
        if open_color is not None:
            open_value = str(Color.parse(open_color))
        styles = [(name, closed_value) for name in closed_properties]
        styles.append((open_property, open_value))
        return dc.replace(self, attributes=self.attributes.with_styles(styles))

    def markup(self) -> Element:
        """Render the accordion with a freshly generated group identity."""
        # Items in individual mode point their collapse regions at the
        # container id, so it must be shared by every item in this render.
        group_id = make_group_id(GROUP_ID_PREFIX)
        items = typ.cast("tuple[AccordionItem, ...]", self.items)
        adapted = tuple(item.assigned(group_id, self.mode) for item in items)
        node = Section(adapted).markup()
        return (
            node.with_attributes(self.attributes)
            .with_class(ACCORDION_CLASS)
            .with_id(group_id)
        )

    def render(self) -> str:
        """Render straight to HTML text."""
        return self.markup().render()


__all__ = ["Accordion"]
