r"""Immutable markup nodes and attribute sets consumed by df12 components.

Components never build HTML strings directly. They compose
:class:`Element` trees whose attributes live in a :class:`CoreAttributes`
value, and the tree is serialized once with :meth:`Element.render`. Every
operation returns a new value, so a node handed to one page can be reused by
another without surprises.

Example
-------
>>> from df12_components.markup import CoreAttributes, Element, Text
>>> node = Element("p", (Text("a < b"),), CoreAttributes().with_classes("lead"))
>>> node.render()
'<p class="lead">a &lt; b</p>'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
from html import escape

VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta"}
)

Pairs = tuple[tuple[str, str], ...]


def _upsert(pairs: Pairs, name: str, value: str) -> Pairs:
    """Return ``pairs`` with ``name`` set to ``value``, keeping its position."""
    for idx, (key, _existing) in enumerate(pairs):
        if key == name:
            return (*pairs[:idx], (name, value), *pairs[idx + 1 :])
    return (*pairs, (name, value))


def _split_classes(names: cabc.Iterable[str]) -> list[str]:
    """Split whitespace-separated class declarations into single names."""
    return [segment for name in names for segment in str(name).split() if segment]


@dc.dataclass(frozen=True, slots=True)
class CoreAttributes:
    """Ordered, immutable collection of HTML attributes for one element.

    Attributes
    ----------
    element_id : str or None
        Value of the ``id`` attribute, if any.
    classes : tuple[str, ...]
        CSS classes in first-seen order; never contains duplicates.
    styles : tuple[tuple[str, str], ...]
        Inline style declarations as ``(property, value)`` pairs.
    custom : tuple[tuple[str, str], ...]
        Any other attributes (``data-*``, ``aria-*``, ``type``...).
    """

    element_id: str | None = None
    classes: tuple[str, ...] = ()
    styles: Pairs = ()
    custom: Pairs = ()

    def with_id(self, element_id: str | None) -> CoreAttributes:
        """Return a copy whose ``id`` is replaced by ``element_id``."""
        return dc.replace(self, element_id=element_id)

    def with_classes(self, *names: str) -> CoreAttributes:
        """Return a copy with ``names`` appended, skipping classes already set."""
        merged = list(self.classes)
        for name in _split_classes(names):
            if name not in merged:
                merged.append(name)
        return dc.replace(self, classes=tuple(merged))

    def without_classes(self, *names: str) -> CoreAttributes:
        """Return a copy with every class in ``names`` removed."""
        removed = set(_split_classes(names))
        return dc.replace(
            self, classes=tuple(name for name in self.classes if name not in removed)
        )

    def with_style(self, name: str, value: object) -> CoreAttributes:
        """Return a copy with one inline style property set.

        Setting a property that already exists overwrites its value in place,
        so the declaration order stays stable across repeated modifiers.
        """
        return dc.replace(self, styles=_upsert(self.styles, name, str(value)))

    def with_styles(
        self, styles: cabc.Mapping[str, object] | cabc.Iterable[tuple[str, object]]
    ) -> CoreAttributes:
        """Return a copy with several inline style properties set in order."""
        items = styles.items() if isinstance(styles, cabc.Mapping) else styles
        result = self
        for name, value in items:
            result = result.with_style(name, value)
        return result

    def with_custom(self, name: str, value: object) -> CoreAttributes:
        """Return a copy with an arbitrary attribute set.

        ``class``, ``style`` and ``id`` are routed to their dedicated fields.
        """
        match name:
            case "id":
                return self.with_id(str(value))
            case "class":
                return self.with_classes(str(value))
            case "style":
                msg = "Use with_style() for inline styles."
                raise ValueError(msg)
            case _:
                return dc.replace(self, custom=_upsert(self.custom, name, str(value)))

    def merged(self, other: CoreAttributes) -> CoreAttributes:
        """Merge ``other`` on top of this set.

        Keys present in both take the value from ``other``; classes are
        unioned in order; the id from ``other`` wins when it has one.
        """
        result = self.with_classes(*other.classes).with_styles(other.styles)
        for name, value in other.custom:
            result = result.with_custom(name, value)
        if other.element_id is not None:
            result = result.with_id(other.element_id)
        return result

    def style_value(self, name: str) -> str | None:
        """Return the inline value for ``name`` or ``None`` when unset."""
        return dict(self.styles).get(name)

    def custom_value(self, name: str) -> str | None:
        """Return the value of a custom attribute or ``None`` when unset."""
        return dict(self.custom).get(name)

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when no attribute would be rendered."""
        return not (self.element_id or self.classes or self.styles or self.custom)

    def render(self) -> str:
        """Serialize into an attribute string with a leading space per entry."""
        parts: list[str] = []
        if self.element_id:
            parts.append(f'id="{escape(self.element_id, quote=True)}"')
        if self.classes:
            parts.append(f'class="{escape(" ".join(self.classes), quote=True)}"')
        if self.styles:
            declarations = "; ".join(f"{key}: {value}" for key, value in self.styles)
            parts.append(f'style="{escape(declarations, quote=True)}"')
        parts.extend(
            f'{escape(key, quote=True)}="{escape(value, quote=True)}"'
            for key, value in self.custom
        )
        return "".join(f" {part}" for part in parts)


@dc.dataclass(frozen=True, slots=True)
class Text:
    """Plain text content, escaped on output."""

    value: str

    def markup(self) -> Text:
        return self

    def render(self) -> str:
        return escape(self.value, quote=False)


@dc.dataclass(frozen=True, slots=True)
class RawMarkup:
    """Pre-rendered HTML inserted verbatim, e.g. converted Markdown."""

    html: str

    def markup(self) -> RawMarkup:
        return self

    def render(self) -> str:
        return self.html


@dc.dataclass(frozen=True, slots=True)
class Element:
    """An HTML element with ordered children and an attribute set."""

    tag: str
    children: tuple[Markup, ...] = ()
    attributes: CoreAttributes = CoreAttributes()

    def markup(self) -> Element:
        return self

    @property
    def child_count(self) -> int:
        """Number of direct children of this element."""
        return len(self.children)

    def with_attributes(self, attributes: CoreAttributes) -> Element:
        """Return a copy with ``attributes`` merged over the current set."""
        return dc.replace(self, attributes=self.attributes.merged(attributes))

    def with_class(self, *names: str) -> Element:
        """Return a copy with ``names`` appended to the class list."""
        return dc.replace(self, attributes=self.attributes.with_classes(*names))

    def with_id(self, element_id: str) -> Element:
        """Return a copy whose ``id`` attribute is ``element_id``."""
        return dc.replace(self, attributes=self.attributes.with_id(element_id))

    def render(self) -> str:
        """Serialize the element and its descendants into HTML text."""
        attrs = self.attributes.render()
        if self.tag in VOID_ELEMENTS:
            return f"<{self.tag}{attrs}>"
        inner = "".join(child.render() for child in self.children)
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"


Markup = Element | Text | RawMarkup


__all__ = ["CoreAttributes", "Element", "Markup", "RawMarkup", "Text"]
