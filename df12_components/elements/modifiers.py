"""Attribute modifiers shared by every df12 element."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from df12_components.markup import CoreAttributes


class ElementModifiers:
    """Mixin for frozen dataclasses that carry an ``attributes`` field.

    Each modifier returns a copy built with :func:`dataclasses.replace`; the
    receiver is never changed.
    """

    __slots__ = ()

    attributes: CoreAttributes

    def css_class(self, *names: str) -> typ.Self:
        """Append one or more CSS classes."""
        return dc.replace(self, attributes=self.attributes.with_classes(*names))

    def inline_style(self, name: str, value: object) -> typ.Self:
        """Set one inline style property, replacing any earlier value."""
        return dc.replace(self, attributes=self.attributes.with_style(name, value))

    def custom_attribute(self, name: str, value: object) -> typ.Self:
        """Set an arbitrary HTML attribute such as ``data-track``."""
        return dc.replace(self, attributes=self.attributes.with_custom(name, value))

    def element_id(self, value: str) -> typ.Self:
        """Set the ``id`` attribute."""
        return dc.replace(self, attributes=self.attributes.with_id(value))

    def reset_attributes(self) -> typ.Self:
        """Drop every accumulated attribute."""
        return dc.replace(self, attributes=CoreAttributes())


__all__ = ["ElementModifiers"]
