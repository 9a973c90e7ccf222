"""Unit tests for the generic section container."""

from __future__ import annotations

import pytest

from df12_components.elements import Section
from df12_components.markup import Element, RawMarkup


def test_section_wraps_children_in_order() -> None:
    node = Section(["one", Element("hr"), RawMarkup("<b>two</b>")]).markup()
    assert node.tag == "div"
    assert node.render() == "<div>one<hr><b>two</b></div>"


def test_section_modifiers_apply_attributes() -> None:
    section = Section(lambda: ["x"]).css_class("py-2").inline_style("gap", "1rem")
    assert section.markup().render() == (
        '<div class="py-2" style="gap: 1rem">x</div>'
    )


def test_section_rejects_unrenderable_children() -> None:
    with pytest.raises(TypeError, match="int"):
        Section([1])
