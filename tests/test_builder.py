"""Unit tests for declarative child list flattening."""

from __future__ import annotations

import pytest

from df12_components.builder import build_elements, collect_children
from df12_components.elements import AccordionItem, Item, Section


def test_flattens_nested_iterables_and_drops_none() -> None:
    first, second, third = Item("1"), Item("2"), Item("3")
    result = build_elements([first, None, [second, (third,)]], kind=AccordionItem)
    assert result == (first, second, third), "order must follow declaration order"


def test_collect_children_evaluates_builder_once() -> None:
    calls: list[int] = []

    def _builder() -> list[Item]:
        calls.append(1)
        return [Item("only")]

    result = collect_children(_builder, kind=AccordionItem)
    assert len(result) == 1
    assert calls == [1], "builder callables must run exactly once"


def test_collect_children_accepts_generators() -> None:
    result = collect_children((Item(str(n)) for n in range(3)), kind=AccordionItem)
    assert len(result) == 3


def test_rejects_wrong_element_kind() -> None:
    with pytest.raises(TypeError, match="AccordionItem"):
        build_elements([Section()], kind=AccordionItem)


def test_rejects_strings_without_coercion() -> None:
    with pytest.raises(TypeError, match="str"):
        build_elements(["loose text"], kind=AccordionItem)


def test_empty_sources_produce_empty_tuples() -> None:
    assert collect_children(None, kind=AccordionItem) == ()
    assert collect_children(lambda: [], kind=AccordionItem) == ()
