"""Turn declarative child lists into flat, validated tuples.

Components accept their children either as an iterable or as a
zero-argument callable producing one, so call sites can write::

    Accordion(lambda: [
        Item("First", "Body"),
        [Item(title, body) for title, body in extra],
        Item("Last", "Body") if show_last else None,
    ])

Nested iterables are flattened and ``None`` entries dropped, in order.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

T = typ.TypeVar("T")

ChildSource = cabc.Callable[[], typ.Any] | cabc.Iterable[typ.Any] | None


def build_elements(
    parts: typ.Any,
    *,
    kind: type[T],
    coerce: cabc.Callable[[typ.Any], T | None] | None = None,
) -> tuple[T, ...]:
    """Flatten ``parts`` into a tuple of ``kind`` instances.

    Parameters
    ----------
    parts : Any
        A single child, ``None``, or an arbitrarily nested iterable of them.
    kind : type
        Class or runtime-checkable protocol every child must satisfy.
    coerce : callable, optional
        Hook used for values that are not ``kind`` instances (for example to
        wrap plain strings); returning ``None`` rejects the value.

    Raises
    ------
    TypeError
        If a child is neither a ``kind`` instance nor accepted by ``coerce``.
    """
    collected: list[T] = []
    _collect(parts, kind, coerce, collected)
    return tuple(collected)


def _collect(
    part: typ.Any,
    kind: type[T],
    coerce: cabc.Callable[[typ.Any], T | None] | None,
    collected: list[T],
) -> None:
    if part is None:
        return
    if isinstance(part, kind):
        collected.append(part)
        return
    if coerce is not None:
        converted = coerce(part)
        if converted is not None:
            collected.append(converted)
            return
    if isinstance(part, cabc.Iterable) and not isinstance(part, str | bytes):
        for child in part:
            _collect(child, kind, coerce, collected)
        return
    msg = f"Expected {kind.__name__}, got {type(part).__name__}."
    raise TypeError(msg)


def collect_children(
    source: ChildSource,
    *,
    kind: type[T],
    coerce: cabc.Callable[[typ.Any], T | None] | None = None,
) -> tuple[T, ...]:
    """Evaluate a builder callable (once) or iterable into a child tuple."""
    parts = source() if callable(source) else source
    return build_elements(parts, kind=kind, coerce=coerce)


__all__ = ["ChildSource", "build_elements", "collect_children"]
