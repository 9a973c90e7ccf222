"""Unit tests for group identity generation."""

from __future__ import annotations

import re

import pytest

from df12_components.identity import make_group_id, make_token, truncated_hash


def test_group_id_is_prefixed_and_identifier_safe() -> None:
    group_id = make_group_id()
    assert re.fullmatch(r"accordion[0-9a-f]{16}", group_id), (
        f"unexpected group id format: {group_id!r}"
    )


def test_group_ids_are_unique() -> None:
    ids = {make_group_id() for _ in range(500)}
    assert len(ids) == 500, "group ids must not repeat"


def test_custom_prefix_must_start_with_letter() -> None:
    assert make_group_id("tabs").startswith("tabs")
    with pytest.raises(ValueError, match="start with a letter"):
        make_group_id("1tabs")


def test_truncated_hash_is_stable_and_sized() -> None:
    assert truncated_hash("abc") == truncated_hash("abc")
    assert len(truncated_hash("abc", 8)) == 8
    assert len(make_token(10)) == 10
