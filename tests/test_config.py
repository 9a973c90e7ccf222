"""Unit tests for accordion configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from df12_components.color import Color
from df12_components.config import (
    AccordionConfigError,
    HeaderColors,
    load_accordion_config,
)
from df12_components.elements import AccordionStyle, OpenMode


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "accordion.yaml"
    path.write_text(body.strip() + "\n", encoding="utf-8")
    return path


def test_full_config_is_parsed(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
page:
  title: FAQ
  output: out/faq.html
  pygments_style: friendly
accordion:
  open_mode: all
  style: plain
  header_background: "#f8f9fa"
  header_foreground:
    closed: "#333333"
    open: "#0d6efd"
  border_color: "#dee2e6"
  classes: "my-4 shadow-sm"
  items:
    - title: Shipping
      body: Orders ship **fast**.
      starts_open: true
    - title: Returns
      classes: [border-0]
        """,
    )
    config = load_accordion_config(path)
    accordion = config.accordion
    assert config.page.title == "FAQ"
    assert config.page.output == Path("out/faq.html")
    assert config.page.pygments_style == "friendly"
    assert accordion.open_mode is OpenMode.ALL
    assert accordion.style is AccordionStyle.PLAIN
    assert accordion.header_background == HeaderColors(
        Color("#f8f9fa"), Color("#f8f9fa")
    )
    assert accordion.header_foreground == HeaderColors(
        Color("#333333"), Color("#0d6efd")
    )
    assert accordion.border_color == Color("#dee2e6")
    assert accordion.classes == ["my-4", "shadow-sm"]
    assert [item.title for item in accordion.items] == ["Shipping", "Returns"]
    assert accordion.items[0].starts_open is True
    assert accordion.items[1].body == ""
    assert accordion.items[1].classes == ["border-0"]


def test_defaults_apply_for_minimal_config(tmp_path: Path) -> None:
    path = _write(tmp_path, "accordion:\n  items: []")
    config = load_accordion_config(path)
    assert config.accordion.items == []
    assert config.accordion.open_mode is OpenMode.INDIVIDUAL
    assert config.accordion.style is None
    assert config.page.output == Path("public/accordion.html")


def test_automatic_style_maps_to_bordered(tmp_path: Path) -> None:
    path = _write(tmp_path, "accordion:\n  style: automatic")
    assert load_accordion_config(path).accordion.style is AccordionStyle.BORDERED


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_accordion_config(tmp_path / "missing.yaml")


def test_non_mapping_top_level_raises(tmp_path: Path) -> None:
    path = _write(tmp_path, "- just\n- a list")
    with pytest.raises(TypeError, match="mapping"):
        load_accordion_config(path)


def test_missing_accordion_block_raises(tmp_path: Path) -> None:
    path = _write(tmp_path, "page:\n  title: Nothing")
    with pytest.raises(AccordionConfigError, match="'accordion'"):
        load_accordion_config(path)


@pytest.mark.parametrize(
    ("body", "fragment"),
    [
        ("accordion:\n  open_mode: sometimes", "open_mode"),
        ("accordion:\n  style: fancy", "style"),
        ("accordion:\n  border_color: '#12'", "border_color"),
        ("accordion:\n  header_background:\n    open: red", "closed"),
        ("accordion:\n  items:\n    - body: no title", "requires a 'title'"),
        ("accordion:\n  items:\n    - plain string", "must be a mapping"),
        ("accordion:\n  items:\n    - title: A\n      starts_open: yes", "true or false"),
        ("accordion:\n  items: nope", "must be a list"),
        ("accordion: [1, 2]", "must be a mapping"),
    ],
)
def test_invalid_fields_raise(tmp_path: Path, body: str, fragment: str) -> None:
    path = _write(tmp_path, body)
    with pytest.raises(AccordionConfigError, match=fragment):
        load_accordion_config(path)


def test_build_produces_configured_accordion(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
accordion:
  open_mode: all
  style: plain
  border_color: red
  classes: [my-4]
  items:
    - title: One
      body: "`code`"
      starts_open: true
    - title: Two
        """,
    )
    accordion = load_accordion_config(path).accordion.build()
    assert accordion.mode is OpenMode.ALL
    assert accordion.attributes.classes == ("accordion-flush", "my-4")
    assert accordion.attributes.style_value("--bs-accordion-border-color") == "red"
    assert len(accordion.items) == 2
    html = accordion.render()
    assert "<code>code</code>" in html
    assert "data-bs-parent" not in html
