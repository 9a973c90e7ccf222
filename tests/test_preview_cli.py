"""Tests for the preview page builder and the ``components`` CLI commands."""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from df12_components import cli
from df12_components.config import load_accordion_config
from df12_components.preview import PreviewPageBuilder

CONFIG_BODY = """
page:
  title: Frequently asked
  output: {output}
accordion:
  items:
    - title: Shipping
      body: |
        Orders ship in *two* days.

        ```python
        print("hi")
        ```
    - title: Returns <fast>
      body: Free for 30 days.
"""


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "accordion.yaml"
    output = tmp_path / "public" / "faq.html"
    path.write_text(CONFIG_BODY.format(output=output).strip() + "\n", encoding="utf-8")
    return path


def test_run_writes_page_with_accordion(config_path: Path) -> None:
    config = load_accordion_config(config_path)
    written = PreviewPageBuilder(config).run()
    assert written == config.page.output
    html = written.read_text(encoding="utf-8")
    assert html.endswith("\n")
    soup = BeautifulSoup(html, "html.parser")
    assert soup.title is not None
    assert soup.title.get_text() == "Frequently asked"
    accordion = soup.select_one("main div.accordion")
    assert accordion is not None, "accordion markup must not be escaped"
    assert len(accordion.select(":scope > .accordion-item")) == 2
    headers = [tag.get_text() for tag in soup.select("button.accordion-button")]
    assert headers == ["Shipping", "Returns <fast>"]
    assert soup.select_one(".codehilite") is not None
    assert ".codehilite" in soup.style.get_text()


def test_run_honours_output_override(config_path: Path, tmp_path: Path) -> None:
    config = load_accordion_config(config_path)
    target = tmp_path / "nested" / "dir" / "preview.html"
    assert PreviewPageBuilder(config).run(target) == target
    assert target.exists()


def test_fragment_has_no_page_chrome(config_path: Path) -> None:
    fragment = PreviewPageBuilder(load_accordion_config(config_path)).render_fragment()
    assert fragment.startswith('<div id="accordion')
    assert "<html" not in fragment


def test_cli_preview_reports_written_path(
    config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.preview(config=config_path)
    out = capsys.readouterr().out
    assert out.startswith("wrote ")
    assert out.strip().endswith("faq.html")


def test_cli_fragment_prints_html(
    config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.fragment(config=config_path)
    out = capsys.readouterr().out
    soup = BeautifulSoup(out, "html.parser")
    assert soup.select_one("div.accordion") is not None


def test_cli_preview_missing_config(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        cli.preview(config=tmp_path / "missing.yaml")
