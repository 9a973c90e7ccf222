"""Accordion preview page rendering pipeline.

This module turns an :class:`~df12_components.config.AccordionPageConfig`
into a standalone HTML page that loads Bootstrap and shows the configured
accordion, which is the quickest way to eyeball colors and open modes. The
main entry point is :class:`PreviewPageBuilder`.

>>> from pathlib import Path
>>> from df12_components.config import load_accordion_config
>>> config = load_accordion_config(Path("config/faq.yaml"))  # doctest: +SKIP
>>> PreviewPageBuilder(config).run()  # doctest: +SKIP
PosixPath('public/faq.html')
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from .rendering import MarkdownBodyRenderer

if typ.TYPE_CHECKING:
    from .config import AccordionPageConfig


class PreviewPageBuilder:
    """Render an accordion preview page from structured config data."""

    def __init__(
        self, config: AccordionPageConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        config : AccordionPageConfig
            Parsed accordion declaration and page settings.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``df12_components/templates``.
        """
        self.config = config
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.renderer = MarkdownBodyRenderer(config.page.pygments_style)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("preview_page.jinja")

    def render_fragment(self) -> str:
        """Return the accordion HTML without the surrounding page."""
        return self.config.accordion.build(self.renderer).render()

    def render_page(self) -> str:
        """Return the full preview page HTML, ending with a newline."""
        context = {
            "page": self.config.page,
            "accordion_html": Markup(self.render_fragment()),
            "pygments_css": Markup(self.renderer.stylesheet),
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self, output: Path | None = None) -> Path:
        """Render and write the preview page, returning the output path.

        Parent directories are created as needed; filesystem errors propagate.
        """
        output_path = output or self.config.page.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_page(), encoding="utf-8")
        return output_path


__all__ = ["PreviewPageBuilder"]
