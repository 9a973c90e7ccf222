"""Render Markdown item bodies with syntax-highlighted code blocks."""

from __future__ import annotations

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from .markup import RawMarkup

MARKDOWN_EXTENSIONS = ("fenced_code", "codehilite", "tables", "sane_lists")


class MarkdownBodyRenderer:
    """Convert Markdown into pre-rendered markup for accordion bodies."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize the renderer.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for code blocks. Defaults to
            ``"monokai"``.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def render(self, text: str) -> RawMarkup:
        """Convert ``text`` to HTML; blank input yields empty markup."""
        if not text.strip():
            return RawMarkup("")
        md = Markdown(
            extensions=list(MARKDOWN_EXTENSIONS),
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        return RawMarkup(md.convert(text))


__all__ = ["MARKDOWN_EXTENSIONS", "MarkdownBodyRenderer"]
