"""Cyclopts CLI entrypoint for previewing df12 components.

The ``components`` console script renders an accordion declared in YAML,
either as a standalone Bootstrap page (``components preview``) or as the bare
HTML fragment printed to stdout (``components fragment``) for pasting into
another template.

Examples
--------
>>> from df12_components.cli import app
>>> app(["preview", "--config", "config/faq.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_accordion_config
from .preview import PreviewPageBuilder

DEFAULT_CONFIG = Path("config/accordion.yaml")

app = App(name="components", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Write a standalone preview page for an accordion config.")
def preview(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to accordion config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the output file", env_var="INPUT_OUTPUT"),
    ] = None,
) -> None:
    """Render the configured accordion into a Bootstrap preview page.

    Parameters
    ----------
    config : Path, optional
        Path to the accordion YAML file (overridable via ``INPUT_CONFIG``).
    output : Path or None, optional
        Destination HTML file; defaults to ``page.output`` from the config.
    """
    page_config = load_accordion_config(config)
    written = PreviewPageBuilder(page_config).run(output)
    print(f"wrote {_format_path(written)}")


@app.command(help="Print the accordion HTML fragment for an accordion config.")
def fragment(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to accordion config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print the rendered accordion markup without the page chrome."""
    page_config = load_accordion_config(config)
    print(PreviewPageBuilder(page_config).render_fragment())


def main() -> None:
    """Invoke the Cyclopts application that powers the `components` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
