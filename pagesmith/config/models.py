"""Typed dataclasses describing pagesmith site configuration structures."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

DEFAULT_MARKDOWN_EXTENSIONS: tuple[str, ...] = (
    "fenced_code",
    "codehilite",
    "tables",
    "sane_lists",
)


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


def _default_page_meta() -> dict[str, typ.Any]:
    return {"layout": "default", "extension": "html", "filter": ["jinja"]}


def _default_layout_meta() -> dict[str, typ.Any]:
    return {"filter": ["jinja"]}


@dc.dataclass(slots=True)
class MarkdownConfig:
    """Options forwarded to the ``markdown`` and ``code`` filters."""

    pygments_style: str = "monokai"
    extensions: list[str] = dc.field(
        default_factory=lambda: list(DEFAULT_MARKDOWN_EXTENSIONS)
    )


@dc.dataclass(slots=True)
class SiteConfig:
    """A fully resolved site definition sourced from YAML config.

    Attributes
    ----------
    content_dir : Path
        Directory holding pages, partials, and static files.
    layouts_dir : Path
        Directory holding layout templates.
    output_dir : Path
        Directory that rendered pages and copied files are written to.
    page_defaults : dict[str, Any]
        Metadata applied beneath each page's front matter.
    layout_defaults : dict[str, Any]
        Metadata applied beneath each layout's front matter.
    markdown : MarkdownConfig
        Markdown and syntax highlighting options.
    variables : dict[str, Any]
        Free-form values exposed to templates as ``site``.
    """

    content_dir: Path = Path("content")
    layouts_dir: Path = Path("layouts")
    output_dir: Path = Path("output")
    page_defaults: dict[str, typ.Any] = dc.field(default_factory=_default_page_meta)
    layout_defaults: dict[str, typ.Any] = dc.field(
        default_factory=_default_layout_meta
    )
    markdown: MarkdownConfig = dc.field(default_factory=MarkdownConfig)
    variables: dict[str, typ.Any] = dc.field(default_factory=dict)

    def with_output_dir(self, output_dir: Path) -> SiteConfig:
        """Return a copy of the config writing into ``output_dir``."""
        return dc.replace(self, output_dir=output_dir)


__all__ = [
    "DEFAULT_MARKDOWN_EXTENSIONS",
    "MarkdownConfig",
    "SiteConfig",
    "SiteConfigError",
]
