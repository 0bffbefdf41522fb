"""Markdown and syntax-highlighting filters."""

from __future__ import annotations

import functools
import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from .registry import register

if typ.TYPE_CHECKING:
    from pagesmith.renderer.context import RenderingContext
    from pagesmith.resources import Resource

CODE_BLOCK_PATTERN = re.compile(r"```([A-Za-z0-9_+#.-]+)?[^\n]*\n(.*?)```", re.DOTALL)
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')


class HtmlContentRenderer:
    """Render markdown and code snippets with consistent styling."""

    def __init__(
        self,
        pygments_style: str = "monokai",
        extensions: typ.Sequence[str] = ("fenced_code", "codehilite"),
    ) -> None:
        """Initialize a renderer with a pygments style and markdown extensions.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        extensions : Sequence[str], optional
            Python-Markdown extension names enabled for every conversion.
        """
        self.pygments_style = pygments_style
        self.extensions = list(extensions)
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        normalized = FENCED_INDENT_PATTERN.sub(r"\1", text)
        if not normalized.strip():
            return ""
        md = Markdown(
            extensions=self.extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        html = md.convert(normalized)
        return self._annotate_codehilite(html, normalized)

    def code_block(self, code: str, language: str | None = None) -> str:
        """Render ``code`` into highlighted HTML tagged with its language.

        Unknown or missing languages fall back to the plain ``text`` lexer.
        """
        lang = language or "text"
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            lexer = get_lexer_by_name("text")
        html = highlight(code, lexer, self._formatter)
        safe_lang = escape(lang, quote=True)
        return CODEHILITE_OPEN_TAG.sub(
            f'<div class="codehilite" data-language="{safe_lang}">', html, 1
        )

    def _annotate_codehilite(self, html: str, source_markdown: str) -> str:
        """Attach language metadata to each highlighted block in converted markdown."""
        languages = [
            match.group(1) or "text"
            for match in CODE_BLOCK_PATTERN.finditer(source_markdown)
        ]
        if not languages:
            return html
        lang_iter = iter(languages)

        def _repl(match: re.Match[str]) -> str:
            lang = next(lang_iter, "text")
            return (
                f'<div class="codehilite" data-language="{escape(lang, quote=True)}">'
            )

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))


@functools.lru_cache(maxsize=8)
def _renderer_for(style: str, extensions: tuple[str, ...]) -> HtmlContentRenderer:
    return HtmlContentRenderer(style, extensions)


def content_renderer(context: RenderingContext) -> HtmlContentRenderer:
    """Return a renderer configured from the site's markdown options."""
    options = context.config.markdown
    return _renderer_for(options.pygments_style, tuple(options.extensions))


@register("markdown")
def markdown_filter(text: str, context: RenderingContext, resource: Resource) -> str:
    """Convert markdown ``text`` into HTML."""
    return content_renderer(context).markdown(text)


@register("code")
def code_filter(text: str, context: RenderingContext, resource: Resource) -> str:
    """Highlight ``text`` as a single block in ``meta["language"]``."""
    language = resource.meta.get("language")
    return content_renderer(context).code_block(text, language)


__all__ = [
    "CODE_BLOCK_PATTERN",
    "HtmlContentRenderer",
    "code_filter",
    "content_renderer",
    "markdown_filter",
]
