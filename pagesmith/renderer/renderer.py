"""Filter pages and compose them into their layouts.

The :class:`Renderer` runs a page through the filters named in its metadata,
then walks outward through the layout chain, splicing each result into the
``content`` slot of the next layout. When a template paginates a collection
the whole composition repeats once per window and each window is written to
its own file.

Example
-------
>>> from pathlib import Path
>>> from pagesmith.config import load_site_config
>>> from pagesmith.resources import load_resources
>>> from pagesmith.renderer import Renderer
>>> config = load_site_config(Path("site.yaml"))  # doctest: +SKIP
>>> resources = load_resources(config)  # doctest: +SKIP
>>> page = resources.pages.find(filename="index")  # doctest: +SKIP
>>> Renderer(page, resources, config).write().written  # doctest: +SKIP
[PosixPath('output/index.html')]
"""

from __future__ import annotations

import contextlib
import logging
import typing as typ

from pagesmith import filters
from pagesmith.config import SiteConfig
from pagesmith.errors import InvalidResourceKind
from pagesmith.resources import Page, SiteResources

from .context import RenderingContext
from .partials import PartialResolver
from .report import PageReport, RenderOutcome

if typ.TYPE_CHECKING:
    from pagesmith.resources import Layout, Partial, Resource

logger = logging.getLogger(__name__)


class Renderer:
    """Compose a single page and write every pagination window of it."""

    def __init__(
        self,
        page: Page,
        resources: SiteResources | None = None,
        config: SiteConfig | None = None,
    ) -> None:
        """Create a renderer for ``page``.

        Parameters
        ----------
        page : Page
            Page to render.
        resources : SiteResources, optional
            Layouts and partials the page may reference. Defaults to an empty
            set of resources.
        config : SiteConfig, optional
            Site configuration exposed to templates and filters.

        Raises
        ------
        InvalidResourceKind
            If ``page`` is not a :class:`~pagesmith.resources.Page`.
        """
        if not isinstance(page, Page):
            path = getattr(page, "path", page)
            msg = f"only page resources can be rendered '{path}'"
            raise InvalidResourceKind(msg)
        self.page = page
        self.resources = resources or SiteResources()
        self.config = config or SiteConfig()
        self.partials = PartialResolver(self.resources.partials)
        self.context = RenderingContext(self, page)
        self._composed = ""

    def write(self) -> PageReport:
        """Render the page and write each pagination window to its destination.

        Returns
        -------
        PageReport
            Every path written, in order, plus any composition failures. A
            page that never paginates produces exactly one file.
        """
        report = PageReport(self.page)
        while True:
            outcome = self.layout_page()
            destination = self.page.destination
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(outcome.content, encoding="utf-8")
            logger.debug("wrote %s", destination)
            report.record(destination, outcome)
            if not self._next_page():
                break
        return report

    def layout_page(self) -> RenderOutcome:
        """Filter the page and compose it into its layouts without raising.

        Any failure is logged with the page path and returned on the outcome
        together with the output composed before the failure.
        """
        try:
            return RenderOutcome(self.compose())
        except Exception as err:  # noqa: BLE001 - failures are reported per page
            logger.error("while rendering page '%s': %s", self.page.path, err)
            self.context.stack.clear()
            self.context.content = None
            return RenderOutcome(self._composed, err)

    def compose(self) -> str:
        """Filter the page and walk its layout chain outward.

        Raises
        ------
        RenderingLoopDetected
            If a layout or partial is reached again while still being rendered.
        StackCorrupted
            If the rendering stack is not empty once the walk completes.
        """
        self._composed = ""
        content = self.render_page()
        self._composed = content
        stack = self.context.stack
        with contextlib.ExitStack() as held:
            held.enter_context(stack.track(self.page.path))
            current: Resource = self.page
            while (layout := self._find_layout(current)) is not None:
                held.enter_context(stack.track(layout.path))
                content = self._render_layout(layout, content)
                self._composed = content
                current = layout
        stack.ensure_empty()
        return content

    def render_page(self) -> str:
        """Run the page body through the page's filters."""
        with self.context.stack.track(self.page.path):
            return filters.process(self.context, self.page, self.page.read())

    def render_partial(self, part: str | Partial) -> str:
        """Render a partial found by name, or a partial resource, to a string.

        Names are searched for in the page's directory before the rest of the
        site; see :class:`~pagesmith.renderer.partials.PartialResolver`.
        """
        partial = self.partials.resolve(part, directory=self.page.directory)
        with self.context.stack.track(partial.path):
            return filters.process(self.context, partial, partial.read())

    def paginate(
        self,
        items: typ.Iterable[typ.Any],
        per_page: int,
        body: typ.Callable[[list[typ.Any]], typ.Any] | None = None,
    ) -> typ.Any:
        """Select the current window of ``items``; see :meth:`RenderingContext.paginate`."""
        return self.context.paginate(items, per_page, body)

    def _render_layout(self, layout: Layout, content: str) -> str:
        self.context.content = content
        try:
            return filters.process(self.context, layout, layout.read())
        finally:
            self.context.content = None

    def _find_layout(self, resource: Resource) -> Layout | None:
        name = getattr(resource, "layout", None)
        if not name:
            return None
        layout = self.resources.layouts.find(filename=name)
        if layout is None:
            logger.debug("layout '%s' for %s not found", name, resource.path)
        return layout

    def _next_page(self) -> bool:
        return self.context.advance()


def write_page(
    page: Page,
    resources: SiteResources | None = None,
    config: SiteConfig | None = None,
) -> PageReport:
    """Render ``page`` and write every window of it; see :meth:`Renderer.write`."""
    return Renderer(page, resources, config).write()


__all__ = ["Renderer", "write_page"]
