"""Per-page traversal state and the helpers templates call while rendering."""

from __future__ import annotations

import typing as typ
from html import escape
from urllib.parse import quote

from pagesmith.filters import build_environment
from pagesmith.filters.markdown import content_renderer

from .paginator import Pager, Paginator
from .stack import RenderStack

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from jinja2 import Environment

    from pagesmith.config import SiteConfig
    from pagesmith.resources import Page, Partial, Resource

    from .renderer import Renderer


class RenderingContext:
    """Environment a resource body is evaluated in.

    A context is created for each page and lives for every pagination window
    of that page. It owns the page's :class:`RenderStack`, the ``content``
    slot an outer layout reads its inner result from, and the pagination
    cursor.

    Attributes
    ----------
    page : Page
        Page being rendered.
    stack : RenderStack
        In-flight resource paths for cycle detection.
    content : str or None
        Output of the step an outer layout wraps; ``None`` outside layouts.
    pager : Pager or None
        Current pagination window once :meth:`paginate` has been called.
    """

    def __init__(
        self,
        renderer: Renderer,
        page: Page,
        *,
        environment: Environment | None = None,
    ) -> None:
        self.renderer = renderer
        self.page = page
        self.stack = RenderStack()
        self.content: str | None = None
        self.pager: Pager | None = None
        self.environment = environment or build_environment()

    @property
    def config(self) -> SiteConfig:
        return self.renderer.config

    def render_partial(self, part: str | Partial) -> str:
        """Render the named partial (or a partial resource) into a string."""
        return self.renderer.render_partial(part)

    def paginate(
        self,
        items: cabc.Iterable[typ.Any],
        per_page: int,
        body: typ.Callable[[list[typ.Any]], typ.Any] | None = None,
    ) -> typ.Any:
        """Select the current window of ``items`` for this page.

        The first call creates the paginator and sets ``page.number`` to 1;
        later calls, in this window or the following ones, reuse it. Returns
        the current :class:`Pager`, or ``body(pager.items)`` when ``body`` is
        given.
        """
        if self.pager is None:
            collection = list(items)
            paginator = Paginator(
                len(collection),
                per_page,
                self.page,
                select=lambda offset, size: collection[offset : offset + size],
            )
            self.pager = paginator.first()
            self.page.number = self.pager.number
        if body is None:
            return self.pager
        return body(self.pager.items)

    def advance(self) -> bool:
        """Move to the next pagination window.

        Returns
        -------
        bool
            ``True`` when another window must be rendered. ``False`` when the
            page was never paginated or the last window has been rendered, in
            which case the cursor is cleared.
        """
        if self.pager is None:
            return False
        following = self.pager.next
        if following is None:
            self.pager = None
            self.page.number = None
            return False
        self.pager = following
        self.page.number = following.number
        return True

    def template_variables(self, resource: Resource) -> dict[str, typ.Any]:
        """Return the variables available to a template evaluating ``resource``."""
        resources = self.renderer.resources
        return {
            "content": "" if self.content is None else self.content,
            "page": self.page,
            "resource": resource,
            "pager": self.pager,
            "site": self.config.variables,
            "pages": resources.pages,
            "partials": resources.partials,
            "render_partial": self.render_partial,
            "paginate": self.paginate,
            "pygments_css": content_renderer(self).stylesheet,
            "h": escape,
            "escape": escape,
            "urlencode": quote,
        }


__all__ = ["RenderingContext"]
