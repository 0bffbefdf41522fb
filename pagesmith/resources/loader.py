"""Walk a site's directories and sort files into pages, layouts, and partials."""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from pagesmith._constants import PARTIAL_PREFIX

from .db import ResourceDB
from .files import split_front_matter
from .models import Layout, Page, Partial, StaticFile

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from pagesmith.config import SiteConfig

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class SiteResources:
    """Every resource discovered for a site, grouped by kind."""

    pages: ResourceDB[Page] = dc.field(default_factory=ResourceDB)
    layouts: ResourceDB[Layout] = dc.field(default_factory=ResourceDB)
    partials: ResourceDB[Partial] = dc.field(default_factory=ResourceDB)
    static: list[StaticFile] = dc.field(default_factory=list)


def _walk(root: Path) -> cabc.Iterator[tuple[Path, str]]:
    """Yield ``(file, relative_directory)`` pairs below ``root`` in sorted order."""
    if not root.is_dir():
        return
    for path in sorted(root.rglob("*")):
        if not path.is_file() or path.name.startswith("."):
            continue
        relative = path.parent.relative_to(root).as_posix()
        yield path, "" if relative == "." else relative


def load_resources(config: SiteConfig) -> SiteResources:
    """Discover the layouts, pages, partials, and static files for ``config``.

    Parameters
    ----------
    config : SiteConfig
        Resolved site configuration providing the content and layout roots
        plus the metadata defaults merged beneath each front-matter block.

    Returns
    -------
    SiteResources
        Resource stores ready to hand to :class:`~pagesmith.renderer.Renderer`.

    Notes
    -----
    Files whose name starts with ``_`` are partials; files opening with a
    ``---`` front-matter block are pages; every other content file is copied
    verbatim. Every file under the layouts directory is a layout.
    """
    resources = SiteResources()

    for path, directory in _walk(config.layouts_dir):
        meta, _body = split_front_matter(path.read_text(encoding="utf-8"))
        merged = {**config.layout_defaults, **(meta or {})}
        resources.layouts.add(Layout(path, directory, merged))

    for path, directory in _walk(config.content_dir):
        if path.name.startswith(PARTIAL_PREFIX):
            meta, _body = split_front_matter(path.read_text(encoding="utf-8"))
            merged = {**config.layout_defaults, **(meta or {})}
            merged.pop("layout", None)
            resources.partials.add(Partial(path, directory, merged))
            continue
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            text = ""
        meta, _body = split_front_matter(text)
        if meta is None:
            relative = path.relative_to(config.content_dir).as_posix()
            resources.static.append(StaticFile(path, relative))
            continue
        merged = {**config.page_defaults, **meta}
        resources.pages.add(Page(path, directory, merged, config.output_dir))

    logger.debug(
        "loaded %d pages, %d layouts, %d partials, %d static files",
        len(resources.pages),
        len(resources.layouts),
        len(resources.partials),
        len(resources.static),
    )
    return resources


__all__ = ["SiteResources", "load_resources"]
