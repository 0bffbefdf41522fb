"""Build a whole site: render every page and copy static files.

``SiteBuilder`` ties the configuration, the resource loader, and the
:class:`~pagesmith.renderer.Renderer` together. Each page gets its own
renderer so a failure in one page is recorded and the build moves on.

>>> from pathlib import Path
>>> from pagesmith.config import load_site_config
>>> from pagesmith.builder import SiteBuilder
>>> report = SiteBuilder(load_site_config(Path("site.yaml"))).run()  # doctest: +SKIP
>>> report.ok  # doctest: +SKIP
True
"""

from __future__ import annotations

import dataclasses as dc
import logging
import shutil
import typing as typ

from .renderer import PageReport, Renderer
from .resources import SiteResources, load_resources

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SiteConfig

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class BuildReport:
    """Outcome of a site build."""

    pages: list[PageReport] = dc.field(default_factory=list)
    copied: list[Path] = dc.field(default_factory=list)

    @property
    def written(self) -> list[Path]:
        """Return every rendered and copied file, in build order."""
        paths = [path for report in self.pages for path in report.written]
        return paths + self.copied

    @property
    def failures(self) -> list[PageReport]:
        return [report for report in self.pages if not report.ok]

    @property
    def ok(self) -> bool:
        return not self.failures


class SiteBuilder:
    """Render the pages of a site and copy its static files."""

    def __init__(
        self, config: SiteConfig, *, resources: SiteResources | None = None
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        config : SiteConfig
            Resolved site configuration.
        resources : SiteResources, optional
            Pre-loaded resources; discovered from ``config`` when omitted.
        """
        self.config = config
        self.resources = resources or load_resources(config)

    def run(self) -> BuildReport:
        """Render every page, copy every static file, and report the results.

        Notes
        -----
        Side effects include creating ``config.output_dir`` and writing one
        file per page window plus one per static file.
        """
        self.config.output_dir.mkdir(parents=True, exist_ok=True)
        report = BuildReport()
        for page in self.resources.pages:
            logger.info("rendering %s", page.path)
            page_report = Renderer(page, self.resources, self.config).write()
            report.pages.append(page_report)
        for static in self.resources.static:
            target = self.config.output_dir / static.relative_path
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(static.source, target)
            report.copied.append(target)
        logger.info(
            "built %d pages (%d failed), copied %d files",
            len(report.pages),
            len(report.failures),
            len(report.copied),
        )
        return report


__all__ = ["BuildReport", "SiteBuilder"]
