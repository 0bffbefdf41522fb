"""Load and validate site configuration YAML for pagesmith builds.

This subpackage parses a project's ``site.yaml`` file, applies defaults for
the content, layout, and output directories, and produces strongly typed
dataclasses that the loader, renderer, and builder consume. The primary entry
point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from pagesmith.config import load_site_config
>>> site = load_site_config(Path("site.yaml"))  # doctest: +SKIP
>>> site.page_defaults["layout"]  # doctest: +SKIP
'default'
"""

from .loader import load_site_config
from .models import MarkdownConfig, SiteConfig, SiteConfigError

__all__ = [
    "MarkdownConfig",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
