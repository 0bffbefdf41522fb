"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _build_markdown_config, _merge_meta, _resolve_dir
from .models import SiteConfig, SiteConfigError

KNOWN_KEYS = frozenset(
    {
        "content_dir",
        "layouts_dir",
        "output_dir",
        "page_defaults",
        "layout_defaults",
        "markdown",
        "site",
    }
)


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing where a site lives and how to build it.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``site.yaml``). Relative directories inside it are resolved against
        the file's parent directory.

    Returns
    -------
    SiteConfig
        Parsed site configuration with defaults applied.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section has the wrong shape or an unknown key is present.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from pagesmith.config import load_site_config
    >>> config = load_site_config(Path("site.yaml"))  # doctest: +SKIP
    >>> config.output_dir.name  # doctest: +SKIP
    'output'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    unknown = sorted(set(raw) - KNOWN_KEYS)
    if unknown:
        msg = f"Unknown configuration keys: {', '.join(unknown)}"
        raise SiteConfigError(msg)

    base = path.resolve().parent
    defaults = SiteConfig()
    variables = raw.get("site") or {}
    if not isinstance(variables, dict):
        msg = "'site' must be a mapping."
        raise SiteConfigError(msg)

    return SiteConfig(
        content_dir=_resolve_dir(base, raw.get("content_dir"), "content"),
        layouts_dir=_resolve_dir(base, raw.get("layouts_dir"), "layouts"),
        output_dir=_resolve_dir(base, raw.get("output_dir"), "output"),
        page_defaults=_merge_meta(
            defaults.page_defaults, raw.get("page_defaults"), section="page_defaults"
        ),
        layout_defaults=_merge_meta(
            defaults.layout_defaults,
            raw.get("layout_defaults"),
            section="layout_defaults",
        ),
        markdown=_build_markdown_config(raw.get("markdown")),
        variables=dict(variables),
    )


__all__ = ["load_site_config"]
