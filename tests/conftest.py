"""Shared fixtures for building small on-disk sites in a temporary directory."""

from __future__ import annotations

import typing as typ

import pytest

from pagesmith.config import SiteConfig
from pagesmith.resources import SiteResources, load_resources

if typ.TYPE_CHECKING:
    from pathlib import Path


class SiteFactory:
    """Write content and layout files, then load them as site resources."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.config = SiteConfig(
            content_dir=root / "content",
            layouts_dir=root / "layouts",
            output_dir=root / "output",
            page_defaults={"extension": "html", "filter": ["jinja"]},
            layout_defaults={"filter": ["jinja"]},
        )

    def content(self, relative: str, text: str) -> Path:
        """Write ``text`` below the content directory and return the path."""
        return self._write(self.config.content_dir / relative, text)

    def layout(self, relative: str, text: str) -> Path:
        """Write ``text`` below the layouts directory and return the path."""
        return self._write(self.config.layouts_dir / relative, text)

    def load(self) -> SiteResources:
        return load_resources(self.config)

    @staticmethod
    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path


@pytest.fixture
def site(tmp_path: Path) -> SiteFactory:
    """Return a factory rooted in a fresh temporary directory."""
    return SiteFactory(tmp_path)
