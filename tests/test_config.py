"""Unit tests for loading ``site.yaml`` into typed configuration."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from pagesmith.config import SiteConfigError, load_site_config

if typ.TYPE_CHECKING:
    from pathlib import Path


def _write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(dedent(text).strip() + "\n", encoding="utf-8")
    return path


def test_defaults_resolve_relative_to_the_config(tmp_path: Path) -> None:
    config = load_site_config(_write_config(tmp_path, "site:\n  title: Example"))

    base = tmp_path.resolve()
    assert config.content_dir == base / "content"
    assert config.layouts_dir == base / "layouts"
    assert config.output_dir == base / "output"
    assert config.page_defaults == {
        "layout": "default",
        "extension": "html",
        "filter": ["jinja"],
    }
    assert config.layout_defaults == {"filter": ["jinja"]}
    assert config.markdown.pygments_style == "monokai"
    assert config.variables == {"title": "Example"}


def test_overrides_merge_over_defaults(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        """
        content_dir: src
        output_dir: /srv/www
        page_defaults:
          filter: [jinja, markdown]
        markdown:
          pygments_style: friendly
          extensions: tables
        """,
    )
    config = load_site_config(path)

    assert config.content_dir == tmp_path.resolve() / "src"
    assert str(config.output_dir) == "/srv/www"
    assert config.page_defaults["filter"] == ["jinja", "markdown"]
    assert config.page_defaults["layout"] == "default"
    assert config.markdown.pygments_style == "friendly"
    assert config.markdown.extensions == ["tables"]


def test_output_dir_can_be_replaced(tmp_path: Path) -> None:
    config = load_site_config(_write_config(tmp_path, "{}"))
    moved = config.with_output_dir(tmp_path / "dist")
    assert moved.output_dir == tmp_path / "dist"
    assert moved.content_dir == config.content_dir


def test_missing_file_is_reported(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        load_site_config(tmp_path / "absent.yaml")


def test_top_level_must_be_a_mapping(tmp_path: Path) -> None:
    with pytest.raises(TypeError, match="mapping"):
        load_site_config(_write_config(tmp_path, "- one\n- two"))


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("unknown: 1", "Unknown configuration keys: unknown"),
        ("page_defaults: [a]", "'page_defaults' must be a mapping"),
        ("markdown: yes", "'markdown' must be a mapping"),
        ("site: text", "'site' must be a mapping"),
        ("content_dir: 3", "Expected a directory path"),
    ],
)
def test_invalid_sections_raise(tmp_path: Path, text: str, message: str) -> None:
    with pytest.raises(SiteConfigError, match=message):
        load_site_config(_write_config(tmp_path, text))
