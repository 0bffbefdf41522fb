"""Utility helpers shared by the pagesmith configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import DEFAULT_MARKDOWN_EXTENSIONS, MarkdownConfig, SiteConfigError


def _resolve_dir(base: Path, value: object, default: str) -> Path:
    """Resolve a configured directory relative to the config file location."""
    if value is None:
        value = default
    if not isinstance(value, str | Path):
        msg = f"Expected a directory path, got {value!r}."
        raise SiteConfigError(msg)
    path = Path(value)
    if path.is_absolute():
        return path
    return base / path


def _merge_meta(
    base: typ.Mapping[str, typ.Any], override: object, *, section: str
) -> dict[str, typ.Any]:
    """Merge an override mapping into a copy of ``base``."""
    merged = dict(base)
    match override:
        case None:
            pass
        case dict():
            merged.update(override)
        case _:
            msg = f"'{section}' must be a mapping."
            raise SiteConfigError(msg)
    return merged


def _build_markdown_config(payload: object) -> MarkdownConfig:
    """Build a MarkdownConfig instance from the provided mapping payload."""
    if payload is None:
        return MarkdownConfig()
    if not isinstance(payload, dict):
        msg = "'markdown' must be a mapping."
        raise SiteConfigError(msg)
    base = MarkdownConfig()
    extensions = payload.get("extensions")
    if extensions is None:
        extensions = list(DEFAULT_MARKDOWN_EXTENSIONS)
    elif isinstance(extensions, str):
        extensions = [extensions]
    return MarkdownConfig(
        pygments_style=str(payload.get("pygments_style", base.pygments_style)),
        extensions=[str(ext) for ext in extensions],
    )


__all__ = ["_build_markdown_config", "_merge_meta", "_resolve_dir"]
