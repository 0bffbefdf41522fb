r"""Read resource files and split their YAML front matter from the body.

A resource file may open with a metadata block delimited by ``---`` lines::

    ---
    title: Hello
    layout: default
    ---
    Body text

Example
-------
>>> meta, body = split_front_matter("---\ntitle: Hi\n---\nBody\n")
>>> meta["title"], body
('Hi', 'Body\n')
"""

from __future__ import annotations

import re
import typing as typ

from ruamel.yaml import YAML

from pagesmith._constants import FRONT_MATTER_DELIMITER

if typ.TYPE_CHECKING:
    from pathlib import Path

_DELIMITER = re.escape(FRONT_MATTER_DELIMITER)
FRONT_MATTER_PATTERN = re.compile(
    rf"\A{_DELIMITER}[ \t]*\r?\n(.*?)^{_DELIMITER}[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


class FrontMatterError(ValueError):
    """Raised when a front-matter block is not a YAML mapping."""


def split_front_matter(text: str) -> tuple[dict[str, typ.Any] | None, str]:
    """Return ``(meta, body)`` for ``text``; ``meta`` is ``None`` without a header."""
    match = FRONT_MATTER_PATTERN.match(text)
    if match is None:
        return None, text
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    loaded = loader.load(match.group(1)) or {}
    if not isinstance(loaded, dict):
        msg = "Front matter must be a YAML mapping."
        raise FrontMatterError(msg)
    return dict(loaded), text[match.end() :]


def read_text(path: Path) -> str:
    """Return the UTF-8 contents of ``path``."""
    return path.read_text(encoding="utf-8")


def read_body(path: Path) -> str:
    """Return the contents of ``path`` with any front matter removed."""
    _meta, body = split_front_matter(read_text(path))
    return body


__all__ = [
    "FRONT_MATTER_PATTERN",
    "FrontMatterError",
    "read_body",
    "read_text",
    "split_front_matter",
]
