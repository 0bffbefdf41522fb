"""Dataclasses describing the resources a site is built from."""

from __future__ import annotations

import dataclasses as dc
import posixpath
import typing as typ
from pathlib import Path

from pagesmith._constants import DEFAULT_EXTENSION

from .files import read_body


@dc.dataclass(slots=True, eq=False)
class Resource:
    """A source file plus the metadata parsed from its front matter.

    Attributes
    ----------
    source : Path
        Location of the file on disk; its POSIX form is the resource identity.
    directory : str
        Directory relative to the owning root (``""`` for the root itself).
    meta : dict[str, Any]
        Front-matter metadata merged over the configured defaults.
    """

    source: Path
    directory: str = ""
    meta: dict[str, typ.Any] = dc.field(default_factory=dict)

    @property
    def path(self) -> str:
        """Return the stable identity used for cycle detection."""
        return self.source.as_posix()

    @property
    def filename(self) -> str:
        """Return the file name without its extension."""
        return self.source.stem

    @property
    def filters(self) -> list[str]:
        """Return the filter names to apply, in declaration order."""
        value = self.meta.get("filter")
        match value:
            case None:
                return []
            case str():
                return [value]
            case _:
                return [str(item) for item in value]

    def read(self) -> str:
        """Return the raw body of the resource without front matter."""
        return read_body(self.source)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"


def _layout_name(meta: typ.Mapping[str, typ.Any]) -> str | None:
    value = meta.get("layout")
    if not value:
        return None
    return str(value)


@dc.dataclass(slots=True, eq=False, repr=False)
class Layout(Resource):
    """A wrapping template that may itself name an outer layout."""

    @property
    def layout(self) -> str | None:
        """Return the name of the enclosing layout, if any."""
        return _layout_name(self.meta)


@dc.dataclass(slots=True, eq=False, repr=False)
class Partial(Resource):
    """A named, directory-scoped template fragment."""


@dc.dataclass(slots=True, eq=False, repr=False)
class Page(Resource):
    """A content resource rendered to an output file.

    Attributes
    ----------
    output_dir : Path
        Root directory that destinations are resolved against.
    number : int or None
        Pagination cursor; ``None`` when the page is not being paginated.
    """

    output_dir: Path = Path("output")
    number: int | None = None

    @property
    def layout(self) -> str | None:
        """Return the name of the layout this page is composed into."""
        return _layout_name(self.meta)

    @property
    def extension(self) -> str:
        """Return the output file extension without the leading dot."""
        return str(self.meta.get("extension") or DEFAULT_EXTENSION).lstrip(".")

    @property
    def relative_destination(self) -> str:
        """Return the output path relative to ``output_dir`` in POSIX form.

        Windows after the first land in a numbered subdirectory so that
        ``blog/index.html`` is followed by ``blog/2/index.html``.
        """
        override = self.meta.get("destination")
        if override:
            base = str(override).lstrip("/")
        else:
            name = f"{self.filename}.{self.extension}"
            base = posixpath.join(self.directory, name) if self.directory else name
        if self.number is not None and self.number > 1:
            head, tail = posixpath.split(base)
            return posixpath.join(head, str(self.number), tail)
        return base

    @property
    def destination(self) -> Path:
        """Return the file the current pagination window is written to."""
        return self.output_dir / self.relative_destination

    @property
    def url(self) -> str:
        """Return the site-absolute URL of the current pagination window."""
        return "/" + self.relative_destination


@dc.dataclass(slots=True, eq=False)
class StaticFile:
    """A content file without front matter that is copied verbatim."""

    source: Path
    relative_path: str


__all__ = ["Layout", "Page", "Partial", "Resource", "StaticFile"]
