"""In-memory store used to look resources up by name and directory."""

from __future__ import annotations

import posixpath
import typing as typ

from .models import Resource

if typ.TYPE_CHECKING:
    import collections.abc as cabc

ResourceT = typ.TypeVar("ResourceT", bound=Resource)


class ResourceDB(typ.Generic[ResourceT]):
    """Ordered collection of resources of a single kind.

    Lookups return the first resource in insertion order that satisfies every
    supplied criterion, mirroring how a site is walked on disk.
    """

    def __init__(self, resources: cabc.Iterable[ResourceT] = ()) -> None:
        self._items: list[ResourceT] = list(resources)

    def add(self, resource: ResourceT) -> ResourceT:
        """Append ``resource`` to the store and return it."""
        self._items.append(resource)
        return resource

    def find(
        self,
        *,
        filename: str | None = None,
        in_directory: str | None = None,
    ) -> ResourceT | None:
        """Return the first resource matching ``filename`` and ``in_directory``.

        Parameters
        ----------
        filename : str, optional
            File name without extension. A name containing ``/`` (for example
            ``"blog/post"``) also constrains the directory.
        in_directory : str, optional
            Directory relative to the resource root; ``""`` selects the root.

        Returns
        -------
        Resource or None
            The first match, or ``None`` when nothing matches.
        """
        if filename and "/" in filename:
            head, filename = posixpath.split(filename.strip("/"))
            if in_directory is None:
                in_directory = head
        for resource in self._items:
            if filename is not None and resource.filename != filename:
                continue
            if in_directory is not None and resource.directory != in_directory:
                continue
            return resource
        return None

    def __iter__(self) -> cabc.Iterator[ResourceT]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["ResourceDB"]
