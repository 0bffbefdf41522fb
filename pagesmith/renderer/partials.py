"""Resolve partial names to partial resources."""

from __future__ import annotations

import posixpath
import typing as typ

from pagesmith._constants import PARTIAL_PREFIX
from pagesmith.errors import PartialNotFound, RenderError
from pagesmith.resources import Partial

if typ.TYPE_CHECKING:
    from pagesmith.resources import ResourceDB


class PartialResolver:
    """Find partials near the page first, then anywhere in the site."""

    def __init__(self, partials: ResourceDB[Partial]) -> None:
        self.partials = partials

    def resolve(self, part: str | Partial, *, directory: str) -> Partial:
        """Return the partial identified by ``part``.

        Parameters
        ----------
        part : str or Partial
            Partial name without the leading underscore, or a partial that has
            already been looked up.
        directory : str
            Directory of the page being rendered; searched before the rest of
            the site.

        Raises
        ------
        PartialNotFound
            If no partial with the given name exists.
        RenderError
            If ``part`` is neither a name nor a partial.
        """
        match part:
            case Partial():
                return part
            case str():
                head, tail = posixpath.split(part)
                filename = posixpath.join(head, PARTIAL_PREFIX + tail)
                found = None
                if not head:
                    found = self.partials.find(
                        filename=filename, in_directory=directory
                    )
                if found is None:
                    found = self.partials.find(filename=filename)
                if found is None:
                    raise PartialNotFound(part)
                return found
            case _:
                msg = f"expecting a partial or a partial name, got {part!r}"
                raise RenderError(msg)


__all__ = ["PartialResolver"]
