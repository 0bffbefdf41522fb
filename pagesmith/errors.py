"""Exception hierarchy raised while composing pages."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class RenderError(RuntimeError):
    """Base class for failures raised by the rendering pipeline."""


class InvalidResourceKind(RenderError, TypeError):  # noqa: N818
    """Raised when something other than a page is handed to the renderer."""


class RenderingLoopDetected(RenderError):  # noqa: N818
    """Raised when a resource path recurs in the active rendering stack.

    Attributes
    ----------
    path : str
        Path of the resource whose render closed the loop.
    stack : tuple[str, ...]
        Snapshot of the rendering stack, innermost entry last.
    """

    def __init__(self, path: str, stack: cabc.Sequence[str]) -> None:
        self.path = path
        self.stack = tuple(stack)
        trail = "\n\t".join(self.stack)
        msg = (
            f"rendering loop detected for '{path}'\n"
            f"    current rendering stack\n\t{trail}"
        )
        super().__init__(msg)


class PartialNotFound(RenderError):  # noqa: N818
    """Raised when a named partial cannot be found in any search phase."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"could not find partial '{name}'")


class StackCorrupted(RenderError):  # noqa: N818
    """Raised when push/pop bookkeeping on the rendering stack is unbalanced."""


class UnknownFilterError(RenderError, KeyError):
    """Raised when a resource names a filter that has not been registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown filter '{name}'")

    def __str__(self) -> str:
        return str(self.args[0])


__all__ = [
    "InvalidResourceKind",
    "PartialNotFound",
    "RenderError",
    "RenderingLoopDetected",
    "StackCorrupted",
    "UnknownFilterError",
]
