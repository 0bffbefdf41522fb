"""Track the resources currently being rendered to detect rendering loops."""

from __future__ import annotations

import contextlib
import typing as typ

from pagesmith.errors import RenderingLoopDetected, StackCorrupted

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class RenderStack:
    """Ordered sequence of in-flight resource paths, innermost last.

    One stack belongs to each top-level render so that independent pages can
    be composed concurrently without seeing each other's entries.

    Examples
    --------
    >>> stack = RenderStack()
    >>> with stack.track("content/index.md"):
    ...     stack.paths
    ('content/index.md',)
    >>> stack.paths
    ()
    """

    def __init__(self) -> None:
        self._paths: list[str] = []

    @property
    def paths(self) -> tuple[str, ...]:
        """Return a snapshot of the stack, innermost entry last."""
        return tuple(self._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __len__(self) -> int:
        return len(self._paths)

    @contextlib.contextmanager
    def track(self, path: str) -> cabc.Iterator[None]:
        """Hold ``path`` on the stack for the duration of the block.

        Raises
        ------
        RenderingLoopDetected
            If ``path`` is already on the stack. The entry is still pushed and
            popped so the stack leaves the block as it entered.
        StackCorrupted
            If, on exit, the top of the stack is not ``path``.
        """
        loop = path in self._paths
        self._paths.append(path)
        try:
            if loop:
                raise RenderingLoopDetected(path, self._paths)
            yield
        finally:
            self._release(path)

    def _release(self, path: str) -> None:
        if self._paths and self._paths[-1] == path:
            self._paths.pop()
            return
        top = self._paths[-1] if self._paths else None
        msg = f"rendering stack corrupted: expected '{path}' on top, found {top!r}"
        raise StackCorrupted(msg)

    def ensure_empty(self) -> None:
        """Raise :class:`StackCorrupted` if any entries remain."""
        if self._paths:
            trail = ", ".join(self._paths)
            msg = f"rendering stack corrupted: {trail}"
            raise StackCorrupted(msg)

    def clear(self) -> None:
        """Drop every entry; used after a corrupted render has been reported."""
        self._paths.clear()


__all__ = ["RenderStack"]
