"""Split an ordered collection into fixed-size windows for paginated pages.

A :class:`Paginator` describes the whole collection; each :class:`Pager`
describes one window of it and links to its neighbours. Windows are created
lazily as the renderer walks forward through them.

Example
-------
>>> paginator = Paginator(10, 3, select=lambda offset, size: list(range(10))[offset:offset + size])
>>> pager = paginator.first()
>>> pager.items, pager.has_next
([0, 1, 2], True)
>>> pager.next.next.next.items, pager.next.next.next.has_next
([9], False)
"""

from __future__ import annotations

import math
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from pagesmith.resources import Page

Selector = typ.Callable[[int, int], typ.Sequence[typ.Any]]


class Paginator:
    """Describe how ``total_items`` are divided into windows of ``per_page``.

    Parameters
    ----------
    total_items : int
        Number of items in the collection.
    per_page : int
        Maximum number of items in each window; must be positive.
    page : Page, optional
        Page being paginated; its ``number`` tracks the current window.
    select : callable, optional
        ``select(offset, size)`` returns the items for a window. Defaults to
        returning an empty list.
    """

    def __init__(
        self,
        total_items: int,
        per_page: int,
        page: Page | None = None,
        *,
        select: Selector | None = None,
    ) -> None:
        if per_page < 1:
            msg = f"per_page must be a positive integer, got {per_page!r}"
            raise ValueError(msg)
        if total_items < 0:
            msg = f"total_items cannot be negative, got {total_items!r}"
            raise ValueError(msg)
        self.total_items = total_items
        self.per_page = per_page
        self.page = page
        self._select = select or (lambda _offset, _size: [])

    @property
    def page_count(self) -> int:
        """Return the number of windows; an empty collection still has one."""
        return max(1, math.ceil(self.total_items / self.per_page))

    def first(self) -> Pager:
        """Return the first window of the collection."""
        return Pager(self, 1, previous=None)

    def select(self, offset: int, size: int) -> list[typ.Any]:
        """Return the items of the window starting at ``offset``."""
        return list(self._select(offset, size))


class Pager:
    """One window of a paginated collection.

    Attributes
    ----------
    paginator : Paginator
        Collection description this window belongs to.
    number : int
        1-based window number.
    previous : Pager or None
        The window before this one, or ``None`` for the first window.
    """

    def __init__(
        self, paginator: Paginator, number: int, *, previous: Pager | None
    ) -> None:
        self.paginator = paginator
        self.number = number
        self.previous = previous
        self._next: Pager | None = None
        self._items: list[typ.Any] | None = None

    @property
    def page(self) -> Page | None:
        """Return the page being paginated."""
        return self.paginator.page

    @property
    def per_page(self) -> int:
        return self.paginator.per_page

    @property
    def total_items(self) -> int:
        return self.paginator.total_items

    @property
    def offset(self) -> int:
        """Return the index of the first item in this window."""
        return (self.number - 1) * self.per_page

    @property
    def size(self) -> int:
        """Return the number of items in this window, clipped to the total."""
        return max(0, min(self.per_page, self.total_items - self.offset))

    @property
    def items(self) -> list[typ.Any]:
        """Return the items of this window, selecting them on first access."""
        if self._items is None:
            self._items = self.paginator.select(self.offset, self.size)
        return self._items

    @property
    def has_next(self) -> bool:
        return self.offset + self.per_page < self.total_items

    @property
    def has_previous(self) -> bool:
        return self.previous is not None

    @property
    def next(self) -> Pager | None:
        """Return the following window, or ``None`` past the last one."""
        if not self.has_next:
            return None
        if self._next is None:
            self._next = Pager(self.paginator, self.number + 1, previous=self)
        return self._next

    @property
    def url(self) -> str | None:
        """Return the URL this window is written to, when bound to a page."""
        page = self.page
        if page is None:
            return None
        current = page.number
        page.number = self.number
        try:
            return page.url
        finally:
            page.number = current

    def __iter__(self) -> cabc.Iterator[typ.Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        end = self.offset + self.size
        return f"Pager(number={self.number}, window=[{self.offset}, {end}))"


__all__ = ["Pager", "Paginator"]
