"""Unit tests for windowed pagination."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

from pagesmith.renderer import Paginator
from pagesmith.resources import Page

if typ.TYPE_CHECKING:
    from pagesmith.renderer import Pager


def _windows(paginator: Paginator) -> list[Pager]:
    pager: Pager | None = paginator.first()
    windows: list[Pager] = []
    while pager is not None:
        windows.append(pager)
        pager = pager.next
    return windows


def test_ten_items_in_windows_of_three() -> None:
    """Windows cover [0,3) [3,6) [6,9) [9,10) and only the last has no next."""
    items = list(range(10))
    paginator = Paginator(
        len(items), 3, select=lambda offset, size: items[offset : offset + size]
    )
    windows = _windows(paginator)

    bounds = [(w.offset, w.offset + w.size) for w in windows]
    assert bounds == [(0, 3), (3, 6), (6, 9), (9, 10)]
    assert [w.has_next for w in windows] == [True, True, True, False]
    assert [w.items for w in windows] == [[0, 1, 2], [3, 4, 5], [6, 7, 8], [9]]
    assert [w.number for w in windows] == [1, 2, 3, 4]
    assert paginator.page_count == 4
    assert windows[-1].next is None


def test_windows_link_back_to_previous() -> None:
    """Each materialized window links to the one before it."""
    windows = _windows(Paginator(5, 2))
    assert windows[0].previous is None
    assert not windows[0].has_previous
    assert windows[2].previous is windows[1]
    assert windows[1].next is windows[2], "Expected next to be memoized"


def test_exact_multiple_has_no_trailing_empty_window() -> None:
    """A collection filling its last window exactly stops there."""
    windows = _windows(Paginator(6, 3))
    assert len(windows) == 2
    assert not windows[-1].has_next


def test_empty_collection_has_a_single_empty_window() -> None:
    """An empty collection still renders once."""
    pager = Paginator(0, 3).first()
    assert pager.items == []
    assert len(pager) == 0
    assert not pager.has_next


@pytest.mark.parametrize("per_page", [0, -1])
def test_per_page_must_be_positive(per_page: int) -> None:
    with pytest.raises(ValueError, match="per_page"):
        Paginator(10, per_page)


def test_pager_url_follows_page_destination(tmp_path: Path) -> None:
    """Window URLs point at numbered subdirectories after the first."""
    page = Page(tmp_path / "index.html", "blog", {}, Path("out"))
    second = Paginator(4, 2, page).first().next
    assert second is not None
    assert second.url == "/blog/2/index.html"
    assert second.previous is not None
    assert second.previous.url == "/blog/index.html"
    assert page.number is None, "Expected url lookups to leave the cursor alone"
