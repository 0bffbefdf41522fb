"""Result values returned by the renderer instead of raised failures."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pagesmith.resources import Page


@dc.dataclass(slots=True)
class RenderOutcome:
    """Composed output for one pagination window.

    Attributes
    ----------
    content : str
        Fully laid out output, or the output composed up to a failure.
    error : Exception or None
        The failure that stopped composition, if any.
    """

    content: str
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dc.dataclass(slots=True)
class PageReport:
    """Files written for a page and the failures met while composing them."""

    page: Page
    written: list[Path] = dc.field(default_factory=list)
    errors: list[Exception] = dc.field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def record(self, path: Path, outcome: RenderOutcome) -> None:
        """Note that ``outcome`` was written to ``path``."""
        self.written.append(path)
        if outcome.error is not None:
            self.errors.append(outcome.error)


__all__ = ["PageReport", "RenderOutcome"]
