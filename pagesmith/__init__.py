"""Static-site rendering with layouts, partials, and pagination.

This package exposes the CLI entry points used by the ``pagesmith`` console
script together with the renderer that composes pages into their layouts.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``Renderer``: Composes and writes a single page.

Examples
--------
>>> from pagesmith import main
>>> main()  # doctest: +SKIP
>>> from pagesmith import Renderer
>>> Renderer.__name__
'Renderer'
"""

from __future__ import annotations

from .cli import app, main
from .renderer import Renderer

__all__ = ["Renderer", "app", "main"]
