"""Compose pages through their filters and layouts, with pagination support."""

from .context import RenderingContext
from .paginator import Pager, Paginator
from .partials import PartialResolver
from .renderer import Renderer, write_page
from .report import PageReport, RenderOutcome
from .stack import RenderStack

__all__ = [
    "PageReport",
    "Pager",
    "Paginator",
    "PartialResolver",
    "RenderOutcome",
    "RenderStack",
    "Renderer",
    "RenderingContext",
    "write_page",
]
