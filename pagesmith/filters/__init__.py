"""Named text filters applied to resource bodies in declaration order.

Importing this package registers the built-in ``jinja``, ``markdown``, and
``code`` filters. Additional filters are added with :func:`register`.
"""

from . import markdown as _markdown  # noqa: F401 - registers filters
from . import templating as _templating  # noqa: F401 - registers filters
from .markdown import HtmlContentRenderer
from .registry import available_filters, get_filter, process, register, unregister
from .templating import build_environment

__all__ = [
    "HtmlContentRenderer",
    "available_filters",
    "build_environment",
    "get_filter",
    "process",
    "register",
    "unregister",
]
