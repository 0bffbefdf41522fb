"""Registry of named text filters and the chain runner that applies them."""

from __future__ import annotations

import logging
import typing as typ

from pagesmith.errors import UnknownFilterError

if typ.TYPE_CHECKING:
    from pagesmith.renderer.context import RenderingContext
    from pagesmith.resources import Resource

FilterFunc = typ.Callable[[str, "RenderingContext", "Resource"], str]

logger = logging.getLogger(__name__)

_FILTERS: dict[str, FilterFunc] = {}


def register(name: str) -> typ.Callable[[FilterFunc], FilterFunc]:
    """Register the decorated callable as the filter called ``name``.

    Examples
    --------
    >>> @register("shout")
    ... def shout(text, context, resource):
    ...     return text.upper()
    >>> get_filter("shout")("hi", None, None)
    'HI'
    """

    def decorator(func: FilterFunc) -> FilterFunc:
        _FILTERS[name] = func
        return func

    return decorator


def unregister(name: str) -> None:
    """Remove the filter called ``name`` if it is registered."""
    _FILTERS.pop(name, None)


def get_filter(name: str) -> FilterFunc:
    """Return the filter called ``name``."""
    try:
        return _FILTERS[name]
    except KeyError as exc:
        raise UnknownFilterError(name) from exc


def available_filters() -> list[str]:
    """Return the names of every registered filter."""
    return sorted(_FILTERS)


def process(context: RenderingContext, resource: Resource, text: str) -> str:
    """Run ``text`` through every filter named by ``resource``, in order."""
    for name in resource.filters:
        logger.debug("applying filter %s to %s", name, resource.path)
        text = get_filter(name)(text, context, resource)
    return text


__all__ = [
    "FilterFunc",
    "available_filters",
    "get_filter",
    "process",
    "register",
    "unregister",
]
