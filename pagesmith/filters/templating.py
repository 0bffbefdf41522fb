"""Evaluate resource bodies as Jinja templates against the rendering context."""

from __future__ import annotations

import typing as typ

from jinja2 import Environment, StrictUndefined, Undefined

from .registry import register

if typ.TYPE_CHECKING:
    from pagesmith.renderer.context import RenderingContext
    from pagesmith.resources import Resource


def build_environment(*, strict: bool = False) -> Environment:
    """Return the Jinja environment used to evaluate resource bodies.

    Autoescaping is off because layouts splice already rendered HTML into
    ``content``; templates escape user data explicitly with ``h``.
    """
    return Environment(
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined if strict else Undefined,
    )


@register("jinja")
def jinja_filter(text: str, context: RenderingContext, resource: Resource) -> str:
    """Evaluate ``text`` as a Jinja template with the context's variables."""
    template = context.environment.from_string(text)
    return template.render(context.template_variables(resource))


__all__ = ["build_environment", "jinja_filter"]
