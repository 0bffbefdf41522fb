"""Resource models, lookup store, and filesystem loader."""

from .db import ResourceDB
from .files import FrontMatterError, read_body, split_front_matter
from .loader import SiteResources, load_resources
from .models import Layout, Page, Partial, Resource, StaticFile

__all__ = [
    "FrontMatterError",
    "Layout",
    "Page",
    "Partial",
    "Resource",
    "ResourceDB",
    "SiteResources",
    "StaticFile",
    "load_resources",
    "read_body",
    "split_front_matter",
]
