"""Fragment renderers for classified type metadata."""

from .section import render_section
from .tables import PropertyTableBuilder
from .types import TypeRenderer, render_type
from .values import acceptable_values, decorate_value, kind_prefix, literal_kind

__all__ = [
    "PropertyTableBuilder",
    "TypeRenderer",
    "acceptable_values",
    "decorate_value",
    "kind_prefix",
    "literal_kind",
    "render_section",
    "render_type",
]
