"""Markdown output for rendered fragments."""

from .lint import MarkdownLinter
from .markers import MarkerManager
from .serializer import MarkdownSerializer, format_cell

__all__ = ["MarkdownLinter", "MarkdownSerializer", "MarkerManager", "format_cell"]
