"""Render extracted type metadata into API reference sections."""

from .config import RenderOptions
from .rendering import render_section, render_type
from .resolve import Collaborators
from .shapes import normalize_type

__version__ = "0.1.0"

__all__ = ["Collaborators", "RenderOptions", "__version__", "normalize_type", "render_section", "render_type"]
