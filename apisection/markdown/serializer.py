"""Markdown serialization of fragment trees via Jinja templates."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Type

from jinja2 import Environment, FileSystemLoader

from ..fragments import Block, BulletList, Fragment, Heading, Paragraph, Table
from .lint import MarkdownLinter

DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")

TEMPLATE_NAMES: Dict[Type[object], str] = {
    Heading: "heading.j2",
    Paragraph: "paragraph.j2",
    Table: "table.j2",
    BulletList: "list.j2",
}


def format_cell(lines: Iterable[str]) -> str:
    """Join a cell's lines with ``<br />`` and escape column separators."""
    return "<br />".join(line.replace("|", "\\|").replace("\n", " ") for line in lines)


class MarkdownSerializer:
    """Turns fragments into markdown; templates in ``templates_dir`` override the bundled ones."""

    def __init__(self, templates_dir: Path | None = None, *, lint: bool = True) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)
        self._linter = MarkdownLinter() if lint else None

    def serialize(self, fragment: Optional[Fragment]) -> str:
        if fragment is None:
            return ""
        markdown = "\n\n".join(self._render(fragment)) + "\n"
        if self._linter is not None:
            markdown = self._linter.lint(markdown)
        return markdown

    def _render(self, fragment: Fragment) -> List[str]:
        if isinstance(fragment, Block):
            parts: List[str] = []
            for child in fragment.children:
                parts.extend(self._render(child))
            return parts
        template = self._env.get_template(TEMPLATE_NAMES[type(fragment)])
        rendered = template.render(fragment=fragment).strip()
        return [rendered] if rendered else []

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = [str(DEFAULT_TEMPLATES_DIR)]
        if templates_dir is not None and templates_dir.resolve() != DEFAULT_TEMPLATES_DIR.resolve():
            directories.insert(0, str(templates_dir))
        env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        env.filters["cell"] = format_cell
        return env


__all__ = ["DEFAULT_TEMPLATES_DIR", "MarkdownSerializer", "format_cell"]
