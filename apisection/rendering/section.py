"""Entry point rendering the full Types section."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, Union

from ..config import RenderOptions
from ..fragments import Block, Fragment, Heading
from ..models import TypeNode
from ..resolve import DEFAULT_COLLABORATORS, Collaborators
from .types import TypeRenderer

SECTION_KEY = "types"


def render_section(
    nodes: Optional[Sequence[Union[TypeNode, Mapping[str, Any]]]],
    options: RenderOptions | None = None,
    collaborators: Collaborators = DEFAULT_COLLABORATORS,
) -> Optional[Block]:
    """Render every type in input order under one section heading.

    Returns ``None`` for an empty input. Types without a documented shape are
    left out without a placeholder.
    """
    if not nodes:
        return None
    options = options or RenderOptions()
    renderer = TypeRenderer(options, collaborators)

    children: List[Fragment] = [Heading(level=options.section_level, text=options.section_title)]
    for node in nodes:
        block = renderer.render(node)
        if block is not None:
            children.append(block)
    return Block(key=SECTION_KEY, children=tuple(children))


__all__ = ["SECTION_KEY", "render_section"]
