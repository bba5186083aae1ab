"""Renderer-agnostic documentation fragments.

Text fields hold inline markdown (code spans, emphasis); block structure is
expressed by the fragment types themselves so a serializer can target any
output format.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Heading:
    level: int
    text: str
    code: bool = False


@dataclass(frozen=True)
class Paragraph:
    text: str


@dataclass(frozen=True)
class TableCell:
    """A table cell; each entry of ``lines`` is rendered on its own line."""

    lines: Tuple[str, ...]


@dataclass(frozen=True)
class TableRow:
    cells: Tuple[TableCell, ...]


@dataclass(frozen=True)
class Table:
    header: Tuple[str, ...]
    rows: Tuple[TableRow, ...] = ()


@dataclass(frozen=True)
class ListItem:
    text: str
    detail: Optional[str] = None


@dataclass(frozen=True)
class BulletList:
    items: Tuple[ListItem, ...]


@dataclass(frozen=True)
class Block:
    """Ordered container, e.g. one type's section or the whole Types section."""

    key: str
    children: Tuple["Fragment", ...] = ()


Fragment = Union[Heading, Paragraph, Table, BulletList, Block]


__all__ = [
    "Block",
    "BulletList",
    "Fragment",
    "Heading",
    "ListItem",
    "Paragraph",
    "Table",
    "TableCell",
    "TableRow",
]
