"""Property tables for object-like types."""

from __future__ import annotations

from typing import Sequence

from ..config import RenderOptions
from ..fragments import Table, TableCell, TableRow
from ..models import Property
from ..resolve import DEFAULT_COLLABORATORS, Collaborators

TABLE_HEADER = ("Name", "Type", "Description")
EMPTY_DESCRIPTION = "-"


class PropertyTableBuilder:
    """Builds one ``Name | Type | Description`` table per property list."""

    def __init__(
        self,
        options: RenderOptions | None = None,
        collaborators: Collaborators = DEFAULT_COLLABORATORS,
    ) -> None:
        self.options = options or RenderOptions()
        self.collaborators = collaborators

    def build(self, properties: Sequence[Property]) -> Table:
        return Table(header=TABLE_HEADER, rows=tuple(self.row(prop) for prop in properties))

    def row(self, prop: Property) -> TableRow:
        name_lines = [f"**{prop.name}**"]
        if prop.optional:
            name_lines.append(self.options.optional_label)

        type_name = self.collaborators.resolve_type_name(prop.type)

        short_text = prop.comment.short_text if prop.comment is not None else None
        description_lines = [short_text or EMPTY_DESCRIPTION]
        if prop.default_value:
            description_lines.append(f"**Default:** {prop.default_value}")

        return TableRow(
            cells=(
                TableCell(tuple(name_lines)),
                TableCell((f"`{type_name}`",)),
                TableCell(tuple(description_lines)),
            )
        )


__all__ = ["EMPTY_DESCRIPTION", "PropertyTableBuilder", "TABLE_HEADER"]
