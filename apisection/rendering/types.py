"""Per-type documentation sections."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from ..config import RenderOptions
from ..fragments import Block, BulletList, Fragment, Heading, ListItem, Paragraph
from ..logging import get_logger
from ..models import (
    DeclarationShape,
    LiteralUnionShape,
    MappingShape,
    PrimitiveShape,
    PropertyBagShape,
    TypeNode,
)
from ..resolve import DEFAULT_COLLABORATORS, UNKNOWN_TYPE, Collaborators
from ..shapes import normalize_type
from .tables import PropertyTableBuilder
from .values import acceptable_values

logger = get_logger("rendering.types")

TYPE_HEADING_LEVEL = 3
ARGUMENTS_HEADING_LEVEL = 4


class TypeRenderer:
    """Renders one classified type into a ``Block``; unsupported shapes yield ``None``."""

    def __init__(
        self,
        options: RenderOptions | None = None,
        collaborators: Collaborators = DEFAULT_COLLABORATORS,
    ) -> None:
        self.options = options or RenderOptions()
        self.collaborators = collaborators
        self.tables = PropertyTableBuilder(self.options, collaborators)

    def render(self, node: Union[TypeNode, Mapping[str, Any]]) -> Optional[Block]:
        if not isinstance(node, TypeNode):
            node = normalize_type(node, self.options)

        shape = node.shape
        if isinstance(shape, DeclarationShape):
            children = self._declaration(node, shape)
        elif isinstance(shape, LiteralUnionShape):
            children = self._literals(node, shape)
        elif isinstance(shape, PropertyBagShape):
            children = self._property_bags(node, shape)
        elif isinstance(shape, MappingShape):
            children = self._mapping(node, shape)
        elif isinstance(shape, PrimitiveShape):
            children = self._primitive(node, shape)
        else:
            logger.debug("Skipping type %s", node.name)
            return None
        return Block(key=f"type-{node.name}", children=tuple(children))

    def _heading(self, text: str) -> Heading:
        return Heading(level=TYPE_HEADING_LEVEL, text=text, code=True)

    def _declaration(self, node: TypeNode, shape: DeclarationShape) -> List[Fragment]:
        title = f"{node.name}()" if shape.callable else node.name
        children: List[Fragment] = [self._heading(title)]
        children.extend(self.collaborators.describe(node.comment))
        if shape.properties is not None:
            children.append(self.tables.build(shape.properties))
        for signature in shape.signatures:
            if not signature.parameters:
                continue
            children.append(Heading(level=ARGUMENTS_HEADING_LEVEL, text="Arguments"))
            children.append(
                BulletList(
                    items=tuple(self.collaborators.render_param(p) for p in signature.parameters)
                )
            )
        return children

    def _literals(self, node: TypeNode, shape: LiteralUnionShape) -> List[Fragment]:
        # Object members of a mixed composite are not documented.
        return [self._heading(node.name), Paragraph(acceptable_values(shape.members))]

    def _property_bags(self, node: TypeNode, shape: PropertyBagShape) -> List[Fragment]:
        children: List[Fragment] = [self._heading(node.name)]
        if shape.kind == "intersection" and shape.bases:
            bases = ", ".join(
                f"`{self.collaborators.resolve_type_name(base)}`" for base in shape.bases
            )
            children.append(Paragraph(f"{bases} extended by:"))
        children.extend(self.collaborators.describe(node.comment))
        children.extend(self.tables.build(properties) for properties in shape.bags)
        return children

    def _mapping(self, node: TypeNode, shape: MappingShape) -> List[Fragment]:
        value_name = self.collaborators.resolve_type_name(shape.value_type)
        key_name = shape.key_name or UNKNOWN_TYPE
        entry = ListItem(text=f"`{shape.container}<{key_name}, {value_name}>`")
        children: List[Fragment] = [self._heading(node.name), BulletList(items=(entry,))]
        children.extend(self.collaborators.describe(node.comment))
        return children

    def _primitive(self, node: TypeNode, shape: PrimitiveShape) -> List[Fragment]:
        children: List[Fragment] = [self._heading(node.name)]
        children.extend(self.collaborators.describe(node.comment))
        children.append(Paragraph(f"**Type:** `{shape.name}`"))
        return children


def render_type(
    node: Union[TypeNode, Mapping[str, Any]],
    options: RenderOptions | None = None,
    collaborators: Collaborators = DEFAULT_COLLABORATORS,
) -> Optional[Block]:
    return TypeRenderer(options, collaborators).render(node)


__all__ = ["ARGUMENTS_HEADING_LEVEL", "TYPE_HEADING_LEVEL", "TypeRenderer", "render_type"]
