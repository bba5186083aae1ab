"""Normalized data model for extracted type metadata.

Raw extraction output is loosely typed: the shape of a type is signalled by
which optional fields happen to be present. ``apisection.shapes`` folds that
into the immutable records below, so renderers only ever match on a single
shape variant.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple, Union

# Raw type references stay opaque; only the collaborator resolver reads them.
TypeRef = Mapping[str, Any]


@dataclass(frozen=True)
class Comment:
    """Description attached to a type, property or parameter."""

    short_text: Optional[str] = None
    text: Optional[str] = None
    tags: Mapping[str, str] = field(default_factory=dict)

    def tag(self, name: str) -> Optional[str]:
        return self.tags.get(name)


@dataclass(frozen=True)
class Property:
    """One row of a property table."""

    name: str
    optional: bool = False
    type: Optional[TypeRef] = None
    comment: Optional[Comment] = None
    default_value: Optional[str] = None


@dataclass(frozen=True)
class Signature:
    """A call signature; parameters are handed to the parameter renderer as-is."""

    parameters: Tuple[Mapping[str, Any], ...] = ()


@dataclass(frozen=True)
class MappingRef:
    """A reference to the two-argument key/value container type."""

    container: str
    key_name: Optional[str]
    value_name: Optional[str]


@dataclass(frozen=True)
class ValueNode:
    """A literal-like member of a union or intersection.

    ``has_value`` separates an explicit ``null`` literal from a member that
    carries no value at all (intrinsics and references).
    """

    kind: str
    name: Optional[str] = None
    value: Any = None
    has_value: bool = False
    mapping: Optional[MappingRef] = None


@dataclass(frozen=True)
class DeclarationShape:
    """Object or callable type with an inline declaration."""

    properties: Optional[Tuple[Property, ...]] = None
    signatures: Tuple[Signature, ...] = ()

    @property
    def callable(self) -> bool:
        return bool(self.signatures)


@dataclass(frozen=True)
class LiteralUnionShape:
    """Union/intersection documented as its set of acceptable values."""

    kind: str
    members: Tuple[ValueNode, ...]


@dataclass(frozen=True)
class PropertyBagShape:
    """Union/intersection of inline object types."""

    kind: str
    bags: Tuple[Tuple[Property, ...], ...] = ()
    bases: Tuple[TypeRef, ...] = ()


@dataclass(frozen=True)
class MappingShape:
    """Generic key/value container such as ``Record<string, T>``."""

    container: str
    key_name: Optional[str]
    value_type: TypeRef


@dataclass(frozen=True)
class PrimitiveShape:
    """Alias of a bare primitive."""

    name: str


@dataclass(frozen=True)
class UnsupportedShape:
    """Anything the renderer does not document."""

    reason: str


Shape = Union[
    DeclarationShape,
    LiteralUnionShape,
    PropertyBagShape,
    MappingShape,
    PrimitiveShape,
    UnsupportedShape,
]


@dataclass(frozen=True)
class TypeNode:
    """One exported type, already classified."""

    name: str
    shape: Shape
    comment: Optional[Comment] = None

    @property
    def renderable(self) -> bool:
        return not isinstance(self.shape, UnsupportedShape)


__all__ = [
    "Comment",
    "DeclarationShape",
    "LiteralUnionShape",
    "MappingRef",
    "MappingShape",
    "PrimitiveShape",
    "Property",
    "PropertyBagShape",
    "Shape",
    "Signature",
    "TypeNode",
    "TypeRef",
    "UnsupportedShape",
    "ValueNode",
]
