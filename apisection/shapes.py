"""Shape classification for raw type metadata.

Every raw type node is folded into exactly one shape variant from
``apisection.models``. The checks run in a fixed priority order (declaration,
composite, generic mapping, primitive) and anything left over becomes an
``UnsupportedShape``; nothing here raises on malformed input.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .config import RenderOptions
from .logging import get_logger
from .models import (
    Comment,
    DeclarationShape,
    LiteralUnionShape,
    MappingRef,
    MappingShape,
    PrimitiveShape,
    Property,
    PropertyBagShape,
    Shape,
    Signature,
    TypeNode,
    TypeRef,
    UnsupportedShape,
    ValueNode,
)

logger = get_logger("shapes")

COMPOSITE_KINDS = frozenset({"union", "intersection"})
LITERAL_KINDS = frozenset({"literal", "intrinsic"})


def normalize_type(raw: Mapping[str, Any], options: RenderOptions | None = None) -> TypeNode:
    """Classify one raw type node."""
    options = options or RenderOptions()
    node = _as_mapping(raw) or {}
    name = _scalar_text(node.get("name")) or ""
    shape = classify(_as_mapping(node.get("type")), options)
    if isinstance(shape, UnsupportedShape):
        logger.debug("Type %s is not documented: %s", name or "<anonymous>", shape.reason)
    return TypeNode(name=name, shape=shape, comment=normalize_comment(node.get("comment")))


def normalize_types(
    raw_nodes: Sequence[Mapping[str, Any]] | None, options: RenderOptions | None = None
) -> List[TypeNode]:
    return [normalize_type(raw, options) for raw in raw_nodes or ()]


def classify(definition: Optional[Mapping[str, Any]], options: RenderOptions) -> Shape:
    if definition is None:
        return UnsupportedShape("missing type definition")

    declaration = _as_mapping(definition.get("declaration"))
    if declaration is not None:
        return DeclarationShape(
            properties=_properties(declaration.get("children"), options),
            signatures=_signatures(declaration.get("signatures")),
        )

    kind = _kind(definition)
    members = definition.get("types")
    if isinstance(members, list) and kind in COMPOSITE_KINDS:
        return _composite(str(kind), members, options)

    mapping = mapping_ref(definition, options)
    if mapping is not None:
        arguments = definition["typeArguments"]
        return MappingShape(
            container=mapping.container,
            key_name=mapping.key_name,
            value_type=_as_mapping(arguments[1]) or {},
        )

    if kind == "intrinsic":
        return PrimitiveShape(name=_scalar_text(definition.get("name")) or "")

    return UnsupportedShape(f"no documented shape for type kind {kind!r}")


def mapping_ref(definition: Mapping[str, Any], options: RenderOptions) -> Optional[MappingRef]:
    """Return a ``MappingRef`` when ``definition`` names the key/value container."""
    if definition.get("name") != options.mapping_name:
        return None
    arguments = definition.get("typeArguments")
    if not isinstance(arguments, list) or len(arguments) != 2:
        return None
    key, value = (_as_mapping(argument) or {} for argument in arguments)
    return MappingRef(
        container=options.mapping_name,
        key_name=_scalar_text(key.get("name")),
        value_name=_scalar_text(value.get("name")),
    )


def _composite(kind: str, members: Sequence[Any], options: RenderOptions) -> Shape:
    literals: List[ValueNode] = []
    bags: List[Tuple[Property, ...]] = []
    bases: List[TypeRef] = []
    has_bag_member = False

    for raw_member in members:
        member = _as_mapping(raw_member)
        if member is None:
            continue
        member_kind = _kind(member)
        if member_kind in LITERAL_KINDS:
            literals.append(_value_node(member, options))
        elif member_kind == "reference" and member.get("name") == options.mapping_name:
            literals.append(_value_node(member, options))
        elif member_kind == "reflection":
            has_bag_member = True
            declaration = _as_mapping(member.get("declaration")) or {}
            properties = _properties(declaration.get("children"), options)
            if properties is not None:
                bags.append(properties)
        elif member_kind == "reference":
            bases.append(member)

    if literals:
        return LiteralUnionShape(kind=kind, members=tuple(literals))
    if has_bag_member:
        return PropertyBagShape(kind=kind, bags=tuple(bags), bases=tuple(bases))
    return UnsupportedShape(f"{kind} without literal or object members")


def _value_node(member: Mapping[str, Any], options: RenderOptions) -> ValueNode:
    mapping = None
    if member.get("type") == "reference":
        mapping = mapping_ref(member, options)
    return ValueNode(
        kind=str(member.get("type")),
        name=_scalar_text(member.get("name")),
        value=member.get("value"),
        has_value="value" in member,
        mapping=mapping,
    )


def _properties(children: Any, options: RenderOptions) -> Optional[Tuple[Property, ...]]:
    if not isinstance(children, list):
        return None
    return tuple(
        normalize_property(child, options) for child in children if _as_mapping(child) is not None
    )


def normalize_property(raw: Mapping[str, Any], options: RenderOptions | None = None) -> Property:
    options = options or RenderOptions()
    flags = _as_mapping(raw.get("flags")) or {}
    comment = normalize_comment(raw.get("comment"))
    default_value = _scalar_text(raw.get("defaultValue"))
    if not default_value and comment is not None:
        default_value = comment.tag(options.default_tag)
    return Property(
        name=_scalar_text(raw.get("name")) or "",
        optional=bool(flags.get("isOptional")),
        type=_as_mapping(raw.get("type")),
        comment=comment,
        default_value=default_value or None,
    )


def _signatures(raw: Any) -> Tuple[Signature, ...]:
    if not isinstance(raw, list):
        return ()
    signatures = []
    for entry in raw:
        signature = _as_mapping(entry)
        if signature is None:
            continue
        parameters = signature.get("parameters")
        if not isinstance(parameters, list):
            parameters = []
        signatures.append(
            Signature(parameters=tuple(p for p in parameters if _as_mapping(p) is not None))
        )
    return tuple(signatures)


def normalize_comment(raw: Any) -> Optional[Comment]:
    """Fold legacy (``shortText``/``tags``) and current (``summary``/``blockTags``) layouts."""
    data = _as_mapping(raw)
    if data is None:
        return None

    short_text = _scalar_text(data.get("shortText")) or _join_parts(data.get("summary"))
    text = _scalar_text(data.get("text"))

    tags: Dict[str, str] = {}
    for entry in _as_list(data.get("tags")):
        tag = _as_mapping(entry)
        if tag is not None and tag.get("tag"):
            tags.setdefault(_tag_name(tag["tag"]), (_scalar_text(tag.get("text")) or "").strip())
    for entry in _as_list(data.get("blockTags")):
        tag = _as_mapping(entry)
        if tag is not None and tag.get("tag"):
            content = _strip_fence(_join_parts(tag.get("content")) or "")
            tags.setdefault(_tag_name(tag["tag"]), content)

    return Comment(
        short_text=short_text.strip() if short_text else None,
        text=text.strip() if text else None,
        tags=tags,
    )


def _tag_name(raw: Any) -> str:
    return str(raw).lstrip("@")


def _join_parts(parts: Any) -> Optional[str]:
    texts = [
        str(part.get("text", ""))
        for part in _as_list(parts)
        if isinstance(part, Mapping)
    ]
    joined = "".join(texts).strip()
    return joined or None


def _strip_fence(text: str) -> str:
    stripped = text.strip()
    if not stripped.startswith("```"):
        return stripped
    lines = stripped.splitlines()[1:]
    if lines and lines[-1].strip() == "```":
        lines = lines[:-1]
    return "\n".join(lines).strip()


def _scalar_text(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return None


def _kind(node: Mapping[str, Any]) -> Optional[str]:
    kind = node.get("type")
    return kind if isinstance(kind, str) else None


def _as_mapping(value: Any) -> Optional[Mapping[str, Any]]:
    return value if isinstance(value, Mapping) else None


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


__all__ = [
    "classify",
    "mapping_ref",
    "normalize_comment",
    "normalize_property",
    "normalize_type",
    "normalize_types",
]
