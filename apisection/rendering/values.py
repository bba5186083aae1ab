"""Formatting of literal-like union members."""

from __future__ import annotations

from typing import Iterable, Optional

from ..models import ValueNode

NULL_MARKER = "`null`"
UNDEFINED_MARKER = "`undefined`"


def decorate_value(node: ValueNode) -> str:
    """Format one literal-like member as an inline code span."""
    if node.has_value and node.value is None:
        return NULL_MARKER
    if node.mapping is not None:
        mapping = node.mapping
        key = mapping.key_name or "undefined"
        value = mapping.value_name or "undefined"
        return f"`{mapping.container}<{key},{value}>`"
    if isinstance(node.value, str):
        return f"`'{node.value}'`"
    if node.has_value:
        return f"`{_spell(node.value)}`"
    if node.name:
        return f"`{node.name}`"
    return UNDEFINED_MARKER


def literal_kind(node: ValueNode) -> Optional[str]:
    """Underlying value kind of a literal, or ``None`` when it is not recognised."""
    value = node.value
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (int, float)):
        return "number"
    return None


def kind_prefix(nodes: Iterable[ValueNode]) -> str:
    kinds = {literal_kind(node) for node in nodes}
    if len(kinds) == 1:
        (kind,) = kinds
        if kind is not None:
            return f"`{kind}` - "
    return ""


def acceptable_values(nodes: Iterable[ValueNode]) -> str:
    """Sentence enumerating every member, prefixed with the shared kind if any."""
    members = list(nodes)
    values = ", ".join(decorate_value(node) for node in members)
    return f"{kind_prefix(members)}Acceptable values are: {values}."


def _spell(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


__all__ = ["acceptable_values", "decorate_value", "kind_prefix", "literal_kind"]
