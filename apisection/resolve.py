"""Default collaborators: type-name resolution, parameter entries, descriptions.

The renderers treat these as black boxes and reach them only through a
``Collaborators`` record, so a documentation site can plug in its own
(for example one that turns references into links).
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Tuple

from .fragments import Fragment, ListItem, Paragraph
from .models import Comment
from .shapes import normalize_comment

UNKNOWN_TYPE = "undefined"


def resolve_type_name(ref: Optional[Mapping[str, Any]]) -> str:
    """Return a display string for a raw type reference."""
    if not isinstance(ref, Mapping):
        return UNKNOWN_TYPE

    kind = ref.get("type")
    if not isinstance(kind, str):
        kind = None
    name = ref.get("name")

    if kind == "literal":
        return _literal(ref)
    if kind in {"union", "intersection"} and isinstance(ref.get("types"), list):
        joiner = " | " if kind == "union" else " & "
        return joiner.join(resolve_type_name(member) for member in ref["types"])
    if kind == "array":
        element = resolve_type_name(ref.get("elementType"))
        if " | " in element or " & " in element:
            element = f"({element})"
        return f"{element}[]"
    if kind == "reflection":
        return _reflection(ref.get("declaration"))
    if name:
        arguments = ref.get("typeArguments")
        if isinstance(arguments, list) and arguments:
            return f"{name}<{', '.join(resolve_type_name(arg) for arg in arguments)}>"
        return str(name)
    return UNKNOWN_TYPE


def _literal(ref: Mapping[str, Any]) -> str:
    value = ref.get("value")
    if isinstance(value, str):
        return f"'{value}'"
    return json.dumps(value)


def _reflection(declaration: Any) -> str:
    if not isinstance(declaration, Mapping):
        return "object"
    signatures = declaration.get("signatures")
    if isinstance(signatures, list) and signatures and isinstance(signatures[0], Mapping):
        signature = signatures[0]
        parameters = signature.get("parameters") or []
        args = ", ".join(
            f"{param.get('name', '')}: {resolve_type_name(param.get('type'))}"
            for param in parameters
            if isinstance(param, Mapping)
        )
        return f"({args}) => {resolve_type_name(signature.get('type'))}"
    return "object"


def render_param(param: Mapping[str, Any]) -> ListItem:
    """Render one call-signature parameter as a list entry."""
    name = param.get("name") or ""
    text = f"`{name}` (`{resolve_type_name(param.get('type'))}`)"
    flags = param.get("flags")
    if isinstance(flags, Mapping) and flags.get("isOptional"):
        text += " (optional)"
    comment = normalize_comment(param.get("comment"))
    detail = comment.short_text if comment is not None else None
    return ListItem(text=text, detail=detail)


def describe(comment: Optional[Comment]) -> Tuple[Fragment, ...]:
    """Description block for a type: short text, then the long text."""
    if comment is None:
        return ()
    return tuple(Paragraph(text) for text in (comment.short_text, comment.text) if text)


@dataclass(frozen=True)
class Collaborators:
    resolve_type_name: Callable[[Optional[Mapping[str, Any]]], str] = resolve_type_name
    render_param: Callable[[Mapping[str, Any]], ListItem] = render_param
    describe: Callable[[Optional[Comment]], Tuple[Fragment, ...]] = describe


DEFAULT_COLLABORATORS = Collaborators()


__all__ = [
    "Collaborators",
    "DEFAULT_COLLABORATORS",
    "UNKNOWN_TYPE",
    "describe",
    "render_param",
    "resolve_type_name",
]
