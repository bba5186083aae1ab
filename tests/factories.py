"""Builders for raw type-metadata nodes used across the test suite."""

from __future__ import annotations

from typing import Any, Dict


def literal(value: Any) -> Dict[str, Any]:
    return {"type": "literal", "value": value}


def intrinsic(name: str) -> Dict[str, Any]:
    return {"type": "intrinsic", "name": name}


def reference(name: str, *arguments: Dict[str, Any]) -> Dict[str, Any]:
    ref: Dict[str, Any] = {"type": "reference", "name": name}
    if arguments:
        ref["typeArguments"] = list(arguments)
    return ref


def reflection(*children: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": "reflection", "declaration": {"children": list(children)}}


def prop(name: str, type_: Dict[str, Any], *, optional: bool = False, **extra: Any) -> Dict[str, Any]:
    node: Dict[str, Any] = {"name": name, "flags": {"isOptional": optional}, "type": type_}
    node.update(extra)
    return node
