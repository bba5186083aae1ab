"""Reading type-extraction output from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

from .logging import get_logger

logger = get_logger("loader")

TYPE_ALIAS_KIND_STRING = "Type alias"
# ReflectionKind.TypeAlias; output without kindString only carries the number.
TYPE_ALIAS_KIND = 2097152


class InputError(RuntimeError):
    """Raised when the extraction output cannot be read."""


def load_type_nodes(path: Path) -> List[Dict[str, Any]]:
    """Load exported type nodes from a JSON file.

    Accepts a plain list of nodes, a mapping with a ``types`` list, or a full
    TypeDoc project in which type aliases are collected from ``children``.
    """
    if not path.exists():
        raise InputError(f"Input file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InputError(f"Failed to parse {path.name}: {exc}") from exc

    nodes = select_type_nodes(data)
    logger.debug("Loaded %d type node(s) from %s", len(nodes), path)
    return nodes


def select_type_nodes(data: Any) -> List[Dict[str, Any]]:
    if isinstance(data, list):
        return [node for node in data if isinstance(node, dict)]
    if not isinstance(data, dict):
        raise InputError("Extraction output must be a JSON list or object")
    if isinstance(data.get("types"), list):
        return [node for node in data["types"] if isinstance(node, dict)]
    if isinstance(data.get("children"), list):
        return list(_type_aliases(data["children"]))
    raise InputError("Extraction output has neither a 'types' nor a 'children' list")


def _type_aliases(children: Iterable[Any]) -> Iterable[Dict[str, Any]]:
    for child in children:
        if not isinstance(child, dict):
            continue
        if _is_type_alias(child):
            yield child
        elif isinstance(child.get("children"), list):
            yield from _type_aliases(child["children"])


def _is_type_alias(node: Mapping[str, Any]) -> bool:
    if "kindString" in node:
        return node["kindString"] == TYPE_ALIAS_KIND_STRING
    return node.get("kind") == TYPE_ALIAS_KIND


__all__ = ["InputError", "load_type_nodes", "select_type_nodes"]
