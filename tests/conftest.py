from __future__ import annotations

from typing import Any, Dict, List

import pytest

from tests.factories import intrinsic, literal, reference


@pytest.fixture
def size_node() -> Dict[str, Any]:
    return {
        "name": "Size",
        "type": {
            "type": "union",
            "types": [literal("small"), literal("medium"), literal("large")],
        },
    }


@pytest.fixture
def options_node() -> Dict[str, Any]:
    return {
        "name": "Options",
        "type": {
            "type": "reflection",
            "declaration": {
                "children": [
                    {"name": "verbose", "flags": {"isOptional": True}, "type": {"name": "boolean"}},
                    {
                        "name": "timeout",
                        "flags": {"isOptional": False},
                        "type": {"name": "number"},
                        "defaultValue": "30",
                    },
                ]
            },
        },
    }


@pytest.fixture
def headers_node() -> Dict[str, Any]:
    return {
        "name": "Headers",
        "comment": {"shortText": "HTTP headers sent with every request."},
        "type": reference("Record", intrinsic("string"), intrinsic("string")),
    }


@pytest.fixture
def id_node() -> Dict[str, Any]:
    return {"name": "Id", "type": intrinsic("string")}


@pytest.fixture
def array_node() -> Dict[str, Any]:
    return {"name": "Tags", "type": {"type": "array", "elementType": intrinsic("string")}}


@pytest.fixture
def all_nodes(
    size_node: Dict[str, Any],
    options_node: Dict[str, Any],
    headers_node: Dict[str, Any],
    id_node: Dict[str, Any],
    array_node: Dict[str, Any],
) -> List[Dict[str, Any]]:
    return [size_node, options_node, array_node, headers_node, id_node]
