"""Tests for reading extraction output."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from apisection.loader import InputError, load_type_nodes, select_type_nodes


def _write(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_loads_plain_list(tmp_path: Path) -> None:
    path = _write(tmp_path / "types.json", [{"name": "A"}, "junk", {"name": "B"}])
    assert [node["name"] for node in load_type_nodes(path)] == ["A", "B"]


def test_loads_types_mapping(tmp_path: Path) -> None:
    path = _write(tmp_path / "types.json", {"types": [{"name": "A"}]})
    assert load_type_nodes(path) == [{"name": "A"}]


def test_collects_type_aliases_from_project() -> None:
    project = {
        "kind": 1,
        "children": [
            {"name": "Size", "kindString": "Type alias"},
            {"name": "Button", "kindString": "Class"},
            {
                "name": "module",
                "kindString": "Module",
                "children": [
                    {"name": "Nested", "kindString": "Type alias"},
                    {"name": "Modern", "kind": 2097152},
                ],
            },
        ],
    }
    assert [node["name"] for node in select_type_nodes(project)] == ["Size", "Nested", "Modern"]


def test_legacy_kind_number_with_kind_string_is_not_misread() -> None:
    project = {"children": [{"name": "Obj", "kind": 2097152, "kindString": "Object literal"}]}
    assert select_type_nodes(project) == []


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InputError, match="not found"):
        load_type_nodes(tmp_path / "missing.json")


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(InputError, match="Failed to parse"):
        load_type_nodes(path)


def test_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe\x00")
    with pytest.raises(InputError, match="Failed to parse"):
        load_type_nodes(path)


@pytest.mark.parametrize("data", ["text", 3, {"other": []}])
def test_unexpected_root(data: object) -> None:
    with pytest.raises(InputError):
        select_type_nodes(data)
