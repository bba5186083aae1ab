"""Tests for the default collaborator functions."""

from __future__ import annotations

import pytest

from apisection.fragments import ListItem, Paragraph
from apisection.models import Comment
from apisection.resolve import describe, render_param, resolve_type_name
from tests.factories import intrinsic, literal, reference


@pytest.mark.parametrize(
    ("ref", "expected"),
    [
        (intrinsic("string"), "string"),
        ({"name": "number"}, "number"),
        (reference("Promise", intrinsic("void")), "Promise<void>"),
        (reference("Map", intrinsic("string"), reference("Entry")), "Map<string, Entry>"),
        ({"type": "array", "elementType": intrinsic("number")}, "number[]"),
        (
            {"type": "array", "elementType": {"type": "union", "types": [intrinsic("string"), intrinsic("number")]}},
            "(string | number)[]",
        ),
        ({"type": "union", "types": [literal("a"), literal(2), literal(None)]}, "'a' | 2 | null"),
        ({"type": "intersection", "types": [reference("A"), reference("B")]}, "A & B"),
        (literal(True), "true"),
        ({"type": "reflection", "declaration": {"children": []}}, "object"),
        (None, "undefined"),
        ({}, "undefined"),
        ({"type": {}}, "undefined"),
        ({"type": ["x"], "name": "Foo"}, "Foo"),
    ],
)
def test_resolve_type_name(ref, expected: str) -> None:
    assert resolve_type_name(ref) == expected


def test_resolve_callable_reflection() -> None:
    ref = {
        "type": "reflection",
        "declaration": {
            "signatures": [
                {
                    "parameters": [{"name": "value", "type": intrinsic("string")}],
                    "type": intrinsic("void"),
                }
            ]
        },
    }
    assert resolve_type_name(ref) == "(value: string) => void"


def test_render_param_includes_description() -> None:
    item = render_param(
        {"name": "uri", "type": intrinsic("string"), "comment": {"shortText": "Location of the asset."}}
    )
    assert item == ListItem(text="`uri` (`string`)", detail="Location of the asset.")


def test_describe_emits_short_and_long_text() -> None:
    assert describe(None) == ()
    assert describe(Comment()) == ()
    assert describe(Comment(short_text="Short.", text="Longer text.")) == (
        Paragraph("Short."),
        Paragraph("Longer text."),
    )
