"""Tests for the FastAPI service mode."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from apisection.config import ApiSectionConfig
from apisection.orchestrator import Orchestrator
from apisection.service import create_app


@pytest.fixture
def client(tmp_path: Path) -> TestClient:
    app = create_app(lambda: Orchestrator(ApiSectionConfig(root=tmp_path)))
    return TestClient(app)


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_render_endpoint(client: TestClient, all_nodes: List[Dict[str, Any]]) -> None:
    response = client.post("/render", json={"types": all_nodes})

    assert response.status_code == 200
    data = response.json()
    assert data["markdown"].startswith("## Types\n")
    assert data["rendered"] == ["Size", "Options", "Headers", "Id"]
    assert data["skipped"] == ["Tags"]


def test_render_endpoint_with_no_types(client: TestClient) -> None:
    response = client.post("/render", json={"types": []})
    assert response.status_code == 200
    assert response.json() == {"markdown": "", "rendered": [], "skipped": []}


def test_render_project_endpoint(client: TestClient, id_node: Dict[str, Any]) -> None:
    project = {"children": [dict(id_node, kindString="Type alias"), {"name": "Foo", "kindString": "Class"}]}

    response = client.post("/render/project", json={"project": project, "title": "Aliases"})

    assert response.status_code == 200
    assert response.json()["markdown"].startswith("## Aliases\n\n### `Id`\n")


def test_render_project_rejects_unexpected_payload(client: TestClient) -> None:
    response = client.post("/render/project", json={"project": "nope"})
    assert response.status_code == 400
    assert "JSON list or object" in response.json()["detail"]
