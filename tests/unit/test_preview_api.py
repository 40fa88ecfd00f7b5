"""
Tests for the Live Preview API.

Preview output must match published output apart from the selector.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.deps import get_preview_registry, get_rules
from src.api.routes.preview import router
from src.components.block_css import PreviewStyleRegistry
from src.rules.models import Rules

# --- Test Client Setup ---


@pytest.fixture
def client(rules: Rules, preview_registry: PreviewStyleRegistry) -> TestClient:
    """Test client with a fresh registry per test."""
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_rules] = lambda: rules
    app.dependency_overrides[get_preview_registry] = lambda: preview_registry

    return TestClient(app)


class TestPreviewCss:
    def test_compiles_and_registers(self, client: TestClient) -> None:
        response = client.post(
            "/css",
            json={
                "instance_id": "c1",
                "css": {"all": "color: red;", "tablet": "& p { margin: 0; }"},
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["css"] == (
            '[data-block="c1"] { color: red; }'
            '@media (min-width: 768px) and (max-width: 1024px) { [data-block="c1"] p { margin: 0; } }'
        )
        assert data["style_html"] == f'<style data-blockcss-block="c1">{data["css"]}</style>'
        assert data["active_variant"] == "all"
        assert data["populated"] == {"all": True, "mobile": False, "tablet": True, "desktop": False}
        assert data["wrapper_props"] == {"data-block": "c1"}

    def test_edit_replaces(self, client: TestClient) -> None:
        client.post("/css", json={"instance_id": "c1", "css": {"all": "color: red;"}})
        client.post("/css", json={"instance_id": "c1", "css": {"all": "color: blue;"}})

        head = client.get("/head").json()
        assert head["count"] == 1
        assert "blue" in head["html"]
        assert "red" not in head["html"]

    def test_clearing_fields_removes_node(self, client: TestClient) -> None:
        client.post("/css", json={"instance_id": "c1", "css": {"all": "color: red;"}})
        response = client.post(
            "/css", json={"instance_id": "c1", "css": {}, "wrapper_props": {"className": "x"}}
        )

        data = response.json()
        assert data["css"] == ""
        assert data["style_html"] is None
        assert data["wrapper_props"] == {"className": "x"}
        assert client.get("/head").json() == {"html": "", "count": 0}

    def test_delete_instance(self, client: TestClient) -> None:
        client.post("/css", json={"instance_id": "c1", "css": {"all": "color: red;"}})

        assert client.delete("/css/c1").json() == {"instance_id": "c1", "removed": True}
        assert client.delete("/css/c1").json() == {"instance_id": "c1", "removed": False}

    def test_markup_in_instance_id_is_inert(self, client: TestClient) -> None:
        instance_id = "x</style><script>alert(1)</script>"
        response = client.post(
            "/css", json={"instance_id": instance_id, "css": {"all": "color: red;"}}
        )

        assert response.status_code == 200
        data = response.json()
        assert "<script" not in data["style_html"]
        assert data["style_html"].count("</style>") == 1
        assert data["style_html"].endswith("</style>")
        assert "<script" not in client.get("/head").json()["html"]

    def test_response_css_matches_node(self, client: TestClient) -> None:
        response = client.post(
            "/css", json={"instance_id": "c1", "css": {"all": "& { color: red; }"}}
        )

        data = response.json()
        assert data["style_html"] == f'<style data-blockcss-block="c1">{data["css"]}</style>'
        assert client.get("/head").json()["html"] == data["style_html"]

    def test_instance_id_required(self, client: TestClient) -> None:
        response = client.post("/css", json={"instance_id": "", "css": {"all": "a: b;"}})
        assert response.status_code == 422


class TestBreakpoints:
    def test_table(self, client: TestClient) -> None:
        response = client.get("/breakpoints")

        assert response.status_code == 200
        data = response.json()
        assert [b["name"] for b in data] == ["all", "mobile", "tablet", "desktop"]
        assert data[0]["media_query"] == ""
        assert data[1]["label"] == "Mobile (max 767px)"
        assert data[3]["media_query"] == "@media (min-width: 1025px)"
