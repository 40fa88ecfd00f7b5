"""
Tests for the Block Render API.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.deps import get_rules
from src.api.routes.blocks import router
from src.rules.models import Rules

# --- Test Client Setup ---


@pytest.fixture
def client(rules: Rules) -> TestClient:
    """Test client with the project rules injected."""
    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_rules] = lambda: rules

    return TestClient(app)


class TestRenderBlock:
    def test_block_with_css(self, client: TestClient) -> None:
        response = client.post(
            "/render",
            json={
                "block_type": "core/paragraph",
                "attrs": {"blockCss_all": "color: red;"},
                "html": "<p>Hello</p>",
            },
        )

        assert response.status_code == 200
        data = response.json()
        token = data["scope_token"]
        assert token.startswith("blockcss-")
        assert data["styles"] == [f"<style>#{token}, .{token} {{ color: red; }}</style>"]
        assert data["html"] == data["styles"][0] + f'<p id="{token}">Hello</p>'

    def test_block_without_css(self, client: TestClient) -> None:
        response = client.post(
            "/render",
            json={"block_type": "core/paragraph", "html": "<p>Hello</p>"},
        )

        assert response.status_code == 200
        assert response.json() == {"html": "<p>Hello</p>", "styles": [], "scope_token": None}

    def test_malicious_css_neutralized(self, client: TestClient) -> None:
        response = client.post(
            "/render",
            json={
                "block_type": "core/group",
                "attrs": {"blockCss_mobile": "</style><script>alert(1)</script>color: red;"},
                "html": '<div id="g" class="wp-block-group">x</div>',
            },
        )

        data = response.json()
        token = data["scope_token"]
        assert "<script" not in data["html"]
        assert data["html"].endswith(f'<div id="g" class="wp-block-group {token}">x</div>')
        assert data["styles"][0].startswith("<style>@media (max-width: 767px) {")

    def test_missing_block_type(self, client: TestClient) -> None:
        response = client.post("/render", json={"html": "<p>x</p>"})
        assert response.status_code == 422


class TestRenderPage:
    def test_blocks_in_order(self, client: TestClient) -> None:
        response = client.post(
            "/render/page",
            json={
                "blocks": [
                    {"block_type": "a", "attrs": {"blockCss_all": "top: 0;"}, "html": "<p>1</p>"},
                    {"block_type": "b", "html": "<p>2</p>"},
                    {"block_type": "c", "attrs": {"blockCss_desktop": "top: 1px;"}, "html": "<p>3</p>"},
                ]
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert len(data["blocks"]) == 3
        assert data["html"] == "".join(b["html"] for b in data["blocks"])
        assert data["blocks"][1]["html"] == "<p>2</p>"
        assert data["html"].index("<p id=") < data["html"].index("<p>2</p>")
        assert data["blocks"][0]["scope_token"] != data["blocks"][2]["scope_token"]
