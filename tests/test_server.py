"""Tests for the outline HTTP API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

import axaml_outline.provider as provider_module
import outline_server.__main__ as server_main
import outline_server.outline_processor as processor_module
from outline_server.main import app
from outline_server.server_config import HOST, PORT, RELOAD


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestOutlineEndpoint:
    """Tests for POST /api/outline."""

    def test_returns_symbols(self, client: TestClient, main_window_axaml: str) -> None:
        response = client.post("/api/outline", json={"text": main_window_axaml})

        assert response.status_code == 200
        body = response.json()
        assert body["uri"] == "untitled.axaml"
        assert body["element_count"] == 7
        window = body["symbols"][0]
        assert window["name"] == "[Window]"
        assert window["kind"] == "class"
        assert window["range"] == {"start": [0, 0], "end": [16, 9]}

    def test_line_numbers(self, client: TestClient, main_window_axaml: str) -> None:
        response = client.post("/api/outline", json={"text": main_window_axaml, "show_line_numbers": True})

        grid = response.json()["symbols"][0]["children"][0]
        assert grid["detail"] == "Grid (line 5)"

    def test_detect_skips_non_axaml(self, client: TestClient) -> None:
        response = client.post(
            "/api/outline",
            json={"text": "<Grid/>", "uri": "notes.xml", "language_id": "xml", "detect": True},
        )

        assert response.status_code == 200
        assert response.json()["symbols"] == []
        assert response.json()["element_count"] == 0

    def test_missing_text_is_rejected(self, client: TestClient) -> None:
        assert client.post("/api/outline", json={"uri": "a.axaml"}).status_code == 422

    def test_document_too_large(self, client: TestClient, monkeypatch) -> None:
        monkeypatch.setattr(processor_module, "MAX_DOCUMENT_SIZE_KB", 0)

        response = client.post("/api/outline", json={"text": "<Grid/>"})

        assert response.status_code == 400
        assert "limit is 0 KB" in response.json()["error"]
        assert "status_code" not in response.json()

    def test_internal_error(self, client: TestClient, monkeypatch) -> None:
        def _boom(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(provider_module, "parse_axaml", _boom)

        response = client.post("/api/outline", json={"text": "<Grid/>"})

        assert response.status_code == 500
        assert response.json() == {"error": "Error parsing AXAML: boom"}

    def test_deeply_nested_document_gives_error_body(self, client: TestClient) -> None:
        depth = 600
        text = "<Border>" * depth + "</Border>" * depth

        response = client.post("/api/outline", json={"text": text})

        assert response.status_code == 500
        assert response.headers["content-type"] == "application/json"
        assert list(response.json()) == ["error"]
        assert response.json()["error"].startswith("Error serializing result")


class TestSymbolsEndpoint:
    """Tests for POST /api/symbols."""

    def test_returns_flat_list(self, client: TestClient, main_window_axaml: str) -> None:
        response = client.post("/api/symbols", json={"text": main_window_axaml, "uri": "MainWindow.axaml"})

        assert response.status_code == 200
        symbols = response.json()["symbols"]
        assert [s["label"] for s in symbols][:4] == ["[Window]", "[Grid]", "[StackPanel]", "TestButton"]
        assert symbols[3] == {"label": "TestButton", "tag_name": "Button", "kind": "function", "line": 11, "depth": 3}

    def test_deep_document(self, client: TestClient) -> None:
        depth = 600
        text = "<Border>" * depth + "</Border>" * depth

        response = client.post("/api/symbols", json={"text": text})

        assert response.status_code == 200
        assert response.json()["symbols"][-1]["depth"] == depth - 1


class TestElementAtEndpoint:
    """Tests for POST /api/element-at."""

    def test_finds_element(self, client: TestClient, main_window_axaml: str) -> None:
        response = client.post("/api/element-at", json={"text": main_window_axaml, "line": 11, "column": 14})

        assert response.status_code == 200
        body = response.json()
        assert body["element"]["label"] == '[Button "Another Button"]'
        assert body["element"]["attributes"] == {"Content": "Another Button"}
        assert body["description"].startswith('[Button "Another Button"] <Button>')

    def test_nothing_at_position(self, client: TestClient) -> None:
        response = client.post("/api/element-at", json={"text": "<Grid/>", "line": 5, "column": 0})

        assert response.status_code == 200
        assert response.json()["element"] is None
        assert response.json()["description"] is None

    def test_negative_position_is_rejected(self, client: TestClient) -> None:
        response = client.post("/api/element-at", json={"text": "<Grid/>", "line": -1, "column": 0})
        assert response.status_code == 422

    def test_deeply_nested_element(self, client: TestClient) -> None:
        depth = 600
        text = "<Border>" * depth + "</Border>" * depth

        response = client.post("/api/element-at", json={"text": text, "line": 0, "column": 0})

        assert response.status_code == 500
        assert response.json()["error"].startswith("Error serializing result")


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_run_starts_uvicorn(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(server_main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    server_main.run()

    assert calls == [
        ("outline_server.main:app", {"host": HOST, "port": PORT, "reload": RELOAD, "log_config": None}),
    ]
