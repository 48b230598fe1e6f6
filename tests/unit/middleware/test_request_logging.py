"""Tests for RequestLoggingMiddleware."""
import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from bijbel_api.middleware.request_logging import RequestLoggingMiddleware


def _make_app():
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/ping")
    async def ping():
        return {"ok": True}

    return app


def test_logs_request_line(caplog):
    client = TestClient(_make_app())
    with caplog.at_level(logging.INFO, logger="bijbel_api.middleware.request_logging"):
        response = client.get("/ping")
    assert response.status_code == 200
    assert any("GET /ping -> 200" in record.getMessage() for record in caplog.records)


def test_logs_not_found_status(caplog):
    client = TestClient(_make_app())
    with caplog.at_level(logging.INFO, logger="bijbel_api.middleware.request_logging"):
        client.get("/missing")
    assert any("GET /missing -> 404" in record.getMessage() for record in caplog.records)
