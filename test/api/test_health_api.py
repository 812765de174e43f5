"""
API tests for /health endpoints.
Tests: simple liveness, generation readiness with and without a Segmind key.
"""

import sys
import os

BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "backend"))
sys.path.insert(0, BACKEND_DIR)

os.environ.setdefault("SEGMIND_API_KEY", "test-segmind-key")

from quizelo.core.config import settings


def test_simple_health(app_client):
    r = app_client.get("/health/simple")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_health_with_key(app_client, store, monkeypatch):
    monkeypatch.setattr(settings, "SEGMIND_API_KEY", "abc")
    store.remember("ReFi", ["q"])
    r = app_client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"llm": "ok", "cached_topics": 1, "overall": "healthy"}


def test_health_without_key(app_client, monkeypatch):
    monkeypatch.setattr(settings, "SEGMIND_API_KEY", "")
    body = app_client.get("/health").json()
    assert body["llm"] == "unconfigured"
    assert body["overall"] == "degraded"
