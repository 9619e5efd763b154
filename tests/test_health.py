# tests/test_health.py
from __future__ import annotations

import time
from typing import Any, Dict

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import APP_TITLE, APP_VERSION, app
from app.repositories.product import ProductRepository
from app.storage import get_repository

# Latență maximă acceptată pentru /health (secunde)
MAX_HEALTH_LATENCY = 1.5


# --- Utilitare ----------------------------------------------------------------
def _dump_response(r: httpx.Response) -> str:
    """Diagnostic scurt pentru mesaje de aserție."""
    try:
        j = r.json()
    except Exception:
        j = None
    snippet = (r.text or "")[:400].replace("\n", "\\n")
    return f"status={r.status_code} {r.request.method} {r.request.url} json={j!r} text='{snippet}...'"


def _is_json(r: httpx.Response) -> bool:
    return r.headers.get("content-type", "").lower().startswith("application/json")


def _get_json(r: httpx.Response) -> Dict[str, Any]:
    assert _is_json(r), f"unexpected content-type: {r.headers.get('content-type')} | {_dump_response(r)}"
    try:
        return r.json()  # type: ignore[return-value]
    except Exception as exc:
        pytest.fail(f"invalid JSON: {exc!r} | {_dump_response(r)}")


# --- Fixură client ------------------------------------------------------------
@pytest.fixture()
def repo() -> ProductRepository:
    return ProductRepository([("Produto A", 100.0)])


@pytest.fixture()
def client(repo: ProductRepository):
    app.dependency_overrides[get_repository] = lambda: repo
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# --- Teste --------------------------------------------------------------------
@pytest.mark.timeout(5)
def test_health_ok(client: httpx.Client):
    t0 = time.perf_counter()
    r = client.get("/health")
    dt = time.perf_counter() - t0

    assert r.status_code == 200, _dump_response(r)
    assert dt <= MAX_HEALTH_LATENCY, f"/health too slow: {dt:.3f}s > {MAX_HEALTH_LATENCY:.3f}s"
    assert _get_json(r).get("status") == "ok"


@pytest.mark.timeout(5)
def test_root_and_version(client: httpx.Client):
    r = client.get("/")
    assert r.status_code == 200, _dump_response(r)
    body = _get_json(r)
    assert body["name"] == APP_TITLE
    assert body["version"] == APP_VERSION
    assert body["resources"] == {"produtos": "/produtos"}

    r = client.get("/__version__")
    assert r.status_code == 200, _dump_response(r)
    body = _get_json(r)
    assert body["version"] == APP_VERSION
    assert isinstance(body["started_at"], int)
    assert r.headers.get("x-app-version") == APP_VERSION


@pytest.mark.timeout(5)
def test_uptime_is_non_negative(client: httpx.Client):
    r = client.get("/health/uptime")
    assert r.status_code == 200, _dump_response(r)
    assert _get_json(r)["uptime_seconds"] >= 0


@pytest.mark.timeout(5)
def test_ready_reports_product_count(client: httpx.Client, repo: ProductRepository):
    r = client.get("/health/ready")
    assert r.status_code == 200, _dump_response(r)
    assert _get_json(r) == {"ready": True, "products": 1}

    repo.create("Produto B", 200.0)
    assert _get_json(client.get("/health/ready"))["products"] == 2


@pytest.mark.timeout(5)
def test_health_head_or_options_do_not_error(client: httpx.Client):
    """Acceptăm 200/204/405/404 pentru HEAD/OPTIONS, dar nu 5xx."""
    r_head = client.head("/health")
    r_opt = client.options("/health")

    assert r_head.status_code < 500, _dump_response(r_head)
    assert r_opt.status_code < 500, _dump_response(r_opt)
