# app/routers/health.py
from __future__ import annotations

import time
from typing import Any, Dict

from fastapi import APIRouter, Depends

from app.core.settings import settings
from app.repositories.product import ProductRepository
from app.storage import get_repository

router = APIRouter(tags=["health"])

APP_STARTED_MONO = time.monotonic()
APP_STARTED_TS = int(time.time())


def _build_info() -> Dict[str, Any]:
    """Versiunea aplicației + build SHA (doar dacă e setat) + mediul."""
    info: Dict[str, Any] = {"version": settings.APP_VERSION, "env": settings.APP_ENV}
    if settings.BUILD_SHA:
        info["build_sha"] = settings.BUILD_SHA
    return info


@router.get("/", summary="Service banner")
def root():
    """Nume, versiune și unde găsești resursa de produse."""
    return {"name": settings.APP_TITLE, **_build_info(), "resources": {"produtos": "/produtos"}}


@router.get("/__version__", summary="Build metadata")
def version_meta():
    return {**_build_info(), "started_at": APP_STARTED_TS}


@router.get("/health", summary="Liveness")
def health():
    return {"status": "ok"}


@router.get("/health/uptime", summary="Process uptime")
def health_uptime():
    # produsele trăiesc cât procesul; uptime-ul spune cât de vechi sunt datele
    return {"uptime_seconds": round(time.monotonic() - APP_STARTED_MONO, 3), "started_at": APP_STARTED_TS}


@router.get("/health/ready", summary="Readiness")
def health_ready(repo: ProductRepository = Depends(get_repository)):
    """Ready dacă repository-ul de produse este inițializat."""
    return {"ready": True, "products": len(repo)}
