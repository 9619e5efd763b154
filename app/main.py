# app/main.py
from __future__ import annotations

import math
import time
import uuid
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.logging import setup_logging
from app.core.settings import settings
from app.repositories.product import ProductNotFoundError
from app.routers.health import router as health_router
from app.routers.product import router as products_router
from app.schemas.product import NotFoundMessage
from app.storage import init_repository

# --- Config din ENV ---
APP_TITLE = settings.APP_TITLE
APP_VERSION = settings.APP_VERSION
ROOT_PATH = settings.ROOT_PATH.strip()

# Docs/OpenAPI (opțional dezactivate)
OPENAPI_URL = None if settings.DISABLE_DOCS else "/openapi.json"
DOCS_URL = None if settings.DISABLE_DOCS else "/docs"
REDOC_URL = None if settings.DISABLE_DOCS else "/redoc"

# --- Logging ---
setup_logging(settings.LOG_LEVEL.upper())
logger = logging.getLogger("produtos-api")

tags_metadata = [
    {"name": "health", "description": "Liveness/Readiness checks"},
    {"name": "produtos", "description": "Product CRUD (in-memory)"},
]

INVALID_ID_MESSAGE = "Identificador inválido"


# --- Utilitare ---
def _get_req_id_from_headers(request: Request) -> str:
    # Prefer X-Request-ID, apoi X-Correlation-ID; dacă lipsesc, generează unul.
    return (
        request.headers.get("x-request-id")
        or request.headers.get("x-correlation-id")
        or uuid.uuid4().hex[:12]
    )


# --- Middleware func (registered after app is created) ---
async def request_context_mw(request: Request, call_next):
    """
    - Generează/propagă X-Request-ID
    - Aplică headers de securitate
    - Server-Timing / X-Process-Time
    """
    req_id = _get_req_id_from_headers(request)

    start = time.perf_counter()
    response: Response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000

    response.headers.setdefault("X-Request-ID", req_id)
    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("X-Frame-Options", "DENY")
    response.headers.setdefault("Referrer-Policy", "no-referrer")
    response.headers.setdefault("Cache-Control", "no-store")
    response.headers.setdefault("X-App-Version", APP_VERSION)

    response.headers.setdefault("Server-Timing", f"app;dur={duration_ms:.1f}")
    response.headers.setdefault("X-Process-Time", f"{duration_ms:.1f}ms")
    return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: repository proaspăt + produse inițiale din SEED_PRODUCTS
    init_repository(settings.SEED_PRODUCTS)
    logger.info("%s %s started (env=%s)", APP_TITLE, APP_VERSION, settings.APP_ENV)

    yield

    logger.info("%s shutting down; in-memory products discarded", APP_TITLE)


# --- App factory (create app BEFORE registering middleware) ---
app = FastAPI(
    title=APP_TITLE,
    version=APP_VERSION,
    openapi_tags=tags_metadata,
    lifespan=lifespan,
    root_path=ROOT_PATH,
    docs_url=DOCS_URL,
    redoc_url=REDOC_URL,
    openapi_url=OPENAPI_URL,
)

app.middleware("http")(request_context_mw)

# CORS din env: CORS_ORIGINS="http://localhost:3000,https://example.com" (implicit "*")
_cors = settings.cors_origins
if _cors:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors,
        # credențialele nu sunt permise împreună cu wildcard
        allow_credentials="*" not in _cors,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[
            "X-Request-ID",
            "Server-Timing",
            "X-Process-Time",
            "X-App-Version",
        ],
    )


# --- Exception handlers ---
@app.exception_handler(ProductNotFoundError)
async def _product_not_found_handler(request: Request, exc: ProductNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=NotFoundMessage().model_dump(),
        headers={"X-Request-ID": _get_req_id_from_headers(request)},
    )


def _finite_or_str(v: float):
    # JSONResponse refuză inf/NaN (allow_nan=False); păstrăm valoarea trimisă ca text
    return v if math.isfinite(v) else str(v)


@app.exception_handler(RequestValidationError)
async def _validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    # id-ul din path care nu e întreg -> 400; erorile de body rămân 422
    if any(tuple(err.get("loc", ()))[:1] == ("path",) for err in errors):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"mensagem": INVALID_ID_MESSAGE},
            headers={"X-Request-ID": _get_req_id_from_headers(request)},
        )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": jsonable_encoder(errors, custom_encoder={float: _finite_or_str})},
        headers={"X-Request-ID": _get_req_id_from_headers(request)},
    )


# Prinde 404/405 Starlette și răspunde JSON unitar
@app.exception_handler(StarletteHTTPException)
async def _starlette_http_exc_handler(request: Request, exc: StarletteHTTPException):
    headers = dict(exc.headers or {})
    headers.setdefault("X-Request-ID", _get_req_id_from_headers(request))
    detail = exc.detail
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        detail = {"message": "Not Found", "path": str(request.url.path)}
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        detail = {"message": "Method Not Allowed", "path": str(request.url.path)}
    return JSONResponse(status_code=exc.status_code, content={"detail": detail}, headers=headers)


@app.exception_handler(Exception)
async def _unhandled_exc_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
        headers={"X-Request-ID": _get_req_id_from_headers(request)},
    )


# --- Routers ---
app.include_router(health_router)
app.include_router(products_router)


def run() -> None:
    """Entry point `produtos-api`: pornește uvicorn pe HOST:PORT."""
    import uvicorn

    logger.info("Listening on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
