"""FastAPI application entrypoint.

Responsibilities kept minimal:
  * App initialization (settings, logging, optional .env)
  * Router registration (nlp)
  * Cross-cutting concerns: metrics middleware & exception handlers
"""

import logging

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.routing import Match
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from dotenv import load_dotenv

from .api.nlp import router as nlp_router
from .config import get_settings
from .errors import BaseAppException
from .logging_config import configure_logging

# --- Optional .env loading (opt-in via APP_LOAD_DOTENV) ---
if get_settings().load_dotenv:  # pragma: no cover
    # Respect existing env (override=False). Default search walks up from CWD.
    load_dotenv(override=False)
    get_settings.cache_clear()

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Voice Agenda API", version="0.1.0")

# --- Metrics setup ---
REQUEST_COUNT = Counter(
    "voice_agenda_requests_total", "Total HTTP requests", ["method", "path", "status"]
)
REQUEST_LATENCY = Histogram(
    "voice_agenda_request_latency_seconds", "Latency of HTTP requests", ["method", "path"]
)

# --- CORS (for local frontend dev) ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(nlp_router)


UNMATCHED_PATH_LABEL = "other"


def route_label(request: Request) -> str:
    """Route template for the metrics label; unknown paths share one series."""
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match != Match.NONE:
            return getattr(route, "path", UNMATCHED_PATH_LABEL)
    return UNMATCHED_PATH_LABEL


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    method = request.method
    path_label = route_label(request)
    with REQUEST_LATENCY.labels(method=method, path=path_label).time():
        response: Response = await call_next(request)
    REQUEST_COUNT.labels(method=method, path=path_label, status=str(response.status_code)).inc()
    return response


@app.get("/metrics")
def metrics():  # pragma: no cover - external scrape
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


@app.exception_handler(BaseAppException)
async def app_exception_handler(request: Request, exc: BaseAppException):
    return JSONResponse(
        status_code=exc.http_status,
        content={"detail": {"code": exc.code, "message": exc.message}},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):  # pragma: no cover
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": {"code": "INTERNAL_ERROR", "message": "unexpected error"}},
    )


@app.get("/healthz")
async def health():
    return {"status": "ok", "defaultLocale": settings.default_locale.value}
