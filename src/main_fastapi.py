"""
Lookup Proxy Service - FastAPI Main Application

Proxies PokéAPI and the Open Library Books API behind two small, fixed
response schemas. Run with ``python main_fastapi.py`` or any ASGI server
pointed at ``main_fastapi:app``.
"""

import sys
from datetime import datetime, UTC
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_client import CollectorRegistry, Gauge, generate_latest
from starlette.exceptions import HTTPException as StarletteHTTPException

# Add src to path for local imports
current_dir = Path(__file__).resolve().parent
if str(current_dir) not in sys.path:
    sys.path.insert(0, str(current_dir))

from app_logging import get_logger  # noqa: E402
from config import get_settings  # noqa: E402
from exceptions import LookupServiceError, UpstreamError  # noqa: E402

logger = get_logger(__name__)
settings = get_settings()

VERSION = "0.1.0"

# Initialize FastAPI app
app = FastAPI(
    title="Lookup Proxy Service",
    description="Validated, reshaped lookups against PokéAPI and Open Library",
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Service information
SERVICE_INFO = {
    "name": "lookup_proxy",
    "version": VERSION,
    "description": "Lookup Proxy Service - PokéAPI and Open Library summaries",
    "status": "healthy",
    "started_at": datetime.now(UTC).isoformat(),
    "framework": "FastAPI"
}

# Include routers
from api.routes.health import router as health_router  # noqa: E402
from api.routes.lookup import router as lookup_router  # noqa: E402

app.include_router(health_router)
app.include_router(lookup_router)
logger.info("Routes loaded: /health, /pokemon-info, /book-info")


# -----------------------------------------------------------------------------
# Error rendering: every error body is {"error": <fixed message>}
# -----------------------------------------------------------------------------
@app.exception_handler(LookupServiceError)
async def lookup_error_handler(request: Request, exc: LookupServiceError):
    # upstream failures were already logged with detail by the adapter
    log = logger.debug if isinstance(exc, UpstreamError) else logger.info
    log(
        "lookup_failed",
        extra={"path": request.url.path, "status_code": exc.status_code, "error": str(exc)},
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    headers = dict(exc.headers or {})
    if exc.status_code == 405:
        # every route of this service is GET-only
        headers["Allow"] = "GET"
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=headers)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled_error", extra={"path": request.url.path})
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


# Root endpoint
@app.get("/", response_class=JSONResponse)
async def root():
    """Root endpoint"""
    return {
        "service": "lookup_proxy",
        "message": "Lookup Proxy Service is running",
        "version": VERSION,
        "framework": "FastAPI",
        "health_check": "/health",
        "api_docs": "/docs"
    }


@app.get("/info", response_class=JSONResponse)
async def info():
    """Service information endpoint"""
    return {
        **SERVICE_INFO,
        "endpoints": {
            "health": "/health",
            "pokemon": "/pokemon-info?name=<name>",
            "book": "/book-info?isbn=<isbn>",
            "metrics": "/metrics",
            "docs": "/docs"
        }
    }


# -----------------------------------------------------------------------------
# Prometheus metrics - minimal exporter
# -----------------------------------------------------------------------------
registry = CollectorRegistry()
build_info = Gauge(
    "lookup_build_info",
    "Build information",
    ["service", "version"],
    registry=registry,
)
build_info.labels(service="lookup_proxy", version=VERSION).set(1)


@app.get("/metrics", response_class=PlainTextResponse)
async def metrics():
    return PlainTextResponse(generate_latest(registry).decode("utf-8"))


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Lookup Proxy Service on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
