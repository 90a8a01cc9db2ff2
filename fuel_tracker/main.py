"""
Point d'entree FastAPI / FastAPI entry point.
Fuel Tracker - suivi des pleins et analyses de consommation.
"""

import json
import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.middleware.base import BaseHTTPMiddleware

from fuel_tracker.api import api_router
from fuel_tracker.api.auth import router as auth_router
from fuel_tracker.config import settings
from fuel_tracker.database import init_db
from fuel_tracker.exceptions import (
    AuthenticationError,
    DuplicateResourceError,
    FuelTrackerError,
    ResourceNotFoundError,
)
from fuel_tracker.rate_limit import limiter

logger = logging.getLogger("fuel_tracker")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialisation et fermeture / Startup and shutdown."""
    # Validation SECRET_KEY en production / Validate SECRET_KEY in production
    if not settings.DEBUG and settings.SECRET_KEY == "change-me-in-production":
        raise RuntimeError("CRITICAL: SECRET_KEY must be changed in production!")

    # Creer les tables au demarrage / Create tables on startup
    await init_db()
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Suivi des pleins et analyses carburant / Refueling log and fuel analytics",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


# Erreurs metier -> codes HTTP / Domain errors -> HTTP status codes
_ERROR_STATUS = {
    ResourceNotFoundError: 404,
    DuplicateResourceError: 409,
    AuthenticationError: 401,
}


async def domain_error_handler(request: Request, exc: FuelTrackerError) -> JSONResponse:
    status_code = _ERROR_STATUS.get(type(exc), 400)
    logger.info("%s %s -> %s: %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


app.add_exception_handler(FuelTrackerError, domain_error_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "X-Requested-With"],
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Ajoute les headers de securite / Add security headers."""

    async def dispatch(self, request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response


app.add_middleware(SecurityHeadersMiddleware)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Ajoute un X-Request-ID unique a chaque requete / Add unique X-Request-ID to each request."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        response: Response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


app.add_middleware(RequestIDMiddleware)


# Routes
app.include_router(auth_router, prefix="/auth", tags=["auth"])
app.include_router(api_router)


@app.get("/")
async def root():
    """Health check."""
    return {"app": settings.APP_NAME, "version": settings.APP_VERSION, "status": "running"}


@app.get("/api/")
async def api_health():
    """Health check (accessible en dev et prod)."""
    return {"app": settings.APP_NAME, "version": settings.APP_VERSION, "status": "running"}


# Logging JSON structure en production / Structured JSON logging in production
if not settings.DEBUG:

    class JSONFormatter(logging.Formatter):
        def format(self, record):
            log_entry = {
                "timestamp": self.formatTime(record),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
            }
            if record.exc_info and record.exc_info[0]:
                log_entry["exception"] = self.formatException(record.exc_info)
            return json.dumps(log_entry)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logging.root.handlers = [handler]
    logging.root.setLevel(logging.INFO)
