"""
Sensor Telemetry API
====================
FastAPI application serving accelerometer, ECU and GPS readings.

HOW TO RUN:
    pip install -e .
    cp .env.example .env   # edit DATABASE_URL / TELEMETRY_API_TOKEN
    uvicorn telemetry_api.main:app --reload --port 8000

API DOCUMENTATION:
    - Swagger UI: http://localhost:8000/docs
    - OpenAPI JSON: http://localhost:8000/openapi.json
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from telemetry_api.config import Config, debug_log
from telemetry_api.db.base import Base
from telemetry_api.db.session import build_engine, build_session_factory
from telemetry_api.models import telemetry as _m_telemetry  # noqa: F401
from telemetry_api.models import user as _m_user  # noqa: F401
from telemetry_api.routers import api_router


def _ensure_db_schema(engine) -> None:
    """Best-effort schema ensure (no migrations framework): create missing tables."""
    try:
        Base.metadata.create_all(bind=engine)
    except Exception as e:
        print(f"[STARTUP] DB create_all skipped/failed: {e}")


def create_app(database_url: str | None = None, api_token: str | None = None) -> FastAPI:
    """
    Build the application.

    The connection pool is created when the app starts and disposed when it
    shuts down; routes reach it only through `get_db`.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(database_url)
        app.state.engine = engine
        app.state.session_factory = build_session_factory(engine)
        _ensure_db_schema(engine)
        debug_log(f"[STARTUP] Connected to {engine.url.render_as_string(hide_password=True)}")
        try:
            yield
        finally:
            engine.dispose()
            debug_log("[SHUTDOWN] Connection pool disposed")

    app = FastAPI(title="Sensor Telemetry API", lifespan=lifespan)
    app.state.api_token = api_token if api_token is not None else Config.API_TOKEN

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError):
        # Malformed JSON / schema errors are client errors: 400, not 422.
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    app.include_router(api_router)
    return app


app = create_app()
