"""
Database engine and session configuration with connection pooling.

The engine is not created at import time: the application builds it in its
lifespan and disposes it at shutdown (see `telemetry_api.main`). Scripts call
`build_engine()` directly.
"""
from __future__ import annotations

import os
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from telemetry_api import config  # noqa: F401  (loads .env)


def build_database_url() -> str:
    """DATABASE_URL when set, otherwise a Postgres URL composed from the PG* variables."""
    explicit = (os.getenv("DATABASE_URL") or "").strip()
    if explicit:
        return explicit

    parts = {
        name: (os.getenv(f"PG{name.upper()}") or default).strip()
        for name, default in (
            ("host", "localhost"),
            ("port", "5432"),
            ("database", "postgres"),
            ("user", "postgres"),
            ("password", ""),
        )
    }
    auth = parts["user"] + (f":{parts['password']}" if parts["password"] else "")
    return f"postgresql://{auth}@{parts['host']}:{parts['port']}/{parts['database']}"


def build_engine(database_url: str | None = None) -> Engine:
    """
    Create the pooled engine.

    Pool tuning comes from the environment:
    - DB_POOL_SIZE: Base pool size (default: 20)
    - DB_MAX_OVERFLOW: Max connections beyond pool_size (default: 40)
    - DB_POOL_RECYCLE: Recycle connections after N seconds (default: 3600)
    - DB_POOL_TIMEOUT: Timeout for getting connection (default: 30)

    SQLite URLs (local dev, tests) skip the pool tuning; in-memory SQLite
    shares one connection across threads so every session sees the same data.
    """
    url = database_url or build_database_url()
    echo = os.getenv("DB_ECHO", "false").lower() == "true"

    if url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **kwargs)

    return create_engine(
        url,
        pool_pre_ping=True,  # Verify connections before using
        pool_size=int(os.getenv("DB_POOL_SIZE", "20")),
        max_overflow=int(os.getenv("DB_MAX_OVERFLOW", "40")),
        pool_recycle=int(os.getenv("DB_POOL_RECYCLE", "3600")),
        pool_timeout=int(os.getenv("DB_POOL_TIMEOUT", "30")),
        echo=echo,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    """FastAPI dependency: one session per request from the app's pool."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
