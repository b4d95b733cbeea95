"""
Initialize database tables
Run this script to create all database tables
"""
from __future__ import annotations

from sqlalchemy.engine import Engine

from telemetry_api.db.base import Base
from telemetry_api.db.session import build_engine
from telemetry_api.models import telemetry  # noqa: F401  Import models to register them
from telemetry_api.models import user  # noqa: F401


def init_db(engine: Engine | None = None) -> None:
    """Create all database tables (existing tables are left untouched)."""
    own_engine = engine is None
    engine = engine or build_engine()
    try:
        Base.metadata.create_all(bind=engine)
    finally:
        if own_engine:
            engine.dispose()


if __name__ == "__main__":
    print("Creating database tables...")
    init_db()
    print("Database tables created successfully!")
