"""
Test database connection script

Usage (from repo root):
  python scripts/db/check_connection.py
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> int:
    sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "backend"))

    from telemetry_api.db.session import build_engine

    engine = build_engine()
    print(f"Testing database connection to {engine.url.render_as_string(hide_password=True)}...")
    try:
        with engine.connect():
            pass
    except Exception as e:
        print(f"[ERROR] Database connection failed: {e}")
        print("\nTo fix this:")
        print("1. Ensure the database server is running")
        print("2. Set DATABASE_URL (or PGHOST/PGPORT/PGDATABASE/PGUSER/PGPASSWORD) in .env")
        print("3. Or use Docker: docker run --name telemetry-db -e POSTGRES_PASSWORD=postgres -p 5432:5432 -d postgres:16")
        return 1
    finally:
        engine.dispose()

    print("[OK] Database connection successful!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
