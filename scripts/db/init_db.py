from __future__ import annotations

"""
Create the telemetry and users tables (wrapper).

Usage (from repo root):
  python scripts/db/init_db.py
"""

from pathlib import Path
import sys


def main() -> int:
    repo_root = Path(__file__).resolve().parents[2]
    sys.path.insert(0, str(repo_root / "backend"))

    from telemetry_api.db.init_db import init_db  # noqa: E402

    print("Creating database tables...")
    init_db()
    print("Database tables created successfully!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
