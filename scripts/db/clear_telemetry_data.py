"""
Delete all telemetry readings (users are kept).

Usage (from repo root):
  python scripts/db/clear_telemetry_data.py            # all kinds
  python scripts/db/clear_telemetry_data.py --kind gps # one kind
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def main() -> int:
    sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "backend"))

    from sqlalchemy import delete

    from telemetry_api.db.session import build_engine
    from telemetry_api.resources import BY_KIND, RESOURCES

    parser = argparse.ArgumentParser()
    parser.add_argument("--kind", choices=sorted(BY_KIND))
    args = parser.parse_args()

    targets = [BY_KIND[args.kind]] if args.kind else RESOURCES

    engine = build_engine()
    try:
        with engine.begin() as conn:
            for resource in targets:
                n = conn.execute(delete(resource.table)).rowcount
                print(f"[CLEAR] Deleted {n} rows from {resource.kind}.")
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
