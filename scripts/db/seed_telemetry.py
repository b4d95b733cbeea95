"""
Seed the database with synthetic telemetry readings.

Handy for trying out pagination locally without a data logger attached.

Usage (from repo root):
  python scripts/db/seed_telemetry.py --count 25
  python scripts/db/seed_telemetry.py --kind ecu --count 40 --seed 7
"""

from __future__ import annotations

import argparse
import math
import random
import sys
from pathlib import Path
from typing import Any, Callable, Dict


def _accelerometer(rng: random.Random, i: int) -> Dict[str, Any]:
    return {
        "x": round(rng.gauss(0.0, 0.3), 3),
        "y": round(rng.gauss(0.0, 0.3), 3),
        "z": round(rng.gauss(1.0, 0.05), 3),
    }


def _ecu(rng: random.Random, i: int) -> Dict[str, Any]:
    rpm = int(900 + 2600 * (1 + math.sin(i / 5.0)))
    return {
        "dwell": round(rng.uniform(2.5, 4.0), 2),
        "map": round(rng.uniform(30, 100), 1),
        "iat": round(rng.uniform(15, 45), 1),
        "clt": round(rng.uniform(70, 95), 1),
        "battery": round(rng.uniform(12.4, 14.4), 2),
        "o2": round(rng.uniform(12.5, 15.5), 2),
        "rpm": rpm,
        "advance": round(rng.uniform(8, 32), 1),
        "tps": round(rng.uniform(0, 100), 1),
        "loopsPerSecond": rng.randint(800, 1200),
        "freeRAM": rng.randint(1500, 3000),
    }


def _gps(rng: random.Random, i: int) -> Dict[str, Any]:
    return {
        "latitude": round(44.5646 + i * 0.0001, 6),
        "longitude": round(-123.2620 + rng.uniform(-0.0005, 0.0005), 6),
        "speed": round(rng.uniform(0, 120), 1),
        "heading": round(rng.uniform(0, 360), 1),
    }


GENERATORS: Dict[str, Callable[[random.Random, int], Dict[str, Any]]] = {
    "accelerometer": _accelerometer,
    "ecu": _ecu,
    "gps": _gps,
}


def main() -> int:
    sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "backend"))

    from sqlalchemy import insert

    from telemetry_api.db.init_db import init_db
    from telemetry_api.db.session import build_engine
    from telemetry_api.resources import BY_KIND

    parser = argparse.ArgumentParser()
    parser.add_argument("--kind", choices=sorted(GENERATORS))
    parser.add_argument("--count", type=int, default=25)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    kinds = [args.kind] if args.kind else sorted(GENERATORS)

    engine = build_engine()
    try:
        init_db(engine)
        with engine.begin() as conn:
            for kind in kinds:
                rows = [GENERATORS[kind](rng, i) for i in range(args.count)]
                conn.execute(insert(BY_KIND[kind].table), rows)
                print(f"[SEED] Inserted {len(rows)} {kind} readings.")
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
