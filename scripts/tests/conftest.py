from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "backend"))

from telemetry_api.main import create_app  # noqa: E402

SERVICE_TOKEN = "test-service-token"


@pytest.fixture
def app():
    return create_app(database_url="sqlite://", api_token=SERVICE_TOKEN)


@pytest.fixture
def client(app):
    # Entering the context runs the lifespan (engine + tables).
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {SERVICE_TOKEN}"}


ACCEL = {"x": 1, "y": 2, "z": 3}

ECU = {
    "dwell": 3.1,
    "map": 98.5,
    "iat": 24.0,
    "clt": 88.0,
    "battery": 13.8,
    "o2": 14.7,
    "rpm": 3200,
    "advance": 18.0,
    "tps": 12.5,
    "loopsPerSecond": 950,
    "freeRAM": 2048,
}

GPS = {"latitude": 44.56, "longitude": -123.28, "speed": 42.0, "heading": 270.0}

SAMPLES = {"accelerometer": ACCEL, "ecu": ECU, "gps": GPS}
