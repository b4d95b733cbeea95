"""
Telemetry resource kinds.

Each kind is data, not code: its name doubles as the table name and URL
segment, and its schema lists the fields a record must carry.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Type

from telemetry_api.models.telemetry import AccelerometerReading, EcuReading, GpsReading


def _required(*fields: str) -> Dict[str, Dict[str, Any]]:
    return {f: {"required": True} for f in fields}


@dataclass(frozen=True)
class ResourceKind:
    kind: str
    model: Type
    schema: Dict[str, Dict[str, Any]]

    @property
    def table(self):
        return self.model.__table__

    @property
    def tag(self) -> str:
        return f"[{self.kind.upper()}]"


ACCELEROMETER = ResourceKind(
    kind="accelerometer",
    model=AccelerometerReading,
    schema=_required("x", "y", "z"),
)

ECU = ResourceKind(
    kind="ecu",
    model=EcuReading,
    schema=_required(
        "dwell",
        "map",
        "iat",
        "clt",
        "battery",
        "o2",
        "rpm",
        "advance",
        "tps",
        "loopsPerSecond",
        "freeRAM",
    ),
)

GPS = ResourceKind(
    kind="gps",
    model=GpsReading,
    schema=_required("latitude", "longitude", "speed", "heading"),
)

RESOURCES: List[ResourceKind] = [ECU, GPS, ACCELEROMETER]

BY_KIND: Dict[str, ResourceKind] = {r.kind: r for r in RESOURCES}
