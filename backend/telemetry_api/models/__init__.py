from telemetry_api.models.telemetry import AccelerometerReading, EcuReading, GpsReading
from telemetry_api.models.user import User

__all__ = ["AccelerometerReading", "EcuReading", "GpsReading", "User"]
