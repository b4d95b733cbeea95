from sqlalchemy import Column, Float

from telemetry_api.db.base import Base, RecordId


# Column names match the JSON field names sent by the data loggers, so rows
# serialize back with the same keys (including loopsPerSecond / freeRAM).
# Columns are nullable: an explicit JSON null counts as a present value.

class AccelerometerReading(Base):
    __tablename__ = "accelerometer"

    id = Column(RecordId, primary_key=True, autoincrement=True)
    x = Column(Float)
    y = Column(Float)
    z = Column(Float)


class EcuReading(Base):
    """Engine control unit snapshot."""

    __tablename__ = "ecu"

    id = Column(RecordId, primary_key=True, autoincrement=True)
    dwell = Column(Float)
    map = Column(Float)  # manifold absolute pressure
    iat = Column(Float)  # intake air temperature
    clt = Column(Float)  # coolant temperature
    battery = Column(Float)
    o2 = Column(Float)
    rpm = Column(Float)
    advance = Column(Float)
    tps = Column(Float)  # throttle position
    loopsPerSecond = Column(Float)
    freeRAM = Column(Float)


class GpsReading(Base):
    __tablename__ = "gps"

    id = Column(RecordId, primary_key=True, autoincrement=True)
    latitude = Column(Float)
    longitude = Column(Float)
    speed = Column(Float)
    heading = Column(Float)
