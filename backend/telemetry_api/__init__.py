"""
Sensor telemetry REST API.

Paginated CRUD access to accelerometer, ECU and GPS readings, plus a small
user/token collaborator that guards write operations.
"""
