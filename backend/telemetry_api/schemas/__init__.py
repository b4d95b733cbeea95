"""
Pydantic schemas used by the FastAPI API layer.

Telemetry bodies are validated against per-kind field schemas
(`telemetry_api.resources`); the models here describe responses and the
user endpoints.
"""
