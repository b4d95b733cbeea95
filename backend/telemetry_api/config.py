from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# backend/telemetry_api/config.py -> repo root
_project_root = Path(__file__).resolve().parents[2]

# Do NOT override already-set environment variables (shell should win).
_env_path = _project_root / ".env"
if _env_path.exists():
    load_dotenv(dotenv_path=_env_path, override=False)
else:
    load_dotenv(override=False)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() == "true"


class Config:
    """
    Application configuration loaded from environment variables.

    Database settings live in `telemetry_api.db.session` (DATABASE_URL / PG*),
    everything else the API needs is collected here.
    """

    # Optional shared bearer token for data loggers that have no user account.
    API_TOKEN = (os.getenv("TELEMETRY_API_TOKEN") or "").strip() or None

    DEBUG = _env_flag("TELEMETRY_DEBUG")

    FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")

    CORS_ORIGINS = [
        FRONTEND_URL,
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]


def debug_log(msg: str) -> None:
    """Print a tagged diagnostic line when TELEMETRY_DEBUG=true."""
    if Config.DEBUG:
        print(msg)
