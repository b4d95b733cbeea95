"""
Bearer-token gate for write operations.

Expected header: "Authorization: Bearer <token>". A token is accepted when it
equals the configured service token (TELEMETRY_API_TOKEN, used by data
loggers) or matches the token most recently issued to a user at login.
"""
from __future__ import annotations

import hmac
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request
from sqlalchemy.orm import Session

from telemetry_api.config import debug_log
from telemetry_api.db.session import get_db
from telemetry_api.models.user import User


@dataclass(frozen=True)
class Principal:
    user_id: Optional[int] = None
    is_service: bool = False


def _bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise HTTPException(
            status_code=401,
            detail="Missing Authorization header. Expected: Bearer <token>",
        )

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1]:
        raise HTTPException(
            status_code=401,
            detail="Invalid Authorization format. Expected: Bearer <token>",
        )
    return parts[1]


def require_authentication(
    request: Request,
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
) -> Principal:
    token = _bearer_token(authorization)

    service_token = getattr(request.app.state, "api_token", None)
    if service_token and hmac.compare_digest(token.encode("utf-8"), service_token.encode("utf-8")):
        return Principal(is_service=True)

    fp = User.fingerprint_for(token)
    user = db.query(User).filter(User.token_fingerprint == fp).first()
    if user is None:
        debug_log(f"[AUTH] Rejected token for {request.method} {request.url.path}")
        raise HTTPException(status_code=403, detail="Invalid authentication token")

    return Principal(user_id=user.id)
