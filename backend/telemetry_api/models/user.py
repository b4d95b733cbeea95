from __future__ import annotations

import hashlib
import hmac
import os

from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func

from telemetry_api.db.base import Base, RecordId

_PBKDF2_ITERATIONS = 200_000


def _fingerprint(text: str) -> str:
    s = (text or "").strip()
    return hashlib.sha256(s.encode("utf-8", errors="ignore")).hexdigest()


class User(Base):
    """
    API user allowed to write telemetry.

    Only a fingerprint of the current bearer token is stored; logging in again
    replaces it (revoking the previous token).
    """

    __tablename__ = "users"

    id = Column(RecordId, primary_key=True, autoincrement=True)
    username = Column(String(64), nullable=False, unique=True, index=True)
    password_salt = Column(String(32), nullable=False)
    password_hash = Column(String(64), nullable=False)
    token_fingerprint = Column(String(64), nullable=True, index=True)

    created_at = Column(DateTime(timezone=True), default=func.now(), nullable=False)

    @staticmethod
    def hash_password(password: str, salt: str) -> str:
        return hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), bytes.fromhex(salt), _PBKDF2_ITERATIONS
        ).hex()

    def set_password(self, password: str) -> None:
        self.password_salt = os.urandom(16).hex()
        self.password_hash = self.hash_password(password, self.password_salt)

    def check_password(self, password: str) -> bool:
        candidate = self.hash_password(password, self.password_salt)
        return hmac.compare_digest(candidate, self.password_hash)

    @staticmethod
    def fingerprint_for(token: str) -> str:
        return _fingerprint(token)
