from __future__ import annotations

import secrets

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from telemetry_api.auth import Principal, require_authentication
from telemetry_api.config import debug_log
from telemetry_api.db.session import get_db
from telemetry_api.models.user import User
from telemetry_api.routers.resources import not_found
from telemetry_api.schemas.users import (
    LoginResponse,
    UserCreatedResponse,
    UserCredentials,
    UserResponse,
)
from telemetry_api.utils.validation import parse_record_id

router = APIRouter(tags=["users"])


@router.post("", status_code=201, response_model=UserCreatedResponse)
def create_user(request: UserCredentials, db: Session = Depends(get_db)):
    if db.query(User).filter(User.username == request.username).first():
        raise HTTPException(status_code=409, detail="Username already exists")

    user = User(username=request.username)
    user.set_password(request.password)
    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError:
        # Lost a race with a concurrent registration of the same name.
        db.rollback()
        raise HTTPException(status_code=409, detail="Username already exists")
    except SQLAlchemyError as e:
        db.rollback()
        print(f"[USERS] Error creating user: {e}")
        raise HTTPException(status_code=500, detail="Error creating user. Please try again later.")

    debug_log(f"[USERS] Created user {user.id} ({user.username})")
    return UserCreatedResponse(id=user.id, links={"user": f"/users/{user.id}"})


@router.post("/login", response_model=LoginResponse)
def login(request: UserCredentials, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.username == request.username).first()
    if user is None or not user.check_password(request.password):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = secrets.token_urlsafe(32)
    user.token_fingerprint = User.fingerprint_for(token)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        print(f"[USERS] Error storing login token: {e}")
        raise HTTPException(status_code=500, detail="Error logging in. Please try again later.")

    return LoginResponse(token=token)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str,
    request: Request,
    principal: Principal = Depends(require_authentication),
    db: Session = Depends(get_db),
):
    uid = parse_record_id(user_id)
    if uid is None:
        raise not_found(request)
    if not principal.is_service and principal.user_id != uid:
        raise HTTPException(status_code=403, detail="Unauthorized to access the specified resource")

    user = db.query(User).filter(User.id == uid).first()
    if user is None:
        raise not_found(request)
    return UserResponse.from_row(user)
