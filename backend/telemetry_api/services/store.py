"""
Table operations used by the telemetry resources.

Every function issues exactly one parameterized statement against the given
table and lets `sqlalchemy.exc.SQLAlchemyError` propagate; writes commit on
success and roll back on failure.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import Table, delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session


def count(db: Session, table: Table) -> int:
    return db.execute(select(func.count()).select_from(table)).scalar_one()


def select_page(db: Session, table: Table, offset: int, limit: int) -> List[Dict[str, Any]]:
    stmt = select(table).order_by(table.c.id).offset(offset).limit(limit)
    return [dict(row) for row in db.execute(stmt).mappings()]


def get_by_id(db: Session, table: Table, record_id: int) -> Optional[Dict[str, Any]]:
    row = db.execute(select(table).where(table.c.id == record_id)).mappings().first()
    return dict(row) if row is not None else None


def _write(db: Session, stmt):
    try:
        result = db.execute(stmt)
        db.commit()
        return result
    except SQLAlchemyError:
        db.rollback()
        raise


def insert_row(db: Session, table: Table, row: Dict[str, Any]) -> int:
    """Insert `row` and return the id assigned by the database."""
    result = _write(db, insert(table).values(**row))
    return result.inserted_primary_key[0]


def update_by_id(db: Session, table: Table, record_id: int, row: Dict[str, Any]) -> int:
    """Update the given columns of one row; returns the affected row count."""
    result = _write(db, update(table).where(table.c.id == record_id).values(**row))
    return result.rowcount


def delete_by_id(db: Session, table: Table, record_id: int) -> int:
    result = _write(db, delete(table).where(table.c.id == record_id))
    return result.rowcount
