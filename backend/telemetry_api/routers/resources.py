"""
Generic CRUD-with-pagination router.

`build_resource_router(resource)` produces the five endpoints for one
telemetry kind; the router is mounted at `/{kind}` by `telemetry_api.routers`.
"""
from __future__ import annotations

import json
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from telemetry_api.auth import Principal, require_authentication
from telemetry_api.config import debug_log
from telemetry_api.db.session import get_db
from telemetry_api.resources import ResourceKind
from telemetry_api.schemas.telemetry import RecordCreatedResponse, RecordLinksResponse
from telemetry_api.services import store
from telemetry_api.services.pagination import PAGE_SIZE, page_links, page_window
from telemetry_api.utils.validation import (
    extract_valid_fields,
    parse_int,
    parse_record_id,
    validate_against_schema,
)


def not_found(request: Request) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail=f"Requested resource {request.url.path} does not exist",
    )


async def authenticated_json_body(
    request: Request,
    _principal: Principal = Depends(require_authentication),
) -> Any:
    """
    Decoded JSON body of a write request, read only once the caller is
    authenticated. Empty or malformed bodies come back as None and fail the
    record schema check.
    """
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


def build_resource_router(resource: ResourceKind) -> APIRouter:
    kind = resource.kind
    table = resource.table
    tag = resource.tag
    router = APIRouter(tags=[kind])

    def _store_failed(action: str, e: Exception, message: str) -> HTTPException:
        print(f"{tag} Error {action}: {e}")
        return HTTPException(status_code=500, detail=message)

    def _require_valid(body: Any) -> dict:
        if not validate_against_schema(body, resource.schema):
            raise HTTPException(
                status_code=400,
                detail=f"Request body is not a valid {kind} object.",
            )
        return extract_valid_fields(body, resource.schema)

    @router.get("")
    def list_records(page: Optional[str] = None, db: Session = Depends(get_db)):
        try:
            total_count = store.count(db, table)
            # Not atomic with the count: under concurrent writes the page may
            # not match totalCount exactly.
            page_number, total_pages, offset = page_window(parse_int(page) or 1, total_count)
            records = store.select_page(db, table, offset, PAGE_SIZE)
        except SQLAlchemyError as e:
            raise _store_failed(
                "fetching page", e, f"Error fetching {kind} records. Please try again later."
            )

        return {
            kind: records,
            "pageNumber": page_number,
            "totalPages": total_pages,
            "pageSize": PAGE_SIZE,
            "totalCount": total_count,
            "links": page_links(kind, page_number, total_pages),
        }

    @router.post("", status_code=201, response_model=RecordCreatedResponse)
    def create_record(
        body: Any = Depends(authenticated_json_body),
        db: Session = Depends(get_db),
    ):
        row = _require_valid(body)
        try:
            record_id = store.insert_row(db, table, row)
        except SQLAlchemyError as e:
            raise _store_failed(
                "inserting record",
                e,
                f"Error inserting {kind} record into DB. Please try again later.",
            )

        debug_log(f"{tag} Inserted record {record_id}")
        return RecordCreatedResponse(id=record_id, links={kind: f"/{kind}/{record_id}"})

    @router.get("/{record_id}")
    def get_record(record_id: str, request: Request, db: Session = Depends(get_db)):
        rid = parse_record_id(record_id)
        if rid is None:
            raise not_found(request)
        try:
            record = store.get_by_id(db, table, rid)
        except SQLAlchemyError as e:
            raise _store_failed(
                "fetching record", e, f"Unable to fetch {kind} record. Please try again later."
            )

        if record is None:
            raise not_found(request)
        return record

    @router.put("/{record_id}", response_model=RecordLinksResponse)
    def replace_record(
        record_id: str,
        request: Request,
        body: Any = Depends(authenticated_json_body),
        db: Session = Depends(get_db),
    ):
        row = _require_valid(body)
        rid = parse_record_id(record_id)
        if rid is None:
            raise not_found(request)
        try:
            affected = store.update_by_id(db, table, rid, row)
        except SQLAlchemyError as e:
            raise _store_failed(
                "updating record",
                e,
                f"Unable to update specified {kind} record. Please try again later.",
            )

        if affected < 1:
            raise not_found(request)
        return RecordLinksResponse(links={kind: f"/{kind}/{rid}"})

    @router.delete("/{record_id}", status_code=204)
    def delete_record(
        record_id: str,
        request: Request,
        _principal: Principal = Depends(require_authentication),
        db: Session = Depends(get_db),
    ):
        rid = parse_record_id(record_id)
        if rid is None:
            raise not_found(request)
        try:
            affected = store.delete_by_id(db, table, rid)
        except SQLAlchemyError as e:
            raise _store_failed(
                "deleting record", e, f"Unable to delete {kind} record. Please try again later."
            )

        if affected < 1:
            raise not_found(request)
        return Response(status_code=204)

    return router
