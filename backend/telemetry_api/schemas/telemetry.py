from __future__ import annotations

from telemetry_api.schemas.common import APIModel, LinkMap


class RecordCreatedResponse(APIModel):
    id: int
    links: LinkMap


class RecordLinksResponse(APIModel):
    links: LinkMap
