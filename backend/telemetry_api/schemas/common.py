from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict

# name -> relative URL, e.g. {"gps": "/gps/12"}
LinkMap = Dict[str, str]


class APIModel(BaseModel):
    """
    Common base for API schemas: unknown keys are rejected so a typo in a
    user payload fails loudly instead of being ignored.

    Telemetry record bodies do NOT go through these models; they are plain
    dicts filtered by `telemetry_api.utils.validation`.
    """

    model_config = ConfigDict(extra="forbid")


def _strip_or_none(v: object) -> object:
    if isinstance(v, str):
        return v.strip()
    return v
