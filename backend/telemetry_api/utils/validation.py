"""
Input validation helpers shared by the telemetry resources.

A schema is a mapping of field name -> options, e.g.::

    {"x": {"required": True}, "y": {"required": True}}
"""
from __future__ import annotations

import re
from typing import Any, Dict, Mapping, Optional

Schema = Mapping[str, Mapping[str, Any]]

_LEADING_INT_RE = re.compile(r"^\s*([+-]?)(\d+)")

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)
_INT64_DIGITS = len(str(INT64_MAX))
_OUT_OF_RANGE = 2**64


def validate_against_schema(obj: Any, schema: Schema) -> bool:
    """
    Check that every required schema field is present in `obj`.

    Presence means the key exists; falsy values (0, False, "", None) count
    as present.
    """
    if not isinstance(obj, dict):
        return False
    return all(field in obj for field, opts in schema.items() if opts.get("required"))


def extract_valid_fields(obj: Mapping[str, Any], schema: Schema) -> Dict[str, Any]:
    """Return a copy of `obj` holding only the fields named in `schema`."""
    return {field: obj[field] for field in schema if field in obj}


def parse_int(value: Any) -> Optional[int]:
    """
    Lenient integer parsing for query/path values.

    Takes the leading integer prefix ("12abc" -> 12, "3.7" -> 3); returns None
    when there is none. Values wider than a signed 64-bit integer saturate to
    +/- 2**64 so callers can clamp or reject them without converting huge
    digit strings.
    """
    if value is None:
        return None
    m = _LEADING_INT_RE.match(str(value))
    if not m:
        return None
    sign, digits = m.group(1), m.group(2).lstrip("0") or "0"
    if len(digits) > _INT64_DIGITS:
        return -_OUT_OF_RANGE if sign == "-" else _OUT_OF_RANGE
    n = int(digits)
    return -n if sign == "-" else n


def parse_record_id(value: Any) -> Optional[int]:
    """Parse a path id; anything that cannot be a BIGINT primary key is None."""
    n = parse_int(value)
    if n is None or not INT64_MIN <= n <= INT64_MAX:
        return None
    return n
