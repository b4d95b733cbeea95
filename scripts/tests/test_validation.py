from __future__ import annotations

from telemetry_api.resources import ACCELEROMETER, ECU
from telemetry_api.utils.validation import (
    extract_valid_fields,
    INT64_MAX,
    INT64_MIN,
    parse_int,
    parse_record_id,
    validate_against_schema,
)


def test_all_required_fields_present():
    assert validate_against_schema({"x": 1, "y": 2, "z": 3}, ACCELEROMETER.schema)


def test_missing_field_fails():
    assert not validate_against_schema({"x": 1, "y": 2}, ACCELEROMETER.schema)


def test_falsy_values_count_as_present():
    assert validate_against_schema({"x": 0, "y": False, "z": ""}, ACCELEROMETER.schema)
    assert validate_against_schema({"x": None, "y": 0, "z": 0}, ACCELEROMETER.schema)


def test_non_object_bodies_fail():
    assert not validate_against_schema(None, ACCELEROMETER.schema)
    assert not validate_against_schema([1, 2, 3], ACCELEROMETER.schema)
    assert not validate_against_schema("x,y,z", ACCELEROMETER.schema)


def test_optional_schema_fields_not_enforced():
    schema = {"a": {"required": True}, "b": {"required": False}}
    assert validate_against_schema({"a": 1}, schema)


def test_extract_drops_unknown_fields():
    body = {"id": 55, "x": 1, "y": 2, "z": 3, "note": "hello"}
    assert extract_valid_fields(body, ACCELEROMETER.schema) == {"x": 1, "y": 2, "z": 3}


def test_ecu_schema_uses_wire_names():
    assert "loopsPerSecond" in ECU.schema
    assert "freeRAM" in ECU.schema
    assert len(ECU.schema) == 11


def test_parse_int_leading_prefix():
    assert parse_int("12") == 12
    assert parse_int("12abc") == 12
    assert parse_int(" 7") == 7
    assert parse_int("3.9") == 3
    assert parse_int("-2") == -2
    assert parse_int("abc") is None
    assert parse_int("") is None
    assert parse_int(None) is None


def test_parse_int_saturates_oversized_values():
    huge = "9" * 5000
    assert parse_int(huge) > INT64_MAX
    assert parse_int("-" + huge) < INT64_MIN
    assert parse_int("000000000000000000000000042") == 42


def test_parse_record_id_rejects_values_outside_bigint():
    assert parse_record_id("17") == 17
    assert parse_record_id(str(INT64_MAX)) == INT64_MAX
    assert parse_record_id(str(INT64_MAX + 1)) is None
    assert parse_record_id("9" * 25) is None
    assert parse_record_id("9" * 5000) is None
    assert parse_record_id("abc") is None
