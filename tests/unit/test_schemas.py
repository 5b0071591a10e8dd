"""Tests for bundled JSON schemas."""

import json
from pathlib import Path

import jsonschema
import pytest

from cwrcodec.api import load_schema
from cwrcodec.audit.logger import AuditLogger


@pytest.fixture(scope="module")
def event_schema() -> dict:
    """Load log event JSON schema."""
    return load_schema("log_event.schema.json")


@pytest.fixture(scope="module")
def batch_schema() -> dict:
    """Load work batch JSON schema."""
    return load_schema("work_batch.schema.json")


@pytest.mark.unit
@pytest.mark.parametrize("name", ["log_event.schema.json", "work_batch.schema.json"])
def test_schemas_are_valid(name: str) -> None:
    """Test bundled schemas are themselves valid Draft 2020-12 schemas."""
    jsonschema.Draft202012Validator.check_schema(load_schema(name))


@pytest.mark.unit
def test_logged_events_validate(tmp_path: Path, event_schema: dict) -> None:
    """Test every event type the logger writes matches the event schema."""
    path = tmp_path / "events.jsonl"
    with AuditLogger(run_id="r1", log_path=path) as logger:
        logger.run_started(["cwrcodec"], {})
        logger.stage_started("generate", expected_items=1)
        logger.work_flagged("WK1", "warning")
        logger.stage_finished("generate", 0.1, counters={"works": 1})
        logger.unknown_record(2, "XYZ", "XYZ")
        logger.line_error(3, "too short")
        logger.artifact_written("out", "sha256:00", 1, 1)
        logger.error("CWRGenerationError", "failed")
        logger.run_finished("success", 0.2)

    for line in path.read_text().splitlines():
        jsonschema.validate(instance=json.loads(line), schema=event_schema)


@pytest.mark.unit
def test_event_schema_rejects_extra_fields(event_schema: dict) -> None:
    """Test the event envelope is closed."""
    event = {
        "ts": "2024-12-01T10:00:00Z",
        "run_id": "r1",
        "level": "INFO",
        "event": "x",
        "data": {},
        "unexpected": 1,
    }

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance=event, schema=event_schema)


@pytest.mark.unit
def test_batch_schema_accepts_minimal_work(batch_schema: dict) -> None:
    """Test a work with title, code and one writer validates."""
    writer = {"code": "W1", "last_name": "LENNON"}
    batch = {"works": [{"title": "YESTERDAY", "work_code": "WK1", "writers": [writer]}]}

    jsonschema.validate(instance=batch, schema=batch_schema)


@pytest.mark.unit
@pytest.mark.parametrize(
    "work",
    [
        {"work_code": "WK1"},
        {"title": "T", "work_code": "WK1", "version_type": "NEW"},
        {
            "title": "T",
            "work_code": "WK1",
            "writers": [{"code": "W1", "last_name": "X", "pr_share": 120}],
        },
    ],
)
def test_batch_schema_rejects_bad_works(batch_schema: dict, work: dict) -> None:
    """Test missing titles, unknown enums and out-of-range shares fail."""
    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(instance={"works": [work]}, schema=batch_schema)
