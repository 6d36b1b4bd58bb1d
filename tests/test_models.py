"""Tests for Pydantic models."""
import pytest
from datetime import datetime, timezone
from pydantic import ValidationError
from app.models import LogCreate, LogUpdate, LogEntry, HealthResponse


class TestLogModels:
    """Tests for log entry models."""

    def test_log_create_from_wire(self):
        """Test camelCase alias is accepted."""
        body = LogCreate.model_validate({"owner": "Alice", "logText": "hello"})
        assert body.owner == "Alice"
        assert body.log_text == "hello"

    def test_log_create_by_field_name(self):
        body = LogCreate(owner="Alice", log_text="hello")
        assert body.log_text == "hello"

    def test_log_create_missing_fields_allowed(self):
        """Test presence is checked by the router, not the schema."""
        body = LogCreate.model_validate({})
        assert body.owner is None
        assert body.log_text is None

    def test_log_update_only_set_fields_dumped(self):
        body = LogUpdate.model_validate({"owner": "Bob"})
        assert body.model_dump(exclude_unset=True) == {"owner": "Bob"}

    def test_log_entry_serializes_camel_case(self):
        ts = datetime(2025, 10, 10, 10, 0, tzinfo=timezone.utc)
        entry = LogEntry(id="1", owner="Alice", log_text="x", created_at=ts, updated_at=ts)

        data = entry.model_dump(mode="json", by_alias=True)

        assert data == {
            "id": "1",
            "owner": "Alice",
            "logText": "x",
            "createdAt": "2025-10-10T10:00:00Z",
            "updatedAt": "2025-10-10T10:00:00Z",
        }

    def test_log_entry_requires_id(self):
        ts = datetime.now(timezone.utc)
        with pytest.raises(ValidationError):
            LogEntry(owner="Alice", log_text="x", created_at=ts, updated_at=ts)


class TestHealthResponse:

    def test_health_response(self):
        health = HealthResponse(
            status="healthy",
            timestamp="2025-10-10T10:00:00+00:00",
            version="1.0.0",
            dependencies={"log_store": "healthy (0 entries)"},
        )
        assert health.dependencies["log_store"].startswith("healthy")
