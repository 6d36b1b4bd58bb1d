"""Pytest fixtures and configuration."""
import pytest
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient
from app.main import create_app
from app.models import LogEntry
from app.services import LogStore
from streamlit_ui.state.notifications import NotificationCenter


class FakeTimer:
    """Stand-in for threading.Timer that only fires when told to."""

    def __init__(self, interval, function, args=None, kwargs=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.kwargs = kwargs or {}
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        if not self.cancelled:
            self.function(*self.args, **self.kwargs)


@pytest.fixture
def fake_timers():
    """List that collects every FakeTimer created by the factory below."""
    return []


@pytest.fixture
def notifications(fake_timers):
    """NotificationCenter whose expiry timers are driven manually."""
    def factory(interval, function, args=None, kwargs=None):
        timer = FakeTimer(interval, function, args=args, kwargs=kwargs)
        fake_timers.append(timer)
        return timer

    center = NotificationCenter(ttl_seconds=3.0, timer_factory=factory)
    yield center
    center.clear()


@pytest.fixture
def sample_entries():
    """Two backend entries with fixed ids and timestamps."""
    created = datetime(2025, 10, 10, 10, 0, tzinfo=timezone.utc)
    return [
        LogEntry(id="1", owner="Alice", log_text="First log",
                 created_at=created, updated_at=created),
        LogEntry(id="2", owner="Bob", log_text="Second log",
                 created_at=created, updated_at=created),
    ]


@pytest.fixture
def log_store(sample_entries):
    """Backend store seeded with the two sample entries."""
    return LogStore(sample_entries)


@pytest.fixture
def client(log_store):
    """Test client over an app that owns ``log_store``."""
    app = create_app(store=log_store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_logs():
    """Two entries as the UI receives them over the wire."""
    return [
        {
            "id": "1",
            "owner": "Alice",
            "logText": "First log",
            "createdAt": "2025-10-10T10:00:00Z",
            "updatedAt": "2025-10-10T10:00:00Z",
        },
        {
            "id": "2",
            "owner": "Bob",
            "logText": "Second log",
            "createdAt": "2025-10-11T10:00:00Z",
            "updatedAt": "2025-10-11T10:00:00Z",
        },
    ]


@pytest.fixture
def mock_api(sample_logs):
    """Async stand-in for streamlit_ui.components.api_client."""
    return SimpleNamespace(
        get_all_logs=AsyncMock(return_value=list(sample_logs)),
        create_log=AsyncMock(),
        update_log=AsyncMock(),
        delete_log=AsyncMock(return_value=None),
    )
