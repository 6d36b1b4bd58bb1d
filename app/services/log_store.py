"""In-memory log entry store."""
import logging
import threading
import time
from datetime import datetime, timezone
from typing import Iterable, Optional
from fastapi import Request
from app.models import LogEntry

logger = logging.getLogger(__name__)


def _utc(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


# (id, owner, created_at, log_text); created_at == updated_at for seeds
SAMPLE_LOGS: list[tuple[str, str, str, str]] = [
    ("1", "John Doe", "2025-10-10T10:00:00", "Initial system startup completed successfully"),
    ("2", "Jane Smith", "2025-10-11T14:30:00", "Database migration executed without errors"),
    ("3", "Bob Johnson", "2025-10-12T09:15:00", "User authentication service is now operational"),
    ("4", "Alice Williams", "2025-10-13T16:45:00", "API response time improved by 40%"),
    ("5", "Charlie Brown", "2025-10-14T11:20:00", "Security patches applied to all production servers"),
    ("6", "Diana Prince", "2025-10-14T13:00:00", "Cache invalidation strategy implemented successfully"),
    ("7", "Eve Martinez", "2025-10-14T15:30:00", "New monitoring dashboard deployed to production"),
    ("8", "Frank Wilson", "2025-10-15T08:00:00", "Backup verification completed - all systems nominal"),
    ("9", "Grace Lee", "2025-10-15T10:10:00", "Load balancer configuration optimized for peak traffic"),
    ("10", "Henry Davis", "2025-10-15T12:30:00", "Code review process automated with new CI/CD pipeline"),
    ("11", "Iris Chen", "2025-10-15T14:00:00", "Customer feedback system integrated into main dashboard"),
    ("12", "Jack Thompson", "2025-10-15T15:15:00", "Performance benchmarks exceeded expectations by 25%"),
]


def sample_logs() -> list[LogEntry]:
    """Build fresh LogEntry objects for the seed data."""
    return [
        LogEntry(
            id=log_id,
            owner=owner,
            log_text=text,
            created_at=_utc(ts),
            updated_at=_utc(ts),
        )
        for log_id, owner, ts, text in SAMPLE_LOGS
    ]


class LogStore:
    """Thread-safe ordered list of log entries, keyed by id."""

    def __init__(self, entries: Optional[Iterable[LogEntry]] = None):
        self._entries: list[LogEntry] = list(entries or [])
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _index_of(self, log_id: str) -> int:
        for i, entry in enumerate(self._entries):
            if entry.id == log_id:
                return i
        return -1

    def _next_id(self) -> str:
        """Millisecond creation timestamp, bumped past any id already in use."""
        candidate = int(time.time() * 1000)
        taken = {entry.id for entry in self._entries}
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    def list_all(self) -> list[LogEntry]:
        """Return a copy of all entries in insertion order."""
        with self._lock:
            return list(self._entries)

    def create(self, owner: str, log_text: str) -> LogEntry:
        """Append a new entry with a server-assigned id and timestamps."""
        now = datetime.now(timezone.utc)
        with self._lock:
            entry = LogEntry(
                id=self._next_id(),
                owner=owner,
                log_text=log_text,
                created_at=now,
                updated_at=now,
            )
            self._entries.append(entry)
        logger.info(f"Created log {entry.id} for owner {owner!r}")
        return entry

    def update(
        self,
        log_id: str,
        owner: Optional[str] = None,
        log_text: Optional[str] = None,
    ) -> Optional[LogEntry]:
        """Apply the provided fields and refresh updated_at.

        Returns the updated entry, or None if the id is unknown.
        """
        with self._lock:
            i = self._index_of(log_id)
            if i < 0:
                return None
            changes: dict = {"updated_at": datetime.now(timezone.utc)}
            if owner is not None:
                changes["owner"] = owner
            if log_text is not None:
                changes["log_text"] = log_text
            entry = self._entries[i].model_copy(update=changes)
            self._entries[i] = entry
        logger.info(f"Updated log {log_id} ({', '.join(sorted(changes))})")
        return entry

    def delete(self, log_id: str) -> bool:
        """Remove the entry; returns False if the id is unknown."""
        with self._lock:
            i = self._index_of(log_id)
            if i < 0:
                return False
            del self._entries[i]
        logger.info(f"Deleted log {log_id}")
        return True


def get_log_store(request: Request) -> LogStore:
    """FastAPI dependency: the store owned by the running application."""
    return request.app.state.log_store
