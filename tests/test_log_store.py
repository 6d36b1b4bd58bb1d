"""Tests for the backend in-memory log store."""
from app.services import LogStore, SAMPLE_LOGS, sample_logs


def _by_id(store, log_id):
    return next((e for e in store.list_all() if e.id == log_id), None)


class TestSampleLogs:

    def test_sample_logs_count_and_ids(self):
        logs = sample_logs()
        assert len(logs) == len(SAMPLE_LOGS) == 12
        assert [log.id for log in logs] == [str(i) for i in range(1, 13)]

    def test_sample_logs_are_utc(self):
        for log in sample_logs():
            assert log.created_at.utcoffset().total_seconds() == 0
            assert log.created_at == log.updated_at

    def test_sample_logs_are_fresh_objects(self):
        assert sample_logs()[0] is not sample_logs()[0]


class TestLogStore:

    def test_empty_store(self):
        store = LogStore()
        assert len(store) == 0
        assert store.list_all() == []

    def test_list_all_returns_copy(self, log_store):
        listed = log_store.list_all()
        listed.clear()
        assert len(log_store) == 2

    def test_create_assigns_id_and_timestamps(self, log_store):
        entry = log_store.create(owner="Charlie", log_text="New log")

        assert entry.id.isdigit()
        assert entry.created_at == entry.updated_at
        assert entry.created_at.tzinfo is not None
        assert log_store.list_all()[-1] == entry

    def test_update_replaces_entry(self, log_store):
        original = _by_id(log_store, "1")

        updated = log_store.update("1", owner="Alice Updated")

        assert updated.owner == "Alice Updated"
        assert updated.log_text == original.log_text
        assert updated.created_at == original.created_at
        assert updated.updated_at > original.updated_at
        assert _by_id(log_store, "1") == updated
        # Untouched neighbour
        assert _by_id(log_store, "2").owner == "Bob"

    def test_update_keeps_position(self, log_store):
        log_store.update("1", log_text="changed")
        assert [e.id for e in log_store.list_all()] == ["1", "2"]

    def test_update_unknown(self, log_store):
        assert log_store.update("missing", owner="X") is None
        assert len(log_store) == 2

    def test_delete(self, log_store):
        assert log_store.delete("1") is True
        assert _by_id(log_store, "1") is None
        assert len(log_store) == 1

    def test_delete_unknown(self, log_store):
        assert log_store.delete("missing") is False
        assert len(log_store) == 2
