"""Services package - in-memory storage services."""
from .log_store import LogStore, SAMPLE_LOGS, get_log_store, sample_logs

__all__ = [
    "LogStore",
    "SAMPLE_LOGS",
    "get_log_store",
    "sample_logs",
]
