"""Pydantic models for the Log Management System."""

# Common Models
from app.models.common import (
    HealthResponse,
    ErrorResponse,
)

# Log Models
from app.models.log import (
    LogCreate,
    LogUpdate,
    LogEntry,
)

__all__ = [
    # Common
    "HealthResponse",
    "ErrorResponse",
    # Logs
    "LogCreate",
    "LogUpdate",
    "LogEntry",
]
