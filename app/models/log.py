"""Log entry Pydantic models.

Field names are snake_case in Python and camelCase on the wire
(``logText``, ``createdAt``, ``updatedAt``).
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class LogCreate(BaseModel):
    """Model for creating a log entry.

    Both fields are optional at the schema level so that a missing value
    reaches the router's presence check (400) instead of a 422.
    """
    model_config = ConfigDict(populate_by_name=True)

    owner: Optional[str] = None
    log_text: Optional[str] = Field(None, alias="logText")


class LogUpdate(BaseModel):
    """Model for updating a log entry (all fields optional)."""
    model_config = ConfigDict(populate_by_name=True)

    owner: Optional[str] = None
    log_text: Optional[str] = Field(None, alias="logText")


class LogEntry(BaseModel):
    """Log entry response model with ID and timestamps."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    owner: str
    log_text: str = Field(..., alias="logText")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")
