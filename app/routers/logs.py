"""Log entry CRUD endpoints."""
import logging
from fastapi import APIRouter, Depends, HTTPException, Response, status
from app.models import ErrorResponse, LogCreate, LogUpdate, LogEntry
from app.services import LogStore, get_log_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/logs", tags=["Logs"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Log not found"}}


def _not_found(log_id: str) -> HTTPException:
    logger.warning(f"Log {log_id} not found")
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Log not found"
    )


@router.get(
    "",
    response_model=list[LogEntry],
    summary="List Logs"
)
async def list_logs(store: LogStore = Depends(get_log_store)):
    """Return every log entry in insertion order."""
    return store.list_all()


@router.post(
    "",
    response_model=LogEntry,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Missing owner or logText"}},
    summary="Create Log"
)
async def create_log(body: LogCreate, store: LogStore = Depends(get_log_store)):
    """Create a new log entry. Owner and log text must both be present."""
    if not body.owner or not body.log_text:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Owner and logText are required"
        )
    return store.create(owner=body.owner, log_text=body.log_text)


@router.put(
    "/{log_id}",
    response_model=LogEntry,
    responses=NOT_FOUND,
    summary="Update Log"
)
async def update_log(log_id: str, body: LogUpdate, store: LogStore = Depends(get_log_store)):
    """Update only the provided fields; updatedAt is always refreshed."""
    update_data = body.model_dump(exclude_unset=True, exclude_none=True)
    entry = store.update(log_id, **update_data)
    if entry is None:
        raise _not_found(log_id)
    return entry


@router.delete(
    "/{log_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND,
    summary="Delete Log"
)
async def delete_log(log_id: str, store: LogStore = Depends(get_log_store)):
    """Delete a log entry."""
    if not store.delete(log_id):
        raise _not_found(log_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
